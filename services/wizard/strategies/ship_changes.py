# -*- coding: utf-8 -*-
"""
Strategies that modify the data of a registered ship: port, name, activity.

The modification request is created when the ship is selected. The
change step shows the ship's current value next to the new one and sends
both as an update of that request.
"""

from typing import Dict, List

from models.marine_unit import MarineUnit
from models.step_data import StepData
from models.transaction import TransactionType
from services.wizard import shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.orchestrator import StepWork
from utils.logger import get_logger

logger = get_logger(__name__)


class ShipModificationStrategy(BaseTransactionStrategy):
    """Selection, one change step, review."""

    proceeds_on_selection = False
    creates_on_selection = True
    # Accumulated key filled from the selected ship
    current_key: str = ""

    def current_value(self, ship: MarineUnit) -> str:
        raise NotImplementedError

    def change_step(self) -> StepData:
        raise NotImplementedError

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(self.change_step())
        steps.extend(self.closing_steps(data))
        return steps

    async def after_selection(self, work: StepWork):
        ship = self.find_ship(work.accumulated.get("shipId", ""))
        if ship is None:
            return
        work.accumulated[self.current_key] = self.current_value(ship)
        logger.debug(f"{self.transaction_type.value}: current value of ship {ship.id} "
                     f"is '{work.accumulated[self.current_key]}'")


class ChangePortStrategy(ShipModificationStrategy):
    transaction_type = TransactionType.SHIP_PORT_CHANGE
    lookup_keys = ("person_types", "commercial_registrations", "ports")
    current_key = "currentPortOfRegistry"

    def current_value(self, ship: MarineUnit) -> str:
        return ship.port_of_registry

    def change_step(self) -> StepData:
        return shared_steps.change_port_step(self.option("ports"))


class ChangeNameStrategy(ShipModificationStrategy):
    transaction_type = TransactionType.SHIP_NAME_CHANGE
    current_key = "currentShipName"

    def current_value(self, ship: MarineUnit) -> str:
        return ship.ship_name

    def change_step(self) -> StepData:
        return shared_steps.change_name_step()


class ChangeActivityStrategy(ShipModificationStrategy):
    transaction_type = TransactionType.SHIP_ACTIVITY_CHANGE
    lookup_keys = ("person_types", "commercial_registrations", "marine_activities")
    current_key = "currentMarineActivity"

    def current_value(self, ship: MarineUnit) -> str:
        return ship.marine_activity

    def change_step(self) -> StepData:
        return shared_steps.change_activity_step(self.option("marine_activities"))
