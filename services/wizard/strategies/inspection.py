# -*- coding: utf-8 -*-
"""
Standalone inspection request.

The unit is either picked from the owner's list or described on the spot;
nothing is sent before the inspection step, which creates the request
(with the new unit's data when there is one).
"""

from typing import Dict, List

from models.step_data import StepData, StepType
from models.transaction import TransactionType
from services.wizard import shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.shared_steps import DocumentConfig
from utils.helpers import is_truthy

INSPECTION_DOCUMENTS = (
    DocumentConfig("inspectionRequestLetter", "document.inspection_request_letter", mandatory=False),
)


class RequestInspectionStrategy(BaseTransactionStrategy):

    transaction_type = TransactionType.REQUEST_FOR_INSPECTION
    lookup_keys = ("person_types", "commercial_registrations", "inspection_purposes",
                   "inspection_authorities", "ports", "ship_types", "countries")
    proceeds_on_selection = False
    allows_new_unit = True
    handler_overrides = {StepType.MARINE_UNIT_DATA: None}

    def inspection_step(self) -> StepData:
        return shared_steps.inspection_purpose_and_authority_step(
            self.option("inspection_purposes"),
            self.option("inspection_authorities"),
            self.option("ports"),
            INSPECTION_DOCUMENTS,
        )

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step(show_add_new_button=True))
        if is_truthy(data.get("isAddingNewUnit")):
            steps.append(shared_steps.unit_data_step(
                self.option("ship_types"), self.option("ports"), self.option("countries"),
                include_construction_dates=False,
            ))
        steps.append(self.inspection_step())
        steps.extend(self.closing_steps(data))
        return steps
