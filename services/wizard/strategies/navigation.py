# -*- coding: utf-8 -*-
"""
Navigation permit strategies.

Both open a navigation license request on ship selection, attach sailing
areas and crew, and pass the inspection gate on review. Renewal starts
from the areas and crew of the current license.
"""

from typing import Dict, List

from models.step_data import StepData, StepType
from models.transaction import TransactionType
from services.wizard import payloads, shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.orchestrator import StepWork
from utils.logger import get_logger

logger = get_logger(__name__)


class IssueNavigationPermitStrategy(BaseTransactionStrategy):
    """New navigation permit."""

    transaction_type = TransactionType.ISSUE_NAVIGATION_PERMIT
    lookup_keys = ("person_types", "commercial_registrations", "sailing_regions",
                   "crew_job_titles", "countries")
    creates_on_selection = True
    can_require_inspection = True

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(shared_steps.sailing_regions_step(self.option("sailing_regions")))
        steps.append(shared_steps.sailor_info_step(self.option("crew_job_titles"), self.option("countries")))
        steps.extend(self.closing_steps(data))
        return steps


class RenewNavigationPermitStrategy(IssueNavigationPermitStrategy):
    """
    Navigation permit renewal.

    After selection the attached areas and crew are read back and treated
    as already posted, so an unchanged list costs no call and an edited
    one is sent as an update.
    """

    transaction_type = TransactionType.RENEW_NAVIGATION_PERMIT

    async def after_selection(self, work: StepWork):
        request_id = work.accumulated.get("requestId")
        if not request_id:
            return

        areas = await self.transaction_repo.fetch_attached(request_id, StepType.NAVIGATION_AREAS.value)
        if areas:
            work.accumulated["sailingRegions"] = payloads.areas_to_form_value(areas)
            work.draft.save_data_snapshot(StepType.NAVIGATION_AREAS,
                                          {"sailingRegions": work.accumulated["sailingRegions"]})
            work.draft.mark_step_as_posted(StepType.NAVIGATION_AREAS)

        crew = await self.transaction_repo.fetch_attached(request_id, StepType.CREW_MANAGEMENT.value)
        if crew:
            work.accumulated["sailors"] = payloads.crew_to_form_value(crew)
            work.draft.save_data_snapshot(StepType.CREW_MANAGEMENT, {"sailors": work.accumulated["sailors"]})
            work.draft.mark_step_as_posted(StepType.CREW_MANAGEMENT)

        logger.info(f"Renewal {request_id} prefilled with {len(areas)} areas and {len(crew)} crew members")
