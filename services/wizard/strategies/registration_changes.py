# -*- coding: utf-8 -*-
"""
Strategies that change an existing permanent registration: cancel, suspend.
"""

from typing import Dict, List

from models.step_data import StepData, StepType
from models.transaction import TransactionType
from services.wizard import shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.shared_steps import DocumentConfig

CANCELLATION_DOCUMENTS = (
    DocumentConfig("cancellationEvidence", "document.cancellation_evidence"),
)

SUSPENSION_DOCUMENTS = (
    DocumentConfig("suspensionLetter", "document.suspension_letter", mandatory=False),
)


class CancelRegistrationStrategy(BaseTransactionStrategy):
    """Deletion of a permanent registration; the reason carries the evidence files."""

    transaction_type = TransactionType.CANCEL_PERMANENT_REGISTRATION
    lookup_keys = ("person_types", "commercial_registrations", "cancellation_reasons")

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(shared_steps.cancellation_reason_step(
            self.option("cancellation_reasons"), CANCELLATION_DOCUMENTS
        ))
        steps.extend(self.closing_steps(data))
        return steps


class SuspendRegistrationStrategy(BaseTransactionStrategy):
    """
    Temporary suspension of a permanent registration.

    The request is created on selection; the suspension details are sent
    as an update of that request.
    """

    transaction_type = TransactionType.SUSPEND_PERMANENT_REGISTRATION
    proceeds_on_selection = False
    creates_on_selection = True
    handler_overrides = {StepType.CUSTOM: "handle_request_update"}

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(shared_steps.suspension_reason_step())
        steps.append(shared_steps.documents_step(SUSPENSION_DOCUMENTS))
        steps.extend(self.closing_steps(data))
        return steps
