# -*- coding: utf-8 -*-
"""
Mortgage strategies: mortgage certificate and mortgage release.
"""

from typing import Dict, List, Optional

from models.responses import ReviewResponse
from models.step_data import StepData
from models.transaction import TransactionType
from services.wizard import shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.shared_steps import DocumentConfig
from services.wizard.step_result import Notice

MORTGAGE_DOCUMENTS = (
    DocumentConfig("mortgageContract", "document.mortgage_contract"),
)

RELEASE_DOCUMENTS = (
    DocumentConfig("bankClearance", "document.bank_clearance"),
)

# additionalData flag -> (value that raises the notice, notice); first match wins
REVIEW_FLAGS = (
    ("bankVerification", "pending", Notice.BANK_VERIFICATION_PENDING),
    ("approvalStatus", "pending", Notice.APPROVAL_PENDING),
    ("documentReview", "required", Notice.DOCUMENT_REVIEW_REQUIRED),
)


class MortgageCertificateStrategy(BaseTransactionStrategy):
    """
    Mortgage certificate.

    The ship selection opens a request through proceed-request; the mortgage
    data step then creates the mortgage request itself, whose id is the
    one sent on review and paid for.
    """

    transaction_type = TransactionType.MORTGAGE_CERTIFICATE
    lookup_keys = ("person_types", "commercial_registrations", "banks", "mortgage_reasons")
    request_id_key = "mortgageRequestId"

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(shared_steps.mortgage_data_step(
            self.option("banks"), self.option("mortgage_reasons"), MORTGAGE_DOCUMENTS
        ))
        steps.extend(self.closing_steps(data))
        return steps

    def review_notice(self, response: ReviewResponse) -> Optional[Notice]:
        for key, value, notice in REVIEW_FLAGS:
            if str(response.additional_data.get(key, "")).lower() == value:
                return notice
        return None


class ReleaseMortgageStrategy(BaseTransactionStrategy):
    """Mortgage release (redemption) for a mortgaged ship."""

    transaction_type = TransactionType.RELEASE_MORTGAGE

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        steps.append(shared_steps.documents_step(RELEASE_DOCUMENTS))
        steps.extend(self.closing_steps(data))
        return steps
