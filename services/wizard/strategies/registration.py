# -*- coding: utf-8 -*-
"""
Registration certificate strategies.

- Temporary: pick an owned unit or register a new one (unit data,
  dimensions, weights, engines, owners, documents), reserve its name
- Permanent: pick a temporarily registered unit, complete its maritime
  identification when missing, attach insurance and documents
"""

from typing import Dict, List

from models.step_data import StepData
from models.transaction import TransactionType
from services.wizard import shared_steps
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.shared_steps import DocumentConfig
from utils.helpers import is_truthy

NEW_UNIT_DOCUMENTS = (
    DocumentConfig("shipbuildingCertificate", "document.shipbuilding_certificate"),
    DocumentConfig("inspectionDocuments", "document.inspection_documents", mandatory=False),
)

PERMANENT_DOCUMENTS = (
    DocumentConfig("temporaryCertificate", "document.temporary_certificate"),
    DocumentConfig("ownershipProof", "document.ownership_proof"),
)


class TemporaryRegistrationStrategy(BaseTransactionStrategy):
    """Temporary registration certificate for an existing or new marine unit."""

    transaction_type = TransactionType.TEMPORARY_REGISTRATION_CERTIFICATE
    lookup_keys = ("person_types", "commercial_registrations", "ship_types", "ports", "countries")
    allows_new_unit = True
    can_require_inspection = True

    def new_unit_steps(self, data: Dict[str, str]) -> List[StepData]:
        return [
            shared_steps.unit_data_step(
                self.option("ship_types"), self.option("ports"), self.option("countries"),
                is_fishing_boat=is_truthy(data.get("isFishingBoat")),
            ),
            shared_steps.dimensions_step(),
            shared_steps.weights_step(),
            shared_steps.engine_info_step(),
            shared_steps.owner_info_step(self.option("countries")),
            shared_steps.documents_step(NEW_UNIT_DOCUMENTS),
        ]

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step(show_add_new_button=True, show_owned_units_warning=True))
        if is_truthy(data.get("isAddingNewUnit")):
            steps.extend(self.new_unit_steps(data))
        steps.append(shared_steps.marine_unit_name_selection_step())
        steps.extend(self.closing_steps(data))
        return steps


class PermanentRegistrationStrategy(BaseTransactionStrategy):
    """Permanent registration of a temporarily registered unit."""

    transaction_type = TransactionType.PERMANENT_REGISTRATION_CERTIFICATE
    lookup_keys = ("person_types", "commercial_registrations", "countries")
    can_require_inspection = True

    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = self.applicant_steps(data)
        steps.append(self.selection_step())
        if is_truthy(data.get("needsMaritimeIdentification")):
            steps.append(shared_steps.maritime_identification_step())
        steps.append(shared_steps.insurance_document_step(self.option("countries")))
        steps.append(shared_steps.documents_step(PERMANENT_DOCUMENTS))
        steps.extend(self.closing_steps(data))
        return steps
