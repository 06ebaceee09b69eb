# -*- coding: utf-8 -*-
"""
Step schema: the StepType tag and the immutable StepData page description.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from models.form_field import FormField


class StepType(Enum):
    """Semantic kind of a wizard step, independent of its position."""

    PERSON_TYPE = "PERSON_TYPE"
    COMMERCIAL_REGISTRATION = "COMMERCIAL_REGISTRATION"
    MARINE_UNIT_SELECTION = "MARINE_UNIT_SELECTION"
    MARINE_UNIT_DATA = "MARINE_UNIT_DATA"
    MARINE_UNIT_NAME_SELECTION = "MARINE_UNIT_NAME_SELECTION"
    MARITIME_IDENTIFICATION = "MARITIME_IDENTIFICATION"
    NAVIGATION_AREAS = "NAVIGATION_AREAS"
    CREW_MANAGEMENT = "CREW_MANAGEMENT"
    SHIP_DIMENSIONS = "SHIP_DIMENSIONS"
    SHIP_WEIGHTS = "SHIP_WEIGHTS"
    OWNER_INFO = "OWNER_INFO"
    ENGINE_INFO = "ENGINE_INFO"
    DOCUMENTS = "DOCUMENTS"
    INSURANCE_DOCUMENT = "INSURANCE_DOCUMENT"
    INSPECTION_PURPOSES_AND_AUTHORITIES = "INSPECTION_PURPOSES_AND_AUTHORITIES"
    MORTGAGE_DATA = "MORTGAGE_DATA"
    CANCELLATION_REASON = "CANCELLATION_REASON"
    CHANGE_PORT_INFO = "CHANGE_PORT_INFO"
    CHANGE_NAME_INFO = "CHANGE_NAME_INFO"
    CHANGE_ACTIVITY_INFO = "CHANGE_ACTIVITY_INFO"
    PAYMENT = "PAYMENT"
    PAYMENT_CONFIRMATION = "PAYMENT_CONFIRMATION"
    PAYMENT_SUCCESS = "PAYMENT_SUCCESS"
    REVIEW = "REVIEW"
    CUSTOM = "CUSTOM"

    @classmethod
    def from_name(cls, name: str) -> Optional["StepType"]:
        """Lenient lookup used when reading resume payloads."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class StepData:
    """One wizard page."""

    step_type: StepType
    title_key: str
    description_key: str = ""
    fields: Tuple[FormField, ...] = ()
    required_lookups: Tuple[str, ...] = ()

    def field_ids(self) -> List[str]:
        return [f.id for f in self.fields]

    def get_field(self, field_id: str) -> Optional[FormField]:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def has_fields(self, *field_ids: str) -> bool:
        """True when every given id is a field of this step."""
        ids = set(self.field_ids())
        return all(fid in ids for fid in field_ids)
