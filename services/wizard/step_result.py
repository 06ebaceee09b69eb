# -*- coding: utf-8 -*-
"""
Step results returned by process_step_data, and focus-lost results.

StepResult = Advance | Abort | Complete
FieldFocusResult = NoAction | UpdateFields | FieldError
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


class AbortReason(Enum):
    """Why a transition stopped without advancing."""

    API_ERROR = "API_ERROR"
    INSPECTION_REQUIRED = "INSPECTION_REQUIRED"
    INCONSISTENT_STATE = "INCONSISTENT_STATE"


class Outcome(Enum):
    """How a transaction finished."""

    SUBMITTED = "SUBMITTED"
    INSPECTION_REQUESTED = "INSPECTION_REQUESTED"


class Notice(Enum):
    """Messages the host shows next to an Advance."""

    SUCCESS_ALERT = "SUCCESS_ALERT"
    BANK_VERIFICATION_PENDING = "BANK_VERIFICATION_PENDING"
    APPROVAL_PENDING = "APPROVAL_PENDING"
    DOCUMENT_REVIEW_REQUIRED = "DOCUMENT_REVIEW_REQUIRED"


@dataclass(frozen=True)
class Advance:
    """Move to `index` of the current step list."""

    index: int
    notice: Optional[Notice] = None
    message: str = ""


@dataclass(frozen=True)
class Abort:
    """Stay on the current step; `message` is localized."""

    reason: AbortReason
    message: str = ""


@dataclass(frozen=True)
class Complete:
    """Transaction finished; the host leaves the wizard."""

    outcome: Outcome
    message: str = ""
    notice: Optional[Notice] = None


StepResult = Union[Advance, Abort, Complete]


@dataclass(frozen=True)
class NoAction:
    pass


@dataclass(frozen=True)
class UpdateFields:
    """Values to write into the form (field id -> value)."""

    values: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldError:
    field_id: str
    message: str


FieldFocusResult = Union[NoAction, UpdateFields, FieldError]
