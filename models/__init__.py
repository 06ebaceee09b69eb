# -*- coding: utf-8 -*-
"""
MTCIT Data Models
"""

from .form_field import (
    FormField, TextField, DropDown, MultiSelectDropDown, DatePicker,
    FileUpload, CheckBox, SailorList, MarineUnitSelector, parse_file_value,
)
from .step_data import StepType, StepData
from .transaction import TransactionType, TransactionContext
from .marine_unit import MarineUnit
from .responses import (
    CompanyInfo, BoatData, ProceedRequestResult, CreatedRequest,
    ReviewResponse, PaymentReceipt, CrewMember,
)

__all__ = [
    "FormField",
    "TextField",
    "DropDown",
    "MultiSelectDropDown",
    "DatePicker",
    "FileUpload",
    "CheckBox",
    "SailorList",
    "MarineUnitSelector",
    "parse_file_value",
    "StepType",
    "StepData",
    "TransactionType",
    "TransactionContext",
    "MarineUnit",
    "CompanyInfo",
    "BoatData",
    "ProceedRequestResult",
    "CreatedRequest",
    "ReviewResponse",
    "PaymentReceipt",
    "CrewMember",
]
