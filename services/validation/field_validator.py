# -*- coding: utf-8 -*-
"""
Field-level validation.

Checks one field value against the constraints declared on its FormField:
mandatory, numeric/decimal, length, email, phone, date format, past dates,
file type and size, multi-select minimum. Format checks only run on
non-empty values; emptiness is the mandatory check's job.
"""

import re
from datetime import date
from typing import Dict, Optional

from app.config import PersonTypes
from models.form_field import (
    CheckBox, DatePicker, FileUpload, FormField, MarineUnitSelector,
    MultiSelectDropDown, SailorList, TextField, parse_file_value,
)
from services.translation_manager import tr
from utils.helpers import is_truthy, parse_form_date, parse_json_list

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
MIN_PHONE_DIGITS = 8

COMPANY_FIELD_IDS = ("companyName", "companyRegistrationNumber", "companyType")


def is_company_selected(form_data: Dict[str, str]) -> bool:
    """Owner type on the current form wins over the applicant's person type."""
    if "ownerType" in form_data:
        return PersonTypes.is_company(form_data.get("ownerType"))
    if is_truthy(form_data.get("isCompany")):
        return True
    return PersonTypes.is_company(form_data.get("selectionPersonType"))


def should_validate_field(field: FormField, form_data: Dict[str, str]) -> bool:
    if field.id in COMPANY_FIELD_IDS:
        return is_company_selected(form_data)
    return True


def _is_empty(field: FormField, value: str, form_data: Dict[str, str]) -> bool:
    text = (value or "").strip()
    if isinstance(field, CheckBox):
        return not is_truthy(text)
    if isinstance(field, (MultiSelectDropDown, MarineUnitSelector)):
        return not parse_json_list(text)
    if isinstance(field, SailorList):
        # An uploaded crew sheet stands in for the manual list
        has_sheet = bool((form_data.get("crewExcelFile") or "").strip())
        return not has_sheet and not parse_json_list(text)
    return not text


def _check_text(field: TextField, text: str) -> Optional[str]:
    if field.is_numeric and not text.isdigit():
        return tr("validation.numeric")
    if field.is_decimal:
        try:
            float(text)
        except ValueError:
            return tr("validation.decimal")
    if field.min_length is not None and len(text) < field.min_length:
        return tr("validation.min_length", count=field.min_length)
    if field.max_length is not None and len(text) > field.max_length:
        return tr("validation.max_length", count=field.max_length)
    if field.is_email and not EMAIL_PATTERN.match(text):
        return tr("validation.email")
    if field.is_phone:
        digits = text[1:] if text.startswith("+") else text
        if not digits.isdigit() or len(digits) < MIN_PHONE_DIGITS:
            return tr("validation.phone", count=MIN_PHONE_DIGITS)
    return None


def _check_date(field: DatePicker, text: str, today: date) -> Optional[str]:
    parsed = parse_form_date(text)
    if parsed is None:
        return tr("validation.date_format")
    if not field.allow_past_dates and parsed < today:
        return tr("validation.past_date")
    return None


def _check_file(field: FileUpload, text: str) -> Optional[str]:
    file_value = parse_file_value(text)
    if file_value is None:
        return None
    allowed = tuple(t.lower().lstrip(".") for t in field.allowed_types)
    if allowed and file_value.extension not in allowed:
        return tr("validation.file_type", types=", ".join(allowed))
    if file_value.size_bytes is not None and file_value.size_bytes > field.max_size_mb * 1024 * 1024:
        return tr("validation.file_size", size=field.max_size_mb)
    return None


def validate_field(field: FormField, value: Optional[str],
                   form_data: Optional[Dict[str, str]] = None,
                   today: Optional[date] = None) -> Optional[str]:
    """
    Validate one field value.

    Args:
        field: Field definition
        value: Raw string value ("" when absent)
        form_data: Merged form data, used for company and crew checks
        today: Reference date for past-date checks (defaults to today)

    Returns:
        Localized error message, or None when the value is acceptable
    """
    form_data = form_data or {}
    if not should_validate_field(field, form_data):
        return None

    text = (value or "").strip()
    if _is_empty(field, text, form_data):
        if not field.mandatory:
            return None
        if isinstance(field, MarineUnitSelector):
            return tr("validation.selection_required")
        if isinstance(field, SailorList):
            return tr("validation.crew_required")
        return tr("validation.required")

    if isinstance(field, TextField):
        return _check_text(field, text)
    if isinstance(field, DatePicker):
        return _check_date(field, text, today or date.today())
    if isinstance(field, FileUpload):
        return _check_file(field, text)
    if isinstance(field, MultiSelectDropDown) and field.min_selections:
        if len(parse_json_list(text)) < field.min_selections:
            return tr("validation.min_selections", count=field.min_selections)
    return None
