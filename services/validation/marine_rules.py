# -*- coding: utf-8 -*-
"""
Marine unit rule catalog.

Groups:
- weight rules: tonnage relations, IMO/MMSI requirements by tonnage
- dimension rules: length/width, height and deck limits by tonnage
- date rules: manufacturer year, construction and registration dates
- document rules: inspection documents for short vessels
"""

from datetime import date
from typing import Dict, List

from services.validation.validation_strategy import (
    CrossStepRule, CustomRule, NumericComparisonRule, ValidationRule, to_number,
)
from utils.helpers import parse_form_date

MIN_MANUFACTURER_YEAR = 1900

IMO_TONNAGE_THRESHOLD = 500
MMSI_TONNAGE_THRESHOLD = 300
INSPECTION_DOCUMENTS_MAX_LENGTH = 24


def height_limit(gross_tonnage: float) -> float:
    if gross_tonnage < 100:
        return 25.0
    if gross_tonnage < 500:
        return 40.0
    if gross_tonnage < 1000:
        return 50.0
    return 70.0


def deck_limit(gross_tonnage: float) -> int:
    if gross_tonnage < 100:
        return 2
    if gross_tonnage < 500:
        return 4
    if gross_tonnage < 1000:
        return 6
    if gross_tonnage < 5000:
        return 8
    return 12


# ==================== Weights ====================

def net_tonnage_rule() -> ValidationRule:
    return NumericComparisonRule("netTonnage", "<=", "grossTonnage", "validation.net_tonnage")


def static_load_rule() -> ValidationRule:
    return NumericComparisonRule("staticLoad", "<=", "grossTonnage", "validation.static_load")


def max_permitted_load_rule() -> ValidationRule:
    return NumericComparisonRule("maxPermittedLoad", ">=", "staticLoad", "validation.max_permitted_load")


def imo_required_rule() -> ValidationRule:
    return CrossStepRule(
        trigger_id="grossTonnage",
        condition=lambda v: (to_number(v) or 0) > IMO_TONNAGE_THRESHOLD,
        required_id="imoNumber",
        message_key="validation.imo_required",
        error_field_id="grossTonnage",
    )


def mmsi_required_rule() -> ValidationRule:
    return CrossStepRule(
        trigger_id="grossTonnage",
        condition=lambda v: (to_number(v) or 0) > MMSI_TONNAGE_THRESHOLD,
        required_id="mmsi",
        message_key="validation.mmsi_required",
        error_field_id="grossTonnage",
    )


def weight_rules() -> List[ValidationRule]:
    return [
        imo_required_rule(),
        mmsi_required_rule(),
        net_tonnage_rule(),
        static_load_rule(),
        max_permitted_load_rule(),
    ]


# ==================== Dimensions ====================

def length_width_rule() -> ValidationRule:
    return NumericComparisonRule(
        "overallLength", ">", "overallWidth", "validation.width_exceeds_length",
        error_field_id="overallWidth",
    )


def _height_within_limit(merged: Dict[str, str]):
    height = to_number(merged.get("height"))
    tonnage = to_number(merged.get("grossTonnage"))
    if height is None or tonnage is None:
        return True
    limit = height_limit(tonnage)
    return True if height <= limit else {"limit": int(limit)}


def _decks_within_limit(merged: Dict[str, str]):
    decks = to_number(merged.get("decksCount"))
    tonnage = to_number(merged.get("grossTonnage"))
    if decks is None or tonnage is None:
        return True
    limit = deck_limit(tonnage)
    return True if decks <= limit else {"limit": limit}


def height_rule() -> ValidationRule:
    return CustomRule(("height", "grossTonnage"), "height", "validation.height_limit", _height_within_limit)


def deck_count_rule() -> ValidationRule:
    return CustomRule(("decksCount", "grossTonnage"), "decksCount", "validation.deck_limit", _decks_within_limit)


def dimension_rules() -> List[ValidationRule]:
    return [length_width_rule(), height_rule(), deck_count_rule()]


# ==================== Dates ====================

def _manufacturer_year_in_range(merged: Dict[str, str]):
    text = str(merged.get("manufacturerYear") or "").strip()
    if not text.isdigit():
        return True
    current_year = date.today().year
    if MIN_MANUFACTURER_YEAR <= int(text) <= current_year:
        return True
    return {"min": MIN_MANUFACTURER_YEAR, "max": current_year}


def _strictly_after(later_id: str, earlier_id: str):
    def predicate(merged: Dict[str, str]):
        later = parse_form_date(merged.get(later_id))
        earlier = parse_form_date(merged.get(earlier_id))
        if later is None or earlier is None:
            return True
        return later > earlier
    return predicate


def manufacturer_year_rule() -> ValidationRule:
    return CustomRule(("manufacturerYear",), "manufacturerYear", "validation.manufacturer_year",
                      _manufacturer_year_in_range)


def construction_dates_rule() -> ValidationRule:
    return CustomRule(
        ("constructionEndDate", "constructionStartDate"), "constructionEndDate",
        "validation.construction_dates",
        _strictly_after("constructionEndDate", "constructionStartDate"),
    )


def registration_date_rule() -> ValidationRule:
    return CustomRule(
        ("firstRegistrationDate", "constructionEndDate"), "firstRegistrationDate",
        "validation.registration_date",
        _strictly_after("firstRegistrationDate", "constructionEndDate"),
    )


def date_rules() -> List[ValidationRule]:
    return [manufacturer_year_rule(), construction_dates_rule(), registration_date_rule()]


# ==================== Documents ====================

def inspection_documents_rule() -> ValidationRule:
    def short_vessel(value) -> bool:
        length = to_number(value)
        return length is not None and length <= INSPECTION_DOCUMENTS_MAX_LENGTH

    return CrossStepRule(
        trigger_id="overallLength",
        condition=short_vessel,
        required_id="inspectionDocuments",
        message_key="validation.inspection_documents_required",
    )


def document_rules() -> List[ValidationRule]:
    return [inspection_documents_rule()]


def all_rules() -> List[ValidationRule]:
    return weight_rules() + dimension_rules() + date_rules() + document_rules()
