# -*- coding: utf-8 -*-
"""
Step dispatch table.

One entry per StepType, read by both halves of the engine:
- validation: the default rule set for the kind (ValidationFactory)
- orchestration: the StepOrchestrator handler run when the step is submitted

A kind without a handler needs no backend call.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from models.step_data import StepType
from services.validation import marine_rules
from services.validation.validation_strategy import CustomRule, ValidationRule, to_number
from utils.helpers import is_truthy, parse_json_list

RuleSetFactory = Callable[[], List[ValidationRule]]


@dataclass(frozen=True)
class DispatchEntry:
    rules: Optional[RuleSetFactory] = None
    handler: Optional[str] = None


# ==================== Rule sets ====================

def _no_rules() -> List[ValidationRule]:
    return []


def _selection_rules() -> List[ValidationRule]:
    def selected_or_adding(merged: Dict[str, str]):
        if parse_json_list(merged.get("selectedMarineUnits")):
            return True
        return is_truthy(merged.get("isAddingNewUnit"))

    return [CustomRule(("selectedMarineUnits", "isAddingNewUnit"), "selectedMarineUnits",
                       "validation.selection_required", selected_or_adding)]


def _unit_data_rules() -> List[ValidationRule]:
    return marine_rules.date_rules()


def _dimension_rules() -> List[ValidationRule]:
    return marine_rules.dimension_rules()


def _weight_rules() -> List[ValidationRule]:
    return marine_rules.weight_rules()


def _document_rules() -> List[ValidationRule]:
    return marine_rules.document_rules()


def _mortgage_rules() -> List[ValidationRule]:
    def positive_value(merged: Dict[str, str]):
        value = to_number(merged.get("mortgageValue"))
        return value is None or value > 0

    return [CustomRule(("mortgageValue",), "mortgageValue", "validation.positive_value", positive_value)]


def _name_rules() -> List[ValidationRule]:
    def latin_name(merged: Dict[str, str]):
        name = str(merged.get("newEnglishMarineUnitName") or "")
        return all(ch.isascii() for ch in name)

    return [CustomRule(("newEnglishMarineUnitName",), "newEnglishMarineUnitName",
                       "validation.latin_only", latin_name)]


def _changed_value_rules(new_id: str, current_id: str) -> RuleSetFactory:
    """The new value must differ from the one the ship already has."""
    def differs(merged: Dict[str, str]):
        new = str(merged.get(new_id) or "").strip()
        return not new or new != str(merged.get(current_id) or "").strip()

    return lambda: [CustomRule((new_id, current_id), new_id, "validation.value_unchanged", differs)]


# ==================== Table ====================

STEP_DISPATCH: Dict[StepType, DispatchEntry] = {
    StepType.PERSON_TYPE: DispatchEntry(_no_rules, "handle_applicant"),
    StepType.COMMERCIAL_REGISTRATION: DispatchEntry(_no_rules, "handle_applicant"),
    StepType.MARINE_UNIT_SELECTION: DispatchEntry(_selection_rules, "handle_selection"),
    StepType.MARINE_UNIT_DATA: DispatchEntry(_unit_data_rules, "handle_unit_data"),
    StepType.MARINE_UNIT_NAME_SELECTION: DispatchEntry(_name_rules, "handle_attach"),
    StepType.MARITIME_IDENTIFICATION: DispatchEntry(_no_rules, "handle_maritime_identification"),
    StepType.NAVIGATION_AREAS: DispatchEntry(_no_rules, "handle_attach"),
    StepType.CREW_MANAGEMENT: DispatchEntry(_no_rules, "handle_crew"),
    StepType.SHIP_DIMENSIONS: DispatchEntry(_dimension_rules, "handle_attach"),
    StepType.SHIP_WEIGHTS: DispatchEntry(_weight_rules, "handle_attach"),
    StepType.OWNER_INFO: DispatchEntry(_no_rules, "handle_attach"),
    StepType.ENGINE_INFO: DispatchEntry(_no_rules, "handle_attach"),
    StepType.DOCUMENTS: DispatchEntry(_document_rules, "handle_attach"),
    StepType.INSURANCE_DOCUMENT: DispatchEntry(_no_rules, "handle_attach"),
    StepType.INSPECTION_PURPOSES_AND_AUTHORITIES: DispatchEntry(_no_rules, "handle_inspection_request"),
    StepType.MORTGAGE_DATA: DispatchEntry(_mortgage_rules, "handle_mortgage_data"),
    StepType.CANCELLATION_REASON: DispatchEntry(_no_rules, "handle_attach"),
    StepType.CHANGE_PORT_INFO: DispatchEntry(
        _changed_value_rules("newPortOfRegistry", "currentPortOfRegistry"), "handle_request_update"),
    StepType.CHANGE_NAME_INFO: DispatchEntry(
        _changed_value_rules("newShipName", "currentShipName"), "handle_request_update"),
    StepType.CHANGE_ACTIVITY_INFO: DispatchEntry(
        _changed_value_rules("newMarineActivity", "currentMarineActivity"), "handle_request_update"),
    StepType.PAYMENT: DispatchEntry(_no_rules, "handle_payment"),
    StepType.PAYMENT_CONFIRMATION: DispatchEntry(_no_rules, "handle_payment_confirmation"),
    StepType.PAYMENT_SUCCESS: DispatchEntry(_no_rules, "handle_payment_success"),
    StepType.REVIEW: DispatchEntry(_no_rules, "handle_review"),
    StepType.CUSTOM: DispatchEntry(),
}


def step_rule_table() -> Dict[StepType, RuleSetFactory]:
    """StepType -> default rule set factory, as registered by ValidationFactory."""
    return {kind: entry.rules for kind, entry in STEP_DISPATCH.items() if entry.rules is not None}


def handler_name(step_type: StepType) -> Optional[str]:
    entry = STEP_DISPATCH.get(step_type)
    return entry.handler if entry else None
