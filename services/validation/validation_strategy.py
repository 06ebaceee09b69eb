# -*- coding: utf-8 -*-
"""
Validation rules - pluggable cross-field and cross-step checks.

Every rule is a pure function of (current step data, accumulated data) and
returns a list of (field_id, message) errors. Rules never mutate either map.

Rule kinds:
- NumericComparison: compares two numeric fields, skipped when either is
  blank or not a number
- Custom: arbitrary predicate over the merged data
- ConditionalRequired: a field becomes mandatory when a trigger holds
- CrossStep: same as ConditionalRequired but the trigger is read from data
  entered on earlier steps
"""

import operator
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple

from services.translation_manager import tr

FieldError = Tuple[str, str]


def to_number(value) -> Optional[float]:
    """Parse a form value as a float; None for blank or non-numeric input."""
    if value is None:
        return None
    text = str(value).strip().replace(",", "")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def merge_data(data: Dict[str, str], accumulated: Dict[str, str]) -> Dict[str, str]:
    """accumulated ∪ data, current step values winning."""
    merged = dict(accumulated or {})
    merged.update(data or {})
    return merged


class ValidationRule(ABC):
    """
    Abstract base class for validation rules.

    field_ids lists the ids the rule reads; error_field_id is where the
    error is reported. A rule is attached to a step when the step holds
    its error field.
    """

    def __init__(self, field_ids: Tuple[str, ...], error_field_id: str, message_key: str):
        self.field_ids = tuple(field_ids)
        self.error_field_id = error_field_id
        self.message_key = message_key

    @abstractmethod
    def validate(self, data: Dict[str, str], accumulated: Dict[str, str]) -> List[FieldError]:
        """
        Check the rule.

        Args:
            data: Values of the step being validated
            accumulated: Values entered on earlier steps

        Returns:
            List of (field_id, message); empty when the rule holds
        """
        pass

    def is_valid(self, data: Dict[str, str], accumulated: Dict[str, str]) -> bool:
        return len(self.validate(data, accumulated)) == 0

    def _error(self, **kwargs) -> List[FieldError]:
        return [(self.error_field_id, tr(self.message_key, **kwargs))]

    def __repr__(self):
        return f"{self.__class__.__name__}({self.error_field_id!r}, {self.message_key!r})"


_COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
}


class NumericComparisonRule(ValidationRule):
    """left <comparison> right; reported on error_field_id (defaults to left)."""

    def __init__(self, left_id: str, comparison: str, right_id: str,
                 message_key: str, error_field_id: Optional[str] = None):
        if comparison not in _COMPARATORS:
            raise ValueError(f"Unknown comparison: {comparison}")
        super().__init__((left_id, right_id), error_field_id or left_id, message_key)
        self.left_id = left_id
        self.right_id = right_id
        self.comparison = comparison

    def validate(self, data: Dict[str, str], accumulated: Dict[str, str]) -> List[FieldError]:
        merged = merge_data(data, accumulated)
        left = to_number(merged.get(self.left_id))
        right = to_number(merged.get(self.right_id))
        if left is None or right is None:
            return []
        if _COMPARATORS[self.comparison](left, right):
            return []
        return self._error(left=merged.get(self.left_id), right=merged.get(self.right_id))


class CustomRule(ValidationRule):
    """
    Predicate over the merged data.

    The predicate returns True when valid. It may also return a dict of
    format arguments for the message, which counts as invalid.
    """

    def __init__(self, field_ids: Tuple[str, ...], error_field_id: str, message_key: str,
                 predicate: Callable[[Dict[str, str]], object]):
        super().__init__(field_ids, error_field_id, message_key)
        self.predicate = predicate

    def validate(self, data: Dict[str, str], accumulated: Dict[str, str]) -> List[FieldError]:
        outcome = self.predicate(merge_data(data, accumulated))
        if outcome is True:
            return []
        if isinstance(outcome, dict):
            return self._error(**outcome)
        return self._error()


class ConditionalRequiredRule(ValidationRule):
    """required_id must be filled when condition(trigger value) holds; both read from the step."""

    def __init__(self, trigger_id: str, condition: Callable[[Optional[str]], bool],
                 required_id: str, message_key: str):
        super().__init__((trigger_id, required_id), required_id, message_key)
        self.trigger_id = trigger_id
        self.condition = condition
        self.required_id = required_id

    def _source(self, data: Dict[str, str], accumulated: Dict[str, str]) -> Dict[str, str]:
        return data or {}

    def validate(self, data: Dict[str, str], accumulated: Dict[str, str]) -> List[FieldError]:
        source = self._source(data, accumulated)
        if not self.condition(source.get(self.trigger_id)):
            return []
        if str(source.get(self.required_id) or "").strip():
            return []
        return self._error()


class CrossStepRule(ConditionalRequiredRule):
    """ConditionalRequired whose trigger usually lives on an earlier step."""

    def __init__(self, trigger_id: str, condition: Callable[[Optional[str]], bool],
                 required_id: str, message_key: str, error_field_id: Optional[str] = None):
        super().__init__(trigger_id, condition, required_id, message_key)
        if error_field_id:
            self.error_field_id = error_field_id

    def _source(self, data: Dict[str, str], accumulated: Dict[str, str]) -> Dict[str, str]:
        return merge_data(data, accumulated)
