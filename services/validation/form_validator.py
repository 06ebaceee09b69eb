# -*- coding: utf-8 -*-
"""
Step validation against accumulated form data.

Field checks come from the FormField constraints, cross-field and
cross-step checks from the rules the ValidationFactory selects. The first
error per field wins; field checks run before rules.
"""

from datetime import date
from typing import Dict, List, Optional, Tuple

from models.step_data import StepData
from services.validation.field_validator import validate_field
from services.validation.validation_factory import ValidationFactory
from services.validation.validation_strategy import ValidationRule, merge_data
from utils.logger import get_logger

logger = get_logger(__name__)


class FormValidator:
    """Validates one step; never mutates the data it is given."""

    def __init__(self, factory: Optional[ValidationFactory] = None):
        self.factory = factory or ValidationFactory()

    def validate_step_with_accumulated_data(
        self,
        step: StepData,
        current_data: Dict[str, str],
        accumulated_data: Dict[str, str],
        extra_rules: Optional[List[ValidationRule]] = None,
        today: Optional[date] = None
    ) -> Tuple[bool, Dict[str, str]]:
        """
        Validate a step.

        Args:
            step: Step definition
            current_data: Values submitted for this step
            accumulated_data: Values from earlier steps
            extra_rules: Rules supplied by the strategy on top of the defaults
            today: Reference date for past-date checks

        Returns:
            Tuple of (is_valid, field_id -> localized message)
        """
        merged = merge_data(current_data, accumulated_data)
        errors: Dict[str, str] = {}

        for field in step.fields:
            if field.read_only:
                continue
            message = validate_field(field, current_data.get(field.id, ""), merged, today)
            if message:
                errors[field.id] = message

        rules = self.factory.rules_for_step(step) + list(extra_rules or [])
        for rule in rules:
            for field_id, message in rule.validate(current_data, accumulated_data):
                errors.setdefault(field_id, message)

        if errors:
            logger.debug(f"Step {step.step_type.value} invalid: {sorted(errors)}")
        return len(errors) == 0, errors
