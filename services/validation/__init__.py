# -*- coding: utf-8 -*-
"""
Validation Module - field checks and cross-field/cross-step rules.
"""

from .validation_strategy import (
    ValidationRule, NumericComparisonRule, CustomRule,
    ConditionalRequiredRule, CrossStepRule,
)
from .field_validator import validate_field
from .validation_factory import ValidationFactory
from .form_validator import FormValidator

__all__ = [
    "ValidationRule",
    "NumericComparisonRule",
    "CustomRule",
    "ConditionalRequiredRule",
    "CrossStepRule",
    "validate_field",
    "ValidationFactory",
    "FormValidator",
]
