# -*- coding: utf-8 -*-
"""
Validation Factory - selects the rules that apply to a step.

Two sources feed the selection:
- the rule set registered for the step's StepType
- the marine rule catalog, filtered by the field ids present in the step

A rule is kept only when the step holds the field its error is reported on.
"""

from typing import Callable, Dict, List, Optional

from models.step_data import StepData, StepType
from services.validation import marine_rules
from services.validation.validation_strategy import ValidationRule
from utils.logger import get_logger

logger = get_logger(__name__)

RuleSetFactory = Callable[[], List[ValidationRule]]


class ValidationFactory:
    """
    Registry of rule sets per StepType.

    Rule sets are factories rather than lists so that every validation
    works on fresh rule objects.
    """

    def __init__(self, step_rules: Optional[Dict[StepType, RuleSetFactory]] = None):
        """
        Args:
            step_rules: StepType -> rule set factory; defaults to the
                wizard's step dispatch table
        """
        self._rule_sets: Dict[StepType, List[RuleSetFactory]] = {}
        if step_rules is None:
            self._register_default_rules()
        else:
            for step_type, factory in step_rules.items():
                self.register_rules(step_type, factory)

    def _register_default_rules(self):
        from services.wizard.step_dispatch import step_rule_table

        for step_type, factory in step_rule_table().items():
            self.register_rules(step_type, factory)

    def register_rules(self, step_type: StepType, factory: RuleSetFactory):
        """
        Register an additional rule set for a step kind.

        Args:
            step_type: Step kind the rules apply to
            factory: Callable returning the rules
        """
        self._rule_sets.setdefault(step_type, []).append(factory)

    def rules_for_step(self, step: StepData) -> List[ValidationRule]:
        """
        Rules applicable to a step.

        Args:
            step: Step being validated

        Returns:
            De-duplicated rules whose error field belongs to the step
        """
        field_ids = set(step.field_ids())
        candidates: List[ValidationRule] = []
        for factory in self._rule_sets.get(step.step_type, []):
            candidates.extend(factory())
        candidates.extend(marine_rules.all_rules())

        selected = []
        seen = set()
        for rule in candidates:
            if rule.error_field_id not in field_ids:
                continue
            key = (type(rule).__name__, rule.error_field_id, rule.message_key)
            if key in seen:
                continue
            seen.add(key)
            selected.append(rule)
        return selected
