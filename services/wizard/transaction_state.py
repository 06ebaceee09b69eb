# -*- coding: utf-8 -*-
"""
Transaction State - the host-visible snapshot of a wizard session.

Frozen: every transition builds a new instance with `evolve`, so a host
holding an old state never sees it change underneath.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional, Tuple

from models.step_data import StepData
from models.transaction import TransactionType
from services.wizard.step_result import Notice


@dataclass(frozen=True)
class TransactionState:
    """
    Snapshot of one wizard session.

    form_data and field_errors are plain dicts for convenience; treat them
    as read-only, evolve() copies them.
    """

    transaction_type: TransactionType
    steps: Tuple[StepData, ...] = ()
    current_step_index: int = 0
    completed_steps: FrozenSet[int] = frozenset()
    locked_steps: FrozenSet[int] = frozenset()
    form_data: Dict[str, str] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    is_loading: bool = False
    is_resumed: bool = False
    is_finished: bool = False
    last_api_error: Optional[str] = None
    notice: Optional[Notice] = None
    message: str = ""

    @property
    def current_step(self) -> Optional[StepData]:
        if 0 <= self.current_step_index < len(self.steps):
            return self.steps[self.current_step_index]
        return None

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def can_go_back(self) -> bool:
        previous = self.current_step_index - 1
        return previous >= 0 and previous not in self.locked_steps

    def is_step_locked(self, index: int) -> bool:
        return index in self.locked_steps

    def evolve(self, **changes) -> "TransactionState":
        """Copy with changes; dict fields are copied defensively."""
        for name in ("form_data", "field_errors"):
            if name in changes:
                changes[name] = dict(changes[name] or {})
        if "steps" in changes:
            changes["steps"] = tuple(changes["steps"])
        for name in ("completed_steps", "locked_steps"):
            if name in changes:
                changes[name] = frozenset(changes[name])
        return replace(self, **changes)
