# -*- coding: utf-8 -*-
"""
Transaction wizard engine.

Modules:
- shared_steps: step catalog
- step_dispatch: StepType -> rule set and orchestrator handler
- orchestrator: backend calls per step kind
- base_strategy / strategies: one strategy per transaction
- wizard_session: host-facing driver with resume support
"""

from .step_result import (
    Abort, AbortReason, Advance, Complete, Notice, Outcome,
    NoAction, UpdateFields, FieldError,
)
from .draft_tracker import DraftTracker
from .transaction_state import TransactionState
from .base_strategy import BaseTransactionStrategy
from .strategy_factory import TransactionStrategyFactory
from .wizard_session import WizardSession

__all__ = [
    "Abort",
    "AbortReason",
    "Advance",
    "Complete",
    "Notice",
    "Outcome",
    "NoAction",
    "UpdateFields",
    "FieldError",
    "DraftTracker",
    "TransactionState",
    "BaseTransactionStrategy",
    "TransactionStrategyFactory",
    "WizardSession",
]
