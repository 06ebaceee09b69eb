# -*- coding: utf-8 -*-
"""
Wizard Session - drives one strategy for a host UI.

Handles:
- Step progression (next/back/go_to) over the computed step list
- Validation before processing
- Cancellation of an in-flight step when the user navigates back
- Resume payload (to_dict/from_dict) and read-only steps after a resume

The session owns the only mutable reference to the immutable
TransactionState; hosts read `session.state` after every call.
"""

import asyncio
from typing import Any, Dict, Optional

from models.step_data import StepType
from models.transaction import TransactionType
from services.validation.validation_strategy import merge_data
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.draft_tracker import DraftTracker
from services.wizard.step_result import (
    Abort, AbortReason, Advance, Complete, FieldError, FieldFocusResult,
    StepResult, UpdateFields,
)
from services.wizard.transaction_state import TransactionState
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardSession:
    """
    One run of a transaction wizard.

    Transitions are serialized by an asyncio.Lock. back() does not wait
    for the lock: it cancels the step being processed and bumps the
    generation counter, so a result arriving afterwards is dropped.
    """

    def __init__(self, strategy: BaseTransactionStrategy):
        self.strategy = strategy
        self._state = TransactionState(transaction_type=strategy.transaction_type)
        self._lock = asyncio.Lock()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def _refresh(self, **changes) -> TransactionState:
        changes.setdefault("steps", self.strategy.get_steps())
        self._state = self._state.evolve(**changes)
        return self._state

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def start(self, resume: Optional[Dict[str, Any]] = None) -> TransactionState:
        """
        Load lookups and materialize the first step list.

        A session that was neither given a payload nor built by from_dict()
        starts a new attempt and clears the strategy first.

        Args:
            resume: Payload produced by to_dict() of an earlier session
        """
        if resume is not None:
            self._restore(resume)
        elif not self._state.is_resumed:
            self.strategy.reset()
            self._state = TransactionState(transaction_type=self.strategy.transaction_type)
        self._state = self._state.evolve(is_loading=True)
        await self.strategy.load_dynamic_options()
        state = self._refresh(is_loading=False, form_data=self.strategy.accumulated_data)
        logger.info(f"Started {state.transaction_type.value} at step {state.current_step_index} "
                    f"of {state.step_count} (resumed={state.is_resumed})")
        return state

    async def next(self, data: Dict[str, str]) -> Optional[StepResult]:
        """
        Validate and process the current step.

        Returns:
            The StepResult, or None when validation failed or the step was
            cancelled by back()
        """
        async with self._lock:
            index = self._state.current_step_index

            if self._state.is_step_locked(index):
                # Read-only step from before the resume point
                result = Advance(index + 1)
                self._apply(index, result)
                return result

            is_valid, errors = self.strategy.validate_step(index, data)
            if not is_valid:
                self._state = self._state.evolve(
                    field_errors=errors,
                    form_data=merge_data(data, self._state.form_data),
                )
                return None

            generation = self._generation
            self._state = self._state.evolve(is_loading=True, field_errors={})
            self._task = asyncio.ensure_future(self.strategy.process_step_data(index, data))
            try:
                result = await self._task
            except asyncio.CancelledError:
                if generation != self._generation:
                    logger.info(f"Step {index} cancelled by navigation")
                    return None
                raise
            finally:
                self._task = None

            if generation != self._generation:
                logger.info(f"Dropping late result of step {index}")
                return None
            self._apply(index, result)
            return result

    def back(self) -> TransactionState:
        """Go to the previous step, cancelling a step still being processed."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()

        state = self._state
        if not state.can_go_back():
            self._state = state.evolve(is_loading=False)
            return self._state
        self._state = state.evolve(
            current_step_index=state.current_step_index - 1,
            is_loading=False,
            field_errors={},
            notice=None,
            message="",
        )
        return self._state

    def go_to(self, index: int) -> bool:
        """Jump to a completed step (or the one after the last completed)."""
        state = self._state
        reachable = max(state.completed_steps, default=-1) + 1
        if not 0 <= index < state.step_count or index > reachable or state.is_loading:
            return False
        self._state = state.evolve(current_step_index=index, field_errors={}, notice=None, message="")
        return True

    # =========================================================================
    # Results
    # =========================================================================

    def _apply(self, index: int, result: StepResult):
        strategy = self.strategy
        common = dict(is_loading=False, form_data=strategy.accumulated_data)

        if isinstance(result, Advance):
            self._refresh(
                current_step_index=result.index,
                completed_steps=self._state.completed_steps | {index},
                notice=result.notice,
                message=result.message,
                last_api_error=None,
                **common,
            )
        elif isinstance(result, Complete):
            self._refresh(
                completed_steps=self._state.completed_steps | {index},
                is_finished=True,
                notice=result.notice,
                message=result.message,
                last_api_error=None,
                **common,
            )
        elif isinstance(result, Abort) and result.reason is AbortReason.INSPECTION_REQUIRED:
            steps = strategy.get_steps()
            target = next(
                (i for i in range(index + 1, len(steps))
                 if steps[i].step_type is StepType.INSPECTION_PURPOSES_AND_AUTHORITIES),
                index,
            )
            self._refresh(
                steps=steps,
                current_step_index=target,
                completed_steps=self._state.completed_steps | {index},
                message=result.message,
                **common,
            )
        else:
            self._refresh(last_api_error=strategy.last_api_error or result.message, **common)

    # =========================================================================
    # Field events
    # =========================================================================

    def field_changed(self, field_id: str, value: str) -> Dict[str, str]:
        form_data = self.strategy.handle_field_change(field_id, value, self._state.form_data)
        self._refresh(form_data=form_data, steps=self.strategy.get_steps(form_data))
        return form_data

    async def field_focus_lost(self, field_id: str, value: str) -> FieldFocusResult:
        result = await self.strategy.on_field_focus_lost(field_id, value)
        if isinstance(result, UpdateFields):
            self._state = self._state.evolve(form_data=merge_data(result.values, self._state.form_data))
        elif isinstance(result, FieldError):
            errors = dict(self._state.field_errors)
            errors[result.field_id] = result.message
            self._state = self._state.evolve(field_errors=errors)
        return result

    # =========================================================================
    # Resume
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        state = self._state
        return {
            "transactionType": state.transaction_type.value,
            "formData": dict(self.strategy.accumulated_data),
            "draft": self.strategy.draft_tracker.to_dict(),
            "currentStepIndex": state.current_step_index,
            "completedSteps": sorted(state.completed_steps),
            "lockedSteps": sorted(state.locked_steps),
            "isResumed": state.is_resumed,
        }

    def _restore(self, payload: Dict[str, Any]):
        expected = self.strategy.transaction_type.value
        if payload.get("transactionType", expected) != expected:
            raise ValueError(f"Resume payload is for {payload.get('transactionType')}, not {expected}")

        current = int(payload.get("currentStepIndex", 0))
        completed = payload.get("completedSteps") or ()
        self.strategy.restore(
            dict(payload.get("formData") or {}),
            DraftTracker.from_dict(payload.get("draft")),
        )
        if payload.get("draft") is None and completed:
            # Payloads from the backend list completed steps only
            steps = self.strategy.get_steps()
            self.strategy.draft_tracker.initialize_posted_steps(
                steps[i].step_type for i in completed if 0 <= i < len(steps)
            )
        locked = payload.get("lockedSteps")
        if locked is None:
            locked = range(current)
        self._state = self._state.evolve(
            current_step_index=current,
            completed_steps=completed,
            locked_steps=locked,
            form_data=self.strategy.accumulated_data,
            is_resumed=True,
        )

    @classmethod
    def from_dict(cls, strategy: BaseTransactionStrategy, payload: Dict[str, Any]) -> "WizardSession":
        """Session restored from a payload; call start() to load lookups."""
        session = cls(strategy)
        session._restore(payload)
        return session

    @staticmethod
    def transaction_type_of(payload: Dict[str, Any]) -> Optional[TransactionType]:
        try:
            return TransactionType(payload.get("transactionType"))
        except ValueError:
            return None
