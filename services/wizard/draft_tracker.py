# -*- coding: utf-8 -*-
"""
Draft Tracker - remembers which step kinds were already persisted.

A step kind is "posted" once its create/attach call succeeded. The tracker
also keeps the data last sent for each kind so that revisiting a step
without changes costs no backend call, and a changed step is sent as an
update (PUT) instead of a second create (POST).

Serialized form (part of the resume payload):
    {"postedSteps": {"SHIP_DIMENSIONS": true, ...},
     "snapshots": {"SHIP_DIMENSIONS": {"overallLength": "30", ...}, ...}}
"""

from typing import Any, Dict, Iterable, Optional

from models.step_data import StepType
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftTracker:
    """Posted step kinds and the snapshot last persisted for each."""

    def __init__(self):
        self._posted: set = set()
        self._snapshots: Dict[StepType, Dict[str, str]] = {}

    def initialize_posted_steps(self, completed_kinds: Iterable[StepType]):
        """Replace the posted set with the kinds a backend reports as completed."""
        self._posted = set(completed_kinds)
        logger.debug(f"Initialized posted steps: {sorted(k.value for k in self._posted)}")

    def has_data_changed(self, kind: StepType, current: Dict[str, str]) -> bool:
        """True when no snapshot exists for the kind or it differs from `current`."""
        snapshot = self._snapshots.get(kind)
        if snapshot is None:
            return True
        return snapshot != dict(current)

    def save_data_snapshot(self, kind: StepType, data: Dict[str, str]):
        self._snapshots[kind] = dict(data)

    def mark_step_as_posted(self, kind: StepType):
        self._posted.add(kind)

    def is_step_posted(self, kind: StepType) -> bool:
        return kind in self._posted

    def should_skip(self, kind: StepType, current: Dict[str, str]) -> bool:
        """Posted and unchanged: nothing to send."""
        return self.is_step_posted(kind) and not self.has_data_changed(kind, current)

    def clear_draft_state(self, keep: Iterable[StepType] = ()):
        """Forget posted flags and snapshots, except for the kinds in `keep`."""
        keep = set(keep)
        self._posted &= keep
        self._snapshots = {kind: snap for kind, snap in self._snapshots.items() if kind in keep}

    def copy(self) -> "DraftTracker":
        clone = DraftTracker()
        clone._posted = set(self._posted)
        clone._snapshots = {kind: dict(snap) for kind, snap in self._snapshots.items()}
        return clone

    @property
    def posted_steps(self) -> frozenset:
        return frozenset(self._posted)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "postedSteps": {kind.value: True for kind in sorted(self._posted, key=lambda k: k.value)},
            "snapshots": {kind.value: dict(snap) for kind, snap in self._snapshots.items()},
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DraftTracker":
        tracker = cls()
        data = data or {}
        for name, posted in (data.get("postedSteps") or {}).items():
            kind = StepType.from_name(name)
            if kind is not None and posted:
                tracker._posted.add(kind)
        for name, snapshot in (data.get("snapshots") or {}).items():
            kind = StepType.from_name(name)
            if kind is not None and isinstance(snapshot, dict):
                tracker._snapshots[kind] = {k: str(v) for k, v in snapshot.items()}
        return tracker

    def __eq__(self, other):
        if not isinstance(other, DraftTracker):
            return NotImplemented
        return self._posted == other._posted and self._snapshots == other._snapshots
