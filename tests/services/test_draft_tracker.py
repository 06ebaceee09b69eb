# -*- coding: utf-8 -*-
"""
Tests for the Draft Tracker.

Tests cover:
- Skip law (posted and unchanged)
- Snapshot comparison
- Copy isolation
- Serialization for the resume payload
"""

import pytest

from models.step_data import StepType
from services.wizard.draft_tracker import DraftTracker


@pytest.fixture
def tracker():
    """Tracker with dimensions posted."""
    draft = DraftTracker()
    draft.save_data_snapshot(StepType.SHIP_DIMENSIONS, {"overallLength": "30", "overallWidth": "8"})
    draft.mark_step_as_posted(StepType.SHIP_DIMENSIONS)
    return draft


class TestSkipLaw:
    """Test when a step may skip its backend call."""

    def test_new_kind_is_never_skipped(self):
        """Test a kind that was never posted is sent."""
        draft = DraftTracker()
        assert draft.should_skip(StepType.SHIP_WEIGHTS, {}) is False
        assert draft.has_data_changed(StepType.SHIP_WEIGHTS, {}) is True

    def test_unchanged_posted_kind_is_skipped(self, tracker):
        """Test posted kind with the same data is skipped."""
        assert tracker.should_skip(StepType.SHIP_DIMENSIONS, {"overallWidth": "8", "overallLength": "30"})

    def test_changed_posted_kind_is_sent(self, tracker):
        """Test posted kind with changed data is sent again."""
        assert tracker.should_skip(StepType.SHIP_DIMENSIONS, {"overallLength": "31", "overallWidth": "8"}) is False

    def test_snapshot_without_post_is_not_skipped(self):
        """Test a snapshot alone does not count as posted."""
        draft = DraftTracker()
        draft.save_data_snapshot(StepType.OWNER_INFO, {"ownerIdNumber": "1"})
        assert draft.should_skip(StepType.OWNER_INFO, {"ownerIdNumber": "1"}) is False

    def test_resume_marks_kinds_posted(self):
        """Test kinds completed in an earlier session count as posted."""
        draft = DraftTracker()
        draft.initialize_posted_steps([StepType.MARINE_UNIT_DATA, StepType.SHIP_WEIGHTS])
        assert draft.is_step_posted(StepType.SHIP_WEIGHTS)
        assert draft.posted_steps == frozenset({StepType.MARINE_UNIT_DATA, StepType.SHIP_WEIGHTS})

    def test_initialize_replaces_posted_kinds(self, tracker):
        """Test initializing drops kinds posted before."""
        tracker.initialize_posted_steps([StepType.SHIP_WEIGHTS])
        assert tracker.posted_steps == frozenset({StepType.SHIP_WEIGHTS})
        assert tracker.should_skip(StepType.SHIP_DIMENSIONS, {"overallLength": "30", "overallWidth": "8"}) is False

    def test_clear(self, tracker):
        """Test clearing forgets posts and snapshots."""
        tracker.clear_draft_state()
        assert tracker.posted_steps == frozenset()
        assert tracker.has_data_changed(StepType.SHIP_DIMENSIONS, {"overallLength": "30", "overallWidth": "8"})

    def test_clear_keeps_listed_kinds(self, tracker):
        """Test kinds passed as keep survive a clear."""
        tracker.save_data_snapshot(StepType.MARINE_UNIT_SELECTION, {"selectedMarineUnits": '["101"]'})
        tracker.mark_step_as_posted(StepType.MARINE_UNIT_SELECTION)

        tracker.clear_draft_state(keep=[StepType.MARINE_UNIT_SELECTION])

        assert tracker.posted_steps == frozenset({StepType.MARINE_UNIT_SELECTION})
        assert tracker.should_skip(StepType.MARINE_UNIT_SELECTION, {"selectedMarineUnits": '["101"]'})
        assert tracker.has_data_changed(StepType.SHIP_DIMENSIONS, {"overallLength": "30", "overallWidth": "8"})


class TestCopyAndSerialization:
    """Test copies and the serialized form."""

    def test_copy_is_independent(self, tracker):
        """Test changes to a copy do not leak into the original."""
        clone = tracker.copy()
        clone.mark_step_as_posted(StepType.SHIP_WEIGHTS)
        clone.save_data_snapshot(StepType.SHIP_DIMENSIONS, {"overallLength": "99"})

        assert not tracker.is_step_posted(StepType.SHIP_WEIGHTS)
        assert tracker.should_skip(StepType.SHIP_DIMENSIONS, {"overallLength": "30", "overallWidth": "8"})

    def test_round_trip(self, tracker):
        """Test to_dict/from_dict preserves posts and snapshots."""
        payload = tracker.to_dict()
        assert payload["postedSteps"] == {"SHIP_DIMENSIONS": True}
        assert DraftTracker.from_dict(payload) == tracker

    def test_unknown_kinds_ignored(self):
        """Test unknown step names in a payload are dropped."""
        draft = DraftTracker.from_dict({"postedSteps": {"LEGACY_STEP": True, "DOCUMENTS": True},
                                        "snapshots": {"LEGACY_STEP": {"a": "1"}}})
        assert draft.posted_steps == frozenset({StepType.DOCUMENTS})

    def test_empty_payload(self):
        """Test a missing payload yields an empty tracker."""
        assert DraftTracker.from_dict(None) == DraftTracker()
