# -*- coding: utf-8 -*-
"""
Tests for the Wizard Session.

Tests cover:
- Start and step progression
- Validation failures staying on the step
- Cancellation of an in-flight step by back()
- Backend errors surfaced on the state
- Resume payload round trip, locked steps and type checks
- Inspection diversion moving the current step
- Field change and focus-lost events
"""

import asyncio
import json

import pytest

from models.step_data import StepType
from models.transaction import TransactionType
from repositories.memory_repositories import MemoryTransactionRepositories
from services.exceptions import ApiException
from services.translation_manager import tr
from services.wizard import WizardSession
from services.wizard.step_result import (
    Abort, AbortReason, Advance, Complete, FieldError, Outcome, UpdateFields,
)

PERMANENT = TransactionType.PERMANENT_REGISTRATION_CERTIFICATE

INDIVIDUAL = {"selectionPersonType": "individual"}

INSURANCE = {
    "insuranceDocumentNumber": "INS-1",
    "insuranceCountry": "عُمان",
    "insuranceCompany": "ظفار للتأمين",
    "insuranceExpiryDate": "2099-01-01",
    "insuranceDocumentFile": "/tmp/insurance.pdf",
}

INSPECTION = {
    "inspectionPurpose": "تسجيل",
    "inspectionRecordingPort": "صحار",
    "inspectionAuthorityAndEntity": "هيئة التصنيف",
}


def selected(*ship_ids):
    return {"selectedMarineUnits": json.dumps(list(ship_ids))}


async def submit(session, *pages):
    for data in pages:
        result = await session.next(data)
        assert isinstance(result, Advance), f"got {result}, errors {session.state.field_errors}"
    return session.state


@pytest.fixture
def make_session(factory):
    """Started session for a transaction type."""
    async def build(transaction_type=PERMANENT, using=None):
        session = WizardSession((using or factory).create(transaction_type))
        await session.start()
        return session
    return build


class TestProgression:
    """Test moving through the steps."""

    @pytest.mark.asyncio
    async def test_start(self, make_session):
        """Test start loads the first step list."""
        session = await make_session()
        state = session.state

        assert state.current_step_index == 0
        assert state.current_step.step_type is StepType.PERSON_TYPE
        assert state.is_loading is False
        assert state.is_resumed is False
        assert session.strategy.option("countries") == ["عُمان", "الإمارات", "السعودية"]

    @pytest.mark.asyncio
    async def test_validation_failure_stays(self, make_session):
        """Test invalid data keeps the step and reports field errors."""
        session = await make_session()

        result = await session.next({})

        assert result is None
        assert session.state.current_step_index == 0
        assert session.state.field_errors == {"selectionPersonType": tr("validation.required")}

    @pytest.mark.asyncio
    async def test_advance(self, make_session):
        """Test valid data moves to the next step."""
        session = await make_session()

        result = await session.next(INDIVIDUAL)

        assert result == Advance(1)
        state = session.state
        assert state.current_step_index == 1
        assert state.completed_steps == frozenset({0})
        assert state.form_data["selectionPersonType"] == "individual"
        assert state.field_errors == {}

    @pytest.mark.asyncio
    async def test_back_and_go_to(self, make_session):
        """Test back and jumps limited to reached steps."""
        session = await make_session()
        await submit(session, INDIVIDUAL, selected("101"))

        session.back()
        assert session.state.current_step_index == 1

        assert session.go_to(5) is False
        assert session.go_to(2) is True
        assert session.state.current_step_index == 2

    @pytest.mark.asyncio
    async def test_states_are_snapshots(self, make_session):
        """Test a held state never changes after a transition."""
        session = await make_session()
        before = session.state

        await session.next(INDIVIDUAL)

        assert before.current_step_index == 0
        assert "selectionPersonType" not in before.form_data

    @pytest.mark.asyncio
    async def test_complete_finishes(self, make_session):
        """Test review on a new session finishes the wizard."""
        session = await make_session()
        await submit(session, INDIVIDUAL, selected("101"), INSURANCE,
                     {"temporaryCertificate": "/tmp/t.pdf", "ownershipProof": "/tmp/o.pdf"})

        result = await session.next({})

        assert isinstance(result, Complete)
        assert session.state.is_finished is True
        assert session.state.message == "تم إرسال الطلب بنجاح"


class TestCancellation:
    """Test back() while a step is being processed."""

    @pytest.mark.asyncio
    async def test_back_cancels_in_flight_step(self, make_factory):
        """Test a cancelled step commits nothing."""
        pause = asyncio.Event()
        repositories = MemoryTransactionRepositories(pause=pause)
        session = WizardSession(make_factory(repositories).create(PERMANENT))
        await session.start()
        await submit(session, INDIVIDUAL, selected("101"))
        repo = repositories.for_type(PERMANENT)

        pending = asyncio.ensure_future(session.next(INSURANCE))
        while not repo.called("attach"):
            await asyncio.sleep(0)
        assert session.state.is_loading is True

        session.back()
        result = await pending

        assert result is None
        state = session.state
        assert state.current_step_index == 1
        assert state.is_loading is False
        assert "insuranceDocumentNumber" not in session.strategy.accumulated_data
        assert not session.strategy.draft_tracker.is_step_posted(StepType.INSURANCE_DOCUMENT)

    @pytest.mark.asyncio
    async def test_back_bumps_generation(self, make_session):
        """Test every back() invalidates pending results."""
        session = await make_session()
        generation = session.generation
        session.back()
        assert session.generation == generation + 1
        assert session.state.current_step_index == 0


class TestNewAttempt:
    """Test starting over on a used strategy."""

    @pytest.mark.asyncio
    async def test_start_clears_previous_attempt(self, factory):
        """Test a fresh start forgets data, draft state and ships of the last run."""
        strategy = factory.create(TransactionType.ISSUE_NAVIGATION_PERMIT)
        first = WizardSession(strategy)
        await first.start()
        await submit(first, INDIVIDUAL, selected("103"),
                     {"sailingRegions": json.dumps(["الخليج العربي"], ensure_ascii=False)})
        assert strategy.accumulated_data["requestId"] == "1000"
        strategy.is_resumed = True
        strategy.last_api_error = "old error"

        second = WizardSession(strategy)
        state = await second.start()

        assert strategy.accumulated_data == {}
        assert strategy.draft_tracker.posted_steps == frozenset()
        assert strategy.is_resumed is False
        assert strategy.last_api_error is None
        assert state.current_step_index == 0
        assert state.form_data == {}
        assert [ship.id for ship in strategy.ships] == ["101", "102", "103"]

    @pytest.mark.asyncio
    async def test_restored_session_not_cleared(self, factory, make_session):
        """Test start() after from_dict() keeps the restored data."""
        session = await make_session()
        await submit(session, INDIVIDUAL, selected("101"))

        restored = WizardSession.from_dict(factory.create(PERMANENT), session.to_dict())
        await restored.start()

        assert restored.strategy.accumulated_data["requestId"] == "500"


class TestErrors:
    """Test backend errors on the state."""

    @pytest.mark.asyncio
    async def test_api_error_on_state(self, make_factory):
        """Test a failed attach keeps the step and exposes the message."""
        repositories = MemoryTransactionRepositories(failures={"attach": ApiException("boom", status_code=500)})
        session = WizardSession(make_factory(repositories).create(PERMANENT))
        await session.start()
        await submit(session, INDIVIDUAL, selected("101"))

        result = await session.next(INSURANCE)

        assert result.reason is AbortReason.API_ERROR
        state = session.state
        assert state.current_step_index == 2
        assert state.last_api_error == tr("error.api.server")
        assert state.is_loading is False
        assert state.form_data["insuranceCompany"] == "ظفار للتأمين"


class TestResume:
    """Test the resume payload."""

    @pytest.mark.asyncio
    async def test_round_trip(self, factory, make_session):
        """Test a restored session continues where the payload left off."""
        session = await make_session()
        await submit(session, INDIVIDUAL, selected("101"))
        payload = json.loads(json.dumps(session.to_dict(), ensure_ascii=False))

        assert payload["transactionType"] == PERMANENT.value
        assert payload["currentStepIndex"] == 2
        assert payload["draft"]["postedSteps"] == {"MARINE_UNIT_SELECTION": True}

        restored = WizardSession.from_dict(factory.create(PERMANENT), payload)
        state = await restored.start()

        assert state.is_resumed is True
        assert state.current_step_index == 2
        assert state.current_step.step_type is StepType.INSURANCE_DOCUMENT
        assert restored.strategy.accumulated_data == session.strategy.accumulated_data
        assert restored.strategy.draft_tracker == session.strategy.draft_tracker

        result = await restored.next(INSURANCE)
        assert result == Advance(3)

    @pytest.mark.asyncio
    async def test_earlier_steps_locked_without_locked_list(self, factory, marine_repo):
        """Test steps before the resume point are read-only when the payload has no lock list."""
        payload = {
            "transactionType": PERMANENT.value,
            "formData": {**INDIVIDUAL, **selected("101"), "requestId": "500", "shipId": "101",
                         "shipInfoId": "101", "needsMaritimeIdentification": "false"},
            "currentStepIndex": 2,
        }
        session = WizardSession.from_dict(factory.create(PERMANENT), payload)
        await session.start()

        assert session.state.locked_steps == frozenset({0, 1})
        assert session.state.can_go_back() is False
        session.back()
        assert session.state.current_step_index == 2

        proceeds = len(marine_repo.called("proceed_with_request"))
        assert session.go_to(0) is True
        result = await session.next({})

        assert result == Advance(1)
        assert len(marine_repo.called("proceed_with_request")) == proceeds

    @pytest.mark.asyncio
    async def test_completed_steps_without_draft_mark_posted(self, factory):
        """Test a payload listing only completed steps marks their kinds as posted."""
        payload = {
            "transactionType": PERMANENT.value,
            "formData": {**INDIVIDUAL, **selected("101"), "requestId": "500", "shipId": "101",
                         "shipInfoId": "101", "needsMaritimeIdentification": "false"},
            "currentStepIndex": 2,
            "completedSteps": [0, 1],
        }
        session = WizardSession.from_dict(factory.create(PERMANENT), payload)

        assert session.strategy.draft_tracker.posted_steps == frozenset(
            {StepType.PERSON_TYPE, StepType.MARINE_UNIT_SELECTION}
        )

    @pytest.mark.asyncio
    async def test_type_mismatch(self, factory, make_session):
        """Test a payload for another transaction is rejected."""
        session = await make_session()
        payload = session.to_dict()

        with pytest.raises(ValueError):
            WizardSession.from_dict(factory.create(TransactionType.MORTGAGE_CERTIFICATE), payload)

    def test_transaction_type_of(self):
        """Test reading the transaction type of a payload."""
        assert WizardSession.transaction_type_of({"transactionType": "MORTGAGE_CERTIFICATE"}) is \
            TransactionType.MORTGAGE_CERTIFICATE
        assert WizardSession.transaction_type_of({"transactionType": "UNKNOWN"}) is None


class TestInspectionDiversion:
    """Test the injected inspection step."""

    @pytest.mark.asyncio
    async def test_gate_moves_to_inspection_step(self, make_factory):
        """Test gate 0 moves the session onto the inspection step."""
        repositories = MemoryTransactionRepositories(gate_status=0)
        session = WizardSession(make_factory(repositories).create(TransactionType.ISSUE_NAVIGATION_PERMIT))
        await session.start()
        sailors = {"sailors": json.dumps([{"nameAr": "أحمد", "seamenBookNo": "SB-1"}], ensure_ascii=False)}
        await submit(session, INDIVIDUAL, selected("103"),
                     {"sailingRegions": json.dumps(["الخليج العربي"], ensure_ascii=False)}, sailors)

        result = await session.next({})

        assert result == Abort(AbortReason.INSPECTION_REQUIRED, tr("notice.inspection_required"))
        state = session.state
        assert state.current_step.step_type is StepType.INSPECTION_PURPOSES_AND_AUTHORITIES
        assert state.message == tr("notice.inspection_required")

        result = await session.next(INSPECTION)

        assert result.outcome is Outcome.INSPECTION_REQUESTED
        assert session.state.is_finished is True


class TestFieldEvents:
    """Test field change and focus-lost events."""

    @pytest.mark.asyncio
    async def test_person_type_change_updates_steps(self, make_session):
        """Test switching to company adds the commercial registration step."""
        session = await make_session()

        session.field_changed("selectionPersonType", "company")

        assert session.state.steps[1].step_type is StepType.COMMERCIAL_REGISTRATION
        assert session.state.form_data["selectionPersonType"] == "company"

    @pytest.mark.asyncio
    async def test_company_lookup_fills_form(self, make_session):
        """Test a resolved company fills the form."""
        session = await make_session()

        result = await session.field_focus_lost("companyRegistrationNumber", "1234567")

        assert isinstance(result, UpdateFields)
        assert session.state.form_data["companyName"] == "شركة الخليج البحرية"

    @pytest.mark.asyncio
    async def test_company_lookup_error(self, make_session):
        """Test a lookup error lands on the field."""
        session = await make_session()

        result = await session.field_focus_lost("companyRegistrationNumber", "12")

        assert isinstance(result, FieldError)
        assert session.state.field_errors["companyRegistrationNumber"] == \
            tr("lookup.company.too_short", count=3)
