# -*- coding: utf-8 -*-
"""
Base Transaction Strategy - abstract base class for all transactions.

Provides the parts every transaction shares:
- Lookup loading (each lookup independently failable)
- Step materialization from the accumulated data
- Validation through FormValidator
- Step processing with commit-on-success of data and draft state
- Field change and focus-lost reactions
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional, Tuple

from app.config import PersonTypes
from models.marine_unit import MarineUnit
from models.responses import ReviewResponse
from models.step_data import StepData, StepType
from models.transaction import TransactionType
from repositories.ports import (
    CompanyRepository, LookupRepository, MarineUnitRepository, TransactionRepository,
)
from services.crew_excel_service import CrewExcelService
from services.error_mapper import map_exception
from services.exceptions import (
    ApiException, InconsistentStateException, NetworkException, ValidationException,
)
from services.translation_manager import tr
from services.validation.field_validator import COMPANY_FIELD_IDS
from services.validation.form_validator import FormValidator
from services.validation.validation_strategy import ValidationRule, merge_data
from services.wizard import shared_steps
from services.wizard.draft_tracker import DraftTracker
from services.wizard.orchestrator import StepOrchestrator, StepWork
from services.wizard.step_dispatch import handler_name
from services.wizard.step_result import (
    Abort, AbortReason, Advance, Complete, FieldError, FieldFocusResult,
    NoAction, Outcome, StepResult, UpdateFields,
)
from utils.helpers import is_truthy
from utils.logger import get_logger

logger = get_logger(__name__)

INSPECTION_LOOKUPS = ("inspection_purposes", "inspection_authorities", "ports")

FISHING_MARKERS = ("صيد", "fishing", "Fishing")

MIN_COMPANY_REGISTRATION_LENGTH = 3
MIN_AGRICULTURE_REQUEST_LENGTH = 5

# Form fields whose value changes the step list
TOPOLOGY_FIELDS = ("selectionPersonType", "isFishingBoat", "isAddingNewUnit")


def is_fishing_unit(unit_type: Optional[str]) -> bool:
    return any(marker in (unit_type or "") for marker in FISHING_MARKERS)


class BaseTransactionStrategy(ABC):
    """
    Abstract base class for transaction strategies.

    Subclasses must implement:
    - build_steps(): The step list for the given accumulated data

    Class attributes tune the shared behaviour:
    - lookup_keys: lookups loaded by load_dynamic_options
    - proceeds_on_selection / creates_on_selection: backend calls made
      when an existing ship is picked
    - allows_new_unit: the selection step offers "add new unit"
    - can_require_inspection: review may divert to an inspection request
    - request_id_key: accumulated key holding the id review sends
    - handler_overrides: StepType -> orchestrator handler name (or None)
    """

    transaction_type: TransactionType = None
    lookup_keys: Tuple[str, ...] = ("person_types", "commercial_registrations")
    loads_ships = True
    proceeds_on_selection = True
    creates_on_selection = False
    allows_new_unit = False
    can_require_inspection = False
    request_id_key = "requestId"
    handler_overrides: Dict[StepType, Optional[str]] = {}

    def __init__(
        self,
        lookup_repo: LookupRepository,
        marine_repo: MarineUnitRepository,
        company_repo: CompanyRepository,
        transaction_repo: TransactionRepository,
        inspection_repo: Optional[TransactionRepository] = None,
        validator: Optional[FormValidator] = None,
        crew_service: Optional[CrewExcelService] = None
    ):
        self.lookup_repo = lookup_repo
        self.marine_repo = marine_repo
        self.company_repo = company_repo
        self.transaction_repo = transaction_repo
        self.inspection_repo = inspection_repo
        self.validator = validator or FormValidator()
        self.crew_service = crew_service or CrewExcelService()
        self.orchestrator = StepOrchestrator(self)

        self.accumulated_data: Dict[str, str] = {}
        self.draft_tracker = DraftTracker()
        self.options: Dict[str, list] = {}
        self.ships: List[MarineUnit] = []
        self.is_resumed = False
        self.last_api_error: Optional[str] = None

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def build_steps(self, data: Dict[str, str]) -> List[StepData]:
        """
        Step list for the given accumulated data.

        Must be a pure function of `data` and the loaded options.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    async def after_selection(self, work: StepWork):
        """Called after an existing ship was selected and its request opened."""
        return None

    def review_notice(self, response: ReviewResponse):
        """Notice attached to a successful review."""
        return None

    def extra_rules(self, step: StepData) -> List[ValidationRule]:
        return []

    async def submit(self, data: Dict[str, str]) -> bool:
        """Final submission; steps already persisted everything."""
        return True

    # =========================================================================
    # Options
    # =========================================================================

    def _all_lookup_keys(self) -> List[str]:
        keys = list(self.lookup_keys)
        if self.can_require_inspection:
            keys.extend(INSPECTION_LOOKUPS)
        return list(dict.fromkeys(keys))

    async def load_dynamic_options(self) -> Dict[str, list]:
        """
        Load every lookup this transaction needs.

        Returns:
            lookup key -> option list; a failed lookup yields []
        """
        options: Dict[str, list] = {}
        for key in self._all_lookup_keys():
            loader = getattr(self.lookup_repo, f"get_{key}")
            try:
                options[key] = list(await loader())
            except (ApiException, NetworkException) as e:
                logger.warning(f"Lookup {key} failed, continuing with no options: {e}")
                options[key] = []

        if self.loads_ships:
            self.ships = await self.fetch_ships(self.accumulated_data)
        options["marineUnits"] = list(self.ships)
        self.options = options
        return options

    async def fetch_ships(self, data: Dict[str, str]) -> List[MarineUnit]:
        """Ships of the applicant; a failure yields an empty list."""
        commercial = None
        if PersonTypes.is_company(data.get("selectionPersonType")):
            commercial = data.get("companyRegistrationNumber") or None
        try:
            return list(await self.marine_repo.load_ships_for_owner(
                owner_id=data.get("ownerId") or None,
                commercial_reg_number=commercial,
                request_type_id=self.transaction_type.request_type_id,
            ))
        except (ApiException, NetworkException) as e:
            logger.warning(f"Loading ships failed: {e}")
            return []

    def option(self, key: str) -> list:
        return list(self.options.get(key, []))

    def find_ship(self, ship_id: str) -> Optional[MarineUnit]:
        for ship in self.ships:
            if ship_id in (ship.id, ship.ship_info_id):
                return ship
        return None

    # =========================================================================
    # Steps
    # =========================================================================

    def derived_values(self, form_data: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Values in the form that shape the step list, including ones implied by other fields."""
        form_data = form_data or {}
        derived = {k: form_data[k] for k in TOPOLOGY_FIELDS if str(form_data.get(k) or "").strip()}
        if "unitType" in form_data:
            derived["isFishingBoat"] = "true" if is_fishing_unit(form_data["unitType"]) else "false"
        return derived

    def get_steps(self, form_data: Optional[Dict[str, str]] = None) -> List[StepData]:
        """
        Step list for the accumulated data.

        Args:
            form_data: Values not yet submitted; the ones that shape the
                step list are applied on top of the accumulated data
        """
        data = dict(self.accumulated_data)
        data.update(self.derived_values(form_data))
        return list(self.build_steps(data))

    def applicant_steps(self, data: Dict[str, str]) -> List[StepData]:
        steps = [shared_steps.person_type_step(self.option("person_types"))]
        if PersonTypes.is_company(data.get("selectionPersonType")):
            steps.append(shared_steps.commercial_registration_step(self.option("commercial_registrations")))
        return steps

    def selection_step(self, **kwargs) -> StepData:
        return shared_steps.marine_unit_selection_step(self.ships, **kwargs)

    def inspection_step(self) -> StepData:
        return shared_steps.inspection_purpose_and_authority_step(
            self.option("inspection_purposes"),
            self.option("inspection_authorities"),
            self.option("ports"),
        )

    def closing_steps(self, data: Dict[str, str]) -> List[StepData]:
        """Review, then the injected inspection step or the payment steps."""
        steps = [shared_steps.review_step()]
        inspection_pending = is_truthy(data.get("showInspectionStep"))
        if self.can_require_inspection and inspection_pending:
            steps.append(self.inspection_step())

        context = self.transaction_type.context
        if context.payment_receipt_endpoint and data.get(self.request_id_key) and not inspection_pending:
            steps.append(shared_steps.payment_step())
            steps.append(shared_steps.payment_confirmation_step())
            if is_truthy(data.get("paymentSuccessful")):
                steps.append(shared_steps.payment_success_step())
        return steps

    def handler_for(self, step_type: StepType) -> Optional[str]:
        if step_type in self.handler_overrides:
            return self.handler_overrides[step_type]
        return handler_name(step_type)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_step(self, step_index: int, data: Dict[str, str],
                      today: Optional[date] = None) -> Tuple[bool, Dict[str, str]]:
        """
        Validate the values of one step against the accumulated data.

        Returns:
            Tuple of (is_valid, field_id -> localized message)
        """
        steps = self.get_steps(data)
        if not 0 <= step_index < len(steps):
            logger.warning(f"validate_step: index {step_index} outside 0..{len(steps) - 1}")
            return False, {}
        step = steps[step_index]
        return self.validator.validate_step_with_accumulated_data(
            step, data, self.accumulated_data, extra_rules=self.extra_rules(step), today=today
        )

    # =========================================================================
    # Processing
    # =========================================================================

    async def process_step_data(self, step_index: int, data: Dict[str, str]) -> StepResult:
        """
        Run the backend side of a submitted step and decide the transition.

        Accumulated data and draft state are replaced only once the
        orchestration returns; on a backend failure only the merged form
        values are kept.

        Args:
            step_index: Index of the step in the current step list
            data: Values entered on that step

        Returns:
            Advance, Abort or Complete
        """
        steps = self.get_steps(data)
        if not 0 <= step_index < len(steps):
            logger.error(f"process_step_data: index {step_index} outside 0..{len(steps) - 1}")
            return Abort(AbortReason.INCONSISTENT_STATE, tr("error.transaction.restart_required"))

        step = steps[step_index]
        merged = merge_data(data, self.accumulated_data)
        merged.update(self.derived_values(data))
        work = StepWork(
            step=step,
            step_index=step_index,
            data=dict(data),
            accumulated=dict(merged),
            draft=self.draft_tracker.copy(),
        )

        try:
            result = await self.orchestrator.run(work)
        except (ApiException, NetworkException) as e:
            self.accumulated_data = merged
            self.last_api_error = map_exception(e, context=step.step_type.value)
            logger.error(f"{self.transaction_type.value} {step.step_type.value} failed: {e}")
            return Abort(AbortReason.API_ERROR, self.last_api_error)
        except ValidationException as e:
            self.accumulated_data = merged
            self.last_api_error = map_exception(e, context=step.step_type.value)
            logger.warning(f"{step.step_type.value} rejected ({e.field}): {e.message}")
            return Abort(AbortReason.API_ERROR, self.last_api_error)
        except InconsistentStateException as e:
            self.accumulated_data = merged
            self.last_api_error = map_exception(e)
            return Abort(AbortReason.INCONSISTENT_STATE, self.last_api_error)

        self.accumulated_data = work.accumulated
        self.draft_tracker = work.draft
        self.last_api_error = None
        if "ships" in work.extra:
            self.ships = list(work.extra["ships"])
            self.options["marineUnits"] = list(self.ships)

        if result is not None:
            return result
        return await self._advance_from(step_index, work)

    async def _advance_from(self, step_index: int, work: StepWork) -> StepResult:
        steps = self.get_steps()
        next_index = step_index + 1
        if next_index < len(steps):
            return Advance(next_index, work.notice, work.message)
        await self.submit(self.accumulated_data)
        return Complete(Outcome.SUBMITTED, work.message or tr("notice.submitted"), work.notice)

    # =========================================================================
    # Field reactions
    # =========================================================================

    def handle_field_change(self, field_id: str, value: str,
                            form_data: Dict[str, str]) -> Dict[str, str]:
        """
        React to a field edit.

        Args:
            field_id: Field that changed
            value: Its new value
            form_data: Current form values

        Returns:
            Updated copy of the form values; get_steps(updated) gives the
            step list they imply. Accumulated data is left untouched.
        """
        updated = dict(form_data)
        updated[field_id] = value

        if field_id in ("ownerType", "owner_type") and PersonTypes.is_individual(value):
            for company_field in COMPANY_FIELD_IDS:
                updated.pop(company_field, None)

        if field_id == "unitType":
            updated["isFishingBoat"] = "true" if is_fishing_unit(value) else "false"
        return updated

    async def on_field_focus_lost(self, field_id: str, value: str) -> FieldFocusResult:
        """
        Lookups triggered when a field loses focus.

        Returns:
            UpdateFields with looked-up values, FieldError, or NoAction
        """
        if field_id == "companyRegistrationNumber":
            return await self._lookup_company(value)
        if field_id == "agricultureRequestNumber":
            return await self._lookup_fishing_boat(value)
        return NoAction()

    async def _lookup_company(self, value: str) -> FieldFocusResult:
        number = (value or "").strip()
        if not number:
            return FieldError("companyRegistrationNumber", tr("lookup.company.required"))
        if len(number) < MIN_COMPANY_REGISTRATION_LENGTH:
            return FieldError("companyRegistrationNumber",
                              tr("lookup.company.too_short", count=MIN_COMPANY_REGISTRATION_LENGTH))
        try:
            company = await self.company_repo.fetch_company_lookup(number)
        except (ApiException, NetworkException) as e:
            return FieldError("companyRegistrationNumber", map_exception(e, context="company lookup"))
        if company is None:
            return FieldError("companyRegistrationNumber", tr("lookup.company.not_found"))
        logger.info(f"Company {number} resolved to {company.name}")
        return UpdateFields({"companyName": company.name, "companyType": company.entity_type})

    async def _lookup_fishing_boat(self, value: str) -> FieldFocusResult:
        number = (value or "").strip()
        if not number:
            return FieldError("agricultureRequestNumber", tr("lookup.agriculture.required"))
        if len(number) < MIN_AGRICULTURE_REQUEST_LENGTH:
            return FieldError("agricultureRequestNumber",
                              tr("lookup.agriculture.too_short", count=MIN_AGRICULTURE_REQUEST_LENGTH))
        try:
            boat = await self.marine_repo.get_fishing_boat_data(number)
        except (ApiException, NetworkException) as e:
            return FieldError("agricultureRequestNumber", map_exception(e, context="agriculture lookup"))
        if boat is None:
            return FieldError("agricultureRequestNumber", tr("lookup.agriculture.not_found"))

        values = boat.to_form_fields()
        values["fishingBoatDataLoaded"] = "true"
        return UpdateFields(values)

    # =========================================================================
    # Resume
    # =========================================================================

    def reset(self):
        """Forget everything from an earlier attempt; the next one starts clean."""
        self.accumulated_data = {}
        self.draft_tracker.clear_draft_state()
        self.ships = []
        self.options.pop("marineUnits", None)
        self.last_api_error = None
        self.is_resumed = False
        logger.debug(f"Reset {self.transaction_type.value} for a new attempt")

    def restore(self, form_data: Dict[str, str], draft_tracker: DraftTracker, is_resumed: bool = True):
        """Adopt state saved by an earlier session."""
        self.accumulated_data = dict(form_data)
        self.draft_tracker = draft_tracker.copy()
        self.is_resumed = is_resumed
        logger.info(f"Restored {self.transaction_type.value} with "
                    f"{len(self.draft_tracker.posted_steps)} posted step kinds")
