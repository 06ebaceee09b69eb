# -*- coding: utf-8 -*-
"""
Step Orchestrator - backend calls made when a step is submitted.

Handlers work on a StepWork: a private copy of the accumulated data and of
the draft tracker. The strategy commits both only when the handler returns,
so a cancelled or failed orchestration leaves no half-applied state.

Handlers return None to let the strategy advance by one step, or an
explicit StepResult (Abort / Complete) to stop there.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from models.form_field import parse_file_value
from models.responses import CrewMember, PaymentReceipt, ReviewResponse
from models.step_data import StepData, StepType
from models.transaction import TransactionType
from services.exceptions import InconsistentStateException
from services.translation_manager import tr
from services.wizard import payloads
from services.wizard.draft_tracker import DraftTracker
from services.wizard.step_result import (
    Abort, AbortReason, Complete, Notice, Outcome, StepResult,
)
from utils.helpers import is_truthy, parse_json_list, pick
from utils.logger import get_logger

if TYPE_CHECKING:
    from services.wizard.base_strategy import BaseTransactionStrategy

logger = get_logger(__name__)

# Values that only make sense for the request they were produced for
REQUEST_BOUND_KEYS = (
    "requestSerial", "mortgageRequestId", "inspectionRequestId", "inspectionRequested",
    "showInspectionStep", "requestSubmitted", "maritimeIdentityAdded",
    "receiptSerial", "receiptYear", "finalTotal", "arabicValue", "paymentReceipt",
    "paymentReceiptId", "paymentSuccessful",
)


@dataclass
class StepWork:
    """Working copy of one step submission."""

    step: StepData
    step_index: int
    data: Dict[str, str]
    accumulated: Dict[str, str]
    draft: DraftTracker
    notice: Optional[Notice] = None
    message: str = ""
    extra: Dict[str, object] = field(default_factory=dict)

    @property
    def kind(self) -> StepType:
        return self.step.step_type

    def snapshot(self) -> Dict[str, str]:
        """Filled values of this step's fields, the unit of change detection."""
        values = pick(self.accumulated, *self.step.field_ids())
        return {k: v for k, v in values.items() if str(v).strip()}

    def require(self, key: str) -> str:
        value = str(self.accumulated.get(key) or "").strip()
        if not value:
            raise InconsistentStateException(
                f"{key} missing before {self.kind.value}", missing_key=key
            )
        return value


class StepOrchestrator:
    """Backend side of process_step_data, one handler per step kind."""

    def __init__(self, strategy: "BaseTransactionStrategy"):
        self.strategy = strategy

    @property
    def repo(self):
        return self.strategy.transaction_repo

    @property
    def request_type_id(self) -> int:
        return self.strategy.transaction_type.request_type_id

    async def run(self, work: StepWork) -> Optional[StepResult]:
        name = self.strategy.handler_for(work.kind)
        if name is None:
            return None
        handler = getattr(self, name)
        logger.debug(f"{self.strategy.transaction_type.value}: {name} for {work.kind.value}")
        return await handler(work)

    # ==================== Draft-aware writes ====================

    def _skip_unchanged(self, work: StepWork) -> bool:
        if work.draft.should_skip(work.kind, work.snapshot()):
            logger.info(f"{work.kind.value} already posted and unchanged, skipping backend call")
            return True
        return False

    def _remember(self, work: StepWork):
        work.draft.save_data_snapshot(work.kind, work.snapshot())
        work.draft.mark_step_as_posted(work.kind)

    def _rebind(self, work: StepWork, previous: Optional[str], request_id: Optional[str]):
        """
        Start a fresh draft when a step opened a different request.

        Everything posted so far belongs to `previous` and has to be sent
        again to `request_id`.
        """
        if not previous or not request_id or previous == request_id:
            return
        work.draft.clear_draft_state(keep=(work.kind, StepType.MARINE_UNIT_SELECTION))
        for key in REQUEST_BOUND_KEYS:
            work.accumulated.pop(key, None)
        logger.info(f"Request changed from {previous} to {request_id}, draft state reset")

    async def _attach(self, work: StepWork, request_id: str, payload, kind: Optional[StepType] = None):
        kind = kind or work.kind
        update = work.draft.is_step_posted(kind)
        await self.repo.attach(request_id, kind.value, payload, update=update)

    # ==================== Applicant ====================

    async def handle_applicant(self, work: StepWork) -> Optional[StepResult]:
        """Reload the applicant's ships once person type or company is known."""
        if self.strategy.loads_ships:
            work.extra["ships"] = await self.strategy.fetch_ships(work.accumulated)
        return None

    # ==================== Selection ====================

    def _is_adding_new_unit(self, data: Dict[str, str]) -> bool:
        if parse_json_list(data.get("selectedMarineUnits")):
            return False
        if is_truthy(data.get("isAddingNewUnit")):
            return True
        return self.strategy.allows_new_unit and "selectedMarineUnits" in data

    async def handle_selection(self, work: StepWork) -> Optional[StepResult]:
        if self._is_adding_new_unit(work.data):
            work.accumulated["isAddingNewUnit"] = "true"
            return None

        ids = parse_json_list(work.data.get("selectedMarineUnits"))
        if not ids:
            return None
        ship = self.strategy.find_ship(str(ids[0]))
        if ship is None:
            raise InconsistentStateException(
                f"selected ship {ids[0]} is not in the owner's list", missing_key="selectedMarineUnits"
            )

        work.accumulated["isAddingNewUnit"] = "false"
        work.accumulated["shipId"] = ship.id
        work.accumulated["shipInfoId"] = ship.ship_info_id or ship.id
        work.accumulated["needsMaritimeIdentification"] = "true" if ship.needs_maritime_identification else "false"
        if ship.last_navigation_license_id:
            work.accumulated["lastNavigationLicenseId"] = ship.last_navigation_license_id
        else:
            work.accumulated.pop("lastNavigationLicenseId", None)

        if self._skip_unchanged(work) and work.accumulated.get("requestId"):
            return None

        previous = work.accumulated.get("requestId")
        request_id, serial = previous, None
        context = self.repo.context
        if self.strategy.proceeds_on_selection and context.proceed_request_endpoint:
            url = context.build_proceed_request_url(work.accumulated["shipInfoId"])
            result = await self.strategy.marine_repo.proceed_with_request(url, work.accumulated["shipInfoId"])
            request_id, serial = str(result.request_id), result.request_serial
            logger.info(f"Proceed request {result.request_id} for ship {ship.id}")

        if self.strategy.creates_on_selection:
            created = await self.repo.create_request(
                payloads.selection_request_payload(work.accumulated, self.request_type_id)
            )
            request_id = created.request_id
            logger.info(f"Created {self.strategy.transaction_type.value} request {created.request_id}")

        self._rebind(work, previous, request_id)
        if request_id:
            work.accumulated["requestId"] = request_id
        if serial:
            work.accumulated["requestSerial"] = serial

        self._remember(work)
        await self.strategy.after_selection(work)
        return None

    # ==================== New marine unit ====================

    async def handle_unit_data(self, work: StepWork) -> Optional[StepResult]:
        if self._skip_unchanged(work):
            return None

        payload = payloads.unit_data_payload(work.accumulated, self.request_type_id)
        request_id = work.accumulated.get("requestId")
        if work.draft.is_step_posted(work.kind) and request_id:
            await self.repo.update_request(request_id, payload)
            logger.info(f"Updated unit data of request {request_id}")
        else:
            created = await self.repo.create_request(payload)
            self._rebind(work, request_id, created.request_id)
            work.accumulated["requestId"] = created.request_id
            if created.ship_info_id:
                work.accumulated["shipInfoId"] = created.ship_info_id
            if created.ship_id:
                work.accumulated["shipId"] = created.ship_id
            logger.info(f"Created registration request {created.request_id}")

        self._remember(work)
        return None

    async def handle_attach(self, work: StepWork) -> Optional[StepResult]:
        if not self.repo.context.supports_attach(work.kind.value):
            return None
        if self._skip_unchanged(work):
            return None
        request_id = work.require(self.strategy.request_id_key)
        payload = payloads.attachment_payload(work.step, work.accumulated)
        await self._attach(work, request_id, payload)
        self._remember(work)
        return None

    async def handle_request_update(self, work: StepWork) -> Optional[StepResult]:
        """Send the step values as an update of the open request."""
        if self._skip_unchanged(work):
            return None
        request_id = work.require(self.strategy.request_id_key)
        await self.repo.update_request(request_id, work.snapshot())
        self._remember(work)
        return None

    async def handle_maritime_identification(self, work: StepWork) -> Optional[StepResult]:
        if self._skip_unchanged(work):
            return None
        ship_id = work.require("shipId")
        await self.strategy.marine_repo.add_maritime_identity(
            ship_id,
            work.accumulated.get("imoNumber") or None,
            work.accumulated.get("mmsiNumber") or None,
            work.accumulated.get("callSign") or None,
        )
        work.accumulated["maritimeIdentityAdded"] = "true"
        self._remember(work)
        return None

    # ==================== Navigation crew ====================

    async def _crew_from(self, work: StepWork) -> List[CrewMember]:
        excel = parse_file_value(work.accumulated.get("crewExcelFile", ""))
        if excel is not None and excel.path:
            crew = await asyncio.to_thread(self.strategy.crew_service.parse, excel.path)
            # Parsed rows replace the manual list so the review shows them
            work.accumulated["sailors"] = json.dumps(
                [m.to_payload() for m in crew], ensure_ascii=False
            )
            return crew
        rows = parse_json_list(work.accumulated.get("sailors"))
        return [CrewMember.from_dict(r) for r in rows if isinstance(r, dict)]

    async def handle_crew(self, work: StepWork) -> Optional[StepResult]:
        if self._skip_unchanged(work):
            return None
        request_id = work.require(self.strategy.request_id_key)
        crew = await self._crew_from(work)
        await self._attach(work, request_id, payloads.crew_payload(crew))
        logger.info(f"Attached {len(crew)} crew members to request {request_id}")
        self._remember(work)
        return None

    # ==================== Mortgage ====================

    async def handle_mortgage_data(self, work: StepWork) -> Optional[StepResult]:
        if self._skip_unchanged(work):
            return None
        work.require("shipInfoId")
        payload = payloads.mortgage_payload(work.accumulated, self.request_type_id)
        mortgage_id = work.accumulated.get("mortgageRequestId")
        if work.draft.is_step_posted(work.kind) and mortgage_id:
            await self.repo.update_request(mortgage_id, payload)
        else:
            created = await self.repo.create_request(payload)
            self._rebind(work, mortgage_id, created.request_id)
            mortgage_id = created.request_id
            work.accumulated["mortgageRequestId"] = mortgage_id
            logger.info(f"Created mortgage request {mortgage_id}")

        files = payloads.file_parts(work.step, work.accumulated)
        if files and self.repo.context.supports_attach(StepType.DOCUMENTS.value):
            await self._attach(work, mortgage_id, payloads.documents_payload(work.step, work.accumulated),
                               kind=StepType.DOCUMENTS)
            work.draft.mark_step_as_posted(StepType.DOCUMENTS)
        self._remember(work)
        return None

    # ==================== Inspection ====================

    async def handle_inspection_request(self, work: StepWork) -> Optional[StepResult]:
        standalone = self.strategy.transaction_type is TransactionType.REQUEST_FOR_INSPECTION
        if standalone and self._skip_unchanged(work):
            return None

        repo = self.repo if standalone else self.strategy.inspection_repo
        if repo is None:
            raise InconsistentStateException("no inspection repository configured",
                                             missing_key="inspectionRepository")

        payload = payloads.inspection_payload(
            work.accumulated, TransactionType.REQUEST_FOR_INSPECTION.request_type_id
        )
        if is_truthy(work.accumulated.get("isAddingNewUnit")):
            payload["shipInfo"] = payloads.unit_data_payload(work.accumulated, self.request_type_id)["shipInfo"]
        if not standalone:
            payload["parentRequestTypeId"] = self.request_type_id

        created = await repo.create_request(payload)
        files = payloads.file_parts(work.step, work.accumulated)
        if files and repo.context.supports_attach(StepType.DOCUMENTS.value):
            await repo.attach(created.request_id, StepType.DOCUMENTS.value,
                              payloads.documents_payload(work.step, work.accumulated))
        self._remember(work)

        if standalone:
            work.accumulated["requestId"] = created.request_id
            if created.ship_info_id and not work.accumulated.get("shipInfoId"):
                work.accumulated["shipInfoId"] = created.ship_info_id
            logger.info(f"Created inspection request {created.request_id}")
            return None

        work.accumulated["inspectionRequestId"] = created.request_id
        work.accumulated["inspectionRequested"] = "true"
        logger.info(f"Inspection request {created.request_id} created for request "
                    f"{work.accumulated.get('requestId')}")
        return Complete(Outcome.INSPECTION_REQUESTED, tr("notice.inspection_requested"))

    # ==================== Review ====================

    def _require_inspection(self, work: StepWork) -> StepResult:
        work.accumulated["showInspectionStep"] = "true"
        logger.info(f"Request {work.accumulated.get('requestId')} needs an inspection first")
        return Abort(AbortReason.INSPECTION_REQUIRED, tr("notice.inspection_required"))

    async def handle_review(self, work: StepWork) -> Optional[StepResult]:
        request_id = work.require(self.strategy.request_id_key)

        if self.strategy.can_require_inspection and self.repo.context.inspection_preview_base_context:
            gate = await self.repo.check_inspection_gate(request_id)
            logger.debug(f"Inspection gate for {request_id}: {gate}")
            if gate == 0:
                return self._require_inspection(work)

        response: ReviewResponse = await self.repo.send_request(request_id)
        if response.need_inspection and self.strategy.can_require_inspection:
            return self._require_inspection(work)

        work.accumulated["requestSubmitted"] = "true"
        message = response.message or tr("notice.submitted")
        notice = self.strategy.review_notice(response)
        logger.info(f"Request {request_id} sent ({self.strategy.transaction_type.value})")

        if not self.strategy.is_resumed:
            return Complete(Outcome.SUBMITTED, message, notice)
        work.notice = notice or Notice.SUCCESS_ALERT
        work.message = message
        return None

    # ==================== Payment ====================

    async def handle_payment(self, work: StepWork) -> Optional[StepResult]:
        request_id = work.require(self.strategy.request_id_key)
        receipt = await self.repo.get_payment_receipt(self.request_type_id, request_id)
        work.accumulated.update({
            "receiptSerial": str(receipt.receipt_serial),
            "receiptYear": str(receipt.receipt_year),
            "finalTotal": str(receipt.final_total),
            "arabicValue": receipt.arabic_value,
            "paymentReceipt": json.dumps(receipt.to_dict(), ensure_ascii=False),
        })
        logger.info(f"Loaded payment receipt {receipt.receipt_serial} for request {request_id}")
        return None

    async def handle_payment_confirmation(self, work: StepWork) -> Optional[StepResult]:
        if is_truthy(work.accumulated.get("paymentSuccessful")):
            return None
        raw = work.require("paymentReceipt")
        try:
            receipt = PaymentReceipt.from_dict(json.loads(raw))
        except (TypeError, ValueError) as e:
            raise InconsistentStateException(f"unreadable payment receipt: {e}",
                                             missing_key="paymentReceipt")
        receipt_id = await self.repo.submit_payment(self.request_type_id, receipt)
        work.accumulated["paymentReceiptId"] = receipt_id
        work.accumulated["paymentSuccessful"] = "true"
        logger.info(f"Payment submitted, receipt id {receipt_id}")
        return None

    async def handle_payment_success(self, work: StepWork) -> Optional[StepResult]:
        return Complete(Outcome.SUBMITTED, tr("notice.payment_success"))
