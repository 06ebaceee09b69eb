# -*- coding: utf-8 -*-
"""
In-memory repositories.

Stand-ins for the backend used by the test-suite and by hosts running the
wizard offline. Every repository records the calls it receives so callers
can assert on the exact orchestration sequence, and any method can be made
to fail by registering an exception for it in `failures`.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from models.marine_unit import MarineUnit
from models.responses import (
    BoatData, CompanyInfo, CreatedRequest, PaymentReceipt,
    ProceedRequestResult, ReviewResponse,
)
from models.transaction import TransactionContext, TransactionType
from repositories.ports import (
    CompanyRepository, LookupRepository, MarineUnitRepository, TransactionRepository,
)
from services.exceptions import NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# Methods that change backend state; reads are recorded but not listed here
WRITE_METHODS = frozenset({
    "create_request", "update_request", "attach", "update_status",
    "send_request", "submit_payment", "add_maritime_identity",
})


class _Recorder:
    """Call log + failure injection + optional pause shared by the fakes."""

    def __init__(self, failures: Optional[Dict[str, Exception]] = None,
                 pause: Optional[asyncio.Event] = None):
        self.calls: List[Tuple[str, tuple]] = []
        self.failures: Dict[str, Exception] = dict(failures or {})
        self.pause = pause

    async def _record(self, method: str, *args):
        self.calls.append((method, args))
        if self.pause is not None:
            await self.pause.wait()
        error = self.failures.get(method)
        if error is not None:
            logger.debug(f"Injected failure for {method}: {error}")
            raise error

    def called(self, method: str) -> List[tuple]:
        return [args for name, args in self.calls if name == method]

    @property
    def writes(self) -> List[Tuple[str, tuple]]:
        return [call for call in self.calls if call[0] in WRITE_METHODS]


DEFAULT_OPTIONS = {
    "ports": ["صحار", "مطرح", "صلالة"],
    "countries": ["عُمان", "الإمارات", "السعودية"],
    "ship_types": ["سفينة شحن", "قارب صيد", "يخت"],
    "commercial_registrations": ["1234567", "7654321"],
    "person_types": ["individual", "company"],
    "crew_job_titles": ["ربان", "مهندس", "بحار"],
    "sailing_regions": ["المياه الإقليمية", "الخليج العربي", "بحر العرب"],
    "banks": ["بنك مسقط", "البنك الوطني العماني"],
    "mortgage_reasons": ["تمويل شراء", "تمويل صيانة"],
    "inspection_purposes": ["تسجيل", "تصريح إبحار"],
    "inspection_authorities": ["هيئة التصنيف", "الإدارة البحرية"],
    "cancellation_reasons": ["بيع خارج السلطنة", "غرق", "تفكيك"],
    "marine_activities": ["نقل بضائع", "صيد", "نزهة"],
}


class MemoryLookupRepository(_Recorder, LookupRepository):
    """Lookups backed by DEFAULT_OPTIONS; keys in `failing` raise NetworkException."""

    def __init__(self, options: Optional[Dict[str, List[str]]] = None,
                 failing: Optional[set] = None):
        super().__init__()
        self.options = dict(DEFAULT_OPTIONS)
        self.options.update(options or {})
        self.failing = set(failing or ())

    async def _load(self, key: str) -> List[str]:
        await self._record(f"get_{key}")
        if key in self.failing:
            raise NetworkException(message=f"lookup {key} unavailable")
        return list(self.options.get(key, []))

    async def get_ports(self) -> List[str]:
        return await self._load("ports")

    async def get_countries(self) -> List[str]:
        return await self._load("countries")

    async def get_ship_types(self) -> List[str]:
        return await self._load("ship_types")

    async def get_commercial_registrations(self) -> List[str]:
        return await self._load("commercial_registrations")

    async def get_person_types(self) -> List[str]:
        return await self._load("person_types")

    async def get_crew_job_titles(self) -> List[str]:
        return await self._load("crew_job_titles")

    async def get_sailing_regions(self) -> List[str]:
        return await self._load("sailing_regions")

    async def get_banks(self) -> List[str]:
        return await self._load("banks")

    async def get_mortgage_reasons(self) -> List[str]:
        return await self._load("mortgage_reasons")

    async def get_inspection_purposes(self) -> List[str]:
        return await self._load("inspection_purposes")

    async def get_inspection_authorities(self) -> List[str]:
        return await self._load("inspection_authorities")

    async def get_cancellation_reasons(self) -> List[str]:
        return await self._load("cancellation_reasons")

    async def get_marine_activities(self) -> List[str]:
        return await self._load("marine_activities")


class MemoryMarineUnitRepository(_Recorder, MarineUnitRepository):

    def __init__(self, ships: Optional[List[MarineUnit]] = None,
                 boats: Optional[Dict[str, BoatData]] = None,
                 failures: Optional[Dict[str, Exception]] = None,
                 first_request_id: int = 500):
        super().__init__(failures)
        self.ships = list(ships or [])
        self.boats = dict(boats or {})
        self._next_request_id = first_request_id

    async def load_ships_for_owner(self, owner_id=None, commercial_reg_number=None,
                                   request_type_id=None) -> List[MarineUnit]:
        await self._record("load_ships_for_owner", owner_id, commercial_reg_number, request_type_id)
        return list(self.ships)

    async def get_fishing_boat_data(self, request_number: str) -> Optional[BoatData]:
        await self._record("get_fishing_boat_data", request_number)
        return self.boats.get(request_number)

    async def proceed_with_request(self, endpoint: str, ship_info_id: str) -> ProceedRequestResult:
        await self._record("proceed_with_request", endpoint, ship_info_id)
        request_id = self._next_request_id
        self._next_request_id += 1
        ship = next((s for s in self.ships if ship_info_id in (s.id, s.ship_info_id)), None)
        return ProceedRequestResult(request_id=request_id, message="ok", ship=ship)

    async def add_maritime_identity(self, ship_id, imo_number, mmsi_number, call_sign) -> bool:
        await self._record("add_maritime_identity", ship_id, imo_number, mmsi_number, call_sign)
        return True


class MemoryCompanyRepository(_Recorder, CompanyRepository):

    def __init__(self, companies: Optional[Dict[str, CompanyInfo]] = None,
                 failures: Optional[Dict[str, Exception]] = None):
        super().__init__(failures)
        self.companies = dict(companies or {})

    async def fetch_company_lookup(self, registration_number: str) -> Optional[CompanyInfo]:
        await self._record("fetch_company_lookup", registration_number)
        return self.companies.get(registration_number)


class MemoryTransactionRepository(_Recorder, TransactionRepository):
    """
    One transaction domain held in memory.

    Args:
        context: TransactionContext served by this repository
        gate_status: Value returned by check_inspection_gate (0 or 1)
        need_inspection: needInspection flag returned by send_request
        additional_data: additionalData returned by send_request
        attached: Pre-existing attachments per step kind (renewals read these)
    """

    def __init__(self, context: TransactionContext, gate_status: int = 1,
                 need_inspection: bool = False,
                 additional_data: Optional[Dict[str, Any]] = None,
                 attached: Optional[Dict[str, List[Dict[str, Any]]]] = None,
                 failures: Optional[Dict[str, Exception]] = None,
                 pause: Optional[asyncio.Event] = None,
                 first_request_id: int = 1000):
        _Recorder.__init__(self, failures, pause)
        TransactionRepository.__init__(self, context)
        self.gate_status = gate_status
        self.need_inspection = need_inspection
        self.additional_data = dict(additional_data or {})
        self.attached: Dict[str, List[Dict[str, Any]]] = dict(attached or {})
        self._next_request_id = first_request_id

    async def create_request(self, payload: Dict[str, Any]) -> CreatedRequest:
        await self._record("create_request", dict(payload))
        request_id = str(self._next_request_id)
        self._next_request_id += 1
        return CreatedRequest(request_id=request_id, ship_info_id=f"si-{request_id}",
                              ship_id=f"s-{request_id}")

    async def update_request(self, request_id: str, payload: Dict[str, Any]) -> bool:
        await self._record("update_request", request_id, dict(payload))
        return True

    async def attach(self, request_id: str, step_type_value: str, payload: Any, update: bool = False) -> Any:
        await self._record("attach", request_id, step_type_value, payload, update)
        rows = payload if isinstance(payload, list) else [payload]
        self.attached[step_type_value] = [dict(r) if isinstance(r, dict) else r for r in rows]
        return payload

    async def fetch_attached(self, request_id: str, step_type_value: str) -> List[Dict[str, Any]]:
        await self._record("fetch_attached", request_id, step_type_value)
        return list(self.attached.get(step_type_value, []))

    async def update_status(self, request_id: str, status_id: int) -> bool:
        await self._record("update_status", request_id, status_id)
        return True

    async def send_request(self, request_id: str) -> ReviewResponse:
        await self._record("send_request", request_id)
        return ReviewResponse(message="تم إرسال الطلب بنجاح", need_inspection=self.need_inspection,
                              additional_data=dict(self.additional_data))

    async def check_inspection_gate(self, request_id: str) -> int:
        await self._record("check_inspection_gate", request_id)
        return self.gate_status

    async def get_payment_receipt(self, request_type_id: int, request_id: str) -> PaymentReceipt:
        await self._record("get_payment_receipt", request_type_id, request_id)
        return PaymentReceipt(receipt_serial=77, receipt_year=2026, total_cost=100.0,
                              total_tax=5.0, final_total=105.0, arabic_value="مئة وخمسة ريالات",
                              invoice_type_id=1)

    async def submit_payment(self, request_type_id: int, receipt: PaymentReceipt) -> str:
        await self._record("submit_payment", request_type_id, receipt)
        return f"R-{receipt.receipt_serial}"


class MemoryTransactionRepositories:
    """
    Factory handing out one MemoryTransactionRepository per context.

    Passed to the strategy factory as its `repository_for` callable; tests
    then fetch the same instance with for_type() to inspect its calls.
    """

    def __init__(self, **defaults):
        self.defaults = defaults
        self._repositories: Dict[str, MemoryTransactionRepository] = {}

    def __call__(self, context: TransactionContext) -> MemoryTransactionRepository:
        key = context.create_endpoint
        if key not in self._repositories:
            self._repositories[key] = MemoryTransactionRepository(context, **self.defaults)
        return self._repositories[key]

    def for_type(self, transaction_type: TransactionType) -> MemoryTransactionRepository:
        return self(transaction_type.context)
