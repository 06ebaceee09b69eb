# -*- coding: utf-8 -*-
"""
Repository ports used by the transaction engine.

Every method is a coroutine and raises ApiException / NetworkException on
failure. Callers decide whether a failure is fatal: lookups degrade to empty
lists, writes abort the current transition.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from models.marine_unit import MarineUnit
from models.responses import (
    BoatData, CompanyInfo, CreatedRequest, PaymentReceipt,
    ProceedRequestResult, ReviewResponse,
)
from models.transaction import TransactionContext


class LookupRepository(ABC):
    """
    Reference data for dropdowns.

    Each lookup is independent; the engine loads them one by one so a single
    failing lookup only empties its own option list.
    """

    @abstractmethod
    async def get_ports(self) -> List[str]:
        pass

    @abstractmethod
    async def get_countries(self) -> List[str]:
        pass

    @abstractmethod
    async def get_ship_types(self) -> List[str]:
        pass

    @abstractmethod
    async def get_commercial_registrations(self) -> List[str]:
        pass

    @abstractmethod
    async def get_person_types(self) -> List[str]:
        pass

    @abstractmethod
    async def get_crew_job_titles(self) -> List[str]:
        pass

    @abstractmethod
    async def get_sailing_regions(self) -> List[str]:
        pass

    @abstractmethod
    async def get_banks(self) -> List[str]:
        pass

    @abstractmethod
    async def get_mortgage_reasons(self) -> List[str]:
        pass

    @abstractmethod
    async def get_inspection_purposes(self) -> List[str]:
        pass

    @abstractmethod
    async def get_inspection_authorities(self) -> List[str]:
        pass

    @abstractmethod
    async def get_cancellation_reasons(self) -> List[str]:
        pass

    @abstractmethod
    async def get_marine_activities(self) -> List[str]:
        pass


class MarineUnitRepository(ABC):
    """Ships of the applicant and ship-level backend operations."""

    @abstractmethod
    async def load_ships_for_owner(
        self,
        owner_id: Optional[str] = None,
        commercial_reg_number: Optional[str] = None,
        request_type_id: Optional[int] = None
    ) -> List[MarineUnit]:
        pass

    @abstractmethod
    async def get_fishing_boat_data(self, request_number: str) -> Optional[BoatData]:
        """Ministry of Agriculture lookup; None when the request is unknown."""
        pass

    @abstractmethod
    async def proceed_with_request(self, endpoint: str, ship_info_id: str) -> ProceedRequestResult:
        pass

    @abstractmethod
    async def add_maritime_identity(
        self,
        ship_id: str,
        imo_number: Optional[str],
        mmsi_number: Optional[str],
        call_sign: Optional[str]
    ) -> bool:
        pass


class CompanyRepository(ABC):
    """Commercial registry."""

    @abstractmethod
    async def fetch_company_lookup(self, registration_number: str) -> Optional[CompanyInfo]:
        pass


class TransactionRepository(ABC):
    """
    Request lifecycle for one transaction domain.

    One instance serves one TransactionContext (registration, mortgage,
    navigation license, inspection ...). attach() writes the payload of a
    step kind; update=True switches the write from POST to PUT for step
    kinds that were already posted.
    """

    def __init__(self, context: TransactionContext):
        self.context = context

    @abstractmethod
    async def create_request(self, payload: Dict[str, Any]) -> CreatedRequest:
        pass

    @abstractmethod
    async def update_request(self, request_id: str, payload: Dict[str, Any]) -> bool:
        pass

    @abstractmethod
    async def attach(
        self,
        request_id: str,
        step_type_value: str,
        payload: Any,
        update: bool = False
    ) -> Any:
        pass

    @abstractmethod
    async def fetch_attached(self, request_id: str, step_type_value: str) -> List[Dict[str, Any]]:
        """Read back what was attached for a step kind (used by renewals)."""
        pass

    @abstractmethod
    async def update_status(self, request_id: str, status_id: int) -> bool:
        pass

    @abstractmethod
    async def send_request(self, request_id: str) -> ReviewResponse:
        pass

    @abstractmethod
    async def check_inspection_gate(self, request_id: str) -> int:
        """0 = inspection required, 1 = cleared."""
        pass

    @abstractmethod
    async def get_payment_receipt(self, request_type_id: int, request_id: str) -> PaymentReceipt:
        pass

    @abstractmethod
    async def submit_payment(self, request_type_id: int, receipt: PaymentReceipt) -> str:
        """Returns the payment receipt id."""
        pass
