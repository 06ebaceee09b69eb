# -*- coding: utf-8 -*-
"""
HTTP implementations of the repository ports.

The API client is synchronous (requests); every call is pushed to a worker
thread with asyncio.to_thread so the wizard's event loop never blocks.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

from models.marine_unit import MarineUnit
from models.responses import (
    BoatData, CompanyInfo, CreatedRequest, PaymentReceipt,
    ProceedRequestResult, ReviewResponse,
)
from models.transaction import TransactionContext
from repositories.ports import (
    CompanyRepository, LookupRepository, MarineUnitRepository, TransactionRepository,
)
from services.api_client import MaritimeApiClient
from services.exceptions import ApiException
from utils.logger import get_logger

logger = get_logger(__name__)


LOOKUP_ENDPOINTS = {
    "ports": "api/v1/coreports",
    "countries": "api/v1/countries",
    "ship_types": "api/v1/ship-types",
    "commercial_registrations": "api/v1/commercial-registrations",
    "person_types": "api/v1/person-types",
    "crew_job_titles": "api/v1/crew-job-titles",
    "sailing_regions": "api/v1/navigation-areas",
    "banks": "api/v1/banks",
    "mortgage_reasons": "api/v1/mortgage-reasons",
    "inspection_purposes": "api/v1/inspection-purposes",
    "inspection_authorities": "api/v1/inspection-authorities",
    "cancellation_reasons": "api/v1/deletion-reasons",
    "marine_activities": "api/v1/marine-activities",
}


def _option_names(items: Any) -> List[str]:
    """Lookup rows come as objects; the dropdowns show the Arabic name."""
    names = []
    for item in items or []:
        if isinstance(item, dict):
            name = item.get("nameAr") or item.get("name") or item.get("nameEn")
            if name:
                names.append(str(name))
        elif item is not None:
            names.append(str(item))
    return names


class HttpLookupRepository(LookupRepository):
    """Lookups served by the backend reference-data endpoints."""

    def __init__(self, client: MaritimeApiClient):
        self.client = client

    async def _load(self, key: str) -> List[str]:
        body = await asyncio.to_thread(self.client.get, LOOKUP_ENDPOINTS[key])
        data = self.client.unwrap(body, default=[])
        if isinstance(data, dict):
            data = data.get("content", [])
        names = _option_names(data)
        logger.debug(f"Lookup '{key}' loaded {len(names)} options")
        return names

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


class HttpMarineUnitRepository(MarineUnitRepository):

    def __init__(self, client: MaritimeApiClient):
        self.client = client

    async def load_ships_for_owner(
        self,
        owner_id: Optional[str] = None,
        commercial_reg_number: Optional[str] = None,
        request_type_id: Optional[int] = None
    ) -> List[MarineUnit]:
        params = {}
        if owner_id:
            params["ownerCivilId"] = owner_id
        if commercial_reg_number:
            params["commercialRegNumber"] = commercial_reg_number
        if request_type_id is not None:
            params["requestTypeId"] = request_type_id

        body = await asyncio.to_thread(self.client.get, "api/v1/ships/owned", params)
        data = self.client.unwrap(body, default=[])
        if isinstance(data, dict):
            data = data.get("content", [])
        units = []
        for row in data or []:
            ship = row.get("ship", row) if isinstance(row, dict) else {}
            unit = MarineUnit.from_dict(ship)
            if isinstance(row, dict) and row.get("id") and not unit.ship_info_id:
                unit.ship_info_id = str(row["id"])
            units.append(unit)
        return units

    async def get_fishing_boat_data(self, request_number: str) -> Optional[BoatData]:
        try:
            body = await asyncio.to_thread(
                self.client.get, f"api/v1/agriculture/fishing-boats/{request_number}"
            )
        except ApiException as e:
            if e.status_code == 404:
                return None
            raise
        data = self.client.unwrap(body)
        return BoatData.from_dict(data) if data else None

    async def proceed_with_request(self, endpoint: str, ship_info_id: str) -> ProceedRequestResult:
        body = await asyncio.to_thread(self.client.post, endpoint)
        return ProceedRequestResult.from_dict(body or {})

    async def add_maritime_identity(
        self,
        ship_id: str,
        imo_number: Optional[str],
        mmsi_number: Optional[str],
        call_sign: Optional[str]
    ) -> bool:
        payload = {"imoNumber": imo_number, "mmsiNumber": mmsi_number, "callSign": call_sign}
        await asyncio.to_thread(
            self.client.put, f"api/v1/ships/{ship_id}/maritime-identity",
            {k: v for k, v in payload.items() if v}
        )
        return True


class HttpCompanyRepository(CompanyRepository):

    def __init__(self, client: MaritimeApiClient):
        self.client = client

    async def fetch_company_lookup(self, registration_number: str) -> Optional[CompanyInfo]:
        try:
            body = await asyncio.to_thread(
                self.client.get, f"api/v1/company/commercial-registration/{registration_number}"
            )
        except ApiException as e:
            if e.status_code == 404:
                return None
            raise
        data = self.client.unwrap(body)
        if isinstance(data, dict) and "result" in data:
            data = data["result"]
        return CompanyInfo.from_dict(data) if data else None


class HttpTransactionRepository(TransactionRepository):
    """Request lifecycle driven entirely by the endpoints of a TransactionContext."""

    def __init__(self, client: MaritimeApiClient, context: TransactionContext):
        super().__init__(context)
        self.client = client

    async def create_request(self, payload: Dict[str, Any]) -> CreatedRequest:
        body = await asyncio.to_thread(self.client.post, self.context.create_endpoint, payload)
        data = self.client.unwrap(body, default={})
        if not isinstance(data, dict):
            data = {"id": data}
        if data.get("id") is None:
            raise ApiException(
                message="create response has no request id",
                status_code=500,
                response_data=body if isinstance(body, dict) else {},
                context=self.context.create_endpoint,
            )
        ship_info = data.get("shipInfo") or {}
        ship = ship_info.get("ship") or {}
        return CreatedRequest(
            request_id=str(data["id"]),
            ship_info_id=str(ship_info["id"]) if ship_info.get("id") else None,
            ship_id=str(ship["id"]) if ship.get("id") else None,
        )

    async def update_request(self, request_id: str, payload: Dict[str, Any]) -> bool:
        endpoint = self.context.build_get_request_url(request_id) or self.context.create_endpoint
        await asyncio.to_thread(self.client.put, endpoint, payload)
        return True

    async def attach(self, request_id: str, step_type_value: str, payload: Any, update: bool = False) -> Any:
        endpoint = self.context.build_attach_url(step_type_value, request_id)
        if endpoint is None:
            raise ApiException(
                message=f"no endpoint for {step_type_value} in {self.context.display_name}",
                status_code=400,
                context=step_type_value,
            )

        # Payloads carrying files go as multipart with the JSON part under "dto"
        if isinstance(payload, dict) and payload.get("files"):
            files = payload["files"]
            dto = {k: v for k, v in payload.items() if k != "files"}
            body = await asyncio.to_thread(
                self.client.upload, endpoint, files,
                {"dto": json.dumps(dto, ensure_ascii=False)},
                "PUT" if update else "POST",
            )
        elif update:
            body = await asyncio.to_thread(self.client.put, endpoint, payload)
        else:
            body = await asyncio.to_thread(self.client.post, endpoint, payload)
        return self.client.unwrap(body)

    async def fetch_attached(self, request_id: str, step_type_value: str) -> List[Dict[str, Any]]:
        endpoint = self.context.build_attach_url(step_type_value, request_id)
        if endpoint is None:
            return []
        body = await asyncio.to_thread(self.client.get, endpoint)
        data = self.client.unwrap(body, default=[])
        return list(data) if isinstance(data, list) else []

    async def update_status(self, request_id: str, status_id: int) -> bool:
        await asyncio.to_thread(
            self.client.put, self.context.build_update_status_url(request_id), {"statusId": status_id}
        )
        return True

    async def send_request(self, request_id: str) -> ReviewResponse:
        endpoint = self.context.build_send_request_url(request_id)
        if self.context.send_request_method.upper() == "PUT":
            body = await asyncio.to_thread(self.client.put, endpoint)
        else:
            body = await asyncio.to_thread(self.client.post, endpoint)
        return ReviewResponse.from_dict(body or {})

    async def check_inspection_gate(self, request_id: str) -> int:
        endpoint = self.context.build_inspection_preview_url(request_id)
        if endpoint is None:
            # No preview endpoint: the request never needs a separate inspection
            return 1
        body = await asyncio.to_thread(self.client.get, endpoint)
        return int(self.client.unwrap(body, default=1))

    async def get_payment_receipt(self, request_type_id: int, request_id: str) -> PaymentReceipt:
        endpoint = self.context.build_payment_receipt_url(request_id=request_id)
        if endpoint is None:
            raise ApiException(message="payment is not configured", status_code=400,
                               context=self.context.display_name)
        body = await asyncio.to_thread(
            self.client.get, endpoint, {"requestTypeId": request_type_id}
        )
        return PaymentReceipt.from_dict(self.client.unwrap(body, default={}))

    async def submit_payment(self, request_type_id: int, receipt: PaymentReceipt) -> str:
        endpoint = self.context.build_payment_submit_url()
        if endpoint is None:
            raise ApiException(message="payment is not configured", status_code=400,
                               context=self.context.display_name)
        payload = dict(receipt.to_dict(), requestTypeId=str(request_type_id), isPaid=0)
        body = await asyncio.to_thread(self.client.post, endpoint, payload)
        return str(self.client.unwrap(body, default=""))
