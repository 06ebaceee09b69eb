# -*- coding: utf-8 -*-
"""
Value objects returned by the repository ports.

The HTTP repositories build them from backend JSON with from_dict(); the
in-memory repositories construct them directly.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.marine_unit import MarineUnit


@dataclass(frozen=True)
class CompanyInfo:
    """Commercial registry entry."""

    registration_number: str
    name: str
    entity_type: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "CompanyInfo":
        return cls(
            registration_number=str(data.get("commercialRegistrationNumber", "")),
            name=data.get("arabicCommercialName") or data.get("englishCommercialName") or "",
            entity_type=data.get("commercialRegistrationEntityType", "") or "",
        )


@dataclass
class BoatData:
    """Fishing boat record from the Ministry of Agriculture."""

    unit_type: str = ""
    call_sign: str = ""
    registration_port: str = ""
    manufacturer_year: str = ""
    maritime_activity: str = ""
    overall_length: str = ""
    overall_width: str = ""
    depth: str = ""
    gross_tonnage: str = ""
    net_tonnage: str = ""
    owner_full_name_ar: str = ""
    owner_nationality: str = ""
    owner_id_number: str = ""
    owner_mobile: str = ""
    imo_number: Optional[str] = None
    mmsi: Optional[str] = None
    height: Optional[str] = None
    decks_count: Optional[str] = None
    construction_end_date: Optional[str] = None
    first_registration_date: Optional[str] = None
    owners: List[Dict[str, Any]] = field(default_factory=list)
    engines: List[Dict[str, Any]] = field(default_factory=list)

    def to_form_fields(self) -> Dict[str, str]:
        """Map the record onto wizard field ids; absent optionals are skipped."""
        fields = {
            "unitType": self.unit_type,
            "callSign": self.call_sign,
            "registrationPort": self.registration_port,
            "manufacturerYear": self.manufacturer_year,
            "maritimeActivity": self.maritime_activity,
            "overallLength": self.overall_length,
            "overallWidth": self.overall_width,
            "depth": self.depth,
            "grossTonnage": self.gross_tonnage,
            "netTonnage": self.net_tonnage,
            "ownerFullNameAr": self.owner_full_name_ar,
            "ownerNationality": self.owner_nationality,
            "ownerIdNumber": self.owner_id_number,
            "ownerMobile": self.owner_mobile,
        }
        optional = {
            "imoNumber": self.imo_number,
            "mmsi": self.mmsi,
            "height": self.height,
            "decksCount": self.decks_count,
            "constructionEndDate": self.construction_end_date,
            "firstRegistrationDate": self.first_registration_date,
        }
        fields.update({k: v for k, v in optional.items() if v})
        if self.owners:
            fields["owners"] = json.dumps(self.owners, ensure_ascii=False)
            fields["totalOwnersCount"] = str(len(self.owners))
        if self.engines:
            fields["engines"] = json.dumps(self.engines, ensure_ascii=False)
        return fields

    @classmethod
    def from_dict(cls, data: dict) -> "BoatData":
        kwargs = {}
        mapping = {
            "unitType": "unit_type", "callSign": "call_sign",
            "registrationPort": "registration_port", "manufacturerYear": "manufacturer_year",
            "maritimeActivity": "maritime_activity", "overallLength": "overall_length",
            "overallWidth": "overall_width", "depth": "depth",
            "grossTonnage": "gross_tonnage", "netTonnage": "net_tonnage",
            "ownerFullNameAr": "owner_full_name_ar", "ownerNationality": "owner_nationality",
            "ownerIdNumber": "owner_id_number", "ownerMobile": "owner_mobile",
            "imoNumber": "imo_number", "mmsi": "mmsi", "height": "height",
            "decksCount": "decks_count", "constructionEndDate": "construction_end_date",
            "firstRegistrationDate": "first_registration_date",
        }
        for api_key, attr in mapping.items():
            if data.get(api_key) is not None:
                kwargs[attr] = str(data[api_key])
        kwargs["owners"] = list(data.get("owners") or [])
        kwargs["engines"] = list(data.get("engines") or [])
        return cls(**kwargs)


@dataclass(frozen=True)
class ProceedRequestResult:
    """Result of the proceed-request call made after picking an existing ship."""

    request_id: int
    message: str = ""
    request_serial: Optional[str] = None
    ship: Optional[MarineUnit] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "ProceedRequestResult":
        data = payload.get("data") or {}
        ship_info = data.get("shipInfo") or {}
        ship_data = ship_info.get("ship") or data.get("ship")
        return cls(
            request_id=int(data.get("id")),
            message=payload.get("message", "") or "",
            request_serial=str(data["requestSerial"]) if data.get("requestSerial") else None,
            ship=MarineUnit.from_dict(ship_data) if ship_data else None,
        )


@dataclass(frozen=True)
class CreatedRequest:
    """Identifiers returned when a registration request is created."""

    request_id: str
    ship_info_id: Optional[str] = None
    ship_id: Optional[str] = None


@dataclass(frozen=True)
class ReviewResponse:
    """Body of a send-request call."""

    message: str
    need_inspection: bool = False
    additional_data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict) -> "ReviewResponse":
        data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
        return cls(
            message=payload.get("message", "") or "",
            need_inspection=bool(data.get("needInspection", payload.get("needInspection", False))),
            additional_data=dict(data.get("additionalData") or payload.get("additionalData") or {}),
        )


@dataclass(frozen=True)
class PaymentReceipt:
    """Invoice the applicant pays before the request is issued."""

    receipt_serial: int
    receipt_year: int
    total_cost: float
    total_tax: float
    final_total: float
    arabic_value: str = ""
    invoice_type_id: int = 0
    details: tuple = ()

    def to_dict(self) -> dict:
        return {
            "receiptSerial": self.receipt_serial,
            "receiptYear": self.receipt_year,
            "totalCost": self.total_cost,
            "totalTax": self.total_tax,
            "finalTotal": self.final_total,
            "arabicValue": self.arabic_value,
            "invoiceType": {"id": self.invoice_type_id},
            "paymentReceiptDetailsList": list(self.details),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PaymentReceipt":
        invoice_type = data.get("invoiceType") or {}
        return cls(
            receipt_serial=int(data.get("receiptSerial", 0)),
            receipt_year=int(data.get("receiptYear", 0)),
            total_cost=float(data.get("totalCost", 0)),
            total_tax=float(data.get("totalTax", 0)),
            final_total=float(data.get("finalTotal", 0)),
            arabic_value=data.get("arabicValue", "") or "",
            invoice_type_id=int(invoice_type.get("id", 0)) if isinstance(invoice_type, dict) else 0,
            details=tuple(data.get("paymentReceiptDetailsList") or ()),
        )


@dataclass(frozen=True)
class CrewMember:
    """One sailor attached to a navigation license request."""

    name_ar: str
    name_en: str = ""
    job_title: str = ""
    civil_no: Optional[str] = None
    seamen_book_no: str = ""
    nationality: str = ""
    id: Optional[str] = None

    def to_payload(self) -> dict:
        job_title = int(self.job_title) if str(self.job_title).isdigit() else 0
        payload = {
            "nameAr": self.name_ar,
            "nameEn": self.name_en,
            "jobTitle": job_title,
            "civilNo": self.civil_no,
            "seamenBookNo": self.seamen_book_no,
        }
        if str(self.nationality).isdigit():
            payload["nationality"] = {"id": int(self.nationality)}
        return payload

    @classmethod
    def from_dict(cls, data: dict) -> "CrewMember":
        nationality = data.get("nationality", "")
        if isinstance(nationality, dict):
            nationality = nationality.get("id", "")
        job_title = data.get("jobTitle", "")
        if isinstance(job_title, dict):
            job_title = job_title.get("id", "")
        return cls(
            name_ar=str(data.get("nameAr", "") or ""),
            name_en=str(data.get("nameEn", "") or ""),
            job_title=str(job_title or ""),
            civil_no=str(data["civilNo"]) if data.get("civilNo") else None,
            seamen_book_no=str(data.get("seamenBookNo", "") or ""),
            nationality=str(nationality or ""),
            id=str(data["id"]) if data.get("id") is not None else None,
        )
