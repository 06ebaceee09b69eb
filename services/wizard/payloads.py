# -*- coding: utf-8 -*-
"""
Backend payload builders.

Each builder turns the accumulated form data (field id -> string) into the
JSON body one backend call expects. Builders never call the backend and
never mutate the data they are given.
"""

import json
from typing import Any, Dict, List, Optional

from models.form_field import FileUpload, parse_file_value
from models.responses import CrewMember
from models.step_data import StepData
from services.validation.validation_strategy import to_number
from utils.helpers import parse_json_list


def _number(value: Optional[str]):
    number = to_number(value)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def _text(value: Optional[str]) -> Optional[str]:
    text = (value or "").strip()
    return text or None


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in payload.items() if v is not None}


def file_parts(step: StepData, data: Dict[str, str]) -> Dict[str, str]:
    """Multipart field name -> local path for every filled upload field."""
    parts = {}
    for field in step.fields:
        if not isinstance(field, FileUpload):
            continue
        parsed = parse_file_value(data.get(field.id, ""))
        if parsed is not None:
            parts[field.id] = parsed.path or parsed.name
    return parts


# ==================== Request creation ====================

def unit_data_payload(data: Dict[str, str], request_type_id: int) -> Dict[str, Any]:
    """Create/update body for a new marine unit registration request."""
    ship = _compact({
        "shipType": _text(data.get("unitType")),
        "callSign": _text(data.get("callSign")),
        "imoNumber": _text(data.get("imoNumber")),
        "mmsiNumber": _text(data.get("mmsi")),
        "portOfRegistry": _text(data.get("registrationPort")),
        "manufacturerYear": _number(data.get("manufacturerYear")),
        "marineActivity": _text(data.get("maritimeActivity")),
        "buildStartDate": _text(data.get("constructionStartDate")),
        "buildEndDate": _text(data.get("constructionEndDate")),
        "firstRegistrationDate": _text(data.get("firstRegistrationDate")),
        "buildCountry": _text(data.get("registrationCountry")),
        "agricultureRequestNumber": _text(data.get("agricultureRequestNumber")),
    })
    return {"requestTypeId": request_type_id, "shipInfo": {"ship": ship}}


def selection_request_payload(data: Dict[str, str], request_type_id: int) -> Dict[str, Any]:
    """Create body for transactions that open their request on ship selection."""
    return _compact({
        "requestTypeId": request_type_id,
        "shipInfoId": _text(data.get("shipInfoId")),
        "lastNavigationLicenseId": _text(data.get("lastNavigationLicenseId")),
    })


def mortgage_payload(data: Dict[str, str], request_type_id: int) -> Dict[str, Any]:
    return _compact({
        "requestTypeId": request_type_id,
        "shipInfoId": _text(data.get("shipInfoId")),
        "bankName": _text(data.get("bankName")),
        "mortgageContractNumber": _text(data.get("mortgageContractNumber")),
        "mortgagePurpose": _text(data.get("mortgagePurpose")),
        "mortgageValue": _number(data.get("mortgageValue")),
        "startDate": _text(data.get("mortgageStartDate")),
    })


def inspection_payload(data: Dict[str, str], request_type_id: int) -> Dict[str, Any]:
    return _compact({
        "requestTypeId": request_type_id,
        "shipInfoId": _text(data.get("shipInfoId")),
        "parentRequestId": _text(data.get("requestId")),
        "purpose": _text(data.get("inspectionPurpose")),
        "recordingPort": _text(data.get("inspectionRecordingPort")),
        "authority": _text(data.get("inspectionAuthorityAndEntity")),
    })


# ==================== Attachments ====================

def dimensions_payload(data: Dict[str, str]) -> Dict[str, Any]:
    return _compact({
        "vesselLengthOverall": _number(data.get("overallLength")),
        "vesselBeam": _number(data.get("overallWidth")),
        "vesselDraft": _number(data.get("depth")),
        "vesselHeight": _number(data.get("height")),
        "decksNumber": _number(data.get("decksCount")),
    })


def weights_payload(data: Dict[str, str]) -> Dict[str, Any]:
    return _compact({
        "grossTonnage": _number(data.get("grossTonnage")),
        "netTonnage": _number(data.get("netTonnage")),
        "staticLoad": _number(data.get("staticLoad")),
        "maxLoadCapacity": _number(data.get("maxPermittedLoad")),
    })


def engines_payload(data: Dict[str, str]) -> List[Dict[str, Any]]:
    return [dict(engine) for engine in parse_json_list(data.get("engines")) if isinstance(engine, dict)]


def owners_payload(data: Dict[str, str]) -> List[Dict[str, Any]]:
    """Listed owners, or a single owner built from the owner fields."""
    owners = [dict(o) for o in parse_json_list(data.get("owners")) if isinstance(o, dict)]
    if owners:
        return owners
    owner = _compact({
        "ownerType": _text(data.get("ownerType")),
        "ownerNameAr": _text(data.get("ownerFullNameAr")),
        "nationality": _text(data.get("ownerNationality")),
        "ownerCivilId": _text(data.get("ownerIdNumber")),
        "ownerPhone": _text(data.get("ownerMobile")),
        "ownerEmail": _text(data.get("ownerEmail")),
        "commercialRegNumber": _text(data.get("companyRegistrationNumber")),
        "companyName": _text(data.get("companyName")),
    })
    return [owner] if owner else []


def documents_payload(step: StepData, data: Dict[str, str]) -> Dict[str, Any]:
    return {"documentIds": [f.id for f in step.fields if data.get(f.id)],
            "files": file_parts(step, data)}


def insurance_payload(step: StepData, data: Dict[str, str]) -> Dict[str, Any]:
    return _compact({
        "insuranceNumber": _text(data.get("insuranceDocumentNumber")),
        "insuranceCountry": _text(data.get("insuranceCountry")),
        "insuranceCompany": _text(data.get("insuranceCompany")),
        "expiryDate": _text(data.get("insuranceExpiryDate")),
        "files": file_parts(step, data) or None,
    })


def name_reservation_payload(data: Dict[str, str]) -> Dict[str, Any]:
    return _compact({
        "shipNameAr": _text(data.get("newArabicMarineUnitName")),
        "shipNameEn": _text(data.get("newEnglishMarineUnitName")),
    })


def navigation_areas_payload(data: Dict[str, str]) -> List[Dict[str, Any]]:
    return [{"name": str(region)} for region in parse_json_list(data.get("sailingRegions"))]


def crew_payload(crew: List[CrewMember]) -> List[Dict[str, Any]]:
    return [member.to_payload() for member in crew]


def cancellation_payload(step: StepData, data: Dict[str, str]) -> Dict[str, Any]:
    return _compact({
        "reason": _text(data.get("cancellationReason")),
        "files": file_parts(step, data) or None,
    })


def attachment_payload(step: StepData, data: Dict[str, str]) -> Any:
    """Payload for the attach call of a step kind."""
    builders = {
        "SHIP_DIMENSIONS": lambda: dimensions_payload(data),
        "SHIP_WEIGHTS": lambda: weights_payload(data),
        "ENGINE_INFO": lambda: engines_payload(data),
        "OWNER_INFO": lambda: owners_payload(data),
        "DOCUMENTS": lambda: documents_payload(step, data),
        "INSURANCE_DOCUMENT": lambda: insurance_payload(step, data),
        "MARINE_UNIT_NAME_SELECTION": lambda: name_reservation_payload(data),
        "NAVIGATION_AREAS": lambda: navigation_areas_payload(data),
        "CANCELLATION_REASON": lambda: cancellation_payload(step, data),
    }
    builder = builders.get(step.step_type.value)
    if builder is None:
        return {k: data[k] for k in step.field_ids() if k in data}
    return builder()


# ==================== Read back (renewals) ====================

def areas_to_form_value(rows: List[Dict[str, Any]]) -> str:
    names = [str(r.get("name") or r.get("nameAr") or "") for r in rows if isinstance(r, dict)]
    return json.dumps([n for n in names if n], ensure_ascii=False)


def crew_to_form_value(rows: List[Dict[str, Any]]) -> str:
    crew = [CrewMember.from_dict(r) for r in rows if isinstance(r, dict)]
    return json.dumps([_crew_form_row(m) for m in crew], ensure_ascii=False)


def _crew_form_row(member: CrewMember) -> Dict[str, Any]:
    return _compact({
        "nameAr": member.name_ar,
        "nameEn": member.name_en,
        "jobTitle": member.job_title,
        "civilNo": member.civil_no,
        "seamenBookNo": member.seamen_book_no,
        "nationality": member.nationality,
        "id": member.id,
    })
