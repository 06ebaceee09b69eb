# -*- coding: utf-8 -*-
"""
Marine unit (ship) entity model.

Holds the subset of the backend ship record the wizard needs to list owned
ships and to decide whether a maritime identification step is required.
"""

from dataclasses import dataclass
from typing import Optional


def _positive_or_none(value) -> Optional[str]:
    """Backend sends 0 or null for identifiers that were never assigned."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text in ("0", "null"):
        return None
    return text


@dataclass
class MarineUnit:
    """
    A ship owned by (or registered to) the current applicant.

    Ids are strings so they match the JSON arrays stored in the
    selectedMarineUnits field.
    """

    id: str = ""
    ship_info_id: Optional[str] = None
    ship_name: str = ""
    imo_number: Optional[str] = None
    mmsi_number: Optional[str] = None
    call_sign: Optional[str] = None
    official_number: str = ""
    port_of_registry: str = ""
    ship_type: str = ""
    marine_activity: str = ""
    gross_tonnage: str = ""
    total_length: str = ""
    is_temp: bool = False
    is_mortgaged: bool = False
    is_active: bool = True
    last_navigation_license_id: Optional[str] = None

    @property
    def registration_type(self) -> str:
        return "TEMPORARY" if self.is_temp else "PERMANENT"

    @property
    def needs_maritime_identification(self) -> bool:
        """True when IMO, MMSI or call sign is missing."""
        return not (self.imo_number and self.mmsi_number and self.call_sign)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "shipInfoId": self.ship_info_id,
            "shipName": self.ship_name,
            "imoNumber": self.imo_number,
            "mmsiNumber": self.mmsi_number,
            "callSign": self.call_sign,
            "officialNumber": self.official_number,
            "portOfRegistry": self.port_of_registry,
            "shipType": self.ship_type,
            "marineActivity": self.marine_activity,
            "grossTonnage": self.gross_tonnage,
            "totalLength": self.total_length,
            "isTemp": self.is_temp,
            "isMortgaged": self.is_mortgaged,
            "isActive": self.is_active,
            "lastNavigationLicenseId": self.last_navigation_license_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MarineUnit":
        """Create MarineUnit from a backend ship payload (camelCase keys)."""
        port = data.get("portOfRegistry")
        if isinstance(port, dict):
            port = port.get("id") or port.get("nameAr") or ""
        ship_type = data.get("shipType")
        if isinstance(ship_type, dict):
            ship_type = ship_type.get("nameAr") or ship_type.get("id") or ""
        activity = data.get("marineActivity")
        if isinstance(activity, dict):
            activity = activity.get("nameAr") or activity.get("id") or ""

        return cls(
            id=str(data.get("id", "")),
            ship_info_id=_positive_or_none(data.get("shipInfoId")),
            ship_name=data.get("shipName", "") or "",
            imo_number=_positive_or_none(data.get("imoNumber")),
            mmsi_number=_positive_or_none(data.get("mmsiNumber")),
            call_sign=_positive_or_none(data.get("callSign")),
            official_number=str(data.get("officialNumber", "") or ""),
            port_of_registry=str(port or ""),
            ship_type=str(ship_type or ""),
            marine_activity=str(activity or ""),
            gross_tonnage=str(data.get("grossTonnage", "") or ""),
            total_length=str(data.get("totalLength", data.get("vesselLengthOverall", "")) or ""),
            is_temp=str(data.get("isTemp", "0")).lower() in ("1", "true"),
            is_mortgaged=bool(data.get("isMortgaged", False)),
            is_active=bool(data.get("isActive", True)),
            last_navigation_license_id=_positive_or_none(data.get("lastNavigationLicenseId")),
        )
