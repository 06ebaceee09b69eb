# -*- coding: utf-8 -*-
"""
Utility helper functions.

Form values travel as strings; these helpers read them back as dates,
lists and flags.
"""

import json
from datetime import date, datetime
from typing import Any, Dict, List, Optional

FORM_DATE_FORMAT = "%Y-%m-%d"


def parse_form_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a yyyy-MM-dd form value.

    Args:
        value: Date string from a DatePicker

    Returns:
        date, or None for blank or malformed input
    """
    if not value or not str(value).strip():
        return None
    try:
        return datetime.strptime(str(value).strip(), FORM_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_json_list(value: Optional[str]) -> List[Any]:
    """
    Read a JSON array stored in a form field (owners, engines, sailors,
    selected units). Anything that is not a JSON array yields [].
    """
    if not value or not str(value).strip():
        return []
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        return []
    return parsed if isinstance(parsed, list) else []


def is_truthy(value: Optional[str]) -> bool:
    """Form flags are stored as "true"/"false"."""
    return str(value or "").strip().lower() in ("true", "1", "yes")


def pick(data: Dict[str, str], *keys: str) -> Dict[str, str]:
    """Sub-map of the given keys, skipping keys that are absent."""
    return {key: data[key] for key in keys if key in data}
