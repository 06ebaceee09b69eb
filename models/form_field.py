# -*- coding: utf-8 -*-
"""
Form field variants.

A step is an ordered tuple of these. Field ids are the join key between the
host UI state, the accumulated form data and the validation rules, so an id
must be unique within its step.
"""

import json
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class FormField:
    """Common part of every field variant."""

    id: str
    label_key: str = ""
    mandatory: bool = False
    value: str = ""
    read_only: bool = False

    kind: ClassVar[str] = "field"

    @property
    def label(self) -> str:
        return self.label_key or f"field.{self.id}"


@dataclass(frozen=True)
class TextField(FormField):
    """Free text input with optional format constraints."""

    is_numeric: bool = False
    is_decimal: bool = False
    is_email: bool = False
    is_phone: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    kind: ClassVar[str] = "text"


@dataclass(frozen=True)
class DropDown(FormField):
    """Single choice from a (usually looked-up) option list."""

    options: Tuple[str, ...] = ()
    lookup_key: Optional[str] = None

    kind: ClassVar[str] = "dropdown"


@dataclass(frozen=True)
class MultiSelectDropDown(FormField):
    """Several choices; the value is a JSON array of the selected options."""

    options: Tuple[str, ...] = ()
    lookup_key: Optional[str] = None
    min_selections: int = 0

    kind: ClassVar[str] = "multi_select"


@dataclass(frozen=True)
class DatePicker(FormField):
    """Date input, value formatted as yyyy-MM-dd."""

    allow_past_dates: bool = True

    kind: ClassVar[str] = "date"


@dataclass(frozen=True)
class FileUpload(FormField):
    """File attachment; see parse_file_value for the value format."""

    allowed_types: Tuple[str, ...] = ("pdf", "jpg", "jpeg", "png")
    max_size_mb: int = 5

    kind: ClassVar[str] = "file"


@dataclass(frozen=True)
class CheckBox(FormField):
    kind: ClassVar[str] = "checkbox"


@dataclass(frozen=True)
class SailorList(FormField):
    """Manual crew entry; the value is a JSON array of crew objects."""

    jobs: Tuple[str, ...] = ()
    nationalities: Tuple[str, ...] = ()

    kind: ClassVar[str] = "sailor_list"


@dataclass(frozen=True)
class MarineUnitSelector(FormField):
    """Ship picker; the value is a JSON array of selected ship ids."""

    units: Tuple = ()
    allow_multiple_selection: bool = False
    show_add_new_button: bool = False
    show_owned_units_warning: bool = False

    kind: ClassVar[str] = "marine_unit_selector"


@dataclass(frozen=True)
class FileValue:
    """Parsed value of a FileUpload field."""

    name: str
    size_bytes: Optional[int] = None
    path: Optional[str] = None

    @property
    def extension(self) -> str:
        if "." not in self.name:
            return ""
        return self.name.rsplit(".", 1)[-1].lower()


def parse_file_value(value: str) -> Optional[FileValue]:
    """
    Parse the string stored for a FileUpload field.

    The host stores either a plain file name/path or a JSON object
    {"name": ..., "size": ..., "path": ...}.

    Returns:
        FileValue, or None for an empty value
    """
    if not value or not value.strip():
        return None

    text = value.strip()
    if text.startswith("{"):
        try:
            payload = json.loads(text)
        except ValueError:
            return FileValue(name=text)
        size = payload.get("size")
        return FileValue(
            name=str(payload.get("name") or payload.get("path") or ""),
            size_bytes=int(size) if size not in (None, "") else None,
            path=payload.get("path"),
        )

    name = text.replace("\\", "/").rsplit("/", 1)[-1]
    return FileValue(name=name, path=text)
