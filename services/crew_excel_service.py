# -*- coding: utf-8 -*-
"""
Crew Excel import.

Reads the crew sheet a navigation-license applicant uploads instead of typing
sailors one by one. The first row is a header; columns are matched by name
(English or Arabic), so column order in the sheet does not matter.

Expected headers:
- nameAr / الاسم بالعربي (required)
- nameEn / الاسم بالإنجليزي
- jobTitle / الوظيفة
- civilNo / الرقم المدني
- seamenBookNo / رقم جواز البحار (required)
- nationality / الجنسية
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from openpyxl import load_workbook

from app.config import Config
from models.responses import CrewMember
from services.exceptions import ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)


HEADER_ALIASES: Dict[str, Tuple[str, ...]] = {
    "nameAr": ("namear", "name_ar", "الاسم بالعربي", "الاسم"),
    "nameEn": ("nameen", "name_en", "الاسم بالإنجليزي"),
    "jobTitle": ("jobtitle", "job_title", "job", "الوظيفة"),
    "civilNo": ("civilno", "civil_no", "الرقم المدني"),
    "seamenBookNo": ("seamenbookno", "seamen_book_no", "رقم جواز البحار"),
    "nationality": ("nationality", "الجنسية"),
}

REQUIRED_COLUMNS = ("nameAr", "seamenBookNo")


def _cell_text(value) -> str:
    if value is None:
        return ""
    # Numeric ids come back as floats from some spreadsheet editors
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _resolve_columns(header_row) -> Dict[str, int]:
    columns = {}
    for index, cell in enumerate(header_row):
        text = _cell_text(cell).lower()
        for key, aliases in HEADER_ALIASES.items():
            if key not in columns and text in aliases:
                columns[key] = index
    return columns


class CrewExcelService:
    """
    Parse crew spreadsheets into CrewMember rows.

    Features:
    - Header matching in English and Arabic
    - Blank rows skipped
    - Row and file size limits from Config
    """

    def __init__(self, max_rows: Optional[int] = None, max_size_mb: Optional[int] = None):
        self.max_rows = max_rows if max_rows is not None else Config.CREW_EXCEL_MAX_ROWS
        self.max_size_mb = max_size_mb if max_size_mb is not None else Config.CREW_EXCEL_MAX_SIZE_MB

    def parse(self, file_path: Union[str, Path]) -> List[CrewMember]:
        """
        Read crew members from an .xlsx file.

        Args:
            file_path: Path of the uploaded workbook

        Returns:
            Crew members in sheet order

        Raises:
            ValidationException: file missing, too large, missing headers,
                too many rows or a row without a required value
        """
        path = Path(file_path)
        if not path.exists():
            raise ValidationException("crew file not found", field="crewExcelFile")
        if path.stat().st_size > self.max_size_mb * 1024 * 1024:
            raise ValidationException("crew file too large", field="crewExcelFile")

        workbook = load_workbook(filename=str(path), read_only=True, data_only=True)
        try:
            sheet = workbook.active
            rows = sheet.iter_rows(values_only=True)
            header = next(rows, None)
            if header is None:
                raise ValidationException("crew file is empty", field="crewExcelFile")

            columns = _resolve_columns(header)
            missing = [key for key in REQUIRED_COLUMNS if key not in columns]
            if missing:
                raise ValidationException(
                    f"crew file is missing columns: {', '.join(missing)}", field="crewExcelFile"
                )

            members = []
            for row_number, row in enumerate(rows, start=2):
                values = {
                    key: _cell_text(row[index]) if index < len(row) else ""
                    for key, index in columns.items()
                }
                if not any(values.values()):
                    continue
                for key in REQUIRED_COLUMNS:
                    if not values.get(key):
                        raise ValidationException(
                            f"row {row_number}: {key} is required", field="crewExcelFile"
                        )
                members.append(CrewMember(
                    name_ar=values["nameAr"],
                    name_en=values.get("nameEn", ""),
                    job_title=values.get("jobTitle", ""),
                    civil_no=values.get("civilNo") or None,
                    seamen_book_no=values["seamenBookNo"],
                    nationality=values.get("nationality", ""),
                ))
                if len(members) > self.max_rows:
                    raise ValidationException(
                        f"crew file has more than {self.max_rows} rows", field="crewExcelFile"
                    )
        finally:
            workbook.close()

        logger.info(f"Parsed {len(members)} crew members from {path.name}")
        return members
