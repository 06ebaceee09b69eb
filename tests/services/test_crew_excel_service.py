# -*- coding: utf-8 -*-
"""
Tests for the crew Excel import.

Tests cover:
- English and Arabic headers in any column order
- Blank rows
- Missing columns and required values
- Row limit
"""

import pytest
from openpyxl import Workbook

from services.crew_excel_service import CrewExcelService
from services.exceptions import ValidationException


def write_sheet(path, rows):
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture
def service():
    """Create crew import service."""
    return CrewExcelService(max_rows=3)


class TestCrewExcelParsing:
    """Test reading crew sheets."""

    def test_english_headers(self, service, tmp_path):
        """Test a sheet with English headers."""
        path = write_sheet(tmp_path / "crew.xlsx", [
            ["nameAr", "nameEn", "jobTitle", "seamenBookNo", "nationality", "civilNo"],
            ["أحمد", "Ahmed", "1", "SB-1", "1", 12345678.0],
            ["سالم", "Salem", "2", "SB-2", "2", None],
        ])
        crew = service.parse(path)

        assert [m.name_ar for m in crew] == ["أحمد", "سالم"]
        assert crew[0].civil_no == "12345678"
        assert crew[1].civil_no is None
        assert crew[1].seamen_book_no == "SB-2"

    def test_arabic_headers_any_order(self, service, tmp_path):
        """Test Arabic headers matched regardless of column order."""
        path = write_sheet(tmp_path / "crew.xlsx", [
            ["رقم جواز البحار", "الوظيفة", "الاسم بالعربي"],
            ["SB-9", "ربان", "خالد"],
        ])
        crew = service.parse(path)

        assert len(crew) == 1
        assert crew[0].name_ar == "خالد"
        assert crew[0].job_title == "ربان"
        assert crew[0].seamen_book_no == "SB-9"

    def test_blank_rows_skipped(self, service, tmp_path):
        """Test empty rows between sailors are ignored."""
        path = write_sheet(tmp_path / "crew.xlsx", [
            ["nameAr", "seamenBookNo"],
            ["أحمد", "SB-1"],
            [None, None],
            ["سالم", "SB-2"],
        ])
        assert len(service.parse(path)) == 2


class TestCrewExcelErrors:
    """Test rejected sheets."""

    def test_missing_file(self, service, tmp_path):
        """Test a path that does not exist."""
        with pytest.raises(ValidationException) as exc_info:
            service.parse(tmp_path / "missing.xlsx")
        assert exc_info.value.field == "crewExcelFile"

    def test_missing_required_column(self, service, tmp_path):
        """Test a sheet without the seamen book column."""
        path = write_sheet(tmp_path / "crew.xlsx", [["nameAr", "nameEn"], ["أحمد", "Ahmed"]])
        with pytest.raises(ValidationException, match="seamenBookNo"):
            service.parse(path)

    def test_missing_required_value(self, service, tmp_path):
        """Test a row without a seamen book number."""
        path = write_sheet(tmp_path / "crew.xlsx", [["nameAr", "seamenBookNo"], ["أحمد", None]])
        with pytest.raises(ValidationException, match="row 2"):
            service.parse(path)

    def test_too_many_rows(self, service, tmp_path):
        """Test the row limit."""
        rows = [["nameAr", "seamenBookNo"]] + [[f"بحار {i}", f"SB-{i}"] for i in range(4)]
        path = write_sheet(tmp_path / "crew.xlsx", rows)
        with pytest.raises(ValidationException, match="more than 3 rows"):
            service.parse(path)
