# -*- coding: utf-8 -*-
"""
Tests for step validation.

Tests cover:
- Field checks (mandatory, numeric, dates, files, multi-select, crew)
- Company field gating by applicant/owner type
- Cross-field rules on weights and dimensions
- Cross-step rules (IMO/MMSI by tonnage, inspection documents by length)
- Custom rule registration on the ValidationFactory
"""

import json
from datetime import date

import pytest

from models.form_field import (
    DatePicker, FileUpload, MultiSelectDropDown, SailorList, TextField,
)
from models.step_data import StepData, StepType
from services.translation_manager import tr
from services.validation import CustomRule, FormValidator, ValidationFactory, validate_field
from services.wizard import shared_steps
from services.wizard.strategies.registration import NEW_UNIT_DOCUMENTS


@pytest.fixture
def validator():
    """Create a validator with the default rule table."""
    return FormValidator()


class TestFieldValidation:
    """Test single field checks."""

    def test_mandatory_text_missing(self):
        """Test an empty mandatory field reports required."""
        field = TextField(id="callSign", mandatory=True)
        assert validate_field(field, "  ") == "هذا الحقل مطلوب"

    def test_optional_empty_is_valid(self):
        """Test format checks never run on empty optional values."""
        field = TextField(id="imoNumber", is_numeric=True, min_length=7)
        assert validate_field(field, "") is None

    def test_numeric(self):
        """Test digits-only fields."""
        field = TextField(id="decksCount", is_numeric=True)
        assert validate_field(field, "12a") == tr("validation.numeric")
        assert validate_field(field, "12") is None

    def test_length_bounds(self):
        """Test min and max length messages carry the bound."""
        field = TextField(id="imoNumber", min_length=7, max_length=7)
        assert validate_field(field, "123") == tr("validation.min_length", count=7)
        assert validate_field(field, "12345678") == tr("validation.max_length", count=7)

    def test_phone_and_email(self):
        """Test phone digit count and email format."""
        phone = TextField(id="ownerMobile", is_phone=True)
        email = TextField(id="ownerEmail", is_email=True)
        assert validate_field(phone, "+9689988") == tr("validation.phone", count=8)
        assert validate_field(phone, "+96899887766") is None
        assert validate_field(email, "owner@") == tr("validation.email")
        assert validate_field(email, "owner@example.om") is None

    def test_date_format(self):
        """Test dates must be yyyy-MM-dd."""
        field = DatePicker(id="mortgageStartDate")
        assert validate_field(field, "01/02/2026") == tr("validation.date_format")

    def test_past_date_rejected(self):
        """Test past dates on fields that disallow them."""
        field = DatePicker(id="suspensionStartDate", allow_past_dates=False)
        today = date(2026, 5, 1)
        assert validate_field(field, "2026-04-30", today=today) == "لا يمكن اختيار تاريخ سابق"
        assert validate_field(field, "2026-05-01", today=today) is None

    def test_file_type_and_size(self):
        """Test file extension and size limits."""
        field = FileUpload(id="insuranceDocumentFile", allowed_types=("pdf",), max_size_mb=5)
        assert validate_field(field, "scan.exe") == tr("validation.file_type", types="pdf")

        too_big = json.dumps({"name": "scan.pdf", "size": 6 * 1024 * 1024})
        assert validate_field(field, too_big) == tr("validation.file_size", size=5)
        assert validate_field(field, "/tmp/scan.PDF") is None

    def test_multi_select_minimum(self):
        """Test the minimum number of selections."""
        field = MultiSelectDropDown(id="sailingRegions", min_selections=2)
        assert validate_field(field, json.dumps(["الخليج العربي"])) == tr("validation.min_selections", count=2)

    def test_crew_sheet_replaces_manual_list(self):
        """Test an uploaded crew file satisfies the mandatory sailor list."""
        field = SailorList(id="sailors", mandatory=True)
        assert validate_field(field, "", {}) == tr("validation.crew_required")
        assert validate_field(field, "", {"crewExcelFile": "crew.xlsx"}) is None


class TestCompanyFieldGating:
    """Test company fields are only checked for company applicants."""

    def test_individual_skips_company_fields(self):
        """Test company fields are ignored for individuals."""
        field = TextField(id="companyName", mandatory=True)
        assert validate_field(field, "", {"selectionPersonType": "individual"}) is None

    def test_company_requires_company_fields(self):
        """Test company fields are mandatory for companies."""
        field = TextField(id="companyName", mandatory=True)
        assert validate_field(field, "", {"selectionPersonType": "company"}) == tr("validation.required")

    def test_owner_type_wins_over_person_type(self):
        """Test the owner type on the current form overrides the applicant type."""
        field = TextField(id="companyRegistrationNumber", mandatory=True)
        form = {"selectionPersonType": "company", "ownerType": "individual"}
        assert validate_field(field, "", form) is None


class TestWeightRules:
    """Test weight step rules."""

    def test_net_tonnage_above_gross(self, validator):
        """Test net tonnage may not exceed gross tonnage."""
        step = shared_steps.weights_step()
        is_valid, errors = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "100", "netTonnage": "150"}, {}
        )
        assert is_valid is False
        assert errors["netTonnage"] == "الحمولة الصافية يجب ألا تتجاوز الحمولة الإجمالية"

    def test_max_permitted_load_below_static(self, validator):
        """Test maximum permitted load must cover the static load."""
        step = shared_steps.weights_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "100", "netTonnage": "80", "staticLoad": "50",
                   "maxPermittedLoad": "40"}, {}
        )
        assert errors["maxPermittedLoad"] == tr("validation.max_permitted_load")

    def test_imo_required_above_500_tons(self, validator):
        """Test IMO number entered on the unit data step is required above 500 tons."""
        step = shared_steps.weights_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "600", "netTonnage": "400"}, {"mmsi": "461000001"}
        )
        assert errors["grossTonnage"] == tr("validation.imo_required")

    def test_identifiers_present_is_valid(self, validator):
        """Test a heavy unit with IMO and MMSI from earlier steps passes."""
        step = shared_steps.weights_step()
        is_valid, errors = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "600", "netTonnage": "400"},
            {"imoNumber": "1234567", "mmsi": "461000001"}
        )
        assert is_valid is True
        assert errors == {}

    def test_net_tonnage_against_earlier_gross(self, validator):
        """Test net tonnage is compared with the gross tonnage from the accumulated data."""
        is_valid, errors = validator.validate_step_with_accumulated_data(
            shared_steps.weights_step(), {"netTonnage": "150"}, {"grossTonnage": "100"}
        )
        assert is_valid is False
        assert errors["netTonnage"] == tr("validation.net_tonnage")

    def test_static_load_above_gross(self, validator):
        """Test static load may not exceed gross tonnage."""
        _, errors = validator.validate_step_with_accumulated_data(
            shared_steps.weights_step(),
            {"grossTonnage": "100", "netTonnage": "80", "staticLoad": "150", "maxPermittedLoad": "200"}, {}
        )
        assert errors["staticLoad"] == tr("validation.static_load")
        assert "maxPermittedLoad" not in errors

    def test_mmsi_required_above_300_tons(self, validator):
        """Test an MMSI from earlier steps is required above 300 tons."""
        step = shared_steps.weights_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "400", "netTonnage": "300"}, {}
        )
        assert errors["grossTonnage"] == tr("validation.mmsi_required")

        is_valid, _ = validator.validate_step_with_accumulated_data(
            step, {"grossTonnage": "400", "netTonnage": "300"}, {"mmsi": "461000001"}
        )
        assert is_valid is True

    def test_does_not_mutate_inputs(self, validator):
        """Test validation leaves both maps untouched."""
        data = {"grossTonnage": "100", "netTonnage": "150"}
        accumulated = {"imoNumber": "1234567"}
        validator.validate_step_with_accumulated_data(shared_steps.weights_step(), data, accumulated)
        assert data == {"grossTonnage": "100", "netTonnage": "150"}
        assert accumulated == {"imoNumber": "1234567"}


class TestDimensionRules:
    """Test dimension step rules."""

    def test_width_must_be_below_length(self, validator):
        """Test overall width below overall length."""
        step = shared_steps.dimensions_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"overallLength": "10", "overallWidth": "12", "depth": "2"}, {}
        )
        assert errors["overallWidth"] == tr("validation.width_exceeds_length")

    def test_height_limit_by_tonnage(self, validator):
        """Test height limit for a unit under 100 tons."""
        step = shared_steps.dimensions_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"overallLength": "20", "overallWidth": "5", "depth": "2", "height": "30"},
            {"grossTonnage": "50"}
        )
        assert errors["height"] == tr("validation.height_limit", limit=25)

    def test_deck_limit_by_tonnage(self, validator):
        """Test deck count limit for a unit under 100 tons."""
        step = shared_steps.dimensions_step()
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"overallLength": "20", "overallWidth": "5", "depth": "2", "decksCount": "3"},
            {"grossTonnage": "50"}
        )
        assert errors["decksCount"] == tr("validation.deck_limit", limit=2)

    def test_limits_skipped_without_tonnage(self, validator):
        """Test tonnage-dependent limits wait for the tonnage."""
        step = shared_steps.dimensions_step()
        is_valid, _ = validator.validate_step_with_accumulated_data(
            step, {"overallLength": "20", "overallWidth": "5", "depth": "2", "height": "30"}, {}
        )
        assert is_valid is True


class TestCrossStepRules:
    """Test rules reading values from earlier steps."""

    def test_inspection_documents_for_short_units(self, validator):
        """Test units up to 24 m need inspection documents."""
        step = shared_steps.documents_step(NEW_UNIT_DOCUMENTS)
        _, errors = validator.validate_step_with_accumulated_data(
            step, {"shipbuildingCertificate": "cert.pdf"}, {"overallLength": "20"}
        )
        assert errors["inspectionDocuments"] == tr("validation.inspection_documents_required")

    def test_long_units_skip_inspection_documents(self, validator):
        """Test longer units do not need inspection documents."""
        step = shared_steps.documents_step(NEW_UNIT_DOCUMENTS)
        is_valid, _ = validator.validate_step_with_accumulated_data(
            step, {"shipbuildingCertificate": "cert.pdf"}, {"overallLength": "30"}
        )
        assert is_valid is True

    def test_construction_dates_order(self, validator):
        """Test construction end date after start date."""
        step = shared_steps.unit_data_step(["يخت"], ["صحار"], ["عُمان"])
        data = {
            "unitType": "يخت", "callSign": "A4OM9", "registrationPort": "صحار",
            "maritimeActivity": "يخت", "constructionStartDate": "2020-05-01",
            "constructionEndDate": "2020-01-01",
        }
        _, errors = validator.validate_step_with_accumulated_data(step, data, {})
        assert errors["constructionEndDate"] == tr("validation.construction_dates")

    def test_manufacturer_year_range(self, validator):
        """Test manufacturer year between 1900 and the current year."""
        step = shared_steps.unit_data_step(["يخت"], ["صحار"], ["عُمان"])
        base = {"unitType": "يخت", "callSign": "A4OM9", "registrationPort": "صحار", "maritimeActivity": "يخت"}
        expected = tr("validation.manufacturer_year", min=1900, max=date.today().year)

        _, errors = validator.validate_step_with_accumulated_data(step, {**base, "manufacturerYear": "1850"}, {})
        assert errors["manufacturerYear"] == expected

        future = str(date.today().year + 1)
        _, errors = validator.validate_step_with_accumulated_data(step, {**base, "manufacturerYear": future}, {})
        assert errors["manufacturerYear"] == expected

        is_valid, _ = validator.validate_step_with_accumulated_data(step, {**base, "manufacturerYear": "1998"}, {})
        assert is_valid is True

    def test_first_registration_after_construction(self, validator):
        """Test first registration date after construction end date."""
        step = shared_steps.unit_data_step(["يخت"], ["صحار"], ["عُمان"])
        data = {
            "unitType": "يخت", "callSign": "A4OM9", "registrationPort": "صحار",
            "maritimeActivity": "يخت", "constructionStartDate": "2019-01-01",
            "constructionEndDate": "2020-01-01", "firstRegistrationDate": "2020-01-01",
        }
        _, errors = validator.validate_step_with_accumulated_data(step, data, {})
        assert errors["firstRegistrationDate"] == tr("validation.registration_date")

        data["firstRegistrationDate"] = "2020-02-01"
        is_valid, _ = validator.validate_step_with_accumulated_data(step, data, {})
        assert is_valid is True


class TestValidationFactory:
    """Test rule selection and registration."""

    def test_rules_limited_to_step_fields(self):
        """Test rules reporting on fields outside the step are dropped."""
        factory = ValidationFactory()
        rules = factory.rules_for_step(shared_steps.weights_step())
        assert rules
        assert all(rule.error_field_id in shared_steps.weights_step().field_ids() for rule in rules)

    def test_custom_registration(self):
        """Test a caller-supplied rule set for a custom step."""
        rule = CustomRule(("reason",), "reason", "validation.required",
                          lambda merged: merged.get("reason") != "x")
        factory = ValidationFactory({StepType.CUSTOM: lambda: [rule]})
        step = StepData(step_type=StepType.CUSTOM, title_key="t", fields=(TextField(id="reason"),))

        is_valid, errors = FormValidator(factory).validate_step_with_accumulated_data(
            step, {"reason": "x"}, {}
        )
        assert is_valid is False
        assert errors == {"reason": tr("validation.required")}
