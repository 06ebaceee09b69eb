# -*- coding: utf-8 -*-
"""
Step Catalog - reusable step builders shared by all transactions.

Every builder is a pure function of its arguments (mostly option lists
loaded by the strategy), so calling it twice yields equal StepData.
Field ids are the keys of the accumulated form data and of the backend
payload builders in services/wizard/payloads.py.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from app.config import PersonTypes
from models.form_field import (
    CheckBox, DatePicker, DropDown, FileUpload, FormField, MarineUnitSelector,
    MultiSelectDropDown, SailorList, TextField,
)
from models.marine_unit import MarineUnit
from models.step_data import StepData, StepType


@dataclass(frozen=True)
class DocumentConfig:
    """One upload slot of a documents step."""

    id: str
    label_key: str
    mandatory: bool = True
    allowed_types: Tuple[str, ...] = ("pdf", "jpg", "jpeg", "png")
    max_size_mb: int = 5


def _options(values: Sequence[str]) -> Tuple[str, ...]:
    return tuple(values or ())


def _document_fields(documents: Sequence[DocumentConfig]) -> Tuple[FormField, ...]:
    return tuple(
        FileUpload(
            id=doc.id,
            label_key=doc.label_key,
            mandatory=doc.mandatory,
            allowed_types=doc.allowed_types,
            max_size_mb=doc.max_size_mb,
        )
        for doc in documents
    )


# ==================== Applicant ====================

def person_type_step(options: Sequence[str]) -> StepData:
    return StepData(
        step_type=StepType.PERSON_TYPE,
        title_key="step.person_type.title",
        description_key="step.person_type.description",
        fields=(
            DropDown(id="selectionPersonType", label_key="field.person_type", mandatory=True,
                     options=_options(options) or tuple(PersonTypes.all_types()),
                     lookup_key="person_types"),
        ),
        required_lookups=("person_types",),
    )


def commercial_registration_step(options: Sequence[str]) -> StepData:
    """Company applicants; the name and type are filled by the registry lookup."""
    return StepData(
        step_type=StepType.COMMERCIAL_REGISTRATION,
        title_key="step.commercial_registration.title",
        fields=(
            DropDown(id="companyRegistrationNumber", label_key="field.company_registration_number",
                     mandatory=True, options=_options(options), lookup_key="commercial_registrations"),
            TextField(id="companyName", label_key="field.company_name", mandatory=True, read_only=True),
            TextField(id="companyType", label_key="field.company_type", read_only=True),
        ),
        required_lookups=("commercial_registrations",),
    )


# ==================== Marine unit ====================

def marine_unit_selection_step(
    units: Sequence[MarineUnit],
    allow_multiple_selection: bool = False,
    show_add_new_button: bool = False,
    show_owned_units_warning: bool = False
) -> StepData:
    """Pick an owned ship; with the add-new button an empty selection is allowed."""
    return StepData(
        step_type=StepType.MARINE_UNIT_SELECTION,
        title_key="step.marine_unit_selection.title",
        fields=(
            MarineUnitSelector(
                id="selectedMarineUnits",
                label_key="field.selected_marine_units",
                mandatory=not show_add_new_button,
                units=tuple(units or ()),
                allow_multiple_selection=allow_multiple_selection,
                show_add_new_button=show_add_new_button,
                show_owned_units_warning=show_owned_units_warning,
            ),
        ),
    )


def unit_data_step(
    ship_types: Sequence[str],
    ports: Sequence[str],
    countries: Sequence[str],
    is_fishing_boat: bool = False,
    include_construction_dates: bool = True
) -> StepData:
    """New marine unit basics; fishing boats get the agriculture request number."""
    fields: List[FormField] = [
        DropDown(id="unitType", label_key="field.unit_type", mandatory=True,
                 options=_options(ship_types), lookup_key="ship_types"),
    ]
    if is_fishing_boat:
        fields.append(TextField(id="agricultureRequestNumber", label_key="field.agriculture_request_number",
                                mandatory=True, is_numeric=True, min_length=5))
    fields.extend([
        TextField(id="callSign", label_key="field.call_sign", mandatory=True, max_length=10),
        TextField(id="imoNumber", label_key="field.imo_number", is_numeric=True, min_length=7, max_length=7),
        TextField(id="mmsi", label_key="field.mmsi", is_numeric=True, min_length=9, max_length=9),
        DropDown(id="registrationPort", label_key="field.registration_port", mandatory=True,
                 options=_options(ports), lookup_key="ports"),
        TextField(id="manufacturerYear", label_key="field.manufacturer_year", is_numeric=True,
                  min_length=4, max_length=4),
        DropDown(id="maritimeActivity", label_key="field.maritime_activity", mandatory=True,
                 options=_options(ship_types), lookup_key="ship_types"),
    ])
    if include_construction_dates:
        fields.extend([
            DatePicker(id="constructionStartDate", label_key="field.construction_start_date"),
            DatePicker(id="constructionEndDate", label_key="field.construction_end_date"),
            DatePicker(id="firstRegistrationDate", label_key="field.first_registration_date"),
        ])
    fields.append(DropDown(id="registrationCountry", label_key="field.registration_country",
                           options=_options(countries), lookup_key="countries"))
    return StepData(
        step_type=StepType.MARINE_UNIT_DATA,
        title_key="step.unit_data.title",
        fields=tuple(fields),
        required_lookups=("ship_types", "ports", "countries"),
    )


def dimensions_step(include_height: bool = True, include_decks_count: bool = True) -> StepData:
    fields: List[FormField] = [
        TextField(id="overallLength", label_key="field.overall_length", mandatory=True, is_decimal=True),
        TextField(id="overallWidth", label_key="field.overall_width", mandatory=True, is_decimal=True),
        TextField(id="depth", label_key="field.depth", mandatory=True, is_decimal=True),
    ]
    if include_height:
        fields.append(TextField(id="height", label_key="field.height", is_decimal=True))
    if include_decks_count:
        fields.append(TextField(id="decksCount", label_key="field.decks_count", is_numeric=True))
    return StepData(step_type=StepType.SHIP_DIMENSIONS, title_key="step.dimensions.title",
                    fields=tuple(fields))


def weights_step(include_max_permitted_load: bool = True) -> StepData:
    fields: List[FormField] = [
        TextField(id="grossTonnage", label_key="field.gross_tonnage", mandatory=True, is_decimal=True),
        TextField(id="netTonnage", label_key="field.net_tonnage", mandatory=True, is_decimal=True),
        TextField(id="staticLoad", label_key="field.static_load", is_decimal=True),
    ]
    if include_max_permitted_load:
        fields.append(TextField(id="maxPermittedLoad", label_key="field.max_permitted_load", is_decimal=True))
    return StepData(step_type=StepType.SHIP_WEIGHTS, title_key="step.weights.title", fields=tuple(fields))


def engine_info_step() -> StepData:
    """Engines are edited as a list; the value is a JSON array."""
    return StepData(
        step_type=StepType.ENGINE_INFO,
        title_key="step.engines.title",
        fields=(FormField(id="engines", label_key="field.engines", mandatory=True),),
        required_lookups=("countries",),
    )


def owner_info_step(nationalities: Sequence[str], include_company_fields: bool = True) -> StepData:
    fields: List[FormField] = [
        DropDown(id="ownerType", label_key="field.owner_type", mandatory=True,
                 options=tuple(PersonTypes.all_types())),
        TextField(id="ownerFullNameAr", label_key="field.owner_name_ar", mandatory=True),
        DropDown(id="ownerNationality", label_key="field.owner_nationality", mandatory=True,
                 options=_options(nationalities), lookup_key="countries"),
        TextField(id="ownerIdNumber", label_key="field.owner_id_number", mandatory=True),
        TextField(id="ownerMobile", label_key="field.owner_mobile", mandatory=True, is_phone=True),
        TextField(id="ownerEmail", label_key="field.owner_email", is_email=True),
    ]
    if include_company_fields:
        fields.extend([
            TextField(id="companyRegistrationNumber", label_key="field.company_registration_number",
                      mandatory=True, min_length=3),
            TextField(id="companyName", label_key="field.company_name", mandatory=True),
            TextField(id="companyType", label_key="field.company_type"),
        ])
    fields.append(FormField(id="owners", label_key="field.owners"))
    return StepData(
        step_type=StepType.OWNER_INFO,
        title_key="step.owners.title",
        fields=tuple(fields),
        required_lookups=("countries",),
    )


def documents_step(documents: Sequence[DocumentConfig]) -> StepData:
    return StepData(step_type=StepType.DOCUMENTS, title_key="step.documents.title",
                    fields=_document_fields(documents))


def maritime_identification_step() -> StepData:
    """Shown after selection when the ship lacks IMO, MMSI or call sign."""
    return StepData(
        step_type=StepType.MARITIME_IDENTIFICATION,
        title_key="step.maritime_identification.title",
        fields=(
            TextField(id="imoNumber", label_key="field.imo_number", mandatory=True,
                      is_numeric=True, min_length=7, max_length=7),
            TextField(id="mmsiNumber", label_key="field.mmsi", mandatory=True,
                      is_numeric=True, min_length=9, max_length=9),
            TextField(id="callSign", label_key="field.call_sign", mandatory=True, max_length=10),
        ),
    )


def insurance_document_step(countries: Sequence[str]) -> StepData:
    return StepData(
        step_type=StepType.INSURANCE_DOCUMENT,
        title_key="step.insurance.title",
        fields=(
            TextField(id="insuranceDocumentNumber", label_key="field.insurance_number", mandatory=True),
            DropDown(id="insuranceCountry", label_key="field.insurance_country", mandatory=True,
                     options=_options(countries), lookup_key="countries"),
            TextField(id="insuranceCompany", label_key="field.insurance_company", mandatory=True),
            DatePicker(id="insuranceExpiryDate", label_key="field.insurance_expiry", mandatory=True,
                       allow_past_dates=False),
            FileUpload(id="insuranceDocumentFile", label_key="field.insurance_file", mandatory=True),
        ),
        required_lookups=("countries",),
    )


def marine_unit_name_selection_step() -> StepData:
    return StepData(
        step_type=StepType.MARINE_UNIT_NAME_SELECTION,
        title_key="step.name_selection.title",
        description_key="step.name_selection.description",
        fields=(
            TextField(id="newArabicMarineUnitName", label_key="field.name_ar", mandatory=True, max_length=50),
            TextField(id="newEnglishMarineUnitName", label_key="field.name_en", mandatory=True, max_length=50),
        ),
    )


# ==================== Navigation ====================

def sailing_regions_step(regions: Sequence[str]) -> StepData:
    return StepData(
        step_type=StepType.NAVIGATION_AREAS,
        title_key="step.sailing_regions.title",
        fields=(
            MultiSelectDropDown(id="sailingRegions", label_key="field.sailing_regions", mandatory=True,
                                options=_options(regions), lookup_key="sailing_regions", min_selections=1),
        ),
        required_lookups=("sailing_regions",),
    )


def sailor_info_step(jobs: Sequence[str], nationalities: Sequence[str]) -> StepData:
    """Crew typed one by one, or uploaded as an Excel sheet."""
    return StepData(
        step_type=StepType.CREW_MANAGEMENT,
        title_key="step.crew.title",
        description_key="step.crew.description",
        fields=(
            FileUpload(id="crewExcelFile", label_key="field.crew_excel", allowed_types=("xlsx",)),
            SailorList(id="sailors", label_key="field.sailors", mandatory=True,
                       jobs=_options(jobs), nationalities=_options(nationalities)),
        ),
        required_lookups=("crew_job_titles", "countries"),
    )


# ==================== Transaction specific ====================

def mortgage_data_step(banks: Sequence[str], reasons: Sequence[str],
                       documents: Sequence[DocumentConfig] = ()) -> StepData:
    fields: List[FormField] = [
        DropDown(id="bankName", label_key="field.bank", mandatory=True,
                 options=_options(banks), lookup_key="banks"),
        TextField(id="mortgageContractNumber", label_key="field.mortgage_contract", mandatory=True),
        DropDown(id="mortgagePurpose", label_key="field.mortgage_purpose", mandatory=True,
                 options=_options(reasons), lookup_key="mortgage_reasons"),
        TextField(id="mortgageValue", label_key="field.mortgage_value", mandatory=True, is_decimal=True),
        DatePicker(id="mortgageStartDate", label_key="field.mortgage_start_date", mandatory=True),
    ]
    fields.extend(_document_fields(documents))
    return StepData(
        step_type=StepType.MORTGAGE_DATA,
        title_key="step.mortgage.title",
        fields=tuple(fields),
        required_lookups=("banks", "mortgage_reasons"),
    )


def cancellation_reason_step(reasons: Sequence[str],
                             documents: Sequence[DocumentConfig] = ()) -> StepData:
    fields: List[FormField] = [
        DropDown(id="cancellationReason", label_key="field.cancellation_reason", mandatory=True,
                 options=_options(reasons), lookup_key="cancellation_reasons"),
    ]
    fields.extend(_document_fields(documents))
    return StepData(
        step_type=StepType.CANCELLATION_REASON,
        title_key="step.cancellation.title",
        fields=tuple(fields),
        required_lookups=("cancellation_reasons",),
    )


def inspection_purpose_and_authority_step(
    purposes: Sequence[str],
    authorities: Sequence[str],
    ports: Sequence[str],
    documents: Sequence[DocumentConfig] = ()
) -> StepData:
    fields: List[FormField] = [
        DropDown(id="inspectionPurpose", label_key="field.inspection_purpose", mandatory=True,
                 options=_options(purposes), lookup_key="inspection_purposes"),
        DropDown(id="inspectionRecordingPort", label_key="field.inspection_port", mandatory=True,
                 options=_options(ports), lookup_key="ports"),
        DropDown(id="inspectionAuthorityAndEntity", label_key="field.inspection_authority", mandatory=True,
                 options=_options(authorities), lookup_key="inspection_authorities"),
    ]
    fields.extend(_document_fields(documents))
    return StepData(
        step_type=StepType.INSPECTION_PURPOSES_AND_AUTHORITIES,
        title_key="step.inspection.title",
        fields=tuple(fields),
        required_lookups=("inspection_purposes", "inspection_authorities", "ports"),
    )


def suspension_reason_step() -> StepData:
    return StepData(
        step_type=StepType.CUSTOM,
        title_key="step.suspension.title",
        fields=(
            TextField(id="suspensionReason", label_key="field.suspension_reason", mandatory=True,
                      max_length=500),
            DatePicker(id="suspensionStartDate", label_key="field.suspension_start_date",
                       mandatory=True, allow_past_dates=False),
        ),
    )


# ==================== Ship data modifications ====================

def change_port_step(ports: Sequence[str]) -> StepData:
    """The current port is filled from the selected ship and cannot be edited."""
    return StepData(
        step_type=StepType.CHANGE_PORT_INFO,
        title_key="step.change_port.title",
        fields=(
            TextField(id="currentPortOfRegistry", label_key="field.current_port_of_registry", read_only=True),
            DropDown(id="newPortOfRegistry", label_key="field.new_port_of_registry", mandatory=True,
                     options=_options(ports), lookup_key="ports"),
        ),
        required_lookups=("ports",),
    )


def change_name_step() -> StepData:
    return StepData(
        step_type=StepType.CHANGE_NAME_INFO,
        title_key="step.change_name.title",
        fields=(
            TextField(id="currentShipName", label_key="field.current_ship_name", read_only=True),
            TextField(id="newShipName", label_key="field.new_ship_name", mandatory=True, max_length=50),
        ),
    )


def change_activity_step(activities: Sequence[str]) -> StepData:
    return StepData(
        step_type=StepType.CHANGE_ACTIVITY_INFO,
        title_key="step.change_activity.title",
        fields=(
            TextField(id="currentMarineActivity", label_key="field.current_marine_activity", read_only=True),
            DropDown(id="newMarineActivity", label_key="field.new_marine_activity", mandatory=True,
                     options=_options(activities), lookup_key="marine_activities"),
        ),
        required_lookups=("marine_activities",),
    )


# ==================== Closing steps ====================

def review_step() -> StepData:
    return StepData(step_type=StepType.REVIEW, title_key="step.review.title",
                    description_key="step.review.description")


def payment_step() -> StepData:
    """Receipt is loaded when this step is submitted."""
    return StepData(step_type=StepType.PAYMENT, title_key="step.payment.title",
                    description_key="step.payment.description")


def payment_confirmation_step() -> StepData:
    return StepData(
        step_type=StepType.PAYMENT_CONFIRMATION,
        title_key="step.payment_confirmation.title",
        fields=(
            TextField(id="finalTotal", label_key="field.final_total", read_only=True),
            TextField(id="arabicValue", label_key="field.arabic_value", read_only=True),
            CheckBox(id="paymentConfirmed", label_key="field.payment_confirmed", mandatory=True),
        ),
    )


def payment_success_step() -> StepData:
    return StepData(
        step_type=StepType.PAYMENT_SUCCESS,
        title_key="step.payment_success.title",
        fields=(TextField(id="paymentReceiptId", label_key="field.payment_receipt_id", read_only=True),),
    )
