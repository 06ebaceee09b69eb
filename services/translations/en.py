# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Error Messages - API
    "error.api.bad_request": "The submitted data is invalid. Please review the fields and try again.",
    "error.api.unauthorized": "Your session has expired. Please sign in again.",
    "error.api.forbidden": "You are not allowed to perform this action.",
    "error.api.not_found": "The request was not found.",
    "error.api.not_acceptable": "The request cannot be accepted in its current state.",
    "error.api.conflict": "An open request already exists for this marine unit.",
    "error.api.server": "A server error occurred. Please try again later.",
    "error.api.timeout": "The server did not respond in time. Please try again.",
    "error.api.connection": "Could not reach the server. Check your network connection.",

    # Error Messages - Transaction
    "error.transaction.restart_required": "The transaction data is incomplete. Please start the transaction again.",
    "error.validation.generic": "Please review the entered data.",

    # Validation
    "validation.required": "This field is required",
    "validation.selection_required": "Select a marine unit or add a new one",
    "validation.crew_required": "Add crew members or upload a crew file",
    "validation.numeric": "Digits only",
    "validation.decimal": "Enter a number",
    "validation.min_length": "Must be at least {count} characters",
    "validation.max_length": "Must be at most {count} characters",
    "validation.email": "Invalid email address",
    "validation.phone": "Phone number must have at least {count} digits",
    "validation.date_format": "Date must be formatted as yyyy-MM-dd",
    "validation.past_date": "Past dates are not allowed",
    "validation.file_type": "File type not allowed. Allowed types: {types}",
    "validation.file_size": "File must not exceed {size} MB",
    "validation.min_selections": "Select at least {count}",
    "validation.net_tonnage": "Net tonnage must not exceed gross tonnage",
    "validation.static_load": "Static load must not exceed gross tonnage",
    "validation.max_permitted_load": "Maximum permitted load must not be less than static load",
    "validation.width_exceeds_length": "Width must be less than overall length",
    "validation.height_limit": "Height must not exceed {limit} m for this tonnage",
    "validation.deck_limit": "Deck count must not exceed {limit} for this tonnage",
    "validation.manufacturer_year": "Manufacturer year must be between {min} and {max}",
    "validation.construction_dates": "Construction end date must be after the start date",
    "validation.registration_date": "First registration date must be after construction end date",
    "validation.imo_required": "IMO number is required above 500 gross tons",
    "validation.mmsi_required": "MMSI number is required above 300 gross tons",
    "validation.inspection_documents_required": "Inspection documents are required for units up to 24 m",
    "validation.positive_value": "Value must be greater than zero",
    "validation.latin_only": "Use English letters only",
    "validation.value_unchanged": "The new value is the same as the current one",

    # Lookups
    "lookup.company.required": "Enter the commercial registration number",
    "lookup.company.too_short": "Commercial registration number must have at least {count} digits",
    "lookup.company.not_found": "No company found for this commercial registration",
    "lookup.agriculture.required": "Enter the Ministry of Agriculture request number",
    "lookup.agriculture.too_short": "Request number must have at least {count} digits",
    "lookup.agriculture.not_found": "No boat data found at the Ministry of Agriculture",

    # Notices
    "notice.submitted": "Request sent successfully",
    "notice.inspection_required": "The marine unit must be inspected before the request can be sent",
    "notice.inspection_requested": "Inspection request submitted successfully",
    "notice.payment_success": "Payment completed successfully",

    # Steps
    "step.person_type.title": "Applicant type",
    "step.person_type.description": "Choose whether you apply as an individual or a company",
    "step.commercial_registration.title": "Commercial registration",
    "step.marine_unit_selection.title": "Select marine unit",
    "step.unit_data.title": "Marine unit data",
    "step.dimensions.title": "Dimensions",
    "step.weights.title": "Weights",
    "step.engines.title": "Engines",
    "step.owners.title": "Owners",
    "step.documents.title": "Documents",
    "step.maritime_identification.title": "Maritime identification",
    "step.insurance.title": "Insurance document",
    "step.name_selection.title": "Marine unit name",
    "step.name_selection.description": "Enter the proposed name in Arabic and English",
    "step.sailing_regions.title": "Sailing regions",
    "step.crew.title": "Crew",
    "step.crew.description": "Add crew members one by one or upload an Excel file",
    "step.mortgage.title": "Mortgage data",
    "step.cancellation.title": "Cancellation reason",
    "step.suspension.title": "Suspension details",
    "step.change_port.title": "Change port of registry",
    "step.change_name.title": "Change marine unit name",
    "step.change_activity.title": "Change marine unit activity",
    "step.inspection.title": "Inspection purpose and authority",
    "step.review.title": "Review",
    "step.review.description": "Review the data before sending the request",
    "step.payment.title": "Payment",
    "step.payment.description": "Fees due",
    "step.payment_confirmation.title": "Confirm payment",
    "step.payment_success.title": "Payment complete",

    # Fields
    "field.person_type": "Applicant type",
    "field.company_registration_number": "Commercial registration number",
    "field.company_name": "Company name",
    "field.company_type": "Company type",
    "field.selected_marine_units": "Marine units",
    "field.unit_type": "Unit type",
    "field.agriculture_request_number": "Ministry of Agriculture request number",
    "field.call_sign": "Call sign",
    "field.imo_number": "IMO number",
    "field.mmsi": "MMSI number",
    "field.registration_port": "Port of registry",
    "field.manufacturer_year": "Manufacturer year",
    "field.maritime_activity": "Maritime activity",
    "field.construction_start_date": "Construction start date",
    "field.construction_end_date": "Construction end date",
    "field.first_registration_date": "First registration date",
    "field.registration_country": "Build country",
    "field.overall_length": "Overall length (m)",
    "field.overall_width": "Overall width (m)",
    "field.depth": "Depth (m)",
    "field.height": "Height (m)",
    "field.decks_count": "Number of decks",
    "field.gross_tonnage": "Gross tonnage",
    "field.net_tonnage": "Net tonnage",
    "field.static_load": "Static load",
    "field.max_permitted_load": "Maximum permitted load",
    "field.engines": "Engines",
    "field.owner_type": "Owner type",
    "field.owner_name_ar": "Owner name",
    "field.owner_nationality": "Nationality",
    "field.owner_id_number": "ID number",
    "field.owner_mobile": "Mobile",
    "field.owner_email": "Email",
    "field.owners": "Owners",
    "field.insurance_number": "Insurance document number",
    "field.insurance_country": "Insurance country",
    "field.insurance_company": "Insurance company",
    "field.insurance_expiry": "Insurance expiry date",
    "field.insurance_file": "Insurance document",
    "field.name_ar": "Arabic name",
    "field.name_en": "English name",
    "field.sailing_regions": "Sailing regions",
    "field.crew_excel": "Crew file (Excel)",
    "field.sailors": "Crew",
    "field.bank": "Bank",
    "field.mortgage_contract": "Mortgage contract number",
    "field.mortgage_purpose": "Mortgage purpose",
    "field.mortgage_value": "Mortgage value",
    "field.mortgage_start_date": "Mortgage start date",
    "field.cancellation_reason": "Cancellation reason",
    "field.suspension_reason": "Suspension reason",
    "field.suspension_start_date": "Suspension start date",
    "field.current_port_of_registry": "Current port of registry",
    "field.new_port_of_registry": "New port of registry",
    "field.current_ship_name": "Current name",
    "field.new_ship_name": "New name",
    "field.current_marine_activity": "Current activity",
    "field.new_marine_activity": "New activity",
    "field.inspection_purpose": "Inspection purpose",
    "field.inspection_port": "Inspection port",
    "field.inspection_authority": "Inspection authority",
    "field.final_total": "Total amount",
    "field.arabic_value": "Amount in words",
    "field.payment_confirmed": "I confirm paying the fees",
    "field.payment_receipt_id": "Receipt number",

    # Documents
    "document.shipbuilding_certificate": "Shipbuilding certificate",
    "document.inspection_documents": "Inspection documents",
    "document.temporary_certificate": "Temporary registration certificate",
    "document.ownership_proof": "Proof of ownership",
    "document.mortgage_contract": "Mortgage contract",
    "document.bank_clearance": "Bank clearance letter",
    "document.cancellation_evidence": "Cancellation evidence",
    "document.suspension_letter": "Suspension letter",
    "document.inspection_request_letter": "Inspection request letter",
}
