# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Error Messages - API
    "error.api.bad_request": "البيانات المرسلة غير صحيحة. يرجى مراجعة الحقول والمحاولة مرة أخرى.",
    "error.api.unauthorized": "انتهت صلاحية الجلسة. يرجى تسجيل الدخول مرة أخرى.",
    "error.api.forbidden": "ليس لديك صلاحية لتنفيذ هذا الإجراء.",
    "error.api.not_found": "الطلب غير موجود.",
    "error.api.not_acceptable": "لا يمكن قبول الطلب بحالته الحالية.",
    "error.api.conflict": "يوجد طلب قائم لهذه الوحدة البحرية.",
    "error.api.server": "حدث خطأ في الخادم. يرجى المحاولة لاحقاً.",
    "error.api.timeout": "انتهت مهلة الاتصال بالخادم. يرجى المحاولة مرة أخرى.",
    "error.api.connection": "تعذر الاتصال بالخادم. تحقق من الاتصال بالشبكة.",

    # Error Messages - Transaction
    "error.transaction.restart_required": "بيانات المعاملة غير مكتملة. يرجى بدء المعاملة من جديد.",
    "error.validation.generic": "يرجى مراجعة البيانات المدخلة.",

    # Validation
    "validation.required": "هذا الحقل مطلوب",
    "validation.selection_required": "يجب اختيار وحدة بحرية أو إضافة وحدة جديدة",
    "validation.crew_required": "يجب إضافة طاقم أو رفع ملف الطاقم",
    "validation.numeric": "يجب إدخال أرقام فقط",
    "validation.decimal": "يجب إدخال رقم صحيح أو عشري",
    "validation.min_length": "يجب ألا يقل عن {count} أحرف",
    "validation.max_length": "يجب ألا يزيد عن {count} حرفاً",
    "validation.email": "البريد الإلكتروني غير صحيح",
    "validation.phone": "رقم الهاتف يجب أن يحتوي على {count} أرقام على الأقل",
    "validation.date_format": "صيغة التاريخ يجب أن تكون yyyy-MM-dd",
    "validation.past_date": "لا يمكن اختيار تاريخ سابق",
    "validation.file_type": "نوع الملف غير مسموح. الأنواع المسموحة: {types}",
    "validation.file_size": "حجم الملف يجب ألا يتجاوز {size} ميجابايت",
    "validation.min_selections": "يجب اختيار {count} على الأقل",
    "validation.net_tonnage": "الحمولة الصافية يجب ألا تتجاوز الحمولة الإجمالية",
    "validation.static_load": "الحمولة الساكنة يجب ألا تتجاوز الحمولة الإجمالية",
    "validation.max_permitted_load": "الحمولة القصوى المسموحة يجب ألا تقل عن الحمولة الساكنة",
    "validation.width_exceeds_length": "العرض يجب أن يكون أقل من الطول الكلي",
    "validation.height_limit": "الارتفاع يجب ألا يتجاوز {limit} متر لهذه الحمولة",
    "validation.deck_limit": "عدد الطوابق يجب ألا يتجاوز {limit} لهذه الحمولة",
    "validation.manufacturer_year": "سنة الصنع يجب أن تكون بين {min} و {max}",
    "validation.construction_dates": "تاريخ انتهاء البناء يجب أن يكون بعد تاريخ بدء البناء",
    "validation.registration_date": "تاريخ أول تسجيل يجب أن يكون بعد تاريخ انتهاء البناء",
    "validation.imo_required": "رقم IMO مطلوب للسفن التي تتجاوز حمولتها 500 طن",
    "validation.mmsi_required": "رقم MMSI مطلوب للسفن التي تتجاوز حمولتها 300 طن",
    "validation.inspection_documents_required": "مستندات المعاينة مطلوبة للوحدات التي لا يتجاوز طولها 24 متراً",
    "validation.positive_value": "يجب أن تكون القيمة أكبر من صفر",
    "validation.latin_only": "يجب إدخال الاسم بأحرف إنجليزية",
    "validation.value_unchanged": "القيمة الجديدة مطابقة للقيمة الحالية",

    # Lookups
    "lookup.company.required": "يرجى إدخال رقم السجل التجاري",
    "lookup.company.too_short": "رقم السجل التجاري يجب ألا يقل عن {count} أرقام",
    "lookup.company.not_found": "لم يتم العثور على شركة بهذا السجل التجاري",
    "lookup.agriculture.required": "يرجى إدخال رقم طلب وزارة الزراعة",
    "lookup.agriculture.too_short": "رقم الطلب يجب ألا يقل عن {count} أرقام",
    "lookup.agriculture.not_found": "لم يتم العثور على بيانات القارب لدى وزارة الزراعة",

    # Notices
    "notice.submitted": "تم إرسال الطلب بنجاح",
    "notice.inspection_required": "تحتاج الوحدة البحرية إلى معاينة قبل إرسال الطلب",
    "notice.inspection_requested": "تم تقديم طلب المعاينة بنجاح",
    "notice.payment_success": "تمت عملية الدفع بنجاح",

    # Steps
    "step.person_type.title": "نوع مقدم الطلب",
    "step.person_type.description": "اختر ما إذا كنت تقدم الطلب كفرد أو كشركة",
    "step.commercial_registration.title": "السجل التجاري",
    "step.marine_unit_selection.title": "اختيار الوحدة البحرية",
    "step.unit_data.title": "بيانات الوحدة البحرية",
    "step.dimensions.title": "أبعاد الوحدة البحرية",
    "step.weights.title": "أوزان الوحدة البحرية",
    "step.engines.title": "المحركات",
    "step.owners.title": "بيانات الملاك",
    "step.documents.title": "المستندات",
    "step.maritime_identification.title": "الهوية البحرية",
    "step.insurance.title": "وثيقة التأمين",
    "step.name_selection.title": "اختيار اسم الوحدة البحرية",
    "step.name_selection.description": "أدخل الاسم المقترح باللغتين العربية والإنجليزية",
    "step.sailing_regions.title": "مناطق الإبحار",
    "step.crew.title": "الطاقم",
    "step.crew.description": "أضف أفراد الطاقم يدوياً أو ارفع ملف Excel",
    "step.mortgage.title": "بيانات الرهن",
    "step.cancellation.title": "سبب الإلغاء",
    "step.suspension.title": "بيانات التعليق",
    "step.change_port.title": "تغيير ميناء التسجيل",
    "step.change_name.title": "تغيير اسم الوحدة البحرية",
    "step.change_activity.title": "تغيير نشاط الوحدة البحرية",
    "step.inspection.title": "غرض المعاينة والجهة",
    "step.review.title": "مراجعة الطلب",
    "step.review.description": "راجع البيانات قبل إرسال الطلب",
    "step.payment.title": "الدفع",
    "step.payment.description": "تفاصيل الرسوم المستحقة",
    "step.payment_confirmation.title": "تأكيد الدفع",
    "step.payment_success.title": "تم الدفع",

    # Fields
    "field.person_type": "نوع مقدم الطلب",
    "field.company_registration_number": "رقم السجل التجاري",
    "field.company_name": "اسم الشركة",
    "field.company_type": "نوع الشركة",
    "field.selected_marine_units": "الوحدات البحرية",
    "field.unit_type": "نوع الوحدة",
    "field.agriculture_request_number": "رقم طلب وزارة الزراعة",
    "field.call_sign": "رمز النداء",
    "field.imo_number": "رقم IMO",
    "field.mmsi": "رقم MMSI",
    "field.registration_port": "ميناء التسجيل",
    "field.manufacturer_year": "سنة الصنع",
    "field.maritime_activity": "النشاط البحري",
    "field.construction_start_date": "تاريخ بدء البناء",
    "field.construction_end_date": "تاريخ انتهاء البناء",
    "field.first_registration_date": "تاريخ أول تسجيل",
    "field.registration_country": "بلد البناء",
    "field.overall_length": "الطول الكلي (م)",
    "field.overall_width": "العرض الكلي (م)",
    "field.depth": "العمق (م)",
    "field.height": "الارتفاع (م)",
    "field.decks_count": "عدد الطوابق",
    "field.gross_tonnage": "الحمولة الإجمالية",
    "field.net_tonnage": "الحمولة الصافية",
    "field.static_load": "الحمولة الساكنة",
    "field.max_permitted_load": "الحمولة القصوى المسموحة",
    "field.engines": "المحركات",
    "field.owner_type": "نوع المالك",
    "field.owner_name_ar": "اسم المالك",
    "field.owner_nationality": "الجنسية",
    "field.owner_id_number": "رقم الهوية",
    "field.owner_mobile": "رقم الهاتف",
    "field.owner_email": "البريد الإلكتروني",
    "field.owners": "الملاك",
    "field.insurance_number": "رقم وثيقة التأمين",
    "field.insurance_country": "بلد التأمين",
    "field.insurance_company": "شركة التأمين",
    "field.insurance_expiry": "تاريخ انتهاء التأمين",
    "field.insurance_file": "وثيقة التأمين",
    "field.name_ar": "الاسم بالعربية",
    "field.name_en": "الاسم بالإنجليزية",
    "field.sailing_regions": "مناطق الإبحار",
    "field.crew_excel": "ملف الطاقم (Excel)",
    "field.sailors": "الطاقم",
    "field.bank": "البنك",
    "field.mortgage_contract": "رقم عقد الرهن",
    "field.mortgage_purpose": "غرض الرهن",
    "field.mortgage_value": "قيمة الرهن",
    "field.mortgage_start_date": "تاريخ بدء الرهن",
    "field.cancellation_reason": "سبب الإلغاء",
    "field.suspension_reason": "سبب التعليق",
    "field.suspension_start_date": "تاريخ بدء التعليق",
    "field.current_port_of_registry": "ميناء التسجيل الحالي",
    "field.new_port_of_registry": "ميناء التسجيل الجديد",
    "field.current_ship_name": "الاسم الحالي",
    "field.new_ship_name": "الاسم الجديد",
    "field.current_marine_activity": "النشاط الحالي",
    "field.new_marine_activity": "النشاط الجديد",
    "field.inspection_purpose": "غرض المعاينة",
    "field.inspection_port": "ميناء المعاينة",
    "field.inspection_authority": "جهة المعاينة",
    "field.final_total": "المبلغ الإجمالي",
    "field.arabic_value": "المبلغ كتابة",
    "field.payment_confirmed": "أؤكد دفع الرسوم",
    "field.payment_receipt_id": "رقم الإيصال",

    # Documents
    "document.shipbuilding_certificate": "شهادة بناء السفينة",
    "document.inspection_documents": "مستندات المعاينة",
    "document.temporary_certificate": "شهادة التسجيل المؤقتة",
    "document.ownership_proof": "إثبات الملكية",
    "document.mortgage_contract": "عقد الرهن",
    "document.bank_clearance": "براءة ذمة من البنك",
    "document.cancellation_evidence": "مستند يثبت سبب الإلغاء",
    "document.suspension_letter": "خطاب التعليق",
    "document.inspection_request_letter": "خطاب طلب المعاينة",
}
