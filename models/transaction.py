# -*- coding: utf-8 -*-
"""
Transaction types and their backend configuration.

Every TransactionType owns exactly one TransactionContext (endpoint templates
with {requestId}/{shipInfoId} placeholders) and one backend request type id.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TransactionContext:
    """Per-transaction endpoint configuration."""

    display_name: str
    create_endpoint: str
    update_status_endpoint: str
    send_request_endpoint: str
    send_request_method: str = "POST"
    get_request_endpoint: Optional[str] = None
    delete_request_endpoint: Optional[str] = None
    proceed_request_endpoint: Optional[str] = None
    payment_receipt_endpoint: Optional[str] = None
    payment_submit_endpoint: Optional[str] = None
    inspection_preview_base_context: Optional[str] = None
    # StepType value -> endpoint template used to attach that step's payload
    attach_endpoints: Dict[str, str] = field(default_factory=dict, compare=False)
    config: Dict[str, Any] = field(default_factory=dict, compare=False)

    @staticmethod
    def _fill(template: Optional[str], request_id=None, ship_info_id=None) -> Optional[str]:
        if template is None:
            return None
        url = template
        if request_id is not None:
            url = url.replace("{requestId}", str(request_id))
        if ship_info_id is not None:
            url = url.replace("{shipInfoId}", str(ship_info_id))
        return url

    def build_update_status_url(self, request_id) -> str:
        return self._fill(self.update_status_endpoint, request_id=request_id)

    def build_send_request_url(self, request_id) -> str:
        return self._fill(self.send_request_endpoint, request_id=request_id)

    def build_get_request_url(self, request_id) -> Optional[str]:
        return self._fill(self.get_request_endpoint, request_id=request_id)

    def build_delete_request_url(self, request_id) -> Optional[str]:
        return self._fill(self.delete_request_endpoint, request_id=request_id)

    def build_proceed_request_url(self, ship_info_id) -> Optional[str]:
        return self._fill(self.proceed_request_endpoint, ship_info_id=ship_info_id)

    def build_payment_receipt_url(self, request_id=None, ship_info_id=None) -> Optional[str]:
        return self._fill(self.payment_receipt_endpoint, request_id, ship_info_id)

    def build_payment_submit_url(self, request_id=None) -> Optional[str]:
        return self._fill(self.payment_submit_endpoint, request_id=request_id)

    def build_inspection_preview_url(self, request_id) -> Optional[str]:
        if not self.inspection_preview_base_context:
            return None
        return f"api/v1/{self.inspection_preview_base_context}/{request_id}/inspection-preview"

    def build_attach_url(self, step_type_value: str, request_id=None) -> Optional[str]:
        return self._fill(self.attach_endpoints.get(step_type_value), request_id=request_id)

    def supports_attach(self, step_type_value: str) -> bool:
        return step_type_value in self.attach_endpoints


def _registration_attach(base: str) -> Dict[str, str]:
    return {
        "SHIP_DIMENSIONS": f"{base}/{{requestId}}/dimensions",
        "SHIP_WEIGHTS": f"{base}/{{requestId}}/weights",
        "ENGINE_INFO": f"{base}/{{requestId}}/engines",
        "OWNER_INFO": f"{base}/{{requestId}}/owners",
        "DOCUMENTS": f"{base}/{{requestId}}/validate-build-status",
        "INSURANCE_DOCUMENT": f"{base}/{{requestId}}/insurance-document",
        "MARINE_UNIT_NAME_SELECTION": f"{base}/{{requestId}}/shipNameReservation",
    }


def _navigation_attach(base: str) -> Dict[str, str]:
    return {
        "NAVIGATION_AREAS": f"{base}/{{requestId}}/navigation-areas",
        "CREW_MANAGEMENT": f"{base}/{{requestId}}/crew",
    }


def _ship_modification(display_name: str, action: str) -> TransactionContext:
    """Ship data modifications share one backend; only the create action differs."""
    base = "api/v1/ship-modifications"
    return TransactionContext(
        display_name=display_name,
        create_endpoint=f"{base}/{action}",
        update_status_endpoint=f"{base}/{{requestId}}/update-status",
        send_request_endpoint=f"{base}/{{requestId}}/send-request",
        get_request_endpoint=f"{base}/{{requestId}}",
    )


class TransactionType(Enum):
    """Transaction kinds offered by the wizard."""

    TEMPORARY_REGISTRATION_CERTIFICATE = "TEMPORARY_REGISTRATION_CERTIFICATE"
    PERMANENT_REGISTRATION_CERTIFICATE = "PERMANENT_REGISTRATION_CERTIFICATE"
    SUSPEND_PERMANENT_REGISTRATION = "SUSPEND_PERMANENT_REGISTRATION"
    CANCEL_PERMANENT_REGISTRATION = "CANCEL_PERMANENT_REGISTRATION"
    MORTGAGE_CERTIFICATE = "MORTGAGE_CERTIFICATE"
    RELEASE_MORTGAGE = "RELEASE_MORTGAGE"
    REQUEST_FOR_INSPECTION = "REQUEST_FOR_INSPECTION"
    ISSUE_NAVIGATION_PERMIT = "ISSUE_NAVIGATION_PERMIT"
    RENEW_NAVIGATION_PERMIT = "RENEW_NAVIGATION_PERMIT"
    SHIP_PORT_CHANGE = "SHIP_PORT_CHANGE"
    SHIP_NAME_CHANGE = "SHIP_NAME_CHANGE"
    SHIP_ACTIVITY_CHANGE = "SHIP_ACTIVITY_CHANGE"

    @property
    def context(self) -> TransactionContext:
        return TRANSACTION_CONTEXTS[self]

    @property
    def request_type_id(self) -> int:
        return REQUEST_TYPE_IDS[self]

    @classmethod
    def from_request_type_id(cls, request_type_id) -> Optional["TransactionType"]:
        """Reverse lookup; 0 is shared by several types and never resolves."""
        try:
            wanted = int(request_type_id)
        except (TypeError, ValueError):
            return None
        if wanted == 0:
            return None
        for transaction_type, type_id in REQUEST_TYPE_IDS.items():
            if type_id == wanted:
                return transaction_type
        return None


REQUEST_TYPE_IDS: Dict[TransactionType, int] = {
    TransactionType.TEMPORARY_REGISTRATION_CERTIFICATE: 1,
    TransactionType.PERMANENT_REGISTRATION_CERTIFICATE: 2,
    TransactionType.ISSUE_NAVIGATION_PERMIT: 3,
    TransactionType.MORTGAGE_CERTIFICATE: 4,
    TransactionType.RELEASE_MORTGAGE: 5,
    TransactionType.RENEW_NAVIGATION_PERMIT: 6,
    TransactionType.CANCEL_PERMANENT_REGISTRATION: 7,
    TransactionType.REQUEST_FOR_INSPECTION: 8,
    TransactionType.SUSPEND_PERMANENT_REGISTRATION: 0,
    TransactionType.SHIP_PORT_CHANGE: 0,
    TransactionType.SHIP_NAME_CHANGE: 0,
    TransactionType.SHIP_ACTIVITY_CHANGE: 0,
}


TRANSACTION_CONTEXTS: Dict[TransactionType, TransactionContext] = {
    TransactionType.TEMPORARY_REGISTRATION_CERTIFICATE: TransactionContext(
        display_name="شهادة تسجيل مؤقتة",
        create_endpoint="api/v1/registration-requests",
        update_status_endpoint="api/v1/registration-requests/{requestId}/update-status",
        send_request_endpoint="api/v1/registration-requests/{requestId}/send-request",
        get_request_endpoint="api/v1/registration-requests/{requestId}",
        delete_request_endpoint="api/v1/registration-requests/{requestId}/delete",
        proceed_request_endpoint="api/v1/registration-requests/ship-info/{shipInfoId}/proceed-request",
        payment_receipt_endpoint="api/v1/registration-requests/{requestId}/payment-receipt",
        payment_submit_endpoint="api/v1/registration-requests/payment",
        attach_endpoints=_registration_attach("api/v1/registration-requests"),
    ),
    TransactionType.PERMANENT_REGISTRATION_CERTIFICATE: TransactionContext(
        display_name="شهادة تسجيل دائمة",
        create_endpoint="api/v1/perm-registration-requests/create-permanent",
        update_status_endpoint="api/v1/perm-registration-requests/{requestId}/update-status",
        send_request_endpoint="api/v1/perm-registration-requests/{requestId}/send-request",
        get_request_endpoint="api/v1/perm-registration-requests/{requestId}",
        delete_request_endpoint="api/v1/perm-registration-requests/{requestId}/delete",
        proceed_request_endpoint="api/v1/perm-registration-requests/ship-info/{shipInfoId}/proceed-request",
        payment_receipt_endpoint="api/v1/perm-registration-requests/{requestId}/payment-receipt",
        payment_submit_endpoint="api/v1/perm-registration-requests/payment",
        attach_endpoints=_registration_attach("api/v1/perm-registration-requests"),
    ),
    TransactionType.SUSPEND_PERMANENT_REGISTRATION: TransactionContext(
        display_name="تعليق تسجيل دائم",
        create_endpoint="api/v1/registration/suspend",
        update_status_endpoint="api/v1/registration/{requestId}/update-status",
        send_request_endpoint="api/v1/registration/{requestId}/send-request",
    ),
    TransactionType.CANCEL_PERMANENT_REGISTRATION: TransactionContext(
        display_name="إلغاء تسجيل دائم",
        create_endpoint="api/v1/deletion-requests/cancel",
        update_status_endpoint="api/v1/deletion-requests/{requestId}/update-status",
        send_request_endpoint="api/v1/deletion-requests/{requestId}/send-request",
        get_request_endpoint="api/v1/deletion-requests/{requestId}",
        delete_request_endpoint="api/v1/deletion-requests/{requestId}/delete",
        proceed_request_endpoint="api/v1/deletion-requests/ship-info/{shipInfoId}/proceed-request",
        attach_endpoints={
            "CANCELLATION_REASON": "api/v1/deletion-requests/{requestId}/reason",
            "DOCUMENTS": "api/v1/deletion-requests/{requestId}/documents",
        },
    ),
    TransactionType.MORTGAGE_CERTIFICATE: TransactionContext(
        display_name="طلب شهادة رهن",
        create_endpoint="api/v1/mortgage-request/create-mortgage-request",
        update_status_endpoint="api/v1/mortgage-request/{requestId}/update-status",
        send_request_endpoint="api/v1/mortgage-request/{requestId}/send-request",
        send_request_method="PUT",
        get_request_endpoint="api/v1/mortgage-request/{requestId}",
        delete_request_endpoint="api/v1/mortgage-request/{requestId}/delete",
        proceed_request_endpoint="api/v1/mortgage-request/ship-info/{shipInfoId}/proceed-request",
        payment_receipt_endpoint="api/v1/mortgage-request/{requestId}/payment-receipt",
        payment_submit_endpoint="api/v1/mortgage-request/payment",
        attach_endpoints={"DOCUMENTS": "api/v1/mortgage-request/{requestId}/documents"},
    ),
    TransactionType.RELEASE_MORTGAGE: TransactionContext(
        display_name="طلب فك رهن",
        create_endpoint="api/v1/mortgage-redemption-request/create-mortgage-redemption-request",
        update_status_endpoint="api/v1/mortgage-redemption-request/{requestId}/update-status",
        send_request_endpoint="api/v1/mortgage-redemption-request/{requestId}/send-request",
        send_request_method="PUT",
        get_request_endpoint="api/v1/mortgage-redemption-request/{requestId}",
        delete_request_endpoint="api/v1/mortgage-redemption-request/{requestId}/delete",
        proceed_request_endpoint="api/v1/mortgage-redemption-request/ship-info/{shipInfoId}/proceed-request",
        attach_endpoints={"DOCUMENTS": "api/v1/mortgage-redemption-request/{requestId}/documents"},
    ),
    TransactionType.REQUEST_FOR_INSPECTION: TransactionContext(
        display_name="طلب معاينة",
        create_endpoint="api/v1/inspection/create",
        update_status_endpoint="api/v1/inspection/{requestId}/update-status",
        send_request_endpoint="api/v1/inspection/{requestId}/send-request",
        attach_endpoints={"DOCUMENTS": "api/v1/inspection/{requestId}/documents"},
    ),
    TransactionType.ISSUE_NAVIGATION_PERMIT: TransactionContext(
        display_name="إصدار تصريح إبحار",
        create_endpoint="api/v1/navigation-permit/issue",
        update_status_endpoint="api/v1/navigation-permit/{requestId}/update-status",
        send_request_endpoint="api/v1/navigation-permit/{requestId}/send-request",
        proceed_request_endpoint="api/v1/navigation-license/ship-info/{shipInfoId}/proceed-request",
        payment_receipt_endpoint="api/v1/navigation-license/{requestId}/payment-receipt",
        payment_submit_endpoint="api/v1/navigation-license/payment",
        inspection_preview_base_context="navigation-license",
        attach_endpoints=_navigation_attach("api/v1/navigation-license"),
    ),
    TransactionType.RENEW_NAVIGATION_PERMIT: TransactionContext(
        display_name="تجديد تصريح إبحار",
        create_endpoint="api/v1/navigation-permit/renew",
        update_status_endpoint="api/v1/navigation-permit/{requestId}/update-status",
        send_request_endpoint="api/v1/navigation-permit/{requestId}/send-request",
        proceed_request_endpoint="api/v1/navigation-license-renewal/ship-info/{shipInfoId}/proceed-request",
        payment_receipt_endpoint="api/v1/navigation-license-renewal/{requestId}/payment-receipt",
        payment_submit_endpoint="api/v1/navigation-license-renewal/payment",
        inspection_preview_base_context="navigation-license-renewal",
        attach_endpoints=_navigation_attach("api/v1/navigation-license-renewal"),
    ),
    TransactionType.SHIP_PORT_CHANGE: _ship_modification("تغيير ميناء السفينة", "port-change"),
    TransactionType.SHIP_NAME_CHANGE: _ship_modification("تغيير اسم السفينة", "name-change"),
    TransactionType.SHIP_ACTIVITY_CHANGE: _ship_modification("تغيير نشاط السفينة", "activity-change"),
}
