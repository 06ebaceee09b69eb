# -*- coding: utf-8 -*-
"""
MTCIT Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "MaritimeApiClient",
    "ApiConfig",
    "CrewExcelService",
    "FormValidator",
    "TransactionStrategyFactory",
    "WizardSession",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "MaritimeApiClient":
        from .api_client import MaritimeApiClient
        return MaritimeApiClient
    elif name == "ApiConfig":
        from .api_client import ApiConfig
        return ApiConfig
    elif name == "CrewExcelService":
        from .crew_excel_service import CrewExcelService
        return CrewExcelService
    elif name == "FormValidator":
        from .validation.form_validator import FormValidator
        return FormValidator
    elif name == "TransactionStrategyFactory":
        from .wizard.strategy_factory import TransactionStrategyFactory
        return TransactionStrategyFactory
    elif name == "WizardSession":
        from .wizard.wizard_session import WizardSession
        return WizardSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
