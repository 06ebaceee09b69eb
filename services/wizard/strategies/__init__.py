# -*- coding: utf-8 -*-
"""
Transaction strategies, one per TransactionType.
"""

from .registration import TemporaryRegistrationStrategy, PermanentRegistrationStrategy
from .mortgage import MortgageCertificateStrategy, ReleaseMortgageStrategy
from .navigation import IssueNavigationPermitStrategy, RenewNavigationPermitStrategy
from .registration_changes import CancelRegistrationStrategy, SuspendRegistrationStrategy
from .inspection import RequestInspectionStrategy
from .ship_changes import ChangeActivityStrategy, ChangeNameStrategy, ChangePortStrategy

__all__ = [
    "TemporaryRegistrationStrategy",
    "PermanentRegistrationStrategy",
    "MortgageCertificateStrategy",
    "ReleaseMortgageStrategy",
    "IssueNavigationPermitStrategy",
    "RenewNavigationPermitStrategy",
    "CancelRegistrationStrategy",
    "SuspendRegistrationStrategy",
    "RequestInspectionStrategy",
    "ChangePortStrategy",
    "ChangeNameStrategy",
    "ChangeActivityStrategy",
]
