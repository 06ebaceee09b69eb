# -*- coding: utf-8 -*-
"""
MTCIT Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "LookupRepository",
    "MarineUnitRepository",
    "CompanyRepository",
    "TransactionRepository",
    "HttpLookupRepository",
    "HttpMarineUnitRepository",
    "HttpCompanyRepository",
    "HttpTransactionRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("LookupRepository", "MarineUnitRepository", "CompanyRepository", "TransactionRepository"):
        from . import ports
        return getattr(ports, name)
    elif name.startswith("Http"):
        from . import api_repositories
        return getattr(api_repositories, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
