# -*- coding: utf-8 -*-
"""
Transaction Strategy Factory - builds the strategy for a TransactionType.

Repositories are injected once; the transaction repository of each
strategy is obtained from `repository_for(context)`, so every domain
(registration, mortgage, navigation license ...) gets its own instance.
"""

from typing import Callable, Dict, List, Optional, Type

from models.transaction import TransactionContext, TransactionType
from repositories.ports import (
    CompanyRepository, LookupRepository, MarineUnitRepository, TransactionRepository,
)
from services.crew_excel_service import CrewExcelService
from services.validation.form_validator import FormValidator
from services.wizard.base_strategy import BaseTransactionStrategy
from services.wizard.strategies import (
    CancelRegistrationStrategy, ChangeActivityStrategy, ChangeNameStrategy, ChangePortStrategy,
    IssueNavigationPermitStrategy, MortgageCertificateStrategy,
    PermanentRegistrationStrategy, ReleaseMortgageStrategy, RenewNavigationPermitStrategy,
    RequestInspectionStrategy, SuspendRegistrationStrategy, TemporaryRegistrationStrategy,
)
from utils.logger import get_logger

logger = get_logger(__name__)

RepositoryProvider = Callable[[TransactionContext], TransactionRepository]

STRATEGY_REGISTRY: Dict[TransactionType, Type[BaseTransactionStrategy]] = {
    TransactionType.TEMPORARY_REGISTRATION_CERTIFICATE: TemporaryRegistrationStrategy,
    TransactionType.PERMANENT_REGISTRATION_CERTIFICATE: PermanentRegistrationStrategy,
    TransactionType.SUSPEND_PERMANENT_REGISTRATION: SuspendRegistrationStrategy,
    TransactionType.CANCEL_PERMANENT_REGISTRATION: CancelRegistrationStrategy,
    TransactionType.MORTGAGE_CERTIFICATE: MortgageCertificateStrategy,
    TransactionType.RELEASE_MORTGAGE: ReleaseMortgageStrategy,
    TransactionType.REQUEST_FOR_INSPECTION: RequestInspectionStrategy,
    TransactionType.ISSUE_NAVIGATION_PERMIT: IssueNavigationPermitStrategy,
    TransactionType.RENEW_NAVIGATION_PERMIT: RenewNavigationPermitStrategy,
    TransactionType.SHIP_PORT_CHANGE: ChangePortStrategy,
    TransactionType.SHIP_NAME_CHANGE: ChangeNameStrategy,
    TransactionType.SHIP_ACTIVITY_CHANGE: ChangeActivityStrategy,
}


class TransactionStrategyFactory:
    """
    Factory for transaction strategies.

    Example:
        factory = TransactionStrategyFactory(lookups, ships, companies, repository_for)
        strategy = factory.create(TransactionType.MORTGAGE_CERTIFICATE)
    """

    def __init__(
        self,
        lookup_repo: LookupRepository,
        marine_repo: MarineUnitRepository,
        company_repo: CompanyRepository,
        repository_for: RepositoryProvider,
        validator: Optional[FormValidator] = None,
        crew_service: Optional[CrewExcelService] = None
    ):
        self.lookup_repo = lookup_repo
        self.marine_repo = marine_repo
        self.company_repo = company_repo
        self.repository_for = repository_for
        self.validator = validator
        self.crew_service = crew_service

    @classmethod
    def from_api_client(cls, client) -> "TransactionStrategyFactory":
        """Factory wired to the HTTP repositories of a MaritimeApiClient."""
        from repositories.api_repositories import (
            HttpCompanyRepository, HttpLookupRepository,
            HttpMarineUnitRepository, HttpTransactionRepository,
        )

        repositories: Dict[str, TransactionRepository] = {}

        def repository_for(context: TransactionContext) -> TransactionRepository:
            if context.create_endpoint not in repositories:
                repositories[context.create_endpoint] = HttpTransactionRepository(client, context)
            return repositories[context.create_endpoint]

        return cls(
            HttpLookupRepository(client),
            HttpMarineUnitRepository(client),
            HttpCompanyRepository(client),
            repository_for,
        )

    def create(self, transaction_type: TransactionType) -> BaseTransactionStrategy:
        """
        Build a fresh strategy.

        Args:
            transaction_type: Transaction to run

        Returns:
            Strategy with empty accumulated data and draft state

        Raises:
            ValueError: If no strategy is registered for the type
        """
        strategy_class = STRATEGY_REGISTRY.get(transaction_type)
        if strategy_class is None:
            raise ValueError(f"No strategy registered for {transaction_type}")

        inspection_repo = None
        if strategy_class.can_require_inspection:
            inspection_repo = self.repository_for(TransactionType.REQUEST_FOR_INSPECTION.context)

        strategy = strategy_class(
            self.lookup_repo,
            self.marine_repo,
            self.company_repo,
            self.repository_for(transaction_type.context),
            inspection_repo=inspection_repo,
            validator=self.validator,
            crew_service=self.crew_service,
        )
        logger.debug(f"Created {strategy_class.__name__} for {transaction_type.value}")
        return strategy

    @staticmethod
    def get_supported_types() -> List[TransactionType]:
        return list(STRATEGY_REGISTRY.keys())
