# -*- coding: utf-8 -*-
"""
Shared fixtures: in-memory repositories and strategy/session builders.
"""

import pytest

from models.marine_unit import MarineUnit
from models.responses import BoatData, CompanyInfo
from repositories.memory_repositories import (
    MemoryCompanyRepository, MemoryLookupRepository,
    MemoryMarineUnitRepository, MemoryTransactionRepositories,
)
from services.translation_manager import set_language
from services.wizard.strategy_factory import TransactionStrategyFactory


@pytest.fixture(autouse=True)
def arabic_messages():
    """Every test starts with the default (Arabic) messages."""
    set_language("ar")
    yield
    set_language("ar")


@pytest.fixture
def ships():
    return [
        MarineUnit(id="101", ship_info_id="101", ship_name="النورس", imo_number="1234567",
                   mmsi_number="461000001", call_sign="A4OM1", port_of_registry="صحار",
                   marine_activity="نقل بضائع"),
        MarineUnit(id="102", ship_info_id="102", ship_name="الصقر", call_sign="A4OM2"),
        MarineUnit(id="103", ship_info_id="103", ship_name="البحار", imo_number="7654321",
                   mmsi_number="461000003", call_sign="A4OM3", last_navigation_license_id="900"),
    ]


@pytest.fixture
def boat_data():
    return BoatData(
        unit_type="قارب صيد", call_sign="A4F1", registration_port="صحار",
        manufacturer_year="2015", maritime_activity="صيد", overall_length="12",
        overall_width="4", depth="2", gross_tonnage="20", net_tonnage="15",
        owner_full_name_ar="سالم", owner_nationality="عُمان", owner_id_number="998877",
        owner_mobile="99887766",
    )


@pytest.fixture
def lookup_repo():
    return MemoryLookupRepository()


@pytest.fixture
def marine_repo(ships, boat_data):
    return MemoryMarineUnitRepository(ships=ships, boats={"12345": boat_data})


@pytest.fixture
def company_repo():
    return MemoryCompanyRepository(companies={
        "1234567": CompanyInfo(registration_number="1234567", name="شركة الخليج البحرية",
                               entity_type="شركة محدودة المسؤولية"),
    })


@pytest.fixture
def repositories():
    return MemoryTransactionRepositories()


@pytest.fixture
def make_factory(lookup_repo, marine_repo, company_repo):
    """Factory builder; pass a MemoryTransactionRepositories to tune the backend."""
    def build(repos):
        return TransactionStrategyFactory(lookup_repo, marine_repo, company_repo, repos)
    return build


@pytest.fixture
def factory(make_factory, repositories):
    return make_factory(repositories)


@pytest.fixture
def make_strategy(factory):
    """Strategy with its options already loaded."""
    async def build(transaction_type, using=None):
        strategy = (using or factory).create(transaction_type)
        await strategy.load_dynamic_options()
        return strategy
    return build
