import pytest

from EmpireOPS_V1.data import (
    get_ACQUISITION_MARKET,
    get_EMPIRE_LEVELS,
    get_INDUSTRY_CATALOG,
    get_SYNERGY_CATALOG,
)
from EmpireOPS_V1.domain.synergy import SynergyBonus, SynergyCatalog, SynergyDefinition
from EmpireOPS_V1.domain.types import BonusTarget, BonusType, Industry


def _definition(
    synergy_id,
    industries,
    bonuses=((BonusTarget.REVENUE, 10),),
    bonus_type=BonusType.PERCENTAGE,
    **kw,
):
    return SynergyDefinition(
        id=synergy_id,
        name=kw.pop("name", synergy_id.title()),
        required_industries=frozenset(industries),
        bonuses=tuple(
            SynergyBonus(type=bonus_type, target=target, base_value=value)
            for target, value in bonuses
        ),
        **kw,
    )


@pytest.fixture
def make_definition():
    return _definition


@pytest.fixture(scope="session")
def catalog():
    return get_SYNERGY_CATALOG()


@pytest.fixture(scope="session")
def industry_catalog():
    return get_INDUSTRY_CATALOG()


@pytest.fixture(scope="session")
def levels():
    return get_EMPIRE_LEVELS()


@pytest.fixture
def market_payloads():
    return get_ACQUISITION_MARKET()


@pytest.fixture
def small_catalog():
    """Trois synergies simples : deux BASIC et une ADVANCED verrouillée au niveau 3."""
    return SynergyCatalog(
        (
            _definition("alpha", {Industry.BANKING, Industry.TECH}),
            _definition(
                "beta",
                {Industry.BANKING, Industry.MEDIA},
                bonuses=((BonusTarget.OPERATING_COST, 15),),
            ),
            _definition(
                "gamma",
                {Industry.BANKING, Industry.TECH, Industry.MEDIA},
                bonuses=((BonusTarget.ALL_PROFITS, 20),),
                tier="advanced",
                unlock_level=3,
            ),
        )
    )


@pytest.fixture
def infrastructure_owner():
    return [
        {"id": "c1", "name": "First National Bank", "industry": "banking"},
        {"id": "c2", "name": "Metro Properties", "industry": "real_estate"},
        {"id": "c3", "name": "Solar Grid Inc", "industry": "energy"},
    ]
