import pytest
from pydantic import ValidationError

from EmpireOPS_V1.core.empire import (
    activation_xp,
    apply_bonus_to_value,
    bonus_for_target,
    empire_summary,
    evaluate_empire,
    newly_activated,
    synergy_coverage,
)
from EmpireOPS_V1.core.results import StackedBonuses
from EmpireOPS_V1.core.synergies import match_synergies
from EmpireOPS_V1.data import get_DEMO_PORTFOLIO
from EmpireOPS_V1.domain.catalog import IndustryCatalog
from EmpireOPS_V1.domain.empire import EmpireLevelTable
from EmpireOPS_V1.domain.types import BonusTarget, Industry


@pytest.fixture
def infra_evaluation(catalog, infrastructure_owner):
    return evaluate_empire(infrastructure_owner, 3, catalog)


def test_evaluate_demo_portfolio(catalog, industry_catalog):
    portfolio = get_DEMO_PORTFOLIO()
    evaluation = evaluate_empire(
        portfolio.companies, portfolio.level, catalog, industry_catalog
    )
    assert evaluation.industries == [
        Industry.BANKING,
        Industry.TECH,
        Industry.REAL_ESTATE,
        Industry.ENERGY,
    ]
    assert evaluation.active_ids == [
        "fintech-empire",
        "property-mogul",
        "green-finance",
        "infrastructure-king",
    ]
    assert evaluation.bonuses.stack_multiplier == 1.3
    titan = next(p for p in evaluation.potential if p.definition_id == "economic-titan")
    assert titan.percent_complete == 80
    assert titan.locked
    assert evaluation.warnings == []


def test_evaluation_of_empty_empire(catalog):
    evaluation = evaluate_empire([], 1, catalog)
    assert evaluation.active == []
    assert evaluation.bonuses.total_bonus_percent == 0
    assert evaluation.near_unlock == 0


def test_evaluation_carries_warnings(catalog):
    companies = [{"id": "x", "industry": "space_mining"}, {"id": "b", "industry": "banking"}]
    evaluation = evaluate_empire(companies, 1, catalog)
    assert evaluation.industries == [Industry.BANKING]
    assert [w.code for w in evaluation.warnings] == ["catalog_miss"]


def test_apply_bonus_to_value():
    stacked = StackedBonuses(
        per_target={BonusTarget.REVENUE: 25},
        flat_per_target={BonusTarget.REVENUE: 50_000},
    )
    assert apply_bonus_to_value(100_000, stacked, BonusTarget.REVENUE) == pytest.approx(175_000)
    assert apply_bonus_to_value(100_000, stacked, BonusTarget.REPUTATION) == 100_000


def test_bonus_for_target(infra_evaluation):
    breakdown = bonus_for_target(infra_evaluation.bonuses, BonusTarget.REVENUE)
    assert breakdown.percentage == 56
    assert breakdown.flat == 0
    assert breakdown.synergies == ["Property Mogul", "Green Finance", "Infrastructure King"]


def test_empire_summary(infra_evaluation):
    summary = empire_summary(infra_evaluation)
    assert summary.active_synergies == 3
    assert summary.total_revenue_bonus == 56
    assert summary.total_cost_reduction == 50
    assert summary.total_efficiency_bonus == 0
    assert [(s.name, s.bonus) for s in summary.top_synergies] == [
        ("Infrastructure King", 66),
        ("Green Finance", 26),
        ("Property Mogul", 24),
    ]


def test_newly_activated_and_xp(infra_evaluation):
    fresh = newly_activated(["property-mogul", "green-finance"], infra_evaluation)
    assert [s.definition_id for s in fresh] == ["infrastructure-king"]
    assert activation_xp(fresh) == 3000
    assert activation_xp(infra_evaluation.active) == 6000


def test_level_table(levels):
    assert levels.max_level == 12
    assert levels.get(3).name == "Business Mogul"
    assert levels.level_for(xp=0, companies=0, industries=0) == 1
    assert levels.level_for(xp=20_000, companies=3, industries=2) == 3
    # assez d'XP mais pas assez d'entreprises
    assert levels.level_for(xp=20_000, companies=2, industries=2) == 2
    assert levels.level_for(xp=10**9, companies=100, industries=12) == 12


def test_level_table_must_be_consecutive():
    with pytest.raises(ValidationError):
        EmpireLevelTable.model_validate(
            [
                {"level": 1, "name": "A", "xp_required": 0, "min_companies": 1, "min_industries": 1},
                {"level": 3, "name": "C", "xp_required": 10, "min_companies": 1, "min_industries": 1},
            ]
        )


def test_synergy_coverage(catalog):
    coverage = synergy_coverage(catalog)
    assert len(coverage[Industry.BANKING]) == 12
    assert coverage[Industry.CRIME] == []
    assert "Fintech Empire" in coverage[Industry.TECH]

    world = IndustryCatalog(frozenset({Industry.MEDIA, Industry.POLITICS}))
    assert list(synergy_coverage(catalog, world)) == [Industry.MEDIA, Industry.POLITICS]


def test_evaluation_reuses_matcher_bonuses(catalog, infrastructure_owner):
    evaluation = evaluate_empire(infrastructure_owner, 3, catalog)
    match = match_synergies(
        {Industry.BANKING, Industry.REAL_ESTATE, Industry.ENERGY}, 3, catalog
    )
    assert evaluation.bonuses == match.bonuses
    assert evaluation.bonuses.per_synergy == evaluation.active
    assert match.bonuses.total_bonus_percent == 116
