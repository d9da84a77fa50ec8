import pytest

from EmpireOPS_V1.core.bonuses import stack_bonuses
from EmpireOPS_V1.domain.types import BonusTarget, BonusType, Industry
from EmpireOPS_V1.rules.stacking import StackingRules, stack_multiplier, stacked_value


def test_no_active_synergy_gives_zero():
    stacked = stack_bonuses([])
    assert stacked.total_bonus_percent == 0
    assert stacked.per_synergy == []
    assert stacked.per_target == {}
    assert stacked.stack_multiplier == 1.0


def test_single_synergy_is_not_multiplied(make_definition):
    alpha = make_definition("alpha", {Industry.BANKING, Industry.TECH})
    stacked = stack_bonuses([alpha])
    assert stacked.stack_multiplier == 1.0
    assert stacked.per_synergy[0].final_bonus_percent == 10
    assert stacked.per_target == {BonusTarget.REVENUE: 10}


def test_three_synergies_share_the_same_multiplier(make_definition):
    definitions = [
        make_definition("a", {Industry.BANKING, Industry.TECH}, bonuses=((BonusTarget.OPERATING_COST, 15),)),
        make_definition("b", {Industry.BANKING, Industry.MEDIA}),
        make_definition("c", {Industry.TECH, Industry.MEDIA}),
    ]
    stacked = stack_bonuses(definitions)
    assert stacked.stack_multiplier == 1.2
    assert all(s.stack_multiplier == 1.2 for s in stacked.per_synergy)
    assert [s.final_bonus_percent for s in stacked.per_synergy] == [18, 12, 12]
    assert stacked.total_bonus_percent == 42
    assert stacked.per_target == {BonusTarget.OPERATING_COST: 18, BonusTarget.REVENUE: 24}


@pytest.mark.parametrize(
    "count, expected",
    [(0, 1.0), (1, 1.0), (2, 1.1), (3, 1.2), (6, 1.5), (11, 2.0), (15, 2.0)],
)
def test_stack_multiplier(count, expected):
    assert stack_multiplier(count) == expected


def test_custom_stacking_rules():
    rules = StackingRules(step=0.25, cap=1.5)
    assert stack_multiplier(2, rules) == 1.25
    assert stack_multiplier(5, rules) == 1.5


def test_stacked_value_rounds_half_up():
    assert stacked_value(15, 1.1) == 17
    assert stacked_value(5, 1.9) == 10
    assert stacked_value(12, 1.2) == 14


def test_flat_bonus_is_never_multiplied(catalog):
    banker = catalog.get("industrial-banker")
    others = [catalog.get("fintech-empire"), catalog.get("green-finance")]
    stacked = stack_bonuses([banker] + others)
    assert stacked.stack_multiplier == 1.2
    assert stacked.flat_per_target == {BonusTarget.REVENUE: 50000}
    banker_result = stacked.per_synergy[0]
    assert banker_result.final_bonus_percent == 22  # 18 * 1.2 = 21.6
    flat = next(b for b in banker_result.bonuses if b.type == BonusType.FLAT)
    assert flat.stacked_value == 50000


def test_unlock_bonus_is_listed_not_counted(catalog):
    stacked = stack_bonuses([catalog.get("data-goldmine")])
    assert stacked.total_bonus_percent == 55
    assert stacked.unlocked_features == ["Unlocks: Consumer Behavior Prediction"]
    assert BonusTarget.FEATURE_UNLOCK not in stacked.per_target


def test_output_follows_catalog_order(catalog):
    definitions = [catalog.get("infrastructure-king"), catalog.get("property-mogul")]
    stacked = stack_bonuses(definitions, catalog=catalog)
    assert [s.definition_id for s in stacked.per_synergy] == [
        "property-mogul",
        "infrastructure-king",
    ]


def test_target_cap_limits_each_aggregate(catalog):
    definitions = [catalog.get(i) for i in ("property-mogul", "green-finance", "infrastructure-king")]
    uncapped = stack_bonuses(definitions)
    assert uncapped.per_target[BonusTarget.REVENUE] == 56
    capped = stack_bonuses(definitions, target_cap=50)
    assert capped.per_target[BonusTarget.REVENUE] == 50
    assert capped.per_target[BonusTarget.LOAN_RATE] == 10
    # le total affiché n'est pas plafonné
    assert capped.total_bonus_percent == uncapped.total_bonus_percent == 116


def test_stacking_does_not_mutate_definitions(catalog):
    king = catalog.get("infrastructure-king")
    stack_bonuses([king, catalog.get("property-mogul"), catalog.get("green-finance")])
    assert [b.base_value for b in king.bonuses] == [25, 30]
