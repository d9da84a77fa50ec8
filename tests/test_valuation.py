import pytest
from pydantic import ValidationError

from EmpireOPS_V1.data import get_SYNERGY_PREMIUM
from EmpireOPS_V1.domain.acquisition import AcquisitionTarget
from EmpireOPS_V1.domain.types import Industry
from EmpireOPS_V1.rules.valuation import (
    SynergyPremium,
    annual_roi_percent,
    load_synergy_premium,
    monthly_profit,
    payback_months,
    revenue_multiple,
    synergy_premium,
    valuate_target,
)


@pytest.fixture
def news_network():
    return AcquisitionTarget(
        id="1",
        name="Digital News Network",
        industry=Industry.MEDIA,
        level=3,
        price=2_800_000,
        monthly_revenue=180_000,
        profit_margin_percent=22,
    )


def test_valuation_of_a_typical_target(news_network):
    valuation = valuate_target(news_network)
    assert valuation.annual_revenue == 2_160_000
    assert round(valuation.revenue_multiple, 2) == 1.3
    assert valuation.payback_months == 71
    assert valuation.annual_roi_percent == 17


def test_monthly_profit(news_network):
    assert monthly_profit(news_network) == pytest.approx(39_600)


def test_exact_payback_is_not_rounded_up():
    target = AcquisitionTarget(
        id="x", industry=Industry.RETAIL, price=1200, monthly_revenue=1000, profit_margin_percent=10
    )
    assert payback_months(target) == 12


def test_zero_revenue_gives_undefined_ratios():
    target = AcquisitionTarget(id="x", industry=Industry.TECH, price=1_000_000)
    assert revenue_multiple(target) is None
    assert payback_months(target) is None
    assert annual_roi_percent(target) == 0


def test_zero_margin_only_undefines_payback():
    target = AcquisitionTarget(
        id="x", industry=Industry.TECH, price=1_200_000, monthly_revenue=100_000
    )
    valuation = valuate_target(target)
    assert valuation.revenue_multiple == pytest.approx(1.0)
    assert valuation.payback_months is None
    assert valuation.annual_roi_percent == 0


@pytest.mark.parametrize("price", [0, -10])
def test_non_positive_price_is_rejected(price):
    with pytest.raises(ValidationError):
        AcquisitionTarget(id="x", industry=Industry.TECH, price=price)


@pytest.mark.parametrize(
    "unlocks, factor",
    [(0, 1.0), (1, 1.08), (2, 1.15), (5, 1.15)],
)
def test_synergy_premium_on_price(news_network, unlocks, factor):
    target = news_network.model_copy(update={"synergy_potential": unlocks})
    valuation = valuate_target(target)
    assert valuation.synergy_premium == factor
    assert valuation.adjusted_price == pytest.approx(2_800_000 * factor)
    # les ratios restent calculés sur le prix demandé
    assert valuation.payback_months == 71


def test_synergy_premium_from_data(tmp_path, news_network):
    assert get_SYNERGY_PREMIUM() == SynergyPremium()

    path = tmp_path / "premium.json"
    path.write_text('{"none": 1.0, "single": 1.2, "multiple": 1.5}', encoding="utf-8")
    premium = load_synergy_premium(path)
    assert synergy_premium(0, premium) == 1.0
    assert synergy_premium(1, premium) == 1.2
    assert synergy_premium(3, premium) == 1.5

    target = news_network.model_copy(update={"synergy_potential": 2})
    assert valuate_target(target, premium).adjusted_price == pytest.approx(4_200_000)


def test_premium_below_one_is_rejected():
    with pytest.raises(ValidationError):
        SynergyPremium(single=0.9)
