"""
Valorisation d'une cible d'acquisition (multiple de CA, délai de retour, ROI).

Les trois ratios sont indépendants. Le prix ajusté applique la prime de
synergie (data/acquisition_premium.json) au prix demandé. Quand un dénominateur est nul le ratio
vaut None (« non calculable ») : on ne lève jamais et on ne renvoie jamais 0,
qui serait lu comme une valeur réelle par l'interface.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.domain.acquisition import AcquisitionTarget
from EmpireOPS_V1.utils import DATA_DIR, half_up, load_and_validate

MONTHS_PER_YEAR = 12


class SynergyPremium(BaseModel):
    """Surcoût payé pour une cible selon le nombre de synergies qu'elle débloque."""

    model_config = ConfigDict(frozen=True)

    none: float = Field(default=1.0, ge=1)
    single: float = Field(default=1.08, ge=1)
    multiple: float = Field(default=1.15, ge=1)  # 2 synergies ou plus


def load_synergy_premium(path=None) -> SynergyPremium:
    return load_and_validate(
        path or DATA_DIR / "acquisition_premium.json", SynergyPremium
    )


def synergy_premium(
    synergy_potential: int, premium: SynergyPremium = SynergyPremium()
) -> float:
    if synergy_potential <= 0:
        return premium.none
    if synergy_potential == 1:
        return premium.single
    return premium.multiple


class Valuation(BaseModel):
    model_config = ConfigDict(frozen=True)

    annual_revenue: float
    revenue_multiple: Optional[float]  # None si CA mensuel nul
    payback_months: Optional[int]  # None si profit mensuel nul
    annual_roi_percent: int
    synergy_premium: float
    adjusted_price: float  # prix x prime de synergie


def monthly_profit(target: AcquisitionTarget) -> float:
    return target.monthly_revenue * (target.profit_margin_percent / 100)


def revenue_multiple(target: AcquisitionTarget) -> Optional[float]:
    """
    Prix / CA annuel.

    Exemple
    -------
    >>> revenue_multiple(AcquisitionTarget(id="1", industry="media", price=2_800_000, monthly_revenue=180_000))
    1.2962962962962963
    """
    annual_revenue = target.monthly_revenue * MONTHS_PER_YEAR
    if annual_revenue == 0:
        return None
    return target.price / annual_revenue


def payback_months(target: AcquisitionTarget) -> Optional[int]:
    """Nombre de mois de profit nécessaires pour rembourser le prix (arrondi au mois supérieur)."""
    profit = monthly_profit(target)
    if profit == 0:
        return None
    return math.ceil(round(target.price / profit, 9))


def annual_roi_percent(target: AcquisitionTarget) -> int:
    # price > 0 garanti par AcquisitionTarget
    return half_up(monthly_profit(target) * MONTHS_PER_YEAR / target.price * 100)


def valuate_target(
    target: AcquisitionTarget, premium: Optional[SynergyPremium] = None
) -> Valuation:
    """
    Ratios de la cible au prix demandé, plus le prix ajusté de la prime de
    synergie (`synergy_potential` renseigné par `score_acquisitions`).

    Exemple
    -------
    Cible à 2 800 000 qui débloque une synergie -> adjusted_price 3 024 000
    """
    factor = synergy_premium(target.synergy_potential, premium or SynergyPremium())
    return Valuation(
        annual_revenue=target.monthly_revenue * MONTHS_PER_YEAR,
        revenue_multiple=revenue_multiple(target),
        payback_months=payback_months(target),
        annual_roi_percent=annual_roi_percent(target),
        synergy_premium=factor,
        adjusted_price=target.price * factor,
    )
