"""
Évaluation complète d'un empire : portefeuille -> synergies -> bonus.

Le moteur n'a pas d'état : l'appelant relance `evaluate_empire` après
chaque acquisition, cession ou montée de niveau.
"""

import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.core.portfolio import CompanyLike, resolve_portfolio_industries
from EmpireOPS_V1.core.results import (
    ActiveSynergy,
    EngineMessage,
    PotentialSynergy,
    StackedBonuses,
)
from EmpireOPS_V1.core.synergies import match_synergies, near_unlock_count
from EmpireOPS_V1.domain.catalog import IndustryCatalog, ordered_industries
from EmpireOPS_V1.domain.empire import SYNERGY_ACTIVATION_XP
from EmpireOPS_V1.domain.synergy import SynergyCatalog
from EmpireOPS_V1.domain.types import BonusTarget, Industry
from EmpireOPS_V1.rules.stacking import StackingRules

logger = logging.getLogger(__name__)


class EmpireEvaluation(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    industries: List[Industry]
    active: List[ActiveSynergy] = Field(default_factory=list)
    potential: List[PotentialSynergy] = Field(default_factory=list)
    bonuses: StackedBonuses = Field(default_factory=StackedBonuses)
    near_unlock: int = 0
    warnings: List[EngineMessage] = Field(default_factory=list)

    @property
    def active_ids(self) -> List[str]:
        return [s.definition_id for s in self.active]


class BonusBreakdown(BaseModel):
    percentage: int
    flat: float
    synergies: List[str]


class TopSynergy(BaseModel):
    name: str
    bonus: int


class EmpireSummary(BaseModel):
    level: int
    active_synergies: int
    total_revenue_bonus: int
    total_cost_reduction: int
    total_efficiency_bonus: int
    top_synergies: List[TopSynergy]


def evaluate_empire(
    companies: Optional[Iterable[CompanyLike]],
    level: int,
    catalog: SynergyCatalog,
    industry_catalog: Optional[IndustryCatalog] = None,
    rules: Optional[StackingRules] = None,
) -> EmpireEvaluation:
    resolution = resolve_portfolio_industries(companies, industry_catalog)
    match = match_synergies(resolution.industries, level, catalog, rules=rules)
    bonuses = match.bonuses

    logger.info(
        "Empire level %d: %d industries, %d active synergies, +%d%% total bonus",
        level,
        len(resolution.industries),
        len(match.active),
        bonuses.total_bonus_percent,
    )
    return EmpireEvaluation(
        level=level,
        industries=ordered_industries(resolution.industries),
        active=match.active,
        potential=match.potential,
        bonuses=bonuses,
        near_unlock=near_unlock_count(match.potential),
        warnings=resolution.warnings,
    )


def apply_bonus_to_value(
    base_value: float, stacked: StackedBonuses, target: BonusTarget
) -> float:
    """
    Applique les bonus cumulés d'une cible à une valeur.

    Exemple
    -------
    CA de 100 000 avec +25 % de REVENUE et 50 000 de FLAT -> 175 000
    """
    percentage = stacked.per_target.get(target, 0)
    value = base_value * (1 + percentage / 100)
    return value + stacked.flat_per_target.get(target, 0.0)


def bonus_for_target(stacked: StackedBonuses, target: BonusTarget) -> BonusBreakdown:
    names: List[str] = []
    for synergy in stacked.per_synergy:
        if any(b.target == target for b in synergy.bonuses) and synergy.name not in names:
            names.append(synergy.name)
    return BonusBreakdown(
        percentage=stacked.per_target.get(target, 0),
        flat=stacked.flat_per_target.get(target, 0.0),
        synergies=names,
    )


def empire_summary(evaluation: EmpireEvaluation, top: int = 3) -> EmpireSummary:
    per_target = evaluation.bonuses.per_target
    ranked = sorted(
        evaluation.bonuses.per_synergy,
        key=lambda s: (-s.final_bonus_percent, s.definition_id),
    )
    return EmpireSummary(
        level=evaluation.level,
        active_synergies=len(evaluation.active),
        total_revenue_bonus=per_target.get(BonusTarget.REVENUE, 0)
        + per_target.get(BonusTarget.ALL_PROFITS, 0),
        total_cost_reduction=per_target.get(BonusTarget.OPERATING_COST, 0),
        total_efficiency_bonus=per_target.get(BonusTarget.PRODUCTION_SPEED, 0),
        top_synergies=[
            TopSynergy(name=s.name, bonus=s.final_bonus_percent) for s in ranked[:top]
        ],
    )


def newly_activated(
    previous_ids: Iterable[str], evaluation: EmpireEvaluation
) -> List[ActiveSynergy]:
    """Synergies actives maintenant mais pas lors de l'évaluation précédente."""
    previous = set(previous_ids)
    return [s for s in evaluation.active if s.definition_id not in previous]


def activation_xp(synergies: Iterable[ActiveSynergy]) -> int:
    return sum(SYNERGY_ACTIVATION_XP[s.tier] for s in synergies)


def synergy_coverage(
    catalog: SynergyCatalog, industry_catalog: Optional[IndustryCatalog] = None
) -> Dict[Industry, List[str]]:
    """Pour chaque industrie, les noms des synergies qui la requièrent."""
    if industry_catalog is None:
        industry_catalog = IndustryCatalog.full()
    by_industry = catalog.by_industry()
    return {i: [d.name for d in by_industry[i]] for i in industry_catalog}
