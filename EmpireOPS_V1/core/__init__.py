"""
Moteur de synergies de l'empire.

Pipeline pur, sans état ni I/O :
    resolve_portfolio_industries -> match_synergies -> stack_bonuses
    match_synergies -> score_acquisitions + valuate_target
"""

from EmpireOPS_V1.core.acquisitions import (
    filter_acquisitions,
    market_overview,
    parse_targets,
    score_acquisitions,
    sort_acquisitions,
)
from EmpireOPS_V1.core.bonuses import stack_bonuses
from EmpireOPS_V1.core.empire import (
    activation_xp,
    apply_bonus_to_value,
    bonus_for_target,
    empire_summary,
    evaluate_empire,
    newly_activated,
    synergy_coverage,
)
from EmpireOPS_V1.core.portfolio import resolve_portfolio_industries
from EmpireOPS_V1.core.results import EngineMessage, MessageLevel
from EmpireOPS_V1.core.synergies import match_synergies, visible_potentials
from EmpireOPS_V1.rules.valuation import valuate_target

__all__ = [
    "EngineMessage",
    "MessageLevel",
    "activation_xp",
    "apply_bonus_to_value",
    "bonus_for_target",
    "empire_summary",
    "evaluate_empire",
    "filter_acquisitions",
    "market_overview",
    "match_synergies",
    "newly_activated",
    "parse_targets",
    "resolve_portfolio_industries",
    "score_acquisitions",
    "sort_acquisitions",
    "stack_bonuses",
    "synergy_coverage",
    "valuate_target",
    "visible_potentials",
]
