"""
AcquisitionScorer : attractivité des entreprises à vendre.

Une cible « débloque » une synergie potentielle seulement si son industrie
est la DERNIÈRE industrie manquante. Contribuer à une synergie à laquelle
il manque encore d'autres industries ne compte pas.

Retour :
    score_acquisitions(...) -> liste de copies annotées
    (synergy_potential, affected_synergy_ids), triées selon `sort_by`.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ValidationError

from EmpireOPS_V1.core.portfolio import catalog_miss, invalid_input, known_industry
from EmpireOPS_V1.core.results import EngineMessage, PotentialSynergy
from EmpireOPS_V1.domain.acquisition import AcquisitionTarget
from EmpireOPS_V1.domain.catalog import IndustryCatalog
from EmpireOPS_V1.domain.types import Industry
from EmpireOPS_V1.rules.valuation import revenue_multiple
from EmpireOPS_V1.utils import format_industry

logger = logging.getLogger(__name__)

# Seuil "forte synergie" du navigateur d'acquisitions
HIGH_SYNERGY_THRESHOLD = 2

SORT_KEYS: Dict[str, Callable[[AcquisitionTarget], tuple]] = {
    "synergy": lambda t: (-t.synergy_potential, t.id),
    "price": lambda t: (t.price, t.id),
    "margin": lambda t: (-t.profit_margin_percent, t.id),
}


def parse_targets(
    payloads: Iterable[Mapping],
    industry_catalog: Optional[IndustryCatalog] = None,
) -> Tuple[List[AcquisitionTarget], List[EngineMessage]]:
    """Valide le flux brut du marché ; les entrées fautives sont écartées et signalées."""
    targets: List[AcquisitionTarget] = []
    warnings: List[EngineMessage] = []
    for payload in payloads:
        if isinstance(payload, AcquisitionTarget):
            target = payload
        else:
            ref = str(payload.get("id", "?"))
            if not known_industry(payload.get("industry")):
                warnings.append(catalog_miss("Target", ref, payload.get("industry")))
                continue
            try:
                target = AcquisitionTarget.model_validate(payload)
            except ValidationError as e:
                warnings.append(invalid_input("Target", ref, e))
                continue

        if industry_catalog is not None and target.industry not in industry_catalog:
            warnings.append(catalog_miss("Target", target.id, target.industry))
            continue
        targets.append(target)

    return targets, warnings


def completed_synergies(
    industry: Industry, potential: Iterable[PotentialSynergy]
) -> List[str]:
    """Synergies dont `industry` est l'unique industrie manquante."""
    return [
        p.definition_id
        for p in potential
        if p.missing_industries == frozenset({industry})
    ]


def sort_acquisitions(
    targets: Iterable[AcquisitionTarget], sort_by: str = "synergy"
) -> List[AcquisitionTarget]:
    """Tri 'synergy' (potentiel décroissant), 'price' (croissant) ou 'margin' (décroissant)."""
    if sort_by not in SORT_KEYS:
        raise ValueError(
            f"Critère de tri inconnu: {sort_by} (attendu: {', '.join(SORT_KEYS)})"
        )
    return sorted(targets, key=SORT_KEYS[sort_by])


def score_acquisitions(
    potential: Iterable[PotentialSynergy],
    targets: Iterable[AcquisitionTarget],
    sort_by: str = "synergy",
) -> List[AcquisitionTarget]:
    """
    Calcule le potentiel de synergie de chaque cible.

    Les cibles sans potentiel sont conservées (potentiel 0, liste vide).
    Les cibles d'entrée ne sont pas modifiées : on renvoie des copies.

    Exemple
    -------
    Potentielles : {media manquant} et {media, politics manquants}
    -> une cible MEDIA a un potentiel de 1, pas de 2.
    """
    potential = list(potential)
    scored: List[AcquisitionTarget] = []
    for target in targets:
        affected = completed_synergies(target.industry, potential)
        scored.append(
            target.model_copy(
                update={
                    "synergy_potential": len(affected),
                    "affected_synergy_ids": tuple(affected),
                }
            )
        )
    logger.debug(
        "Scored %d targets against %d potential synergies", len(scored), len(potential)
    )
    return sort_acquisitions(scored, sort_by)


def filter_acquisitions(
    targets: Iterable[AcquisitionTarget],
    query: Optional[str] = None,
    industry: Optional[Industry] = None,
) -> List[AcquisitionTarget]:
    """Recherche texte (nom ou industrie, insensible à la casse) et filtre d'industrie."""
    result = list(targets)
    if query:
        q = query.lower()
        result = [
            t
            for t in result
            if q in t.name.lower() or q in format_industry(t.industry).lower()
        ]
    if industry is not None:
        result = [t for t in result if t.industry == industry]
    return result


class MarketOverview(BaseModel):
    available: int
    high_synergy: int
    median_price: Optional[float]
    median_revenue_multiple: Optional[float]


def market_overview(targets: Iterable[AcquisitionTarget]) -> MarketOverview:
    """Indicateurs d'en-tête du navigateur d'acquisitions."""
    targets = list(targets)
    prices = [t.price for t in targets]
    multiples = [m for m in (revenue_multiple(t) for t in targets) if m is not None]

    return MarketOverview(
        available=len(targets),
        high_synergy=sum(
            1 for t in targets if t.synergy_potential >= HIGH_SYNERGY_THRESHOLD
        ),
        median_price=float(np.median(prices)) if prices else None,
        median_revenue_multiple=float(np.median(multiples)) if multiples else None,
    )
