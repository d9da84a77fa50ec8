"""
SynergyMatcher : classe chaque synergie du catalogue en active ou potentielle.

Règles implémentées :
- Active si toutes les industries requises sont possédées ET si le niveau
  d'empire atteint `unlock_level`. Les industries possédées en plus ne
  bloquent jamais une synergie.
- Sinon potentielle, avec les industries manquantes et le pourcentage de
  complétion. Une synergie complète mais bloquée par le niveau reste
  potentielle (100 %, `locked=True`) pour rester visible du joueur.
- Ordre des potentielles : complétion décroissante, puis palier croissant
  (BASIC avant ULTIMATE), puis identifiant.
"""

from typing import Iterable, List, Optional

from EmpireOPS_V1.core.bonuses import stack_bonuses
from EmpireOPS_V1.core.results import PotentialSynergy, SynergyMatch
from EmpireOPS_V1.domain.synergy import SynergyCatalog, SynergyDefinition
from EmpireOPS_V1.domain.types import Industry
from EmpireOPS_V1.rules.stacking import StackingRules
from EmpireOPS_V1.utils import half_up


def percent_complete(definition: SynergyDefinition, owned: frozenset) -> int:
    """
    Part des industries requises déjà possédées, en pourcentage entier.

    Exemple
    -------
    4 industries possédées sur 5 requises -> 80
    """
    required = definition.required_industries
    return half_up(100 * len(required & owned) / len(required))


def potential_sort_key(potential: PotentialSynergy):
    return (-potential.percent_complete, potential.tier.rank, potential.definition_id)


def _potential(
    definition: SynergyDefinition, owned: frozenset, level: int
) -> PotentialSynergy:
    required = definition.required_industries
    return PotentialSynergy(
        definition_id=definition.id,
        name=definition.name,
        tier=definition.tier,
        owned_industries=required & owned,
        missing_industries=required - owned,
        percent_complete=percent_complete(definition, owned),
        estimated_bonus_percent=definition.estimated_bonus_percent,
        locked=level < definition.unlock_level,
        unlock_level=definition.unlock_level,
    )


def match_synergies(
    owned_industries: Optional[Iterable[Industry]],
    level: int,
    catalog: SynergyCatalog,
    rules: Optional[StackingRules] = None,
) -> SynergyMatch:
    """
    Évalue toutes les synergies du catalogue pour un ensemble d'industries.

    Args:
        owned_industries: industries couvertes (sortie du PortfolioResolver).
        level: niveau d'empire du joueur.
        catalog: catalogue de synergies, passé explicitement.
        rules: paramètres de cumul transmis au BonusStacker.

    Returns:
        SynergyMatch : actives dans l'ordre du catalogue (déjà cumulées,
        agrégats dans `bonuses`), potentielles triées de la plus proche à
        la plus lointaine.
    """
    owned = frozenset(owned_industries or ())

    active_definitions: List[SynergyDefinition] = []
    potential: List[PotentialSynergy] = []
    for definition in catalog:
        is_satisfied = definition.required_industries <= owned
        is_unlocked_by_level = level >= definition.unlock_level
        if is_satisfied and is_unlocked_by_level:
            active_definitions.append(definition)
        else:
            potential.append(_potential(definition, owned, level))

    potential.sort(key=potential_sort_key)
    stacked = stack_bonuses(active_definitions, rules=rules, catalog=catalog)

    return SynergyMatch(
        active=stacked.per_synergy,
        potential=potential,
        active_definitions=active_definitions,
        bonuses=stacked,
    )


def visible_potentials(
    potential: Iterable[PotentialSynergy], level: int, horizon: int = 5
) -> List[PotentialSynergy]:
    """Masque les synergies dont le niveau requis dépasse `level + horizon`.

    Filtre d'affichage uniquement : ne change pas la classification.
    """
    return [p for p in potential if p.unlock_level <= level + horizon]


def near_unlock_count(potential: Iterable[PotentialSynergy]) -> int:
    """Synergies à au moins 50 % mais pas encore complètes."""
    return sum(1 for p in potential if 50 <= p.percent_complete < 100)
