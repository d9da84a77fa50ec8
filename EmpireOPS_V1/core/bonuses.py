"""
BonusStacker : cumul des bonus des synergies actives.

Règles :
- Un multiplicateur unique (voir rules/stacking.py) s'applique à tous les
  bonus en pourcentage de toutes les synergies actives.
- Les bonus FLAT (montant fixe) et UNLOCK (fonctionnalité) ne sont pas
  multipliés et ne comptent pas dans les pourcentages.
- Total affiché = somme des `final_bonus_percent` des synergies actives.
- Agrégat par cible = somme des valeurs cumulées de cette cible, sans
  plafond sauf si l'appelant en demande un (`target_cap`).
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from EmpireOPS_V1.core.results import ActiveSynergy, StackedBonus, StackedBonuses
from EmpireOPS_V1.domain.synergy import SynergyCatalog, SynergyDefinition
from EmpireOPS_V1.domain.types import BonusTarget, BonusType
from EmpireOPS_V1.rules.stacking import StackingRules, stack_multiplier, stacked_value


def _stack_one(definition: SynergyDefinition, multiplier: float) -> ActiveSynergy:
    bonuses: List[StackedBonus] = []
    for bonus in definition.bonuses:
        if bonus.type.is_percentage:
            value = stacked_value(bonus.base_value, multiplier)
        else:
            value = bonus.base_value
        bonuses.append(
            StackedBonus(
                target=bonus.target,
                type=bonus.type,
                base_value=bonus.base_value,
                stacked_value=value,
                description=bonus.description,
            )
        )

    final_bonus = sum(int(b.stacked_value) for b in bonuses if b.type.is_percentage)
    return ActiveSynergy(
        definition_id=definition.id,
        name=definition.name,
        tier=definition.tier,
        stack_multiplier=multiplier,
        bonuses=bonuses,
        final_bonus_percent=final_bonus,
    )


def stack_bonuses(
    active_definitions: Iterable[SynergyDefinition],
    rules: Optional[StackingRules] = None,
    catalog: Optional[SynergyCatalog] = None,
    target_cap: Optional[int] = None,
) -> StackedBonuses:
    """
    Applique le multiplicateur d'empire aux synergies actives et agrège.

    Args:
        active_definitions: définitions actives (sortie du matcher).
        rules: paramètres de cumul ; valeurs par défaut 0.1 / 2.0.
        catalog: si fourni, la sortie suit l'ordre du catalogue quel que
            soit l'ordre d'entrée.
        target_cap: plafond optionnel appliqué à chaque agrégat par cible.

    Returns:
        StackedBonuses. Avec une liste vide : total 0, agrégats vides.

    Exemple
    -------
    3 synergies actives -> multiplicateur 1.2 pour chacune ;
    un bonus de 15 % devient 18 %.
    """
    definitions = list(active_definitions)
    if catalog is not None:
        definitions.sort(key=lambda d: catalog.position(d.id))

    multiplier = stack_multiplier(len(definitions), rules or StackingRules())

    per_synergy = [_stack_one(d, multiplier) for d in definitions]

    per_target: Dict[BonusTarget, int] = defaultdict(int)
    flat_per_target: Dict[BonusTarget, float] = defaultdict(float)
    unlocked_features: List[str] = []
    for synergy in per_synergy:
        for bonus in synergy.bonuses:
            if bonus.type.is_percentage:
                per_target[bonus.target] += int(bonus.stacked_value)
            elif bonus.type == BonusType.FLAT:
                flat_per_target[bonus.target] += bonus.stacked_value
            else:
                unlocked_features.append(bonus.description or synergy.name)

    if target_cap is not None:
        per_target = {t: min(v, target_cap) for t, v in per_target.items()}

    return StackedBonuses(
        per_synergy=per_synergy,
        total_bonus_percent=sum(s.final_bonus_percent for s in per_synergy),
        per_target=dict(per_target),
        flat_per_target=dict(flat_per_target),
        unlocked_features=unlocked_features,
        stack_multiplier=multiplier,
    )
