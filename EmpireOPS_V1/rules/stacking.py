from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.utils import DATA_DIR, half_up, load_and_validate

# =====================================================
# Multiplicateur d'empire
#  - identique pour toutes les synergies actives
#  - croît avec le nombre de synergies actives simultanément
#  - plafonné
# =====================================================


class StackingRules(BaseModel):
    """Paramètres du cumul des synergies (voir data/stacking_rules.json)."""

    model_config = ConfigDict(frozen=True)

    step: float = Field(default=0.1, ge=0)  # gain par synergie active supplémentaire
    cap: float = Field(default=2.0, ge=1)  # plafond du multiplicateur


def load_stacking_rules(path=None) -> StackingRules:
    return load_and_validate(path or DATA_DIR / "stacking_rules.json", StackingRules)


def stack_multiplier(active_count: int, rules: StackingRules = StackingRules()) -> float:
    """
    min(1 + step * (n - 1), cap) ; 1.0 quand aucune synergie n'est active.

    Exemple
    -------
    >>> stack_multiplier(3)
    1.2
    """
    if active_count <= 1:
        return 1.0
    # arrondi à 4 décimales : 1 + 0.1 * 2 doit valoir exactement 1.2
    return round(min(1.0 + rules.step * (active_count - 1), rules.cap), 4)


def stacked_value(base_value: float, multiplier: float) -> int:
    """Valeur d'un bonus après multiplicateur, arrondie à l'entier."""
    return half_up(base_value * multiplier)
