"""
Structures de résultat renvoyées par le moteur de synergies.

Toutes sont des modèles pydantic figés : une couche API peut les
sérialiser telles quelles avec `model_dump(mode="json")`.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.domain.synergy import SynergyDefinition
from EmpireOPS_V1.domain.types import BonusTarget, BonusType, Industry, SynergyTier


class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class EngineMessage(BaseModel):
    """Avertissement non bloquant remonté à l'appelant avec le résultat."""

    model_config = ConfigDict(frozen=True)

    level: MessageLevel
    code: str  # ex: "catalog_miss", "invalid_input"
    text: str
    ref: Optional[str] = None  # identifiant de l'entrée fautive


class PortfolioResolution(BaseModel):
    model_config = ConfigDict(frozen=True)

    industries: FrozenSet[Industry] = frozenset()
    warnings: List[EngineMessage] = Field(default_factory=list)


class StackedBonus(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: BonusTarget
    type: BonusType
    base_value: float
    stacked_value: float  # entier pour les pourcentages, montant brut pour FLAT/UNLOCK
    description: str = ""


class ActiveSynergy(BaseModel):
    model_config = ConfigDict(frozen=True)

    definition_id: str
    name: str
    tier: SynergyTier
    stack_multiplier: float = Field(ge=1)
    bonuses: List[StackedBonus]
    final_bonus_percent: int


class PotentialSynergy(BaseModel):
    model_config = ConfigDict(frozen=True)

    definition_id: str
    name: str
    tier: SynergyTier
    owned_industries: FrozenSet[Industry]
    missing_industries: FrozenSet[Industry]
    percent_complete: int = Field(ge=0, le=100)
    estimated_bonus_percent: float
    locked: bool
    unlock_level: int


class StackedBonuses(BaseModel):
    """Sortie du BonusStacker."""

    model_config = ConfigDict(frozen=True)

    per_synergy: List[ActiveSynergy] = Field(default_factory=list)
    total_bonus_percent: int = 0
    per_target: Dict[BonusTarget, int] = Field(default_factory=dict)
    flat_per_target: Dict[BonusTarget, float] = Field(default_factory=dict)
    unlocked_features: List[str] = Field(default_factory=list)
    stack_multiplier: float = 1.0


class SynergyMatch(BaseModel):
    """Sortie du SynergyMatcher : chaque définition est soit active, soit potentielle."""

    model_config = ConfigDict(frozen=True)

    active: List[ActiveSynergy] = Field(default_factory=list)
    potential: List[PotentialSynergy] = Field(default_factory=list)
    active_definitions: List[SynergyDefinition] = Field(default_factory=list)
    bonuses: StackedBonuses = Field(default_factory=StackedBonuses)
