"""
Définitions de synergies inter-industries et chargement du catalogue.

Une synergie s'active quand le joueur possède au moins une entreprise dans
chacune des industries requises et que son niveau d'empire atteint
`unlock_level`. Le catalogue est chargé une seule fois depuis un JSON puis
passé explicitement aux fonctions du moteur.
"""

import json
import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)

from EmpireOPS_V1.domain.catalog import CatalogError
from EmpireOPS_V1.domain.types import BonusTarget, BonusType, Industry, SynergyTier

logger = logging.getLogger(__name__)

# cibles prises en compte dans l'estimation du gain d'une synergie potentielle
PROFIT_TARGETS = frozenset({BonusTarget.REVENUE, BonusTarget.ALL_PROFITS})


class SynergyBonus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: BonusType = BonusType.PERCENTAGE
    target: BonusTarget
    base_value: float = Field(ge=0)
    description: str = ""


class SynergyDefinition(BaseModel):
    """
    Définition immuable d'une synergie.

    Exemple
    -------
    {
        "id": "fintech-empire",
        "name": "Fintech Empire",
        "tier": "basic",
        "required_industries": ["banking", "tech"],
        "unlock_level": 1,
        "bonuses": [
            {"type": "cost_reduction", "target": "operating_cost", "base_value": 15}
        ]
    }
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    tier: SynergyTier = SynergyTier.BASIC
    required_industries: FrozenSet[Industry]
    bonuses: Tuple[SynergyBonus, ...] = Field(min_length=1)
    unlock_level: int = Field(default=1, ge=1)
    icon: str = ""

    @field_validator("required_industries")
    @classmethod
    def _at_least_two_industries(cls, value: FrozenSet[Industry]):
        if len(value) < 2:
            raise ValueError(
                "une synergie requiert au moins 2 industries distinctes"
            )
        return value

    @property
    def estimated_bonus_percent(self) -> float:
        """Gain de profit attendu : bonus PERCENTAGE sur REVENUE ou ALL_PROFITS, avant multiplicateur."""
        return sum(
            b.base_value
            for b in self.bonuses
            if b.type == BonusType.PERCENTAGE and b.target in PROFIT_TARGETS
        )


class SynergyCatalog(RootModel[Tuple[SynergyDefinition, ...]]):
    """Table ordonnée des synergies (l'ordre du fichier fait foi)."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _unique_ids(self):
        seen = set()
        for definition in self.root:
            if definition.id in seen:
                raise ValueError(f"identifiant de synergie dupliqué: {definition.id}")
            seen.add(definition.id)
        return self

    def __iter__(self) -> Iterator[SynergyDefinition]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, synergy_id: str) -> Optional[SynergyDefinition]:
        for definition in self.root:
            if definition.id == synergy_id:
                return definition
        return None

    def position(self, synergy_id: str) -> int:
        """Rang d'une synergie dans le catalogue (sert à rétablir l'ordre)."""
        for i, definition in enumerate(self.root):
            if definition.id == synergy_id:
                return i
        raise KeyError(synergy_id)

    def by_industry(self) -> Dict[Industry, List[SynergyDefinition]]:
        out: Dict[Industry, List[SynergyDefinition]] = {i: [] for i in Industry}
        for definition in self.root:
            for industry in definition.required_industries:
                out[industry].append(definition)
        return out


def load_synergy_catalog(filepath: Path | str) -> SynergyCatalog:
    """Charge le catalogue de synergies depuis un fichier JSON.

    Paramètres
    ----------
    filepath : Path | str
        Chemin vers un JSON contenant une liste de définitions.

    Retour
    ------
    SynergyCatalog
        Catalogue validé, dans l'ordre du fichier.

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    CatalogError
        Si une définition est invalide (ex: moins de 2 industries requises)
        ou si deux définitions partagent le même identifiant.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Synergy catalog not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)

    if not isinstance(raw_data, list):
        raise CatalogError(
            f"{path.name} doit contenir une liste JSON de définitions de synergies."
        )

    definitions: List[SynergyDefinition] = []
    for payload in raw_data:
        try:
            definitions.append(SynergyDefinition.model_validate(payload))
        except ValidationError as e:
            synergy_id = payload.get("id", "?") if isinstance(payload, dict) else "?"
            raise CatalogError(f"Validation error for synergy {synergy_id}: {e}")

    try:
        catalog = SynergyCatalog(tuple(definitions))
    except ValidationError as e:
        raise CatalogError(f"Invalid synergy catalog {path.name}: {e}")

    logger.info("Loaded %d synergy definitions from %s", len(catalog), path.name)
    return catalog
