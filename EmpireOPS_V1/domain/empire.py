"""
Progression de l'empire : paliers de niveau et récompenses d'XP.

Le niveau d'empire conditionne l'activation des synergies (`unlock_level`).
Les paliers sont chargés depuis `data/empire_levels.json`.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from EmpireOPS_V1.domain.types import SynergyTier


class EmpireLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1)
    name: str
    xp_required: int = Field(ge=0)
    min_companies: int = Field(ge=0)
    min_industries: int = Field(ge=0)


class EmpireLevelTable(RootModel[List[EmpireLevel]]):
    """Paliers consécutifs 1, 2, 3, ... triés par niveau."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _consecutive_levels(self):
        levels = [entry.level for entry in self.root]
        if levels != list(range(1, len(levels) + 1)):
            raise ValueError(f"niveaux non consécutifs: {levels}")
        return self

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, level: int) -> EmpireLevel:
        return self.root[level - 1]

    @property
    def max_level(self) -> int:
        return len(self.root)

    def level_for(self, xp: int, companies: int, industries: int) -> int:
        """
        Niveau atteint pour un total d'XP et une taille d'empire donnés.

        On monte palier par palier depuis le niveau 1 : un palier dont une
        condition n'est pas remplie bloque tous les suivants.

        Exemple
        -------
        >>> table.level_for(xp=20_000, companies=3, industries=2)
        3
        """
        level = 1
        for entry in self.root[1:]:
            if (
                xp >= entry.xp_required
                and companies >= entry.min_companies
                and industries >= entry.min_industries
            ):
                level = entry.level
            else:
                break
        return level


# XP accordée à l'activation d'une synergie, selon son palier
SYNERGY_ACTIVATION_XP: Dict[SynergyTier, int] = {
    SynergyTier.BASIC: 1500,
    SynergyTier.ADVANCED: 3000,
    SynergyTier.ELITE: 5000,
    SynergyTier.ULTIMATE: 10000,
}
