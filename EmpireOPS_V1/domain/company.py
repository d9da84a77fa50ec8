from typing import List

from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.domain.types import Industry


class Company(BaseModel):
    """Entreprise détenue par le joueur (une ligne du portefeuille)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    industry: Industry
    level: int = Field(default=1, ge=1)
    monthly_revenue: float = Field(default=0.0, ge=0)
    value: float = Field(default=0.0, ge=0)


class Portfolio(BaseModel):
    """Collection ordonnée des entreprises d'un joueur, avec son niveau d'empire."""

    level: int = Field(default=1, ge=1)
    companies: List[Company] = Field(default_factory=list)

    @property
    def total_value(self) -> float:
        return sum(c.value for c in self.companies)

    @property
    def monthly_revenue(self) -> float:
        return sum(c.monthly_revenue for c in self.companies)
