from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from EmpireOPS_V1.domain.types import Industry


class AcquisitionTarget(BaseModel):
    """
    Entreprise non détenue, proposée à l'achat par le marché.

    `synergy_potential` et `affected_synergy_ids` sont renseignés par
    `score_acquisitions` ; le flux du marché les laisse à leurs valeurs par défaut.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    industry: Industry
    level: int = Field(default=1, ge=1)
    price: float = Field(gt=0)
    monthly_revenue: float = Field(default=0.0, ge=0)
    profit_margin_percent: float = Field(default=0.0, ge=0)
    synergy_potential: int = Field(default=0, ge=0)
    affected_synergy_ids: Tuple[str, ...] = ()
    highlights: Tuple[str, ...] = ()
