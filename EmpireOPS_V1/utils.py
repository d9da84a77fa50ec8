import json
import logging
import math
from pathlib import Path
from typing import Optional, Type, Union

from pydantic import BaseModel, RootModel

from EmpireOPS_V1.domain.types import Industry, SynergyTier

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def load_json(data_path: Path):
    data_path = Path(data_path)
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_and_validate(
    data_path: Path, model: Union[Type[RootModel], Type[BaseModel]]
) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    raw_data = load_json(data_path)
    logger.debug("Loaded %s into %s", Path(data_path).name, model.__name__)
    return model.model_validate(raw_data)


# ---------- Helpers de formatage ----------


def half_up(x: float) -> int:
    """Arrondi « commercial » (0.5 -> 1), comme Math.round côté client.

    >>> half_up(16.8)
    17
    >>> half_up(2.5)
    3
    """
    # round(.., 9) absorbe le bruit flottant (5 * 1.9 = 9.4999999...)
    return int(math.floor(round(x, 9) + 0.5))


def format_currency(amount: float) -> str:
    """
    Format compact des montants affichés dans le navigateur d'acquisitions.

    Exemple
    -------
    >>> format_currency(2_800_000)
    '$2.80M'
    >>> format_currency(95_000)
    '$95K'
    """
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.2f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${amount:,.0f}"


def format_industry(industry: Industry) -> str:
    """'real_estate' -> 'Real Estate'"""
    return industry.value.replace("_", " ").title()


def tier_label(tier: SynergyTier) -> str:
    return tier.value.capitalize()


def format_multiple(value: Optional[float]) -> str:
    if value is None:
        return "—"
    return f"{value:.1f}x"


def format_months(value: Optional[int]) -> str:
    if value is None:
        return "—"
    return f"{value} months"
