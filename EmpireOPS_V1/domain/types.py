# EmpireOPS_V1/domain/types.py
from enum import Enum


class Industry(Enum):
    # Values aligned with JSON keys and the rest of the codebase
    BANKING = "banking"
    TECH = "tech"
    MEDIA = "media"
    REAL_ESTATE = "real_estate"
    ENERGY = "energy"
    MANUFACTURING = "manufacturing"
    HEALTHCARE = "healthcare"
    LOGISTICS = "logistics"
    POLITICS = "politics"
    RETAIL = "retail"
    CONSULTING = "consulting"
    CRIME = "crime"


class SynergyTier(Enum):
    """Paliers de synergie, du plus accessible au plus rare."""

    BASIC = "basic"
    ADVANCED = "advanced"
    ELITE = "elite"
    ULTIMATE = "ultimate"

    @property
    def rank(self) -> int:
        """Position du palier (BASIC = 0), utilisée comme clé de tri."""
        return _TIER_ORDER.index(self)


_TIER_ORDER = [
    SynergyTier.BASIC,
    SynergyTier.ADVANCED,
    SynergyTier.ELITE,
    SynergyTier.ULTIMATE,
]


class BonusTarget(Enum):
    OPERATING_COST = "operating_cost"
    REVENUE = "revenue"
    PRODUCTION_SPEED = "production_speed"
    LOAN_RATE = "loan_rate"
    CUSTOMER_ACQUISITION = "customer_acquisition"
    REPUTATION = "reputation"
    ALL_PROFITS = "all_profits"
    FEATURE_UNLOCK = "feature_unlock"


class BonusType(Enum):
    """Nature d'un bonus.

    Seuls FLAT (montant fixe par mois) et UNLOCK (déblocage de fonctionnalité)
    échappent au multiplicateur d'empire : tous les autres sont des pourcentages.
    """

    PERCENTAGE = "percentage"
    FLAT = "flat"
    COST_REDUCTION = "cost_reduction"
    EFFICIENCY = "efficiency"
    UNLOCK = "unlock"

    @property
    def is_percentage(self) -> bool:
        return self not in (BonusType.FLAT, BonusType.UNLOCK)
