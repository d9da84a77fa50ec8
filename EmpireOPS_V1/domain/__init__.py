"""
Domain objects for EmpireOPS.

The domain layer holds the business objects of the empire system:
industries, companies, synergy definitions, acquisition targets and
empire levels. These classes are frozen pydantic models so that the
engine can share them between calls without side effects.
"""

from .types import BonusTarget, BonusType, Industry, SynergyTier
from .catalog import CatalogError, IndustryCatalog
from .company import Company, Portfolio
from .synergy import SynergyBonus, SynergyCatalog, SynergyDefinition
from .acquisition import AcquisitionTarget
from .empire import EmpireLevel, EmpireLevelTable

__all__ = [
    "AcquisitionTarget",
    "BonusTarget",
    "BonusType",
    "CatalogError",
    "Company",
    "EmpireLevel",
    "EmpireLevelTable",
    "Industry",
    "IndustryCatalog",
    "Portfolio",
    "SynergyBonus",
    "SynergyCatalog",
    "SynergyDefinition",
    "SynergyTier",
]
