"""
EmpireOPS package

This package provides the cross-industry synergy engine of the empire
game. It separates domain objects, data tables, calculation rules, the
stateless engine and a small console view into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
