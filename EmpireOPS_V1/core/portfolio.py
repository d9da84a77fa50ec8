"""
PortfolioResolver : ensemble des industries couvertes par le portefeuille.

Une entreprise dont l'industrie est inconnue ou absente du catalogue du
monde est écartée avec un avertissement ; le reste du portefeuille est
résolu normalement.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from EmpireOPS_V1.core.results import EngineMessage, MessageLevel, PortfolioResolution
from EmpireOPS_V1.domain.catalog import IndustryCatalog
from EmpireOPS_V1.domain.company import Company
from EmpireOPS_V1.domain.types import Industry

logger = logging.getLogger(__name__)

CompanyLike = Union[Company, Mapping]


_INDUSTRY_VALUES = frozenset(i.value for i in Industry)


def known_industry(raw) -> bool:
    """Membre de l'enum ou chaîne connue ; toute autre valeur est inconnue."""
    if isinstance(raw, Industry):
        return True
    return isinstance(raw, str) and raw in _INDUSTRY_VALUES


def catalog_miss(kind: str, ref: str, industry) -> EngineMessage:
    label = industry.value if isinstance(industry, Industry) else industry
    logger.warning("Catalog miss: %s %s references industry %r", kind, ref, label)
    return EngineMessage(
        level=MessageLevel.WARNING,
        code="catalog_miss",
        text=f"{kind} {ref}: industrie inconnue '{label}', entrée ignorée.",
        ref=ref,
    )


def invalid_input(kind: str, ref: str, error: ValidationError) -> EngineMessage:
    logger.warning("Invalid %s %s: %s", kind, ref, error)
    return EngineMessage(
        level=MessageLevel.WARNING,
        code="invalid_input",
        text=f"{kind} {ref} invalide, entrée ignorée: {error.error_count()} erreur(s).",
        ref=ref,
    )


def coerce_companies(
    companies: Optional[Iterable[CompanyLike]],
) -> Tuple[List[Company], List[EngineMessage]]:
    """Valide des entreprises brutes (dict JSON) ou déjà construites."""
    valid: List[Company] = []
    warnings: List[EngineMessage] = []

    for raw in companies or []:
        if isinstance(raw, Company):
            valid.append(raw)
            continue
        ref = str(raw.get("id", "?"))
        if not known_industry(raw.get("industry")):
            warnings.append(catalog_miss("Company", ref, raw.get("industry")))
            continue
        try:
            valid.append(Company.model_validate(raw))
        except ValidationError as e:
            warnings.append(invalid_input("Company", ref, e))

    return valid, warnings


def resolve_portfolio_industries(
    companies: Optional[Iterable[CompanyLike]],
    industry_catalog: Optional[IndustryCatalog] = None,
) -> PortfolioResolution:
    """
    Projette le portefeuille sur l'ensemble de ses industries distinctes.

    Args:
        companies: entreprises du joueur (modèles ou dicts). None ou vide
            donne un ensemble vide, jamais une erreur.
        industry_catalog: industries ouvertes dans ce monde ; par défaut
            toutes les industries connues.

    Returns:
        PortfolioResolution avec les industries et les avertissements.
    """
    valid, warnings = coerce_companies(companies)

    industries = set()
    for company in valid:
        if industry_catalog is not None and company.industry not in industry_catalog:
            warnings.append(catalog_miss("Company", company.id, company.industry))
            continue
        industries.add(company.industry)

    return PortfolioResolution(industries=frozenset(industries), warnings=warnings)
