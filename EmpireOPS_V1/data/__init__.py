"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets globaux calculés au chargement :
chaque appel relit le JSON, l'appelant garde le résultat s'il le réutilise.
"""


def get_SYNERGY_CATALOG():
    from EmpireOPS_V1.domain.synergy import load_synergy_catalog
    from EmpireOPS_V1.utils import DATA_DIR

    return load_synergy_catalog(DATA_DIR / "synergy_catalog.json")


def get_INDUSTRY_CATALOG():
    from EmpireOPS_V1.domain.catalog import IndustryCatalog
    from EmpireOPS_V1.utils import DATA_DIR, load_and_validate

    return load_and_validate(DATA_DIR / "industries.json", IndustryCatalog)


def get_STACKING_RULES():
    from EmpireOPS_V1.rules.stacking import load_stacking_rules

    return load_stacking_rules()


def get_EMPIRE_LEVELS():
    from EmpireOPS_V1.domain.empire import EmpireLevelTable
    from EmpireOPS_V1.utils import DATA_DIR, load_and_validate

    return load_and_validate(DATA_DIR / "empire_levels.json", EmpireLevelTable)


def get_ACQUISITION_MARKET():
    # flux brut : la validation (et les avertissements) passe par parse_targets
    from EmpireOPS_V1.utils import DATA_DIR, load_json

    return load_json(DATA_DIR / "acquisition_market.json")


def get_DEMO_PORTFOLIO():
    from EmpireOPS_V1.domain.company import Portfolio
    from EmpireOPS_V1.utils import DATA_DIR, load_and_validate

    return load_and_validate(DATA_DIR / "demo_portfolio.json", Portfolio)


def get_SYNERGY_PREMIUM():
    from EmpireOPS_V1.rules.valuation import load_synergy_premium

    return load_synergy_premium()
