import logging

from EmpireOPS_V1.core.acquisitions import (
    market_overview,
    parse_targets,
    score_acquisitions,
)
from EmpireOPS_V1.core.empire import activation_xp, evaluate_empire
from EmpireOPS_V1.data import (
    get_ACQUISITION_MARKET,
    get_DEMO_PORTFOLIO,
    get_INDUSTRY_CATALOG,
    get_STACKING_RULES,
    get_SYNERGY_CATALOG,
    get_SYNERGY_PREMIUM,
)
from EmpireOPS_V1.rules.valuation import valuate_target
from EmpireOPS_V1.ui.empire_view import (
    show_acquisition_browser,
    show_synergy_panel,
    show_valuation,
    show_warnings,
)


def run():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    catalog = get_SYNERGY_CATALOG()
    industries = get_INDUSTRY_CATALOG()
    rules = get_STACKING_RULES()
    portfolio = get_DEMO_PORTFOLIO()

    evaluation = evaluate_empire(
        portfolio.companies,
        portfolio.level,
        catalog,
        industry_catalog=industries,
        rules=rules,
    )
    show_synergy_panel(evaluation, portfolio)
    print(f"\nXP d'activation des synergies actives : {activation_xp(evaluation.active)}")

    targets, warnings = parse_targets(get_ACQUISITION_MARKET(), industries)
    scored = score_acquisitions(evaluation.potential, targets, sort_by="synergy")
    show_acquisition_browser(scored, market_overview(scored))
    show_warnings(warnings)

    if scored:
        best = scored[0]
        show_valuation(best, valuate_target(best, get_SYNERGY_PREMIUM()))


if __name__ == "__main__":
    run()
