# EmpireOPS_V1/ui/empire_view.py
from typing import Iterable, List, Optional

from EmpireOPS_V1.core.acquisitions import HIGH_SYNERGY_THRESHOLD, MarketOverview
from EmpireOPS_V1.core.empire import EmpireEvaluation, empire_summary
from EmpireOPS_V1.core.results import EngineMessage, PotentialSynergy
from EmpireOPS_V1.core.synergies import visible_potentials
from EmpireOPS_V1.domain.acquisition import AcquisitionTarget
from EmpireOPS_V1.domain.company import Portfolio
from EmpireOPS_V1.rules.valuation import Valuation
from EmpireOPS_V1.ui.console_style import bold, dim, green, tier_style, yellow
from EmpireOPS_V1.utils import (
    format_currency,
    format_industry,
    format_months,
    format_multiple,
    tier_label,
)


# ---------- Helpers de formatage ----------


def _bar(percent: int, width: int = 20, fill_char: str = "█") -> str:
    ratio = max(0.0, min(1.0, percent / 100.0))
    n = int(round(ratio * width))
    return fill_char * n + "░" * (width - n)


def _industries(industries: Iterable) -> str:
    return ", ".join(format_industry(i) for i in industries) or "—"


def _potential_line(p: PotentialSynergy) -> str:
    lock = f" 🔒 niveau {p.unlock_level}" if p.locked else ""
    missing = sorted(p.missing_industries, key=lambda i: i.value)
    return (
        f"  {_bar(p.percent_complete)} {p.percent_complete:3d}%  "
        f"{tier_style(p.name, p.tier)}{lock}\n"
        f"      manque : {_industries(missing)}"
        f"  (~+{p.estimated_bonus_percent:.0f}%)"
    )


# ---------- Vues ----------


def show_warnings(warnings: List[EngineMessage]) -> None:
    for w in warnings:
        print(yellow(f"⚠ [{w.code}] {w.text}"))


def show_synergy_panel(
    evaluation: EmpireEvaluation,
    portfolio: Optional[Portfolio] = None,
    horizon: int = 5,
) -> None:
    """Panneau de synergies : actives, cumul, puis synergies à portée."""
    summary = empire_summary(evaluation)
    bonuses = evaluation.bonuses

    print(bold(f"\n=== Synergies de l'empire (niveau {evaluation.level}) ==="))
    print(f"Industries : {_industries(evaluation.industries)}")
    if portfolio is not None:
        print(
            f"Entreprises : {len(portfolio.companies)}  |  "
            f"Valeur : {format_currency(portfolio.total_value)}  |  "
            f"CA : {format_currency(portfolio.monthly_revenue)}/mois"
        )
    print(
        f"Actives : {summary.active_synergies}  |  "
        f"Multiplicateur : x{bonuses.stack_multiplier:.1f}  |  "
        f"Bonus total : +{bonuses.total_bonus_percent}%  |  "
        f"Proches : {evaluation.near_unlock}"
    )
    print(
        f"Revenus +{summary.total_revenue_bonus}%  "
        f"Coûts -{summary.total_cost_reduction}%  "
        f"Efficacité +{summary.total_efficiency_bonus}%"
    )

    if evaluation.active:
        print(bold("\nActives"))
    for synergy in evaluation.active:
        print(
            f"  ✔ {tier_style(synergy.name, synergy.tier)} "
            f"[{tier_label(synergy.tier)}]  +{synergy.final_bonus_percent}%"
        )
        for bonus in synergy.bonuses:
            print(dim(f"      {bonus.description}"))

    if bonuses.unlocked_features:
        print(bold("\nFonctionnalités débloquées"))
        for feature in bonuses.unlocked_features:
            print(green(f"  ★ {feature}"))

    shown = visible_potentials(evaluation.potential, evaluation.level, horizon)
    if shown:
        print(bold("\nÀ portée"))
    for p in shown:
        print(_potential_line(p))

    show_warnings(evaluation.warnings)


def show_acquisition_browser(
    targets: List[AcquisitionTarget], overview: MarketOverview
) -> None:
    print(bold("\n=== Marché des acquisitions ==="))
    median_price = (
        format_currency(overview.median_price) if overview.median_price else "—"
    )
    print(
        f"Disponibles : {overview.available}  |  "
        f"Forte synergie : {overview.high_synergy}  |  "
        f"Prix médian : {median_price}  |  "
        f"Multiple médian : {format_multiple(overview.median_revenue_multiple)}"
    )
    for t in targets:
        badge = " 🔥" if t.synergy_potential >= HIGH_SYNERGY_THRESHOLD else ""
        print(
            f"\n  {bold(t.name)} — {format_industry(t.industry)} niv. {t.level}{badge}\n"
            f"    Prix {format_currency(t.price)}  |  "
            f"CA {format_currency(t.monthly_revenue)}/mois  |  "
            f"Marge {t.profit_margin_percent:.0f}%"
        )
        if t.synergy_potential:
            print(
                green(
                    f"    Débloque {t.synergy_potential} synergie(s) : "
                    f"{', '.join(t.affected_synergy_ids)}"
                )
            )
        for h in t.highlights:
            print(dim(f"    • {h}"))


def show_valuation(target: AcquisitionTarget, valuation: Valuation) -> None:
    print(bold(f"\n--- Valorisation : {target.name} ---"))
    print(f"CA annuel       : {format_currency(valuation.annual_revenue)}")
    print(f"Multiple de CA  : {format_multiple(valuation.revenue_multiple)}")
    print(f"Retour sur prix : {format_months(valuation.payback_months)}")
    print(f"ROI annuel      : {valuation.annual_roi_percent}%")
    print(
        f"Prix ajusté     : {format_currency(valuation.adjusted_price)} "
        f"(prime x{valuation.synergy_premium:.2f})"
    )
