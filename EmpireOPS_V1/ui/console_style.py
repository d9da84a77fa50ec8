# EmpireOPS_V1/ui/console_style.py
from EmpireOPS_V1.domain.types import SynergyTier

RESET = "\033[0m"

_CODES = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[96m",
    "green": "\033[92m",
    "red": "\033[91m",
    "yellow": "\033[93m",
    "magenta": "\033[95m",
}

# couleur d'affichage de chaque palier
TIER_STYLE = {
    SynergyTier.BASIC: "cyan",
    SynergyTier.ADVANCED: "green",
    SynergyTier.ELITE: "magenta",
    SynergyTier.ULTIMATE: "yellow",
}


def style(text: str, name: str) -> str:
    return f"{_CODES[name]}{text}{RESET}"


def bold(text: str) -> str:
    return style(text, "bold")


def dim(text: str) -> str:
    return style(text, "dim")


def green(text: str) -> str:
    return style(text, "green")


def yellow(text: str) -> str:
    return style(text, "yellow")


def tier_style(text: str, tier: SynergyTier) -> str:
    return style(text, TIER_STYLE[tier])
