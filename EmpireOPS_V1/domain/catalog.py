"""
Catalogue des industries disponibles dans le monde de jeu.

Un monde peut n'ouvrir qu'une partie des industries (ex: pas de CRIME
en mode « corporate ») : toute entreprise hors catalogue est ignorée par
le moteur de synergies et signalée par un avertissement.
"""

from typing import FrozenSet, Iterator

from pydantic import ConfigDict, RootModel

from EmpireOPS_V1.domain.types import Industry


class CatalogError(ValueError):
    """Catalogue structurellement invalide (erreur fatale au chargement)."""


class IndustryCatalog(RootModel[FrozenSet[Industry]]):
    model_config = ConfigDict(frozen=True)

    def __contains__(self, industry: object) -> bool:
        return industry in self.root

    def __iter__(self) -> Iterator[Industry]:
        # ordre de déclaration de l'enum, pour un affichage stable
        return iter([i for i in Industry if i in self.root])

    def __len__(self) -> int:
        return len(self.root)

    @classmethod
    def full(cls) -> "IndustryCatalog":
        """Catalogue contenant toutes les industries connues."""
        return cls(frozenset(Industry))


def ordered_industries(industries) -> list:
    """Trie un ensemble d'industries selon l'ordre de l'enum Industry."""
    members = set(industries)
    return [i for i in Industry if i in members]
