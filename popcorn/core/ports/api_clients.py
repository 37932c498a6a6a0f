"""
Interfaces ports pour le client du catalogue.

Le controleur de recherche et le chargeur de details ne connaissent que
ICatalogClient : l'URL de base et la cle API sont injectees dans
l'implementation concrete, ce qui permet de substituer un faux transport
dans les tests.
"""

from abc import ABC, abstractmethod

from popcorn.core.entities.catalog import DetailRecord, SearchResultItem


class CatalogError(Exception):
    """
    Erreur de base du catalogue.

    Attributes:
        reason: Message court presente a l'utilisateur
    """

    reason = "api error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.reason)


class CatalogTransportError(CatalogError):
    """Reponse non-2xx ou echec reseau du catalogue."""

    reason = "api error"


class CatalogNotFoundError(CatalogError):
    """Le catalogue indique explicitement qu'aucun titre ne correspond."""

    reason = "movie not found"


class ICatalogClient(ABC):
    """
    Interface du catalogue de films (endpoints recherche + details).
    """

    @abstractmethod
    async def search(self, query: str) -> list[SearchResultItem]:
        """
        Recherche des titres par texte libre.

        Args :
            query : Texte recherche (titre uniquement)

        Retourne :
            Liste des resultats dans l'ordre du catalogue

        Raises :
            CatalogTransportError : Reponse non-2xx ou erreur reseau
            CatalogNotFoundError : Le catalogue indique "aucun resultat"
        """
        ...

    @abstractmethod
    async def get_details(self, item_id: str) -> DetailRecord:
        """
        Recupere le detail complet d'un titre.

        Args :
            item_id : Identifiant catalogue

        Retourne :
            DetailRecord, eventuellement partiel si l'identifiant est invalide

        Raises :
            CatalogTransportError : Reponse non-2xx ou erreur reseau
        """
        ...

    async def close(self) -> None:
        """Libere les ressources reseau (no-op par defaut)."""
        return None
