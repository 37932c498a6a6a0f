"""
Session de navigation.

Assemble le controleur de recherche, le coordinateur de selection, le
chargeur de details et la liste des films vus. C'est l'unique objet
manipule par la couche de presentation : elle lit l'etat expose et
transmet les intentions de l'utilisateur (texte, selection, ajout,
suppression).
"""

from typing import Optional

from loguru import logger

from popcorn.core.entities.watched import Rating, WatchedEntry, WatchedSummary
from popcorn.core.ports.api_clients import ICatalogClient
from popcorn.services.detail_fetcher import DetailFetcher
from popcorn.services.handles import FetchHandle
from popcorn.services.search_controller import MIN_QUERY_LENGTH, SearchController
from popcorn.services.selection import SelectionCoordinator
from popcorn.services.watched_list import WatchedListError, WatchedListManager


class BrowserSession:
    """
    Etat applicatif d'une session interactive.

    Attributes:
        selection: Titre ouvert en vue detail
        search: Controleur de recherche (referme la selection a chaque requete)
        details: Detail du titre ouvert (suit la selection)
        watched: Liste persistante des films vus
    """

    def __init__(
        self,
        client: ICatalogClient,
        watched: WatchedListManager,
        min_query_length: int = MIN_QUERY_LENGTH,
        debounce_seconds: float = 0.0,
    ) -> None:
        self.selection = SelectionCoordinator()
        self.search = SearchController(
            client,
            selection=self.selection,
            min_query_length=min_query_length,
            debounce_seconds=debounce_seconds,
        )
        self.details = DetailFetcher(client)
        self._unbind_details = self.details.bind(self.selection)
        self.watched = watched

    def set_query(self, text: str) -> FetchHandle:
        """Transmet le nouveau texte de recherche."""
        return self.search.set_query(text)

    def select(self, item_id: str) -> Optional[str]:
        """Ouvre (ou referme, si deja ouvert) le detail de item_id."""
        return self.selection.select(item_id)

    def close_detail(self) -> None:
        self.selection.close()

    async def wait_for_detail(self) -> None:
        """Attend la fin du chargement du detail en cours, s'il y en a un."""
        handle = self.details.pending
        if handle is not None:
            await handle.wait()

    def add_watched(self, user_rating: Optional[Rating]) -> WatchedEntry:
        """
        Ajoute le titre ouvert a la liste avec la note donnee, puis referme le detail.

        Raises:
            WatchedListError: Aucun detail charge, note absente ou titre deja vu
        """
        record = self.details.record
        if record is None:
            raise WatchedListError("Aucun detail charge")
        entry = self.watched.add_from_detail(record, user_rating)
        self.selection.close()
        return entry

    def delete_watched(self, item_id: str) -> int:
        return self.watched.remove(item_id)

    def summary(self) -> WatchedSummary:
        return self.watched.summary()

    async def aclose(self) -> None:
        """Annule les requetes en vol et detache le chargeur de details."""
        await self.search.aclose()
        await self.details.aclose()
        self._unbind_details()
        logger.debug("Session de navigation fermee")
