"""
Controleur de recherche.

Transforme le texte de recherche courant en requete catalogue annulable,
classe le resultat (Loading / Results / Empty / Failed) et garantit qu'une
reponse appartenant a une recherche remplacee n'est jamais appliquee.

Usage:
    controller = SearchController(client, selection=selection)
    controller.subscribe(render)
    handle = controller.set_query("Interstellar")
    await handle.wait()
    print(controller.results)
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, Union

from loguru import logger

from popcorn.core.entities.catalog import SearchResultItem
from popcorn.core.ports.api_clients import (
    CatalogError,
    CatalogTransportError,
    ICatalogClient,
)
from popcorn.services.handles import FetchHandle
from popcorn.services.selection import SelectionCoordinator

MIN_QUERY_LENGTH = 3


@dataclass(frozen=True)
class Loading:
    """Requete en cours."""


@dataclass(frozen=True)
class Results:
    """Resultats de recherche, dans l'ordre du catalogue."""

    items: tuple[SearchResultItem, ...] = ()


@dataclass(frozen=True)
class Empty:
    """Reponse valide sans aucun titre."""


@dataclass(frozen=True)
class Failed:
    """Echec classifie ("api error", "movie not found")."""

    reason: str


SearchOutcome = Union[Loading, Results, Empty, Failed]
SearchListener = Callable[[SearchOutcome], None]


class SearchController:
    """
    Proprietaire du texte recherche et de l'unique requete en vol.

    Toutes les methodes s'executent sur la boucle asyncio de l'appelant :
    aucun verrou, l'ordre est garanti par l'annulation explicite de la
    poignee precedente et par la verification de la poignee courante a la
    reception d'une reponse.
    """

    def __init__(
        self,
        client: ICatalogClient,
        selection: Optional[SelectionCoordinator] = None,
        min_query_length: int = MIN_QUERY_LENGTH,
        debounce_seconds: float = 0.0,
    ) -> None:
        """
        Initialise le controleur.

        Args:
            client: Client du catalogue
            selection: Selection a refermer avant chaque nouvelle recherche
            min_query_length: Longueur minimale declenchant un appel reseau
            debounce_seconds: Delai avant l'appel reseau (0 = immediat)
        """
        self._client = client
        self._selection = selection
        self._min_query_length = min_query_length
        self._debounce_seconds = debounce_seconds
        self._query = ""
        self._state: SearchOutcome = Results()
        self._current: Optional[FetchHandle] = None
        self._listeners: list[SearchListener] = []

    @property
    def query(self) -> str:
        return self._query

    @property
    def state(self) -> SearchOutcome:
        """Derniere classification emise."""
        return self._state

    @property
    def results(self) -> tuple[SearchResultItem, ...]:
        """Resultats courants (vide hors etat Results)."""
        if isinstance(self._state, Results):
            return self._state.items
        return ()

    @property
    def error(self) -> str:
        """Message d'erreur courant, chaine vide si aucun."""
        if isinstance(self._state, Failed):
            return self._state.reason
        return ""

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def pending(self) -> Optional[FetchHandle]:
        """Poignee de la requete en vol, None si aucune."""
        return self._current

    def subscribe(self, listener: SearchListener) -> Callable[[], None]:
        """
        Enregistre un observateur des classifications emises.

        Returns:
            Fonction de desinscription
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def set_query(self, text: str) -> FetchHandle:
        """
        Met a jour le texte recherche et planifie la requete correspondante.

        Doit etre appele depuis la boucle asyncio (une tache est creee).

        Args:
            text: Nouveau texte de recherche

        Returns:
            Poignee de la requete (deja terminee si le texte est trop court)
        """
        self._query = text
        self._cancel_current()

        handle = FetchHandle(text)
        if len(text) < self._min_query_length:
            self._emit(Results())
            return handle

        if self._selection is not None:
            self._selection.close()

        self._emit(Loading())
        handle.attach(asyncio.get_running_loop().create_task(self._run(handle)))
        self._current = handle
        logger.debug("Recherche planifiee", query=text)
        return handle

    async def aclose(self) -> None:
        """Annule la requete en vol et attend sa terminaison."""
        handle = self._current
        self._cancel_current()
        if handle is not None:
            await handle.wait()

    def _cancel_current(self) -> None:
        if self._current is not None:
            logger.debug("Recherche precedente annulee", query=self._current.key)
            self._current.cancel()
            self._current = None

    async def _run(self, handle: FetchHandle) -> None:
        try:
            if self._debounce_seconds > 0:
                await asyncio.sleep(self._debounce_seconds)
            items = await self._client.search(handle.key)
        except asyncio.CancelledError:
            # Requete remplacee : jamais d'erreur visible
            logger.debug("Recherche interrompue", query=handle.key)
            raise
        except CatalogError as e:
            outcome: SearchOutcome = Failed(e.reason)
        except Exception:
            logger.exception("Erreur inattendue du catalogue", query=handle.key)
            outcome = Failed(CatalogTransportError.reason)
        else:
            outcome = Results(tuple(items)) if items else Empty()

        if handle.cancelled or handle is not self._current:
            logger.debug("Reponse obsolete ignoree", query=handle.key)
            return

        self._current = None
        logger.debug("Recherche terminee", query=handle.key, outcome=type(outcome).__name__)
        self._emit(outcome)

    def _emit(self, outcome: SearchOutcome) -> None:
        self._state = outcome
        for listener in list(self._listeners):
            listener(outcome)
