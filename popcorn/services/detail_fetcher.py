"""
Chargeur de details.

Recupere le DetailRecord du titre selectionne. Cycle de vie independant du
controleur de recherche : Idle -> Loading -> Loaded | Failed, retour a Idle
a la deselection. Une reponse arrivant apres un changement de selection
est ignoree.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, Union

from loguru import logger

from popcorn.core.entities.catalog import DetailRecord
from popcorn.core.ports.api_clients import (
    CatalogError,
    CatalogTransportError,
    ICatalogClient,
)
from popcorn.services.handles import FetchHandle
from popcorn.services.selection import SelectionCoordinator


@dataclass(frozen=True)
class DetailIdle:
    """Aucun titre ouvert."""


@dataclass(frozen=True)
class DetailLoading:
    item_id: str


@dataclass(frozen=True)
class DetailLoaded:
    record: DetailRecord


@dataclass(frozen=True)
class DetailFailed:
    item_id: str
    reason: str


DetailState = Union[DetailIdle, DetailLoading, DetailLoaded, DetailFailed]
DetailListener = Callable[[DetailState], None]


class DetailFetcher:
    """Detail du titre actif, recharge a chaque changement de selection."""

    def __init__(self, client: ICatalogClient) -> None:
        """
        Args:
            client: Client du catalogue
        """
        self._client = client
        self._state: DetailState = DetailIdle()
        self._current: Optional[FetchHandle] = None
        self._listeners: list[DetailListener] = []

    @property
    def state(self) -> DetailState:
        return self._state

    @property
    def record(self) -> Optional[DetailRecord]:
        """Detail charge, None hors etat Loaded."""
        if isinstance(self._state, DetailLoaded):
            return self._state.record
        return None

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, DetailLoading)

    @property
    def pending(self) -> Optional[FetchHandle]:
        """Poignee du chargement en vol, None si aucun."""
        return self._current

    def subscribe(self, listener: DetailListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def bind(self, selection: SelectionCoordinator) -> Callable[[], None]:
        """
        Suit les changements de selection : charge le nouvel identifiant,
        revient a Idle a la deselection.

        Returns:
            Fonction de desinscription
        """

        def on_selection(item_id: Optional[str]) -> None:
            if item_id is None:
                self.clear()
            else:
                self.load_detail(item_id)

        return selection.subscribe(on_selection)

    def load_detail(self, item_id: str) -> FetchHandle:
        """
        Demarre le chargement du detail de item_id.

        Doit etre appele depuis la boucle asyncio.

        Returns:
            Poignee de la requete
        """
        self._cancel_current()
        handle = FetchHandle(item_id)
        self._emit(DetailLoading(item_id))
        handle.attach(asyncio.get_running_loop().create_task(self._run(handle)))
        self._current = handle
        return handle

    def clear(self) -> None:
        """Abandonne le detail courant et revient a Idle."""
        self._cancel_current()
        if not isinstance(self._state, DetailIdle):
            self._emit(DetailIdle())

    async def aclose(self) -> None:
        """Annule le chargement en vol et attend sa terminaison."""
        handle = self._current
        self._cancel_current()
        if handle is not None:
            await handle.wait()

    def _cancel_current(self) -> None:
        if self._current is not None:
            self._current.cancel()
            self._current = None

    async def _run(self, handle: FetchHandle) -> None:
        try:
            record = await self._client.get_details(handle.key)
        except asyncio.CancelledError:
            logger.debug("Chargement du detail interrompu", id=handle.key)
            raise
        except CatalogError as e:
            state: DetailState = DetailFailed(handle.key, e.reason)
        except Exception:
            logger.exception("Erreur inattendue du catalogue", id=handle.key)
            state = DetailFailed(handle.key, CatalogTransportError.reason)
        else:
            state = DetailLoaded(record)

        if handle.cancelled or handle is not self._current:
            logger.debug("Detail obsolete ignore", id=handle.key)
            return

        self._current = None
        self._emit(state)

    def _emit(self, state: DetailState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
