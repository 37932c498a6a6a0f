"""
Coordinateur de selection.

Suit l'unique titre ouvert en vue detail (ou aucun). Selectionner a nouveau
le titre actif le referme.
"""

from typing import Callable, Optional

from loguru import logger

SelectionListener = Callable[[Optional[str]], None]


class SelectionCoordinator:
    """
    Selection d'au plus un identifiant, avec semantique de bascule.

    Les observateurs sont notifies a chaque changement effectif, avec le
    nouvel identifiant actif ou None.
    """

    def __init__(self) -> None:
        self._selected_id: Optional[str] = None
        self._listeners: list[SelectionListener] = []

    @property
    def selected_id(self) -> Optional[str]:
        """Identifiant actuellement ouvert, ou None."""
        return self._selected_id

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Enregistre un observateur des changements de selection.

        Returns:
            Fonction de desinscription
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def select(self, item_id: str) -> Optional[str]:
        """
        Ouvre item_id, ou referme la selection si item_id est deja actif.

        Returns:
            Le nouvel identifiant actif (None apres une bascule)
        """
        new_id = None if item_id == self._selected_id else item_id
        self._set(new_id)
        return new_id

    def close(self) -> None:
        """Referme inconditionnellement la selection."""
        self._set(None)

    def _set(self, new_id: Optional[str]) -> None:
        if new_id == self._selected_id:
            return
        self._selected_id = new_id
        logger.debug("Selection modifiee", selected_id=new_id)
        for listener in list(self._listeners):
            listener(new_id)
