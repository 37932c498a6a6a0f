"""
Poignees d'operations asynchrones annulables.

Chaque requete reseau lancee par un controleur est representee par une
FetchHandle. Le controleur appelle cancel() sur la poignee precedente avant
d'en demarrer une nouvelle.
"""

import asyncio
from typing import Optional


class FetchHandle:
    """
    Poignee sur une requete en cours.

    Attributes:
        key: Cle de la requete (texte recherche ou identifiant catalogue)
    """

    def __init__(self, key: str) -> None:
        self.key = key
        self._task: Optional[asyncio.Task] = None
        self._cancelled = False

    def attach(self, task: asyncio.Task) -> None:
        """Associe la tache asyncio qui execute la requete."""
        self._task = task

    @property
    def cancelled(self) -> bool:
        """True si cancel() a ete appele."""
        return self._cancelled

    @property
    def done(self) -> bool:
        """True si la requete est terminee (ou n'a jamais ete lancee)."""
        return self._task is None or self._task.done()

    def cancel(self) -> None:
        """Signale l'abandon de la requete. Sans effet si deja terminee."""
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> None:
        """Attend la fin de la requete, sans lever si elle a ete annulee."""
        if self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    def __repr__(self) -> str:
        return f"FetchHandle(key={self.key!r}, done={self.done}, cancelled={self.cancelled})"
