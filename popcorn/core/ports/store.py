"""
Interface port pour le stockage durable cle -> chaine.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """
    Stockage durable de blobs texte indexes par cle.

    Les ecritures sont synchrones et en last-writer-wins : aucune fusion
    n'est faite entre deux ecritures sur la meme cle.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retourne la valeur stockee, ou None si la cle est absente."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Remplace la valeur stockee pour la cle."""
        ...

    def close(self) -> None:
        """Ferme le stockage (no-op par defaut)."""
        return None
