"""
Stockage cle/valeur persistant sur disque.

Utilise diskcache (SQLite sous le capot) pour conserver la liste des films
vus entre les redemarrages. Les entrees n'expirent jamais.

Usage:
    store = DiskKeyValueStore(store_dir="~/.popcorn/store")
    store.set(WATCHED_KEY, "[]")
    raw = store.get(WATCHED_KEY)
    store.close()
"""

from pathlib import Path
from typing import Optional, Union

from diskcache import Cache
from loguru import logger

from popcorn.core.ports.store import IKeyValueStore

# Cle fixe identifiant la liste des films vus
WATCHED_KEY = "watched"


class DiskKeyValueStore(IKeyValueStore):
    """
    Implementation de IKeyValueStore adossee a un repertoire diskcache.

    Attributes:
        directory: Repertoire de stockage (cree si inexistant)
    """

    def __init__(self, store_dir: Union[str, Path] = "~/.popcorn/store") -> None:
        """
        Initialise le stockage.

        Args:
            store_dir: Chemin vers le repertoire du stockage (~ etendu)
        """
        self.directory = Path(store_dir).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self._cache = Cache(str(self.directory))

    def get(self, key: str) -> Optional[str]:
        value = self._cache.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Valeur ecrite par autre chose que ce stockage
            logger.warning("Valeur non textuelle ignoree", key=key, type=type(value).__name__)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        self._cache.set(key, value)
        logger.debug("Valeur persistee", key=key, size=len(value))

    def close(self) -> None:
        """Ferme la connexion au stockage (a appeler a la fin)."""
        self._cache.close()
