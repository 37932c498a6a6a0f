"""
Gestionnaire de la liste des films vus.

Collection ordonnee (ordre d'insertion) des WatchedEntry, chargee une seule
fois depuis le stockage a l'initialisation puis resynchronisee integralement
a chaque mutation.

Usage:
    manager = WatchedListManager(store=DiskKeyValueStore(...))
    manager.add_from_detail(details, user_rating=8)
    stats = manager.summary()
    manager.remove("tt1375666")
"""

import json
from typing import Iterator, Optional, Sequence

from loguru import logger

from popcorn.core.entities.catalog import DetailRecord
from popcorn.core.entities.watched import Rating, WatchedEntry, WatchedSummary, is_number
from popcorn.core.ports.store import IKeyValueStore
from popcorn.infrastructure.persistence.store import WATCHED_KEY


class WatchedListError(ValueError):
    """Action utilisateur invalide sur la liste des films vus."""


class MissingRatingError(WatchedListError):
    """Ajout d'une entree sans note utilisateur."""


class DuplicateWatchedEntryError(WatchedListError):
    """Ajout d'un identifiant deja present dans la liste."""


def _mean(values: Sequence[Optional[float]]) -> float:
    """Moyenne arithmetique des valeurs presentes, 0.0 si aucune."""
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return sum(present) / len(present)


class WatchedListManager:
    """
    Liste des films vus, seule entite durable de l'application.

    Le gestionnaire est le seul ecrivain du stockage : chaque mutation
    ecrit un instantane complet de la liste (last-writer-wins).
    """

    def __init__(self, store: IKeyValueStore, key: str = WATCHED_KEY) -> None:
        """
        Initialise le gestionnaire et charge la liste persistee.

        Args:
            store: Stockage cle/valeur durable
            key: Cle de stockage de la liste
        """
        self._store = store
        self._key = key
        self._entries: list[WatchedEntry] = self._load()

    @property
    def entries(self) -> tuple[WatchedEntry, ...]:
        """Entrees dans l'ordre d'insertion."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WatchedEntry]:
        return iter(tuple(self._entries))

    def is_watched(self, item_id: str) -> bool:
        """Indique si l'identifiant est deja dans la liste."""
        return any(entry.id == item_id for entry in self._entries)

    def user_rating_for(self, item_id: str) -> Optional[Rating]:
        """Note donnee par l'utilisateur au titre, None s'il n'est pas vu."""
        for entry in self._entries:
            if entry.id == item_id:
                return entry.user_rating
        return None

    def add(self, entry: WatchedEntry) -> WatchedEntry:
        """
        Ajoute une entree en fin de liste et persiste.

        Args:
            entry: Entree a ajouter (user_rating obligatoire)

        Returns:
            L'entree ajoutee

        Raises:
            MissingRatingError: Si la note utilisateur est absente ou non numerique
            DuplicateWatchedEntryError: Si l'identifiant est deja dans la liste
        """
        if not is_number(entry.user_rating):
            raise MissingRatingError(f"Note utilisateur requise pour {entry.id}")
        if self.is_watched(entry.id):
            raise DuplicateWatchedEntryError(f"{entry.id} est deja dans la liste")

        self._entries.append(entry)
        self._persist()
        logger.info("Film ajoute a la liste", id=entry.id, user_rating=entry.user_rating)
        return entry

    def add_from_detail(self, record: DetailRecord, user_rating: Optional[Rating]) -> WatchedEntry:
        """
        Cree une entree depuis le detail affiche et la note saisie, puis l'ajoute.

        Raises:
            WatchedListError: Voir add()
        """
        entry = WatchedEntry(
            id=record.id,
            title=record.title,
            user_rating=user_rating,
            release_year=record.release_year,
            poster_url=record.poster_url,
            external_rating=record.external_rating,
            runtime_minutes=record.runtime_minutes,
        )
        return self.add(entry)

    def remove(self, item_id: str) -> int:
        """
        Supprime toutes les entrees de cet identifiant et persiste.

        Returns:
            Nombre d'entrees supprimees (0 ou 1 en pratique)
        """
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.id != item_id]
        removed = before - len(self._entries)
        self._persist()
        logger.info("Film retire de la liste", id=item_id, removed=removed)
        return removed

    def summary(self) -> WatchedSummary:
        """
        Calcule le nombre d'entrees et les moyennes.

        Les valeurs absentes (note catalogue ou duree inconnue) sont ignorees
        dans la moyenne correspondante. Liste vide -> tout a 0.
        """
        return WatchedSummary(
            count=len(self._entries),
            avg_external_rating=_mean([e.external_rating for e in self._entries]),
            avg_user_rating=_mean([e.user_rating for e in self._entries]),
            avg_runtime_minutes=_mean([e.runtime_minutes for e in self._entries]),
        )

    def _persist(self) -> None:
        snapshot = json.dumps([entry.to_dict() for entry in self._entries])
        self._store.set(self._key, snapshot)

    def _load(self) -> list[WatchedEntry]:
        """Charge l'instantane persiste, liste vide si absent ou corrompu."""
        raw = self._store.get(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"Liste attendue, obtenu {type(data).__name__}")
            entries = [WatchedEntry.from_dict(item) for item in data]
            ids = [entry.id for entry in entries]
            if len(set(ids)) != len(ids):
                raise ValueError("Identifiants en double dans la liste")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Liste des films vus illisible, ignoree", key=self._key, error=str(e))
            return []

        logger.debug("Liste des films vus chargee", count=len(entries))
        return entries
