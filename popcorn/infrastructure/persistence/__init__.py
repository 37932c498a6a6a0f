"""Persistance de la liste des films vus."""

from popcorn.infrastructure.persistence.store import DiskKeyValueStore, WATCHED_KEY

__all__ = ["DiskKeyValueStore", "WATCHED_KEY"]
