"""Entites du domaine Popcorn."""

from popcorn.core.entities.catalog import DetailRecord, SearchResultItem
from popcorn.core.entities.watched import WatchedEntry, WatchedSummary

__all__ = [
    "DetailRecord",
    "SearchResultItem",
    "WatchedEntry",
    "WatchedSummary",
]
