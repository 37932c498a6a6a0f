"""
Couche application (services).

- search_controller : recherche annulable et classification des reponses
- detail_fetcher : detail du titre selectionne
- selection : titre ouvert en vue detail
- watched_list : liste persistante des films vus
- browser : session assemblant les composants ci-dessus
"""

from popcorn.services.browser import BrowserSession
from popcorn.services.detail_fetcher import (
    DetailFailed,
    DetailFetcher,
    DetailIdle,
    DetailLoaded,
    DetailLoading,
)
from popcorn.services.handles import FetchHandle
from popcorn.services.search_controller import (
    Empty,
    Failed,
    Loading,
    Results,
    SearchController,
)
from popcorn.services.selection import SelectionCoordinator
from popcorn.services.watched_list import (
    DuplicateWatchedEntryError,
    MissingRatingError,
    WatchedListError,
    WatchedListManager,
)

__all__ = [
    "BrowserSession",
    "DetailFetcher",
    "DetailIdle",
    "DetailLoading",
    "DetailLoaded",
    "DetailFailed",
    "FetchHandle",
    "SearchController",
    "Loading",
    "Results",
    "Empty",
    "Failed",
    "SelectionCoordinator",
    "WatchedListManager",
    "WatchedListError",
    "MissingRatingError",
    "DuplicateWatchedEntryError",
]
