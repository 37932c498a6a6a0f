"""
Catalog entities.

Immutable records produced from the external movie catalog: search result
rows and the full detail record of a single title.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchResultItem:
    """
    One row of a catalog search.

    Produced only by the search controller, in the order returned by the
    catalog. Never patched after reception.

    Attributes:
        id: Opaque catalog identifier (IMDb id for OMDb, e.g. "tt1375666")
        title: Title as returned by the catalog
        media_type: Catalog media type ("movie", "series", "episode", ...)
        release_year: Release year as displayed by the catalog ("2010", "2008-2013")
        poster_url: Poster image URL, None when the catalog has none
    """

    id: str
    title: str
    media_type: str = ""
    release_year: Optional[str] = None
    poster_url: Optional[str] = None


@dataclass(frozen=True)
class DetailRecord:
    """
    Full catalog record for the selected title.

    Attributes:
        id: Catalog identifier
        title: Title
        release_year: Release year as displayed by the catalog
        poster_url: Poster image URL
        runtime_minutes: Runtime in minutes
        external_rating: Catalog rating on a 0-10 scale (IMDb rating)
        plot: Short plot summary
        release_date: Release date as displayed by the catalog ("16 Jul 2010")
        actors: Main cast, comma separated
        director: Director(s), comma separated
        genre: Genres, comma separated
    """

    id: str
    title: str = ""
    release_year: Optional[str] = None
    poster_url: Optional[str] = None
    runtime_minutes: Optional[int] = None
    external_rating: Optional[float] = None
    plot: Optional[str] = None
    release_date: Optional[str] = None
    actors: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
