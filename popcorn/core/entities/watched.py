"""
Watched list entities.

WatchedEntry is the only entity persisted across sessions.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

Rating = Union[int, float]


def is_number(value: object) -> bool:
    """True pour un int ou float (bool exclu)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_text(value: object) -> bool:
    return isinstance(value, str)


def _optional(data: dict[str, Any], key: str, check) -> Any:
    value = data.get(key)
    if value is not None and not check(value):
        raise TypeError(f"Champ {key} invalide: {value!r}")
    return value


@dataclass(frozen=True)
class WatchedEntry:
    """
    A title the user has watched and rated.

    Attributes:
        id: Catalog identifier, unique within the watched list
        title: Title
        release_year: Release year as displayed by the catalog
        poster_url: Poster image URL
        external_rating: Catalog rating (0-10)
        runtime_minutes: Runtime in minutes
        user_rating: Rating given by the user (required)
    """

    id: str
    title: str
    user_rating: Optional[Rating]
    release_year: Optional[str] = None
    poster_url: Optional[str] = None
    external_rating: Optional[float] = None
    runtime_minutes: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise l'entree en dictionnaire JSON-compatible."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WatchedEntry":
        """
        Reconstruit une entree depuis son dictionnaire serialise.

        Raises:
            KeyError: Si id, title ou user_rating est absent
            TypeError: Si data n'est pas un dictionnaire ou si un champ a un type invalide
        """
        if not isinstance(data, dict):
            raise TypeError(f"Entree invalide: {data!r}")
        if not is_number(data["user_rating"]):
            raise TypeError(f"Note utilisateur invalide: {data['user_rating']!r}")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            user_rating=data["user_rating"],
            release_year=_optional(data, "release_year", _is_text),
            poster_url=_optional(data, "poster_url", _is_text),
            external_rating=_optional(data, "external_rating", is_number),
            runtime_minutes=_optional(data, "runtime_minutes", is_number),
        )


@dataclass(frozen=True)
class WatchedSummary:
    """Statistiques de la liste des films vus (moyennes a 0 si liste vide)."""

    count: int = 0
    avg_external_rating: float = 0.0
    avg_user_rating: float = 0.0
    avg_runtime_minutes: float = 0.0
