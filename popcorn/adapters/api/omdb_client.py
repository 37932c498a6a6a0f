"""
Client OMDb pour la recherche et la recuperation des details de films.

Implemente l'interface ICatalogClient pour OMDb (Open Movie Database).
Aucun retry : un echec est remonte immediatement sous forme d'erreur
classifiee (CatalogTransportError / CatalogNotFoundError).

Usage:
    client = OMDbClient(api_key="your_key")
    items = await client.search("Inception")
    details = await client.get_details("tt1375666")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from popcorn.core.entities.catalog import DetailRecord, SearchResultItem
from popcorn.core.ports.api_clients import (
    CatalogNotFoundError,
    CatalogTransportError,
    ICatalogClient,
)

# Valeur de remplissage utilisee par OMDb pour les champs absents
OMDB_MISSING = "N/A"


def _clean(value: Any) -> Optional[str]:
    """Retourne None pour les champs absents ou "N/A"."""
    if value is None:
        return None
    value = str(value).strip()
    if not value or value == OMDB_MISSING:
        return None
    return value


def parse_runtime(value: Any) -> Optional[int]:
    """
    Extrait la duree en minutes d'un champ Runtime OMDb.

    Args:
        value: Valeur brute ("148 min", "N/A", None)

    Returns:
        Nombre de minutes, ou None si non interpretable
    """
    cleaned = _clean(value)
    if cleaned is None:
        return None
    head = cleaned.split(" ")[0]
    try:
        return int(head)
    except ValueError:
        return None


def parse_rating(value: Any) -> Optional[float]:
    """Convertit imdbRating ("8.8") en float, None si absent."""
    cleaned = _clean(value)
    if cleaned is None:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


class OMDbClient(ICatalogClient):
    """
    Client API OMDb.

    Implemente ICatalogClient avec:
    - Recherche par titre (parametre s)
    - Details par identifiant IMDb (parametre i)

    L'URL de base et la cle API sont injectees (voir Settings et Container).

    Example:
        client = OMDbClient(api_key="xxx")

        items = await client.search("Interstellar")
        if items:
            details = await client.get_details(items[0].id)
            print(f"{details.title} ({details.release_year}) - {details.genre}")

        await client.close()
    """

    OMDB_BASE_URL = "https://www.omdbapi.com/"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb
            base_url: URL de base du service
            timeout: Timeout transport en secondes
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            params = {"apikey": self._api_key} if self._api_key else {}
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get_json(self, params: dict[str, str]) -> dict[str, Any]:
        """
        Execute un GET sur l'endpoint unique d'OMDb et decode le JSON.

        Raises:
            CatalogTransportError: Reponse non-2xx, erreur reseau ou JSON invalide
        """
        client = self._get_client()
        try:
            response = await client.get("", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.debug("Reponse OMDb en erreur", status=e.response.status_code)
            raise CatalogTransportError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.debug("Echec reseau OMDb", error=str(e))
            raise CatalogTransportError(str(e)) from e
        except ValueError as e:
            raise CatalogTransportError("Reponse OMDb illisible") from e

        if not isinstance(data, dict):
            raise CatalogTransportError("Reponse OMDb inattendue")
        return data

    async def search(self, query: str) -> list[SearchResultItem]:
        """
        Recherche des titres par texte libre.

        Args:
            query: Titre a rechercher

        Returns:
            Liste de SearchResultItem dans l'ordre d'OMDb

        Raises:
            CatalogTransportError: Echec transport
            CatalogNotFoundError: OMDb repond Response == "False"
        """
        data = await self._get_json({"s": query})

        if data.get("Response") == "False":
            logger.debug("Aucun resultat OMDb", query=query, error=data.get("Error"))
            raise CatalogNotFoundError(data.get("Error") or "")

        items = []
        for item in data.get("Search") or []:
            items.append(
                SearchResultItem(
                    id=str(item.get("imdbID", "")),
                    title=item.get("Title", ""),
                    media_type=item.get("Type", ""),
                    release_year=_clean(item.get("Year")),
                    poster_url=_clean(item.get("Poster")),
                )
            )
        return items

    async def get_details(self, item_id: str) -> DetailRecord:
        """
        Recupere les details complets d'un titre.

        Un identifiant invalide produit un DetailRecord partiel (OMDb renvoie
        alors seulement Response/Error).

        Args:
            item_id: Identifiant IMDb (ttXXXXXXX)

        Returns:
            DetailRecord

        Raises:
            CatalogTransportError: Echec transport
        """
        data = await self._get_json({"i": item_id})

        return DetailRecord(
            id=str(data.get("imdbID") or item_id),
            title=data.get("Title", ""),
            release_year=_clean(data.get("Year")),
            poster_url=_clean(data.get("Poster")),
            runtime_minutes=parse_runtime(data.get("Runtime")),
            external_rating=parse_rating(data.get("imdbRating")),
            plot=_clean(data.get("Plot")),
            release_date=_clean(data.get("Released")),
            actors=_clean(data.get("Actors")),
            director=_clean(data.get("Director")),
            genre=_clean(data.get("Genre")),
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
