"""
Fixtures pytest partagees pour les tests Popcorn.

Ce module contient les fixtures communes utilisees dans les tests:
- Stockage cle/valeur en memoire
- Faux catalogue pilote par le test (ordre de completion controle)
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest

from popcorn.config import Settings
from popcorn.core.entities.catalog import DetailRecord, SearchResultItem
from tests.fixtures.fakes import InMemoryStore, ScriptedCatalogClient


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def catalog() -> ScriptedCatalogClient:
    return ScriptedCatalogClient()


@pytest.fixture
def inception_item() -> SearchResultItem:
    return SearchResultItem(
        id="tt1375666",
        title="Inception",
        media_type="movie",
        release_year="2010",
        poster_url="https://m.media-amazon.com/images/M/inception.jpg",
    )


@pytest.fixture
def interstellar_item() -> SearchResultItem:
    return SearchResultItem(
        id="tt0816692",
        title="Interstellar",
        media_type="movie",
        release_year="2014",
        poster_url="https://m.media-amazon.com/images/M/interstellar.jpg",
    )


@pytest.fixture
def inception_detail() -> DetailRecord:
    return DetailRecord(
        id="tt1375666",
        title="Inception",
        release_year="2010",
        poster_url="https://m.media-amazon.com/images/M/inception.jpg",
        runtime_minutes=148,
        external_rating=8.8,
        plot="A thief who steals corporate secrets through dream-sharing technology...",
        release_date="16 Jul 2010",
        actors="Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
        director="Christopher Nolan",
        genre="Action, Adventure, Sci-Fi",
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        omdb_api_key="test_api_key",
        omdb_base_url="https://www.omdbapi.com/",
        store_dir=tmp_path / "store",
        search_debounce_seconds=0.0,
        log_file=tmp_path / "test.log",
    )
