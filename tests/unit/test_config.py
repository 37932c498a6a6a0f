"""
Tests pour Settings (pydantic-settings).
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from popcorn.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("POPCORN_OMDB_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.omdb_base_url == "https://www.omdbapi.com/"
        assert settings.min_query_length == 3
        assert settings.omdb_enabled is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("POPCORN_OMDB_API_KEY", "abcd1234")
        monkeypatch.setenv("POPCORN_MIN_QUERY_LENGTH", "4")

        settings = Settings(_env_file=None)

        assert settings.omdb_api_key == "abcd1234"
        assert settings.omdb_enabled is True
        assert settings.min_query_length == 4

    def test_store_dir_expands_home(self):
        settings = Settings(_env_file=None, store_dir="~/popcorn-store")
        assert settings.store_dir == Path.home() / "popcorn-store"

    def test_rejects_negative_debounce(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search_debounce_seconds=-1)
