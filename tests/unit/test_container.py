"""
Tests pour le container d'injection de dependances.
"""

import pytest
from dependency_injector import providers

from popcorn.adapters.api.omdb_client import OMDbClient
from popcorn.container import Container
from popcorn.services.browser import BrowserSession


@pytest.fixture
def container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.watched_store().close()


class TestContainer:
    def test_catalog_client_is_singleton(self, container):
        client = container.catalog_client()
        assert isinstance(client, OMDbClient)
        assert client is container.catalog_client()

    def test_watched_list_shared_between_sessions(self, container):
        first = container.browser_session()
        second = container.browser_session()

        assert isinstance(first, BrowserSession)
        assert first is not second
        assert first.watched is second.watched

    def test_store_uses_configured_directory(self, container, test_settings):
        assert container.watched_store().directory == test_settings.store_dir
        assert test_settings.store_dir.is_dir()
