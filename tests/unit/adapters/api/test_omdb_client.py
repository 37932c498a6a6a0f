"""
Tests for OMDbClient - OMDb API client implementation.

Uses respx to mock httpx calls and verifies:
- Search returns SearchResultItem objects in catalog order
- "Response": "False" is reported as CatalogNotFoundError
- Non-2xx and network failures are reported as CatalogTransportError
- Details are parsed into DetailRecord ("N/A" -> None)
"""

import httpx
import pytest
import respx

from popcorn.adapters.api.omdb_client import OMDbClient, parse_rating, parse_runtime
from popcorn.core.entities.catalog import DetailRecord, SearchResultItem
from popcorn.core.ports.api_clients import (
    CatalogNotFoundError,
    CatalogTransportError,
    ICatalogClient,
)
from tests.fixtures.omdb_responses import (
    OMDB_DETAILS_INVALID_ID_RESPONSE,
    OMDB_DETAILS_PARTIAL_RESPONSE,
    OMDB_DETAILS_RESPONSE,
    OMDB_NOT_FOUND_RESPONSE,
    OMDB_SEARCH_RESPONSE,
)

OMDB_URL = "https://www.omdbapi.com/"


@pytest.fixture
def omdb_client() -> OMDbClient:
    """OMDbClient instance with a test key."""
    return OMDbClient(api_key="test_api_key", base_url=OMDB_URL)


class TestOMDbClientInterface:
    def test_implements_interface(self, omdb_client: OMDbClient):
        assert isinstance(omdb_client, ICatalogClient)


class TestOMDbSearch:
    """Tests for OMDbClient.search() method."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_returns_items_in_catalog_order(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL, params={"s": "Inception"}).mock(
            return_value=httpx.Response(200, json=OMDB_SEARCH_RESPONSE)
        )

        items = await omdb_client.search("Inception")

        assert items == [
            SearchResultItem(
                id="tt1375666",
                title="Inception",
                media_type="movie",
                release_year="2010",
                poster_url="https://m.media-amazon.com/images/M/inception.jpg",
            ),
            SearchResultItem(
                id="tt5295894",
                title="Inception: The Cobol Job",
                media_type="movie",
                release_year="2010",
                poster_url=None,
            ),
        ]
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_sends_api_key_and_query(self, omdb_client: OMDbClient):
        route = respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_SEARCH_RESPONSE)
        )

        await omdb_client.search("Inception")

        request = route.calls.last.request
        assert request.url.params["apikey"] == "test_api_key"
        assert request.url.params["s"] == "Inception"
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_not_found_raises(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_NOT_FOUND_RESPONSE)
        )

        with pytest.raises(CatalogNotFoundError) as exc_info:
            await omdb_client.search("zzzzzqqqqq")

        assert exc_info.value.reason == "movie not found"
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("status", [401, 404, 500, 503])
    async def test_search_non_2xx_raises_transport_error(self, omdb_client: OMDbClient, status):
        respx.get(OMDB_URL).mock(return_value=httpx.Response(status))

        with pytest.raises(CatalogTransportError) as exc_info:
            await omdb_client.search("Inception")

        assert exc_info.value.reason == "api error"
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_network_error_raises_transport_error(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(CatalogTransportError):
            await omdb_client.search("Inception")
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_invalid_json_raises_transport_error(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(CatalogTransportError):
            await omdb_client.search("Inception")
        await omdb_client.close()


class TestOMDbGetDetails:
    """Tests for OMDbClient.get_details() method."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_details_parses_record(self, omdb_client: OMDbClient):
        route = respx.get(OMDB_URL, params={"i": "tt1375666"}).mock(
            return_value=httpx.Response(200, json=OMDB_DETAILS_RESPONSE)
        )

        details = await omdb_client.get_details("tt1375666")

        assert route.called
        assert details == DetailRecord(
            id="tt1375666",
            title="Inception",
            release_year="2010",
            poster_url="https://m.media-amazon.com/images/M/inception.jpg",
            runtime_minutes=148,
            external_rating=8.8,
            plot=OMDB_DETAILS_RESPONSE["Plot"],
            release_date="16 Jul 2010",
            actors="Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
            director="Christopher Nolan",
            genre="Action, Adventure, Sci-Fi",
        )
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_details_partial_fields(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_DETAILS_PARTIAL_RESPONSE)
        )

        details = await omdb_client.get_details("tt0999999")

        assert details.title == "Some Short"
        assert details.runtime_minutes is None
        assert details.external_rating is None
        assert details.poster_url is None
        assert details.plot is None
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_details_invalid_id_returns_partial_record(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(
            return_value=httpx.Response(200, json=OMDB_DETAILS_INVALID_ID_RESPONSE)
        )

        details = await omdb_client.get_details("tt0000000")

        assert details == DetailRecord(id="tt0000000")
        await omdb_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_details_server_error_raises(self, omdb_client: OMDbClient):
        respx.get(OMDB_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(CatalogTransportError):
            await omdb_client.get_details("tt1375666")
        await omdb_client.close()


class TestParsers:
    @pytest.mark.parametrize(
        "raw, expected",
        [("148 min", 148), ("90 min", 90), ("N/A", None), (None, None), ("", None), ("abc", None)],
    )
    def test_parse_runtime(self, raw, expected):
        assert parse_runtime(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("8.8", 8.8), ("10", 10.0), ("N/A", None), (None, None), ("x", None)],
    )
    def test_parse_rating(self, raw, expected):
        assert parse_rating(raw) == expected


class TestClose:
    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self, omdb_client: OMDbClient):
        await omdb_client.close()
        await omdb_client.close()
