"""Tests for the ListenBrainz listen-state connector."""

import httpx
import pytest

from np_enhancer.domain.exceptions import ListenSourceError
from np_enhancer.infrastructure.connectors import CachingFetcher, ListenBrainzConnector
from tests.fixtures.payloads import lb_listens, lb_track_metadata
from tests.fixtures.transport import FakeServices

PLAYING_NOW = ("api.listenbrainz.org", "/1/user/rob/playing-now")
LISTENS = ("api.listenbrainz.org", "/1/user/rob/listens")


@pytest.fixture
def services():
    return FakeServices(
        {
            PLAYING_NOW: (200, lb_listens(lb_track_metadata(track_name="Live"), playing_now=True)),
            LISTENS: (200, lb_listens(lb_track_metadata(track_name="Earlier"))),
        }
    )


@pytest.fixture
def connector(services, cache):
    return ListenBrainzConnector(
        fetcher=CachingFetcher(cache=cache, client=services.client()),
        base_url="https://api.listenbrainz.org/1",
    )


class TestListenBrainzConnector:
    """Test cases for listen-state retrieval."""

    async def test_get_playing_now(self, connector):
        listens = await connector.get_playing_now("rob")

        assert len(listens) == 1
        assert listens[0].playing_now
        assert listens[0].track_metadata.track_name == "Live"

    async def test_get_recent_listens_requests_single_listen(self, connector, services):
        listens = await connector.get_recent_listens("rob")

        assert listens[0].track_metadata.track_name == "Earlier"
        assert services.requests[0].url.params["count"] == "1"

    async def test_listen_state_never_cached(self, connector, services, cache):
        await connector.get_playing_now("rob")
        await connector.get_playing_now("rob")

        assert len(services.requests) == 2
        assert cache.size == 0

    async def test_empty_payload(self, connector, services):
        services.routes[PLAYING_NOW] = (200, {"payload": {"count": 0, "listens": []}})
        assert await connector.get_playing_now("rob") == []

    async def test_non_ok_is_fatal(self, connector, services):
        services.routes[PLAYING_NOW] = (500, {"error": "boom"})

        with pytest.raises(ListenSourceError) as exc_info:
            await connector.get_playing_now("rob")

        assert exc_info.value.status_code == 500
        assert exc_info.value.url.endswith("/user/rob/playing-now")

    async def test_transport_error_is_fatal(self, cache):
        def explode(request):
            raise httpx.ConnectError("unreachable", request=request)

        connector = ListenBrainzConnector(
            fetcher=CachingFetcher(
                cache=cache,
                client=httpx.AsyncClient(transport=httpx.MockTransport(explode)),
            )
        )
        with pytest.raises(ListenSourceError):
            await connector.get_recent_listens("rob")
