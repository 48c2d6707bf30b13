"""ListenBrainz listen-state connector.

Fetches the volatile "playing now" and "recent listens" state for a user.
These endpoints are polled per request and must never be served from the
response cache; the caching fetcher bypasses them by host, and every call
here additionally passes ``no_cache=True``.

Any transport error or non-ok status is fatal for the request and surfaces
as ``ListenSourceError``.
"""

from attrs import define, field
import httpx

from np_enhancer.config import get_logger, resilient_operation, settings
from np_enhancer.domain.entities import RawListen
from np_enhancer.domain.exceptions import ListenSourceError
from np_enhancer.infrastructure.connectors.http import CachingFetcher

# Get contextual logger with service binding
logger = get_logger(__name__).bind(service="listenbrainz")


@define(slots=True)
class ListenBrainzConnector:
    """Read-only client for a user's listen state.

    Attributes:
        fetcher: Caching HTTP fetcher shared with other connectors
        base_url: API root, e.g. ``https://api.listenbrainz.org/1``
    """

    fetcher: CachingFetcher
    base_url: str = field(factory=lambda: settings.api.listenbrainz_base_url)

    @resilient_operation("listenbrainz_playing_now")
    async def get_playing_now(self, user: str) -> list[RawListen]:
        """Return the user's active listen(s), usually zero or one."""
        return await self._get_listens(f"/user/{user}/playing-now")

    @resilient_operation("listenbrainz_recent_listens")
    async def get_recent_listens(
        self, user: str, count: int | None = None
    ) -> list[RawListen]:
        """Return the user's most recent listens, newest first."""
        count = count or settings.api.recent_listen_count
        return await self._get_listens(f"/user/{user}/listens?count={count}")

    async def _get_listens(self, path: str) -> list[RawListen]:
        url = f"{self.base_url.rstrip('/')}{path}"

        try:
            response = await self.fetcher.fetch(url, no_cache=True)
        except httpx.HTTPError as e:
            raise ListenSourceError(f"ListenBrainz request failed: {e}", url=url) from e

        if not response.ok:
            logger.error(
                "ListenBrainz response was not ok", url=url, status=response.status
            )
            raise ListenSourceError(
                f"ListenBrainz returned {response.status}",
                status_code=response.status,
                url=url,
            )

        try:
            payload = response.json().get("payload") or {}
        except ValueError as e:
            raise ListenSourceError("ListenBrainz returned malformed JSON", url=url) from e

        listens = [RawListen.from_listenbrainz(item) for item in payload.get("listens") or []]
        logger.debug(f"Fetched {len(listens)} listens", url=url)
        return listens
