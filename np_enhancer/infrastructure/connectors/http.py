"""Read-through caching HTTP fetcher shared by all service connectors.

Policy:
- Hosts in ``cache.uncached_hosts`` (live listen state) are never cached
- Every other GET is served from the cache when present
- Only ok (2xx) responses are written; failures are never cached
- No retries; transport errors propagate as ``httpx.HTTPError``
"""

import json
from typing import Any

from attrs import define, field
import httpx

from np_enhancer.config import get_logger, settings
from np_enhancer.infrastructure.cache import CachedResponse, FetchCache

logger = get_logger(__name__).bind(service="http")


@define(frozen=True, slots=True)
class FetchResponse:
    """Response as seen by connectors, whether fetched or cached."""

    url: str
    status: int
    body: str
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


@define(slots=True)
class CachingFetcher:
    """HTTP GET wrapper applying the response cache policy.

    Attributes:
        cache: Response cache handle, passed explicitly by the composition root
        client: Shared async HTTP client
        user_agent: Sent on every outbound request
        uncached_hosts: Hosts whose responses must never be cached
    """

    cache: FetchCache
    client: httpx.AsyncClient = field(factory=lambda: _default_client())
    user_agent: str = field(factory=lambda: settings.api.user_agent)
    uncached_hosts: frozenset[str] = field(
        factory=lambda: frozenset(settings.cache.uncached_hosts),
        converter=frozenset,
    )

    def should_cache(self, url: str, no_cache: bool = False) -> bool:
        if no_cache:
            return False
        return httpx.URL(url).host not in self.uncached_hosts

    async def fetch(self, url: str, no_cache: bool = False) -> FetchResponse:
        """GET ``url``, consulting and populating the cache where allowed."""
        cacheable = self.should_cache(url, no_cache)

        if cacheable:
            hit = await self.cache.get(url)
            if hit is not None:
                logger.debug("Serving response from cache", url=url)
                return FetchResponse(
                    url=url, status=hit.status, body=hit.body, from_cache=True
                )

        response = await self.client.get(url, headers={"User-Agent": self.user_agent})
        result = FetchResponse(url=url, status=response.status_code, body=response.text)

        if cacheable and result.ok:
            await self.cache.put(
                url,
                CachedResponse(
                    status=response.status_code,
                    body=response.text,
                    headers=dict(response.headers),
                ),
            )
        elif not result.ok:
            logger.warning("Non-ok response", url=url, status=result.status)

        return result

    async def aclose(self) -> None:
        await self.client.aclose()


def _default_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.api.request_timeout)
