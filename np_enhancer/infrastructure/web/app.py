"""HTTP handler exposing the current track as JSON.

``GET /?user=<name>`` returns the canonical Track. A missing ``user``
parameter is a 400. Listen-state failures map to 502 (404 when the user has
no listens at all). Every response allows any origin.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
import httpx

from np_enhancer import __version__
from np_enhancer.config import get_logger, settings
from np_enhancer.domain.exceptions import ListenSourceError, NoListensError
from np_enhancer.infrastructure.cache import FetchCache, InMemoryFetchCache
from np_enhancer.infrastructure.factories import build_current_track_use_case

logger = get_logger(__name__).bind(service="web")

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)


def create_app(
    cache: FetchCache | None = None, client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        cache: Response cache shared by all requests; in-memory when omitted
        client: HTTP client for outbound calls; created and closed with the app
            when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_client = client is None
        app.state.cache = cache if cache is not None else InMemoryFetchCache()
        app.state.client = (
            httpx.AsyncClient(timeout=settings.api.request_timeout)
            if owns_client
            else client
        )
        try:
            yield
        finally:
            if owns_client:
                await app.state.client.aclose()

    app = FastAPI(title="ListenBrainz now playing enhancer", version=__version__, lifespan=lifespan)

    @app.get("/")
    async def now_playing(request: Request, user: str | None = Query(default=None)):
        if not user:
            return _error(400, "no user param specified")

        use_case = build_current_track_use_case(
            request.app.state.cache, request.app.state.client
        )
        try:
            track = await use_case.execute(user)
        except NoListensError as e:
            return _error(404, str(e))
        except ListenSourceError as e:
            logger.error("Listen source failed", user=user, error=str(e), status=e.status_code)
            return _error(502, str(e))

        return JSONResponse(track.to_dict(), headers=CORS_HEADERS)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
