"""Domain exceptions for now-playing resolution.

Two failure families exist: listen-source failures are fatal for a request,
metadata search failures are absorbed by the reconciliation engine.
"""


class NpEnhancerError(Exception):
    """Base class for all np-enhancer errors."""


class ListenSourceError(NpEnhancerError):
    """The listen-tracking service was unreachable or answered non-ok."""

    def __init__(self, message: str, status_code: int | None = None, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class NoListensError(ListenSourceError):
    """The user has neither a now-playing listen nor any listen history."""


class SearchFailure(NpEnhancerError):
    """The metadata database lookup did not produce a usable response."""

    def __init__(self, message: str, status_code: int | None = None, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
