"""Configuration module for np-enhancer.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

resilient_operation(operation_name: str)
    Decorator for handling errors in external API calls

configure_stdlib_logging() -> None
    Forward third-party stdlib loggers to Loguru

Usage:
------
```python
from np_enhancer.config import settings
timeout = settings.api.request_timeout

from np_enhancer.config import get_logger
logger = get_logger(__name__)
logger.info("Resolving now playing", user="rob")
```
"""

from .logging import (
    configure_stdlib_logging,
    get_logger,
    resilient_operation,
    setup_loguru_logger,
)
from .settings import Settings, settings

__all__ = [
    "Settings",
    "configure_stdlib_logging",
    "get_logger",
    "resilient_operation",
    "settings",
    "setup_loguru_logger",
]
