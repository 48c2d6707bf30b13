"""ListenBrainz now-playing metadata enhancer."""

# Version detection with environment-aware fallback pattern
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("np-enhancer")
except PackageNotFoundError:
    # Development environment fallback
    __version__ = "0.1.0-dev"

__license__ = "MIT"

__all__ = ["__version__"]
