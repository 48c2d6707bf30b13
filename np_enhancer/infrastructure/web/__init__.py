"""HTTP interface."""

from np_enhancer.infrastructure.web.app import create_app

__all__ = ["create_app"]
