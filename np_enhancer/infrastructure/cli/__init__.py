"""Command line interface."""

from np_enhancer.infrastructure.cli.app import app, main

__all__ = ["app", "main"]
