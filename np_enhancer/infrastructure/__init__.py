"""Infrastructure layer: cache, service connectors, CLI and HTTP interfaces."""
