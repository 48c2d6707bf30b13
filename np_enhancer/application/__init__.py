"""Application layer: reconciliation service and use cases."""
