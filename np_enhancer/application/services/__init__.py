"""Application services."""

from np_enhancer.application.services.reconciliation import ReconciliationEngine

__all__ = ["ReconciliationEngine"]
