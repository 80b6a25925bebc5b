# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .payout_service import PayoutService

__all__ = [
    "PayoutService",
]
