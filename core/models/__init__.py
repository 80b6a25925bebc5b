# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for API responses:
# - payout.py: Payout weight and summary schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .payout import (
    PayoutSummary,
    PayoutWeight,
    PrimeFactor,
)

__all__ = [
    "PayoutSummary",
    "PayoutWeight",
    "PrimeFactor",
]
