# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - payouts.py: Payout weight endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import payouts

__all__ = [
    "health",
    "payouts",
]
