# =============================================================================
# app/routers/payouts.py - Payout Weight Endpoints
# =============================================================================
# Returns the divisors of an epoch number paired with their payout weights.
#
# Handlers are plain `def` functions: the work is CPU-bound, so FastAPI
# runs it in its threadpool instead of on the event loop.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path as PathParam

from core.models.payout import PayoutSummary, PayoutWeight
from core.services.payout_service import PayoutService

router = APIRouter()

# Taken as a string so that "0", "-5", "1.5" and "abc" all produce the
# same INVALID_EPOCH error instead of FastAPI's generic 422.
EpochParam = Annotated[str, PathParam(description="Epoch number (positive integer)")]


@router.get("/payouts/{number}", response_model=list[PayoutWeight])
def get_payouts(number: EpochParam):
    """
    Get the payout weights for an epoch.

    Returns one entry per divisor of the epoch number, ascending by token,
    with weight = token / sigma(number). The weights sum to 1.
    """
    return PayoutService.get_payout_weights(number)


@router.get("/payouts/{number}/summary", response_model=PayoutSummary)
def get_payout_summary(number: EpochParam):
    """
    Get the full payout breakdown for an epoch.

    Includes sigma, the prime factorization and the weights.
    """
    return PayoutService.get_payout_summary(number)
