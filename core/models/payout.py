# =============================================================================
# core/models/payout.py - Payout Schemas
# =============================================================================
# These models define the API contract for payout operations:
# - PayoutWeight: One {token, weight} entry of an epoch's payout
# - PrimeFactor: One prime power of the epoch's factorization
# - PayoutSummary: Full breakdown of an epoch (sigma, factors, weights)
#
# The numeric core works with exact Fractions; these models carry the
# float values that are sent over the wire.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

from lib.divisors import DivisorWeight


class PayoutWeight(BaseModel):
    """
    Schema for one entry of an epoch's payout.

    Returned (as a list, ascending by token) by:
    - GET /payouts/{number}

    Example:
        {
            "token": 3,
            "weight": 0.25
        }
    """

    model_config = ConfigDict(frozen=True)

    # The divisor of the epoch number
    token: int = Field(
        ...,
        ge=1,
        description="Divisor of the epoch number"
    )

    # token / sigma(epoch)
    weight: float = Field(
        ...,
        gt=0.0,
        le=1.0,
        description="Share of the payout (all weights of an epoch sum to 1)"
    )

    @classmethod
    def from_divisor_weight(cls, item: DivisorWeight) -> "PayoutWeight":
        """Create PayoutWeight from a calculator result."""
        return cls(token=item.divisor, weight=item.weight_float)


class PrimeFactor(BaseModel):
    """A prime power p^k exactly dividing the epoch number."""

    model_config = ConfigDict(frozen=True)

    prime: int = Field(..., ge=2, description="Prime factor")
    exponent: int = Field(..., ge=1, description="Multiplicity of the prime")


class PayoutSummary(BaseModel):
    """
    Schema for the full payout breakdown of one epoch.

    Returned by:
    - GET /payouts/{number}/summary

    Example:
        {
            "epoch": 12,
            "sigma": 28,
            "divisor_count": 6,
            "prime_factors": [{"prime": 2, "exponent": 2}, {"prime": 3, "exponent": 1}],
            "weights": [{"token": 1, "weight": 0.0357...}, ...]
        }
    """

    epoch: int = Field(..., ge=1, description="Epoch number")
    sigma: int = Field(..., ge=1, description="Sum of all divisors of the epoch")
    divisor_count: int = Field(..., ge=1, description="Number of divisors")
    prime_factors: list[PrimeFactor] = Field(
        default_factory=list,
        description="Prime factorization, ascending by prime (empty for epoch 1)"
    )
    weights: list[PayoutWeight] = Field(
        default_factory=list,
        description="Payout weights, ascending by token"
    )
