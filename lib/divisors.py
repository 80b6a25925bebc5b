# =============================================================================
# lib/divisors.py - Divisor Weight Calculator
# =============================================================================
# Pure numeric core of the payouts service.
#
# For an epoch number n, every positive divisor d of n receives the weight
#     d / sigma(n)
# where sigma(n) is the sum of all positive divisors of n. Because the
# divisors of n add up to sigma(n), the weights of one epoch always sum to 1.
#
# sigma(n) is computed from the prime factorization of n:
#     sigma(p1^k1 * ... * pm^km) = prod(1 + p + p^2 + ... + p^k)
# and divisors are enumerated by pairing y with n // y for y <= sqrt(n),
# so both steps run in O(sqrt(n)).
#
# Usage:
#   from lib.divisors import compute_weights
#   weights = compute_weights(6)
#   # (DivisorWeight(divisor=1, weight=Fraction(1, 12)), ...)
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from math import isqrt
from typing import Any

from lib.utils import ApplicationError

# Digits only, optional leading "+", surrounding whitespace allowed
_INTEGER_PATTERN = re.compile(r"^\s*\+?([0-9]+)\s*$")


# =============================================================================
# Errors
# =============================================================================

class InvalidInputError(ApplicationError):
    """Raised when an epoch number is not a positive integer."""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Epoch must be a positive integer, got {value!r}",
            code="INVALID_INPUT",
            suggestion="Pass a whole number greater than or equal to 1",
            details={"value": repr(value)},
        )
        self.value = value


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class DivisorWeight:
    """
    A divisor of the epoch number and its share of the payout.

    The weight is kept as an exact Fraction; use weight_float for the
    value sent over the wire.
    """
    divisor: int
    weight: Fraction

    @property
    def weight_float(self) -> float:
        return float(self.weight)


# =============================================================================
# Validation
# =============================================================================

def validate_epoch(value: Any) -> int:
    """
    Coerce an epoch number to a positive int.

    Accepts ints and digit strings such as path parameters ("12", " +12 ").
    Booleans, floats, zero, negatives and anything non-numeric are rejected.

    Raises:
        InvalidInputError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise InvalidInputError(value)

    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        match = _INTEGER_PATTERN.match(value)
        if match is None:
            raise InvalidInputError(value)
        try:
            n = int(match.group(1))
        except ValueError:
            # Exceeds the interpreter's int string conversion limit
            raise InvalidInputError(value) from None
    else:
        raise InvalidInputError(value)

    if n < 1:
        raise InvalidInputError(value)
    return n


# =============================================================================
# Sum of Divisors
# =============================================================================

def prime_factorization(n: int) -> dict[int, int]:
    """
    Factor n by trial division up to sqrt(n).

    Returns:
        Mapping of prime -> multiplicity, ascending by prime.
        prime_factorization(1) == {}
    """
    n = validate_epoch(n)

    factors: dict[int, int] = {}
    remaining = n
    p = 2
    while p * p <= remaining:
        while remaining % p == 0:
            factors[p] = factors.get(p, 0) + 1
            remaining //= p
        p += 1 if p == 2 else 2

    # Whatever survives has no factor <= its square root, so it is prime
    if remaining > 1:
        factors[remaining] = factors.get(remaining, 0) + 1

    return factors


def sum_of_divisors(n: int) -> int:
    """
    Compute sigma(n) from the prime factorization of n.

    Each prime power p^k contributes the geometric series 1 + p + ... + p^k,
    and sigma(n) is the product of those contributions. sigma(1) == 1.
    """
    sigma = 1
    for p, k in prime_factorization(n).items():
        term = 1
        series = 1
        for _ in range(k):
            term *= p
            series += term
        sigma *= series
    return sigma


def sum_of_divisors_naive(n: int) -> int:
    """Reference sigma(n) by summing every divisor in 1..n. O(n)."""
    n = validate_epoch(n)
    return sum(d for d in range(1, n + 1) if n % d == 0)


# =============================================================================
# Divisors and Weights
# =============================================================================

def enumerate_divisors(n: int) -> list[int]:
    """
    List the positive divisors of n in ascending order.

    Pairs each y <= sqrt(n) that divides n with its cofactor n // y.
    A perfect square contributes its root only once.
    """
    n = validate_epoch(n)

    small: list[int] = []
    large: list[int] = []
    for y in range(1, isqrt(n) + 1):
        if n % y == 0:
            small.append(y)
            cofactor = n // y
            if cofactor != y:
                large.append(cofactor)

    large.reverse()
    return small + large


def compute_weights(n: int) -> tuple[DivisorWeight, ...]:
    """
    Compute the payout weights for epoch n.

    Args:
        n: Epoch number, a positive integer

    Returns:
        One DivisorWeight per divisor of n, ascending by divisor.
        The weights sum to exactly 1.

    Raises:
        InvalidInputError: If n is not a positive integer

    Example:
        >>> [str(w.weight) for w in compute_weights(6)]
        ['1/12', '1/6', '1/4', '1/2']
    """
    n = validate_epoch(n)
    sigma = sum_of_divisors(n)
    return tuple(
        DivisorWeight(divisor=d, weight=Fraction(d, sigma))
        for d in enumerate_divisors(n)
    )
