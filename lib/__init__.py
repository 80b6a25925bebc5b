# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable, framework-free utilities:
# - divisors.py: Divisor weight calculator (sigma via prime factorization)
# - utils.py: Shared utilities (base error class)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.divisors import (
    DivisorWeight,
    InvalidInputError,
    compute_weights,
    enumerate_divisors,
    prime_factorization,
    sum_of_divisors,
    sum_of_divisors_naive,
    validate_epoch,
)
from lib.utils import ApplicationError

__all__ = [
    # Divisors
    "DivisorWeight",
    "InvalidInputError",
    "compute_weights",
    "enumerate_divisors",
    "prime_factorization",
    "sum_of_divisors",
    "sum_of_divisors_naive",
    "validate_epoch",
    # Utils
    "ApplicationError",
]
