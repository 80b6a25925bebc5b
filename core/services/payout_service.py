# =============================================================================
# core/services/payout_service.py - Payout Business Logic
# =============================================================================
# Validates epoch numbers, applies the configured limits and turns
# calculator results into API models.
# Separates HTTP concerns from the numeric core.
# =============================================================================

import logging
from typing import Any

from app.config import settings
from app.exceptions import EpochTooLargeError, InvalidEpochError
from core.models.payout import PayoutSummary, PayoutWeight, PrimeFactor
from lib.divisors import (
    InvalidInputError,
    compute_weights,
    prime_factorization,
    sum_of_divisors,
    validate_epoch,
)

logger = logging.getLogger(__name__)


class PayoutService:
    """
    Service for payout weight operations.

    Provides a clean interface between API routes and the divisor calculator.
    Every call computes its result from scratch; nothing is stored.
    """

    @staticmethod
    def resolve_epoch(value: Any, max_epoch: int | None = None) -> int:
        """
        Validate an epoch number from a request.

        Args:
            value: Raw epoch number (int or path parameter string)
            max_epoch: Upper bound (defaults to settings.MAX_EPOCH)

        Returns:
            The epoch number as a positive int

        Raises:
            InvalidEpochError: If value is not a positive integer
            EpochTooLargeError: If value exceeds max_epoch
        """
        limit = settings.MAX_EPOCH if max_epoch is None else max_epoch

        try:
            epoch = validate_epoch(value)
        except InvalidInputError as e:
            logger.info(f"Rejected epoch {value!r}: {e.message}")
            raise InvalidEpochError(value) from e

        if epoch > limit:
            logger.info(f"Rejected epoch {epoch}: above limit {limit}")
            raise EpochTooLargeError(epoch, limit)

        return epoch

    @staticmethod
    def get_payout_weights(
        value: Any,
        max_epoch: int | None = None,
    ) -> list[PayoutWeight]:
        """
        Get the payout weights for an epoch.

        Args:
            value: Epoch number (int or path parameter string)
            max_epoch: Upper bound (defaults to settings.MAX_EPOCH)

        Returns:
            List of PayoutWeight ascending by token

        Raises:
            InvalidEpochError: If value is not a positive integer
            EpochTooLargeError: If value exceeds max_epoch
        """
        epoch = PayoutService.resolve_epoch(value, max_epoch)

        weights = compute_weights(epoch)
        logger.debug(f"Computed {len(weights)} payout weights for epoch {epoch}")

        return [PayoutWeight.from_divisor_weight(w) for w in weights]

    @staticmethod
    def get_payout_summary(
        value: Any,
        max_epoch: int | None = None,
    ) -> PayoutSummary:
        """
        Get the full payout breakdown for an epoch.

        Includes sigma, the prime factorization and the weights.

        Raises:
            InvalidEpochError: If value is not a positive integer
            EpochTooLargeError: If value exceeds max_epoch
        """
        epoch = PayoutService.resolve_epoch(value, max_epoch)

        factors = prime_factorization(epoch)
        sigma = sum_of_divisors(epoch)
        weights = compute_weights(epoch)
        logger.debug(
            f"Epoch {epoch}: sigma={sigma}, {len(weights)} divisors, "
            f"factors={factors}"
        )

        return PayoutSummary(
            epoch=epoch,
            sigma=sigma,
            divisor_count=len(weights),
            prime_factors=[
                PrimeFactor(prime=p, exponent=k) for p, k in factors.items()
            ],
            weights=[PayoutWeight.from_divisor_weight(w) for w in weights],
        )
