# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an API test client and known payout tables
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("MAX_EPOCH", "1000000000000")

from fractions import Fraction

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """FastAPI test client (runs the app lifespan)."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def known_payouts():
    """Epoch number -> (sigma, divisors) for hand-checked cases."""
    return {
        1: (1, [1]),
        6: (12, [1, 2, 3, 6]),
        12: (28, [1, 2, 3, 4, 6, 12]),
        13: (14, [1, 13]),
        36: (91, [1, 2, 3, 4, 6, 9, 12, 18, 36]),
    }


@pytest.fixture
def epoch_six_weights():
    """Exact weights for epoch 6 (sigma = 12)."""
    return [Fraction(1, 12), Fraction(2, 12), Fraction(3, 12), Fraction(6, 12)]
