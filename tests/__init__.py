# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Orbital Payouts API:
# - test_divisors.py: Unit tests for the divisor weight calculator
# - test_payout_service.py: Tests for epoch validation and limits
# - test_models.py: Unit tests for Pydantic model validation
# - test_config.py: Tests for environment settings
# - test_payouts_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
