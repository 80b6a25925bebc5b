# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the API:
# - models/: Pydantic schemas for API responses
# - services/: Payout computation and input policy
#
# The numeric work itself lives in lib/divisors.py; services here
# apply configuration limits and shape results for the API.
# =============================================================================
