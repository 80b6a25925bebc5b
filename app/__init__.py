# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: API error types and JSON handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
