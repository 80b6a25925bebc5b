#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts the Orbital Payouts API with uvicorn.
#
# Usage:
#   # Start server (host/port from API_HOST / API_PORT, default 0.0.0.0:3000)
#   python scripts/start_api.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload --port 3000
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("Orbital Payouts API")
    print("=" * 60)
    print()
    print(f"Example: http://localhost:{settings.API_PORT}/payouts/6")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
