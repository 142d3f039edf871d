#!/usr/bin/env python3
# =============================================================================
# scripts/serve.py - API Server Entry Point
# =============================================================================
# Starts the Amino Acid API with uvicorn using API_HOST / API_PORT.
#
# Usage:
#   poetry run python scripts/serve.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --reload
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
    print("Amino Acid API")
    print("=" * 60)
    print()
    print(f"Listening on http://{settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
