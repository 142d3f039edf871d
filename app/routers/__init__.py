# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - amino_acids.py: GET /{amino_acid} lookups and field projections
# - catalog.py: Listing of every record name
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import amino_acids
from . import catalog
from . import health

__all__ = [
    "amino_acids",
    "catalog",
    "health",
]
