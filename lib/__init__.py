# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (error base class, key normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import ApplicationError, normalize_key

__all__ = [
    "ApplicationError",
    "normalize_key",
]
