# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .dataset_service import (
    DEFAULT_DATA_FILE,
    DatasetError,
    DatasetMalformedError,
    DatasetService,
    DatasetUnavailableError,
)
from .amino_acid_service import AminoAcidRepository

__all__ = [
    "DEFAULT_DATA_FILE",
    "DatasetError",
    "DatasetMalformedError",
    "DatasetService",
    "DatasetUnavailableError",
    "AminoAcidRepository",
]
