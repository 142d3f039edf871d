# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - amino_acid.py: AminoAcid record and SideChain classification
# - responses.py: Response projections served by the API
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Record Models - Reference data
# -----------------------------------------------------------------------------
from .amino_acid import (
    AminoAcid,
    InvalidEnumError,
    SideChain,
    format_weight,
)

# -----------------------------------------------------------------------------
# Response Models - Projections of a record
# -----------------------------------------------------------------------------
from .responses import (
    AminoAcidAbbreviationResponse,
    AminoAcidCodonCountResponse,
    AminoAcidCodonResponse,
    AminoAcidListResponse,
    AminoAcidMolecularWeightResponse,
    AminoAcidNameResponse,
    AminoAcidResponse,
    AminoAcidShortNameResponse,
    AminoAcidSideChainResponse,
    ErrorResponse,
    RootResponse,
)

__all__ = [
    # Records
    "AminoAcid",
    "InvalidEnumError",
    "SideChain",
    "format_weight",
    # Responses
    "AminoAcidAbbreviationResponse",
    "AminoAcidCodonCountResponse",
    "AminoAcidCodonResponse",
    "AminoAcidListResponse",
    "AminoAcidMolecularWeightResponse",
    "AminoAcidNameResponse",
    "AminoAcidResponse",
    "AminoAcidShortNameResponse",
    "AminoAcidSideChainResponse",
    "ErrorResponse",
    "RootResponse",
]
