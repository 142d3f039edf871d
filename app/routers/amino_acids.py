# =============================================================================
# app/routers/amino_acids.py - Amino Acid Lookup Endpoints
# =============================================================================
# GET /{amino_acid} and its field projections. Every route matches the path
# key against record names case-insensitively and answers
# 404 {"error": "Amino Acid not found"} when nothing matches.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path as PathParam

from app.dependencies import RepositoryDep
from core.models import (
    AminoAcidAbbreviationResponse,
    AminoAcidCodonCountResponse,
    AminoAcidCodonResponse,
    AminoAcidMolecularWeightResponse,
    AminoAcidNameResponse,
    AminoAcidResponse,
    AminoAcidShortNameResponse,
    AminoAcidSideChainResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(responses={404: {"model": ErrorResponse}})

AminoAcidKey = Annotated[
    str,
    PathParam(description="Full amino acid name, any letter casing (e.g. 'alanine')"),
]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/{amino_acid}", response_model=AminoAcidResponse)
async def get_amino_acid(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """
    Get the full record for an amino acid.
    """
    return AminoAcidResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/name", response_model=AminoAcidNameResponse)
async def get_amino_acid_name(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """
    Get the name, three-letter code and one-letter code of an amino acid.
    """
    return AminoAcidNameResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/short_name", response_model=AminoAcidShortNameResponse)
async def get_amino_acid_short_name(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """Get the three-letter code of an amino acid."""
    return AminoAcidShortNameResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/abbreviation", response_model=AminoAcidAbbreviationResponse)
async def get_amino_acid_abbreviation(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """Get the one-letter code of an amino acid."""
    return AminoAcidAbbreviationResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/side_chain", response_model=AminoAcidSideChainResponse)
async def get_amino_acid_side_chain(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """Get the side chain classification of an amino acid."""
    return AminoAcidSideChainResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/molecular_weight", response_model=AminoAcidMolecularWeightResponse)
async def get_amino_acid_molecular_weight(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """Get the molecular weight (g/mol) of an amino acid."""
    return AminoAcidMolecularWeightResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/codon", response_model=AminoAcidCodonResponse)
async def get_amino_acid_codon(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """
    Get the codons encoding an amino acid, in canonical order.
    """
    return AminoAcidCodonResponse.from_amino_acid(repository.get(amino_acid))


@router.get("/{amino_acid}/codon_count", response_model=AminoAcidCodonCountResponse)
async def get_amino_acid_codon_count(amino_acid: AminoAcidKey, repository: RepositoryDep):
    """Get how many codons encode an amino acid."""
    return AminoAcidCodonCountResponse.from_amino_acid(repository.get(amino_acid))
