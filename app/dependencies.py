# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.amino_acid_service import AminoAcidRepository


def get_repository(request: Request) -> AminoAcidRepository:
    """
    Get the amino acid repository loaded at startup.

    Tests replace this through app.dependency_overrides.
    """
    return request.app.state.repository


# Type alias for dependency injection
RepositoryDep = Annotated[AminoAcidRepository, Depends(get_repository)]
