# =============================================================================
# app/routers/catalog.py - Dataset Listing Endpoints
# =============================================================================
# Lists the names that can be looked up. Mounted under /api/v1 so it never
# shadows a GET /{amino_acid} lookup.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import RepositoryDep
from core.models import AminoAcidListResponse

router = APIRouter()


@router.get("/amino_acids", response_model=AminoAcidListResponse)
async def list_amino_acids(repository: RepositoryDep):
    """
    List every amino acid name in dataset order.
    """
    names = repository.names()
    return AminoAcidListResponse(count=len(names), amino_acids=names)
