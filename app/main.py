# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Amino Acid API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    AminoAcidAPIException,
    amino_acid_exception_handler,
    unexpected_exception_handler,
)
from app.routers import amino_acids, catalog, health
from core.models import RootResponse
from core.services import AminoAcidRepository, DatasetError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup loads and validates the dataset once. A missing or malformed
    dataset aborts startup instead of serving partial data.
    """
    logger.info(f"Starting Amino Acid API in {settings.ENVIRONMENT} mode")

    try:
        app.state.repository = AminoAcidRepository.from_file(settings.DATA_FILE)
    except DatasetError as e:
        logger.critical(f"Cannot start without a dataset: {e.to_dict()}")
        raise

    logger.info(f"Serving {len(app.state.repository)} amino acids")

    yield

    logger.info("Shutting down Amino Acid API")


# Create FastAPI application
app = FastAPI(
    title="Amino Acid API",
    description="""
## Amino Acid Reference Data

Read-only lookups of the standard amino acids by full name.
Names match case-insensitively: `/alanine`, `/Alanine` and `/ALANINE`
return the same record.

| Path | Returns |
|------|---------|
| `/{name}` | Full record |
| `/{name}/name` | Name, short name and abbreviation |
| `/{name}/short_name` | Three-letter code |
| `/{name}/abbreviation` | One-letter code |
| `/{name}/side_chain` | Side chain classification |
| `/{name}/molecular_weight` | Molecular weight (g/mol) |
| `/{name}/codon` | Encoding codons |
| `/{name}/codon_count` | Number of encoding codons |

Unknown names return `404 {"error": "Amino Acid not found"}`.
""",
    version=__version__,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Amino Acids",
            "description": "Look up amino acids and projections of their fields",
        },
        {
            "name": "Catalog",
            "description": "List the available amino acids",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AminoAcidAPIException)
async def handle_amino_acid_exception(request: Request, exc: AminoAcidAPIException):
    """Handle custom Amino Acid API exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return await amino_acid_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"], response_model=RootResponse)
async def root():
    """
    Root endpoint - returns the welcome message.
    """
    return RootResponse(message="Welcome to the Amino Acid API")


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Dataset listing
app.include_router(
    catalog.router,
    prefix="/api/v1",
    tags=["Catalog"]
)

# Lookups - registered last, /{amino_acid} matches any single path segment
app.include_router(
    amino_acids.router,
    tags=["Amino Acids"]
)
