# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Error bodies are flat objects: {"error": "<message>"}.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class AminoAcidAPIException(Exception):
    """
    Base exception for the Amino Acid API.

    All custom HTTP-facing exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "AMINO_ACID_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Lookup Exceptions
# =============================================================================

class AminoAcidNotFoundError(AminoAcidAPIException):
    """Raised when no amino acid name matches the requested key."""

    def __init__(self, key: str):
        super().__init__(
            message="Amino Acid not found",
            code="AMINO_ACID_NOT_FOUND",
            status_code=404,
            details={"key": key},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def amino_acid_exception_handler(
    request: Request,
    exc: AminoAcidAPIException
) -> JSONResponse:
    """Convert AminoAcidAPIException to a JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Hide internal errors behind a generic 500 body."""
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"}
    )
