# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any


# =============================================================================
# Key Normalization
# =============================================================================

def normalize_key(value: str) -> str:
    """
    Normalize a lookup key for case-insensitive comparison.

    Only the letter casing changes; whitespace is kept so that matching
    stays exact.

    Example:
        normalize_key("ALANINE")  # "alanine"
    """
    return value.lower()


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Attributes:
        code: Error code for categorization, e.g. "DATASET_MALFORMED"
        message: Human-readable error message
        suggestion: How to fix the problem, if known
        details: Context such as the offending path
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """
        Structured form of the error for log records.

        Empty suggestion and details are left out.
        """
        result: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result
