# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the reference data logic:
# - models/: Pydantic schemas for records and response projections
# - services/: Dataset loading and name lookup
# - data/: The bundled amino acid dataset
#
# Apart from the shared error types in app.exceptions, code in this package
# does not depend on FastAPI. This keeps the logic testable and reusable.
# =============================================================================
