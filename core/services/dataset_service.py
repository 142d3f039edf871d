# =============================================================================
# core/services/dataset_service.py - Dataset Loader
# =============================================================================
# Reads the static amino acid dataset (a JSON array of records) into memory.
# A missing or malformed source is fatal: no partial dataset is ever
# returned, so the application refuses to start instead of serving
# incomplete data.
# =============================================================================

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from core.models.amino_acid import AminoAcid
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

# Bundled dataset shipped with the package
DEFAULT_DATA_FILE = Path(__file__).parent.parent / "data" / "amino_acid_data.json"

_RECORDS_ADAPTER = TypeAdapter(list[AminoAcid])


# =============================================================================
# Errors
# =============================================================================

class DatasetError(ApplicationError):
    """Base error for dataset loading failures."""
    pass


class DatasetUnavailableError(DatasetError):
    """Raised when the dataset source cannot be read."""

    def __init__(self, path: Path | str, error: str):
        super().__init__(
            message=f"Unable to read dataset {path}: {error}",
            code="DATASET_UNAVAILABLE",
            suggestion="Check that DATA_FILE points to an existing, readable JSON file",
            details={"path": str(path), "error": error},
        )


class DatasetMalformedError(DatasetError):
    """Raised when the dataset source cannot be parsed into records."""

    def __init__(self, path: Path | str, error: str):
        super().__init__(
            message=f"Malformed dataset {path}: {error}",
            code="DATASET_MALFORMED",
            suggestion="The file must be a JSON array of amino acid records",
            details={"path": str(path), "error": error},
        )


# =============================================================================
# Service
# =============================================================================

class DatasetService:
    """
    Loads amino acid records from a JSON source.

    The loader is stateless; callers decide whether to keep the result
    (the API loads once at startup).
    """

    @staticmethod
    def load(path: Path | str | None = None) -> list[AminoAcid]:
        """
        Load every record from the dataset file.

        Args:
            path: JSON file to read (defaults to the bundled dataset)

        Returns:
            Records in file order

        Raises:
            DatasetUnavailableError: If the file is missing or unreadable
            DatasetMalformedError: If the file is not valid JSON or any
                record fails validation
        """
        path = Path(path) if path else DEFAULT_DATA_FILE

        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.error(f"Failed to read dataset {path}: {e}")
            raise DatasetUnavailableError(path, str(e)) from e

        records = DatasetService.parse(text, source=path)
        logger.info(f"Loaded {len(records)} amino acids from {path}")
        return records

    @staticmethod
    def parse(text: str, source: Path | str = "<string>") -> list[AminoAcid]:
        """
        Parse dataset JSON text into records.

        Raises:
            DatasetMalformedError: If the text is not a JSON array of
                valid records
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise DatasetMalformedError(source, f"invalid JSON: {e}") from e

        if not isinstance(raw, list):
            raise DatasetMalformedError(
                source, f"expected a JSON array, got {type(raw).__name__}"
            )

        try:
            return _RECORDS_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise DatasetMalformedError(source, str(e)) from e
