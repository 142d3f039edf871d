# =============================================================================
# core/services/amino_acid_service.py - Lookup Engine
# =============================================================================
# Case-insensitive exact-match lookup over the in-memory dataset.
# The repository is built once and never mutated, so it is safe to share
# between concurrent requests.
# =============================================================================

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from app.exceptions import AminoAcidNotFoundError
from core.models.amino_acid import AminoAcid
from core.services.dataset_service import DatasetService
from lib.utils import normalize_key

logger = logging.getLogger(__name__)


class AminoAcidRepository:
    """
    Immutable table of amino acids keyed by lowercased name.

    When two records share a name, the first one in dataset order wins.
    """

    def __init__(self, records: Iterable[AminoAcid]):
        self._records: tuple[AminoAcid, ...] = tuple(records)
        self._by_name: dict[str, AminoAcid] = {}
        for record in self._records:
            key = normalize_key(record.name)
            if key in self._by_name:
                logger.warning(f"Duplicate amino acid name ignored: {record.name}")
                continue
            self._by_name[key] = record

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "AminoAcidRepository":
        """Load the dataset and build a repository from it."""
        return cls(DatasetService.load(path))

    def find(self, key: str) -> AminoAcid | None:
        """
        Find the record whose name matches the key, ignoring case.

        Returns:
            The matching record, or None when nothing matches
        """
        record = self._by_name.get(normalize_key(key))
        if record is None:
            logger.debug(f"No amino acid matches {key!r}")
        return record

    def get(self, key: str) -> AminoAcid:
        """
        Get the record whose name matches the key, ignoring case.

        Raises:
            AminoAcidNotFoundError: If no record matches
        """
        record = self.find(key)
        if record is None:
            raise AminoAcidNotFoundError(key)
        return record

    def all(self) -> tuple[AminoAcid, ...]:
        return self._records

    def names(self) -> list[str]:
        return [record.name for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AminoAcid]:
        return iter(self._records)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._by_name
