# =============================================================================
# core/models/amino_acid.py - Amino Acid Record Schemas
# =============================================================================
# These models define a single amino acid reference record and its
# side chain classification. Records are loaded once from the static
# dataset (see core/services/dataset_service.py) and never modified.
# =============================================================================

import math
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Errors
# =============================================================================

class InvalidEnumError(ValueError):
    """Raised when a string does not name a known enumeration value."""

    def __init__(self, value: Any, allowed: list[str]):
        super().__init__(
            f"Invalid side chain {value!r}; expected one of: {', '.join(allowed)}"
        )
        self.value = value
        self.allowed = allowed


# =============================================================================
# Enums for Classification
# =============================================================================

class SideChain(str, Enum):
    """
    Chemical behaviour of an amino acid's side chain.

    Values are the display names used in the dataset and in API responses.
    Parsing is case-insensitive:

        SideChain.parse("nonpolar")  # SideChain.NONPOLAR
    """
    NONPOLAR = "Nonpolar"
    POLAR = "Polar"
    ACIDIC = "Acidic"
    BASIC = "Basic"
    POSITIVE = "Positive"      # Positively charged

    @classmethod
    def parse(cls, value: "str | SideChain") -> "SideChain":
        """
        Parse a side chain from its name in any letter casing.

        Only case is ignored; padded values such as " Nonpolar" are rejected.

        Raises:
            InvalidEnumError: If the value is not one of the known names
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        raise InvalidEnumError(value, [member.value for member in cls])

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Amino Acid Record
# =============================================================================

class AminoAcid(BaseModel):
    """
    A single amino acid reference record.

    Example:
        {
            "name": "Alanine",
            "short_name": "Ala",
            "abbreviation": "A",
            "side_chain": "Nonpolar",
            "molecular_weight": 89.09,
            "codon": ["GCT", "GCC", "GCA", "GCG"]
        }
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Full chemical name, the lookup key (case-insensitive)"
    )

    short_name: str = Field(
        ...,
        description="Three-letter code, e.g. 'Ala'"
    )

    abbreviation: str = Field(
        ...,
        description="One-letter code, e.g. 'A'"
    )

    side_chain: SideChain = Field(
        ...,
        description="Side chain classification"
    )

    molecular_weight: float = Field(
        ...,
        description="Molecular weight in g/mol"
    )

    codon: tuple[str, ...] = Field(
        default=(),
        description="DNA codons encoding this amino acid, in canonical order"
    )

    @field_validator("side_chain", mode="before")
    @classmethod
    def parse_side_chain(cls, value: Any) -> SideChain:
        return SideChain.parse(value)

    @property
    def codon_string(self) -> str:
        """Codons joined with ', ' in their original order."""
        return ", ".join(self.codon)

    @property
    def codon_count(self) -> int:
        return len(self.codon)

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\t"
            f"Short Name: {self.short_name}\t"
            f"Abbreviation: {self.abbreviation}\t"
            f"Side Chain: {self.side_chain}\t"
            f"Molecular Weight: {format_weight(self.molecular_weight)}\t"
            f"Codon: {self.codon_string}"
        )


def format_weight(value: float) -> str:
    """
    Render a molecular weight in plain decimal notation.

    Uses the shortest digits that round-trip the float, never exponent
    notation, and drops a trailing '.0':

        format_weight(89.09)    # "89.09"
        format_weight(75.0)     # "75"
        format_weight(0.00001)  # "0.00001"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
