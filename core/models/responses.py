# =============================================================================
# core/models/responses.py - API Response Projections
# =============================================================================
# Each response model is a narrowed view of an AminoAcid record. Projections
# only select fields; they never compute anything beyond the record's own
# derived properties and cannot fail for a valid record.
# =============================================================================

from pydantic import BaseModel, Field

from core.models.amino_acid import AminoAcid, SideChain


# =============================================================================
# Generic Responses
# =============================================================================

class RootResponse(BaseModel):
    """Welcome payload returned by GET /."""
    message: str


class ErrorResponse(BaseModel):
    """Error payload, e.g. {"error": "Amino Acid not found"}."""
    error: str


class AminoAcidListResponse(BaseModel):
    """Names of every record in dataset order."""
    count: int = Field(..., ge=0)
    amino_acids: list[str] = Field(default_factory=list)


# =============================================================================
# Record Projections
# =============================================================================

class AminoAcidResponse(BaseModel):
    """Full record projection."""
    amino_acid: AminoAcid

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidResponse":
        return cls(amino_acid=amino_acid)


class AminoAcidNameResponse(BaseModel):
    """All of the names a record is known by."""
    name: str
    short_name: str
    abbreviation: str

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidNameResponse":
        return cls(
            name=amino_acid.name,
            short_name=amino_acid.short_name,
            abbreviation=amino_acid.abbreviation,
        )


class AminoAcidShortNameResponse(BaseModel):
    name: str
    short_name: str

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidShortNameResponse":
        return cls(name=amino_acid.name, short_name=amino_acid.short_name)


class AminoAcidAbbreviationResponse(BaseModel):
    name: str
    abbreviation: str

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidAbbreviationResponse":
        return cls(name=amino_acid.name, abbreviation=amino_acid.abbreviation)


class AminoAcidSideChainResponse(BaseModel):
    name: str
    side_chain: SideChain

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidSideChainResponse":
        return cls(name=amino_acid.name, side_chain=amino_acid.side_chain)


class AminoAcidMolecularWeightResponse(BaseModel):
    name: str
    molecular_weight: float

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidMolecularWeightResponse":
        return cls(name=amino_acid.name, molecular_weight=amino_acid.molecular_weight)


class AminoAcidCodonResponse(BaseModel):
    name: str
    codon: list[str]

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidCodonResponse":
        return cls(name=amino_acid.name, codon=list(amino_acid.codon))


class AminoAcidCodonCountResponse(BaseModel):
    name: str
    codon_count: int = Field(..., ge=0)

    @classmethod
    def from_amino_acid(cls, amino_acid: AminoAcid) -> "AminoAcidCodonCountResponse":
        return cls(name=amino_acid.name, codon_count=amino_acid.codon_count)
