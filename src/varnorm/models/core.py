"""
Core data models for varnorm.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class VariantType(str, Enum):
    """Structural type of a normalized variant."""
    SNV = "SNV"
    MNV = "MNV"
    INSERTION = "INSERTION"
    DELETION = "DELETION"
    INDEL = "INDEL"


class Variant(BaseModel):
    """
    Normalized representation of a variant record.

    ``pos``, ``ref`` and ``alt`` hold the minimal form; the ``original_*``
    fields keep the record as it was supplied, when known.
    """
    pos: int = Field(ge=0, description="1-based position of the normalized variant")
    ref: str = Field(min_length=1)
    alt: str = Field(min_length=1)
    variant_type: VariantType | None = None

    # Input as supplied (optional)
    original_pos: int | None = None
    original_ref: str | None = None
    original_alt: str | None = None

    @computed_field
    @property
    def was_normalized(self) -> bool:
        """True if normalization changed the position or either allele."""
        if self.original_pos is None:
            return False
        return (self.original_pos, self.original_ref, self.original_alt) != (
            self.pos,
            self.ref,
            self.alt,
        )
