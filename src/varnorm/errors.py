"""
Allele validation errors.

Every failure the normalizer can report is one of four closed cases. Each
exception carries a ``kind`` so callers can dispatch on the case without
an isinstance chain; the two invalid-symbol cases also carry the offending
bases.
"""

from enum import Enum

__all__ = [
    "AlleleErrorKind",
    "AlleleValidationError",
    "AltBasesEmptyError",
    "AltBasesInvalidSymbolError",
    "RefBasesEmptyError",
    "RefBasesInvalidSymbolError",
]


class AlleleErrorKind(str, Enum):
    """The four ways an allele pair can fail validation."""

    REF_EMPTY = "REF_EMPTY"
    ALT_EMPTY = "ALT_EMPTY"
    REF_INVALID_SYMBOL = "REF_INVALID_SYMBOL"
    ALT_INVALID_SYMBOL = "ALT_INVALID_SYMBOL"


class AlleleValidationError(ValueError):
    """Base class for reference/alternate allele validation failures."""

    kind: AlleleErrorKind


class RefBasesEmptyError(AlleleValidationError):
    kind = AlleleErrorKind.REF_EMPTY

    def __init__(self) -> None:
        super().__init__("Reference bases must not be empty")


class AltBasesEmptyError(AlleleValidationError):
    kind = AlleleErrorKind.ALT_EMPTY

    def __init__(self) -> None:
        super().__init__("Alternate bases must not be empty")


class RefBasesInvalidSymbolError(AlleleValidationError):
    kind = AlleleErrorKind.REF_INVALID_SYMBOL

    def __init__(self, bases: str) -> None:
        self.bases = bases
        super().__init__(f"Reference bases contains non-ACGT characters: {bases}")


class AltBasesInvalidSymbolError(AlleleValidationError):
    kind = AlleleErrorKind.ALT_INVALID_SYMBOL

    def __init__(self, bases: str) -> None:
        self.bases = bases
        super().__init__(f"Alternate bases contains non-ACGT characters: {bases}")
