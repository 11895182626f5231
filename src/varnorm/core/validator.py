"""
Allele Validator: gatekeeper for the normalization kernel.

Both alleles must be non-empty and consist entirely of symbols from
``ALLOWED_SYMBOLS``. Checks run in a fixed order (empty REF, empty ALT,
invalid REF, invalid ALT) and the first failure is raised.
"""

from ..config import ALLOWED_SYMBOLS
from ..errors import (
    AltBasesEmptyError,
    AltBasesInvalidSymbolError,
    RefBasesEmptyError,
    RefBasesInvalidSymbolError,
)

__all__ = ["is_valid_bases", "validate_alleles"]


def is_valid_bases(bases: str) -> bool:
    """Return True if every character of ``bases`` is an allowed symbol."""
    return all(base in ALLOWED_SYMBOLS for base in bases)


def validate_alleles(reference: str, alternate: str) -> None:
    """
    Validate a reference/alternate allele pair.

    Args:
        reference: Reference allele.
        alternate: Alternate allele.

    Raises:
        RefBasesEmptyError: Reference allele is empty.
        AltBasesEmptyError: Alternate allele is empty.
        RefBasesInvalidSymbolError: Reference contains a disallowed symbol.
        AltBasesInvalidSymbolError: Alternate contains a disallowed symbol.
    """
    if not reference:
        raise RefBasesEmptyError()

    if not alternate:
        raise AltBasesEmptyError()

    if not is_valid_bases(reference):
        raise RefBasesInvalidSymbolError(reference)

    if not is_valid_bases(alternate):
        raise AltBasesInvalidSymbolError(alternate)
