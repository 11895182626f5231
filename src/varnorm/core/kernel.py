"""
Normalization Kernel: reduces a variant record to its minimal form.

A record (position, REF, ALT) is normalized in two passes:

1. Trailing trim: drop symbols shared at the right end of both alleles.
   Position is unchanged.
2. Leading trim: drop symbols shared at the left end of both alleles and
   advance position by the number dropped.

Neither pass may empty an allele. When a pass would consume a whole
allele, one shared symbol is kept as the anchor base. The trailing pass
must run first: its boundary rule is defined on the raw allele lengths.

Examples (1-based position):
    1000 ATCC  ATACC  ->  1001 T  TA    (insertion)
    1000 ACTCC AGTTCC ->  1001 C  GT    (indel)
    1000 A     A      ->  1000 A  A     (no variant)
"""

from collections.abc import Iterable

from ..models.core import VariantType
from .validator import validate_alleles

__all__ = [
    "count_shared_bases",
    "normalize",
    "trim_leading_shared_bases",
    "trim_trailing_shared_bases",
    "variant_type",
]


def normalize(position: int, reference: str, alternate: str) -> tuple[int, str, str]:
    """
    Normalize a variant record.

    Args:
        position: 1-based position of the first REF base.
        reference: Reference allele.
        alternate: Alternate allele.

    Returns:
        Tuple of (position, reference, alternate) in minimal form. Both
        alleles are non-empty substrings of the inputs and the returned
        position is never less than ``position``.

    Raises:
        AlleleValidationError: If either allele is empty or contains a
            symbol outside the allowed alphabet. Raised before any trimming.
    """
    validate_alleles(reference, alternate)

    ref, alt = trim_trailing_shared_bases(reference, alternate)

    return trim_leading_shared_bases(position, ref, alt)


def variant_type(reference: str, alternate: str) -> VariantType | None:
    """
    Classify a normalized allele pair.

    Rules are checked in order and the first match wins. Insertions and
    deletions require the shorter allele to be the shared anchor base;
    other length changes are indels. Identical alleles have no type.

    The alleles are expected to come from :func:`normalize`; this is not
    checked.
    """
    ref_len = len(reference)
    alt_len = len(alternate)

    if ref_len == 1 and alt_len == 1 and reference != alternate:
        return VariantType.SNV
    if ref_len == alt_len and reference != alternate:
        return VariantType.MNV
    if ref_len == 1 and alt_len > 1 and reference[:1] == alternate[:1]:
        return VariantType.INSERTION
    if alt_len == 1 and ref_len > 1 and reference[:1] == alternate[:1]:
        return VariantType.DELETION
    if ref_len != alt_len:
        return VariantType.INDEL
    return None


def trim_trailing_shared_bases(reference: str, alternate: str) -> tuple[str, str]:
    """
    Remove symbols shared at the right end of both alleles.

    If trimming every shared symbol would leave either allele empty, one
    more symbol is kept on both sides.
    """
    shared = count_shared_bases(reversed(reference), reversed(alternate))

    ref_end = len(reference) - shared
    alt_end = len(alternate) - shared

    if ref_end == 0 or alt_end == 0:
        ref_end += 1
        alt_end += 1

    return reference[:ref_end], alternate[:alt_end]


def trim_leading_shared_bases(
    position: int, reference: str, alternate: str
) -> tuple[int, str, str]:
    """
    Remove symbols shared at the left end of both alleles, shifting position.

    If one allele is a prefix of the other, the last shared symbol is kept
    as the anchor base.
    """
    shared = count_shared_bases(reference, alternate)

    if shared == len(reference) or shared == len(alternate):
        shared -= 1

    return position + shared, reference[shared:], alternate[shared:]


def count_shared_bases(reference: Iterable[str], alternate: Iterable[str]) -> int:
    """Count leading positions at which both symbol streams agree."""
    shared = 0
    for ref_base, alt_base in zip(reference, alternate):
        if ref_base != alt_base:
            break
        shared += 1
    return shared
