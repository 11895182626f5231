"""
Record-level Variant Normalization.

This module wraps the normalization kernel for callers that want a single
``Variant`` record back: the record is validated, trimmed to its minimal
form, classified, and returned together with the coordinates it was
supplied with.

Usage::

    >>> from varnorm.record import normalize_variant
    >>> v = normalize_variant(1000, "ATCC", "ATACC")
    >>> v.pos, v.ref, v.alt, v.variant_type
    (1001, 'T', 'TA', <VariantType.INSERTION: 'INSERTION'>)
"""

from .core.kernel import normalize, variant_type
from .models.core import Variant
from .utils.logging import get_logger, log_call

logger = get_logger(__name__)

__all__ = ["normalize_variant"]


@log_call(logger)
def normalize_variant(position: int, reference: str, alternate: str) -> Variant:
    """
    Normalize and classify a single variant record.

    Args:
        position: 1-based position of the first REF base.
        reference: Reference allele.
        alternate: Alternate allele.

    Returns:
        Variant holding the normalized record, its type (None when the
        alleles are identical) and the original coordinates.

    Raises:
        AlleleValidationError: If either allele fails validation.
    """
    norm_pos, norm_ref, norm_alt = normalize(position, reference, alternate)

    variant = Variant(
        pos=norm_pos,
        ref=norm_ref,
        alt=norm_alt,
        variant_type=variant_type(norm_ref, norm_alt),
        original_pos=position,
        original_ref=reference,
        original_alt=alternate,
    )

    if variant.was_normalized:
        logger.debug(
            "Normalized %d:%s>%s -> %d:%s>%s",
            position,
            reference,
            alternate,
            norm_pos,
            norm_ref,
            norm_alt,
        )

    return variant
