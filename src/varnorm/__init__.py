"""
varnorm - Minimal-form normalization of genomic variant records.

This package provides a Python API and command-line interface that trims a
(position, REF, ALT) record to its minimal anchored form and classifies it
as SNV, MNV, insertion, deletion or indel.

Example usage:
    $ varnorm normalize 1000 ATCC ATACC
"""

__version__ = "0.1.0"

from .core.kernel import normalize, variant_type
from .errors import (
    AlleleErrorKind,
    AlleleValidationError,
    AltBasesEmptyError,
    AltBasesInvalidSymbolError,
    RefBasesEmptyError,
    RefBasesInvalidSymbolError,
)
from .models.core import Variant, VariantType
from .record import normalize_variant

__all__ = [
    "__version__",
    "AlleleErrorKind",
    "AlleleValidationError",
    "AltBasesEmptyError",
    "AltBasesInvalidSymbolError",
    "RefBasesEmptyError",
    "RefBasesInvalidSymbolError",
    "Variant",
    "VariantType",
    "normalize",
    "normalize_variant",
    "variant_type",
]
