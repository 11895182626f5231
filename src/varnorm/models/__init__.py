"""
Data models for varnorm.

Provides the variant type enum and the Pydantic variant record.
"""

from .core import Variant, VariantType

__all__ = [
    "Variant",
    "VariantType",
]
