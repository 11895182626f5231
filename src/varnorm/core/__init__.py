"""
Core module for varnorm.

Provides the allele validator and the normalization kernel.
"""

from .kernel import normalize, variant_type
from .validator import validate_alleles

__all__ = ["normalize", "validate_alleles", "variant_type"]
