"""Constants and enums for varnorm."""

from enum import Enum

# IUPAC nucleotide and ambiguity codes, uppercase only
ALLOWED_SYMBOLS: frozenset[str] = frozenset("ACGTURYKMSWBDHVN")


class OutputFormat(str, Enum):
    """Output format for the ``normalize`` command."""

    TEXT = "text"
    JSON = "json"
