"""
Pattern search over record fields.
"""

from seqr.search.pattern import (
    Pattern,
    RecordPart,
    compile_pattern,
)

from seqr.search.matcher import Matcher

__all__ = [
    "Pattern",
    "RecordPart",
    "compile_pattern",
    "Matcher",
]
