"""
Compiled search patterns and the record parts they can be applied to.
"""

import re
from dataclasses import dataclass
from enum import Enum

from seqr.errors import PatternError


class RecordPart(Enum):
    """Which field of a record a pattern is tested against."""

    HEAD = "head"
    SEQ = "seq"
    QUAL = "qual"


@dataclass(frozen=True)
class Pattern:
    """
    A compiled regular expression plus the match policy flags.

    Attributes:
        text: Pattern as given by the user
        regex: Compiled expression
        invert: Report records that do NOT contain the pattern
        case_insensitive: Ignore letter case
        literal: ``text`` was matched as a fixed string
    """
    text: str
    regex: "re.Pattern[str]"
    invert: bool = False
    case_insensitive: bool = False
    literal: bool = False

    def found_in(self, value: str) -> bool:
        """True when the pattern occurs anywhere in value (ignores invert)."""
        return self.regex.search(value) is not None


def compile_pattern(
    text: str,
    invert: bool = False,
    case_insensitive: bool = False,
    literal: bool = False,
) -> Pattern:
    """
    Compile a search pattern.

    Args:
        text: Regular expression, or a fixed string when ``literal`` is set.
            The empty pattern matches every value.
        invert: Select values that do not contain the pattern
        case_insensitive: Compile with re.IGNORECASE
        literal: Escape regex metacharacters in ``text``

    Returns:
        Immutable Pattern

    Raises:
        PatternError: If ``text`` is not a valid regular expression

    Example:
        >>> compile_pattern("alu", case_insensitive=True).found_in("AluY")
        True
    """
    source = re.escape(text) if literal else text
    flags = re.IGNORECASE if case_insensitive else 0
    try:
        regex = re.compile(source, flags)
    except re.error:
        raise PatternError(text) from None
    return Pattern(
        text=text,
        regex=regex,
        invert=invert,
        case_insensitive=case_insensitive,
        literal=literal,
    )
