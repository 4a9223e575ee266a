"""
Exception hierarchy for seqr.

Every failure raised by the reader, matcher, writer and pipeline is a
SeqrError, so the command-line layer can turn any of them into a message
on stderr and a non-zero exit status.
"""

from typing import Optional


class SeqrError(Exception):
    """Base class for all seqr errors."""


class SourceOpenError(SeqrError):
    """An input source could not be opened."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class ParseError(SeqrError):
    """
    A record could not be parsed.

    Attributes:
        source: Name of the input ("-" for stdin)
        line_number: 1-based line where the problem was found, if known
        message: What went wrong
    """

    def __init__(self, source: str, line_number: Optional[int], message: str):
        self.source = source
        self.line_number = line_number
        self.message = message
        where = source if line_number is None else f"{source}:{line_number}"
        super().__init__(f"{where}: {message}")


class FormatDetectionError(ParseError):
    """The first non-blank character is neither '>' nor '@'."""

    def __init__(self, source: str, line_number: Optional[int], found: str):
        self.found = found
        super().__init__(
            source,
            line_number,
            f"cannot detect format, expected '>' or '@' but found {found!r}",
        )


class WriteError(SeqrError):
    """Output could not be written."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"{target}: {reason}")


class PatternError(SeqrError):
    """The search pattern is not a valid regular expression."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f'Invalid pattern "{pattern}"')
