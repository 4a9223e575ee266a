"""
Format detection and input/output plumbing shared by FASTA and FASTQ.
"""

import logging
import sys
from contextlib import contextmanager
from itertools import chain
from typing import IO, Iterator, Optional, Tuple

from seqr.errors import FormatDetectionError, ParseError, SourceOpenError, WriteError
from seqr.io.fasta import parse_fasta
from seqr.io.fastq import parse_fastq
from seqr.io.record import FastxRecord, SeqFormat

logger = logging.getLogger(__name__)

STDIN = "-"
BOM = "\ufeff"

_PARSERS = {
    SeqFormat.FASTA: parse_fasta,
    SeqFormat.FASTQ: parse_fastq,
}


def _numbered(handle: IO[str], source: str) -> Iterator[Tuple[int, str]]:
    try:
        yield from enumerate(handle, 1)
    except UnicodeDecodeError as e:
        raise ParseError(
            source, None, f"input is not valid text ({e.reason})"
        ) from None


def detect_format(
    lines: Iterator[Tuple[int, str]],
    source: str = STDIN,
) -> Tuple[Optional[SeqFormat], Iterator[Tuple[int, str]]]:
    """
    Look at the first non-blank line to decide between FASTA and FASTQ.

    A byte order mark at the very start of the input is dropped.

    Args:
        lines: Numbered lines of one source
        source: Name used in error messages

    Returns:
        (format, lines) where lines starts again at the inspected line.
        format is None when the source holds nothing but whitespace.

    Raises:
        FormatDetectionError: If the first non-blank character is not a
            known header marker
    """
    for line_number, raw in lines:
        if line_number == 1:
            raw = raw.lstrip(BOM)
        stripped = raw.lstrip()
        if not stripped:
            continue
        fmt = SeqFormat.from_marker(stripped[0])
        if fmt is None:
            raise FormatDetectionError(source, line_number, stripped[0])
        return fmt, chain([(line_number, raw)], lines)
    return None, iter(())


def read_fastx(
    handle: IO[str],
    source: str = STDIN,
    fmt: Optional[SeqFormat] = None,
) -> Iterator[FastxRecord]:
    """
    Read FASTA or FASTQ records from an open text handle.

    The format is detected once from the first non-blank character unless
    ``fmt`` is given. An input with no records yields nothing. Records are
    produced lazily, one per ``next()``.

    Args:
        handle: Text stream to read
        source: Name used in error messages ("-" for stdin)
        fmt: Skip detection and parse with this grammar

    Yields:
        FastxRecord objects

    Raises:
        FormatDetectionError: If the format cannot be detected
        ParseError: If a record is malformed or truncated

    Example:
        >>> import io
        >>> [r.id for r in read_fastx(io.StringIO(">a\\nAC\\n>b\\nGT\\n"))]
        ['a', 'b']
    """
    lines = _numbered(handle, source)
    if fmt is None:
        fmt, lines = detect_format(lines, source)
        if fmt is None:
            logger.debug("%s: no records", source)
            return
        logger.debug("%s: detected %s", source, fmt.value)
    yield from _PARSERS[fmt](lines, source)


@contextmanager
def open_source(name: str, stdin: Optional[IO[str]] = None) -> Iterator[IO[str]]:
    """
    Open an input for reading; "-" means standard input.

    Standard input is never closed. Files are closed when the block exits,
    including when it exits with an error.

    Raises:
        SourceOpenError: If the file cannot be opened
    """
    if name == STDIN:
        yield stdin if stdin is not None else sys.stdin
        return

    try:
        handle = open(name, "rt", encoding="utf-8-sig")
    except OSError as e:
        raise SourceOpenError(name, e.strerror or str(e)) from e
    with handle:
        yield handle


@contextmanager
def open_sink(
    path: Optional[str] = None,
    stdout: Optional[IO[str]] = None,
) -> Iterator[IO[str]]:
    """
    Open the single output for a run; None means standard output.

    The sink is flushed on exit. A file sink is also closed; standard
    output is left open.

    Raises:
        WriteError: If the file cannot be created or flushed
    """
    if path is None:
        handle = stdout if stdout is not None else sys.stdout
        target = "<stdout>"
        owned = False
    else:
        try:
            handle = open(path, "wt")
        except OSError as e:
            raise WriteError(path, e.strerror or str(e)) from e
        target = path
        owned = True

    try:
        yield handle
        try:
            handle.flush()
        except OSError as e:
            raise WriteError(target, e.strerror or str(e)) from e
    finally:
        if owned:
            handle.close()
