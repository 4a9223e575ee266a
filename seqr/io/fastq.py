"""
FASTQ grammar and quality helpers.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of 4 lines:
1. Header line starting with '@' followed by sequence ID
2. Sequence line
3. '+' line (optionally followed by the ID again)
4. Quality line (ASCII-encoded Phred scores)
"""

from typing import Iterable, Iterator, List, Tuple

import numpy as np

from seqr.errors import ParseError
from seqr.io.record import FastxRecord, split_header

NumberedLine = Tuple[int, str]

# Phred quality score encoding offsets
PHRED33_OFFSET = 33  # Sanger/Illumina 1.8+
PHRED64_OFFSET = 64  # Illumina 1.3-1.7


def quality_to_phred(quality_string: str, offset: int = PHRED33_OFFSET) -> List[int]:
    """
    Convert quality string to Phred scores.

    Args:
        quality_string: ASCII-encoded quality string
        offset: Phred offset (33 or 64)

    Returns:
        List of integer Phred scores
    """
    return [ord(c) - offset for c in quality_string]


def quality_scores(quality_string: str, offset: int = PHRED33_OFFSET) -> np.ndarray:
    """Quality string as a numpy array of integer Phred scores."""
    return np.array(quality_to_phred(quality_string, offset), dtype=np.int32)


def mean_quality(quality_string: str, offset: int = PHRED33_OFFSET) -> float:
    """Mean Phred score of a quality string, 0.0 when it is empty."""
    if not quality_string:
        return 0.0
    return float(np.mean(quality_scores(quality_string, offset)))


def _next_line(
    lines: Iterator[NumberedLine],
    source: str,
    record_id: str,
    record_line: int,
    what: str,
) -> NumberedLine:
    try:
        line_number, raw = next(lines)
    except StopIteration:
        raise ParseError(
            source,
            record_line,
            f"truncated record {record_id!r}: missing {what} line",
        ) from None
    return line_number, raw.strip()


def parse_fastq(
    lines: Iterable[NumberedLine],
    source: str = "-",
) -> Iterator[FastxRecord]:
    """
    Parse four-line FASTQ records from numbered lines.

    Blank lines between records are skipped. Inside a record every line
    counts, so an empty sequence line must be followed by an empty quality
    line.

    Args:
        lines: (line_number, text) pairs, e.g. from enumerate(handle, 1)
        source: Name used in error messages

    Yields:
        FastxRecord objects with quality

    Raises:
        ParseError: On a bad header, a missing '+' separator, a quality line
            whose length differs from the sequence, or input ending inside
            a record
    """
    lines = iter(lines)
    for header_line, raw in lines:
        header = raw.strip()
        if not header:
            continue
        if not header.startswith("@"):
            raise ParseError(
                source, header_line, f"expected '@' header, found {header[:20]!r}"
            )

        try:
            seq_id, description = split_header(header[1:])
        except ValueError as e:
            raise ParseError(source, header_line, str(e)) from None

        _, sequence = _next_line(lines, source, seq_id, header_line, "sequence")
        plus_line, separator = _next_line(
            lines, source, seq_id, header_line, "'+' separator"
        )
        if not separator.startswith("+"):
            raise ParseError(
                source, plus_line, f"record {seq_id!r}: expected '+' separator line"
            )
        qual_line, quality = _next_line(lines, source, seq_id, header_line, "quality")

        if len(quality) != len(sequence):
            raise ParseError(
                source,
                qual_line,
                f"record {seq_id!r}: quality length {len(quality)} "
                f"does not match sequence length {len(sequence)}",
            )

        yield FastxRecord(
            id=seq_id,
            description=description,
            sequence=sequence,
            quality=quality,
        )
