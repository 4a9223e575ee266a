"""
FASTA grammar.

A record starts at a line beginning with '>'. Every following line up to
the next '>' line (or the end of input) holds sequence, and those lines are
joined without their line breaks.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from seqr.errors import ParseError
from seqr.io.record import FastxRecord, split_header

NumberedLine = Tuple[int, str]


def _make_record(
    header: str,
    chunks: List[str],
    source: str,
    line_number: int,
) -> FastxRecord:
    try:
        seq_id, description = split_header(header)
    except ValueError as e:
        raise ParseError(source, line_number, str(e)) from None
    return FastxRecord(id=seq_id, description=description, sequence="".join(chunks))


def parse_fasta(
    lines: Iterable[NumberedLine],
    source: str = "-",
) -> Iterator[FastxRecord]:
    """
    Parse FASTA records from numbered lines.

    Only one record is held at a time; it is yielded as soon as the next
    header (or the end of input) is seen.

    Args:
        lines: (line_number, text) pairs, e.g. from enumerate(handle, 1)
        source: Name used in error messages

    Yields:
        FastxRecord objects without quality

    Raises:
        ParseError: On an empty id or sequence data before the first header
    """
    header: Optional[str] = None
    header_line = 0
    chunks: List[str] = []

    for line_number, raw in lines:
        line = raw.strip()
        if not line:
            continue

        if line.startswith(">"):
            if header is not None:
                yield _make_record(header, chunks, source, header_line)
            header = line[1:]
            header_line = line_number
            chunks = []
        elif header is None:
            raise ParseError(
                source, line_number, "sequence data before first '>' header"
            )
        else:
            chunks.append(line)

    if header is not None:
        yield _make_record(header, chunks, source, header_line)
