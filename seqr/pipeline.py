"""
Multi-source processing.

Sources are handled strictly one after another: a source is opened,
streamed to exhaustion and closed before the next one is opened. Any
failure (unopenable source, parse error, write error) propagates at once
and no later source is touched.
"""

import logging
from typing import IO, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from seqr.config import DEFAULT_QUALITY_FILLER
from seqr.io.fastx import STDIN, open_source, read_fastx
from seqr.io.record import FastxRecord, SeqFormat
from seqr.io.writer import FastxWriter
from seqr.search.matcher import Matcher
from seqr.search.pattern import Pattern, RecordPart

logger = logging.getLogger(__name__)


def _sources(sources: Optional[Sequence[str]]) -> List[str]:
    return list(sources) if sources else [STDIN]


def stream_sources(
    sources: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
) -> Iterator[Tuple[str, Iterator[FastxRecord]]]:
    """
    Open each source in order and hand out its record stream.

    The record iterator of one source must be consumed before asking for
    the next pair; the source is closed when the generator advances.

    Args:
        sources: Paths, "-" for stdin. Empty or None means stdin.
        stdin: Stream to use for "-" (defaults to sys.stdin)

    Yields:
        (source_name, records) pairs
    """
    names = _sources(sources)
    for index, name in enumerate(names, 1):
        logger.debug("opening source %d/%d: %s", index, len(names), name)
        with open_source(name, stdin) as handle:
            yield name, read_fastx(handle, name)
        logger.debug("source exhausted: %s", name)
    logger.debug("all %d source(s) exhausted", len(names))


def iter_records(
    sources: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
) -> Iterator[FastxRecord]:
    """All records of all sources, in source order."""
    for _, records in stream_sources(sources, stdin):
        yield from records


def grep(
    pattern: Pattern,
    sources: Optional[Sequence[str]],
    sink: IO[str],
    part: RecordPart = RecordPart.HEAD,
    out_format: Optional[SeqFormat] = None,
    stdin: Optional[IO[str]] = None,
    line_width: int = 0,
    quality_filler: str = DEFAULT_QUALITY_FILLER,
) -> int:
    """
    Write every record selected by ``pattern`` to ``sink``.

    Args:
        pattern: Compiled pattern (carries invert and case policy)
        sources: Input paths, "-" for stdin
        sink: Output stream shared by all sources
        part: Record field to search
        out_format: Output format; None keeps each record's own format
        stdin: Stream to use for "-"
        line_width: FASTA wrap width (0 = single line)
        quality_filler: Quality character used when writing FASTA as FASTQ

    Returns:
        Number of records written

    Example:
        >>> import io
        >>> from seqr.search import compile_pattern
        >>> out = io.StringIO()
        >>> grep(compile_pattern("r1"), ["-"], out,
        ...      stdin=io.StringIO(">r1 desc\\nACGT\\n>r2\\nGGGG\\n"))
        1
        >>> out.getvalue()
        '>r1 desc\\nACGT\\n'
    """
    matcher = Matcher(pattern, part)
    writer = FastxWriter(
        sink,
        out_format=out_format,
        line_width=line_width,
        quality_filler=quality_filler,
    )
    logger.debug("grep with %r", matcher)

    for name, records in stream_sources(sources, stdin):
        written = writer.write_all(filter(matcher, records))
        logger.info("%s: %d matching record(s)", name, written)
    return writer.count


def count(
    sources: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
) -> List[Tuple[str, int]]:
    """
    Count records per source.

    Returns:
        (source_name, record_count) for each source, in order
    """
    counts = []
    for name, records in stream_sources(sources, stdin):
        num = sum(1 for _ in records)
        logger.info("%s: %d record(s)", name, num)
        counts.append((name, num))
    return counts


def headers(
    sources: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
    id_only: bool = False,
    desc_only: bool = False,
) -> Iterator[str]:
    """Header text of every record: the id, the description, or both."""
    if id_only and desc_only:
        raise ValueError("id_only and desc_only are mutually exclusive")
    for record in iter_records(sources, stdin):
        if id_only:
            yield record.id
        elif desc_only:
            yield record.description
        else:
            yield record.header


def filter_records(
    sources: Optional[Sequence[str]],
    sink: IO[str],
    min_length: int = 0,
    max_length: int = 0,
    number: int = 0,
    ids: Optional[Iterable[str]] = None,
    out_format: Optional[SeqFormat] = None,
    stdin: Optional[IO[str]] = None,
    line_width: int = 0,
    quality_filler: str = DEFAULT_QUALITY_FILLER,
) -> int:
    """
    Write records that pass length and id filters.

    Args:
        sources: Input paths, "-" for stdin
        sink: Output stream
        min_length: Minimum sequence length (0 = no minimum)
        max_length: Maximum sequence length (0 = no maximum)
        number: Stop after this many records (0 = no limit)
        ids: Keep only records whose id or description is listed
            (None or empty keeps all)
        out_format: Output format; None keeps each record's own format

    Returns:
        Number of records written
    """
    wanted: Set[str] = set(ids or ())
    writer = FastxWriter(
        sink,
        out_format=out_format,
        line_width=line_width,
        quality_filler=quality_filler,
    )

    def keep(record: FastxRecord) -> bool:
        if min_length and len(record) < min_length:
            return False
        if max_length and len(record) > max_length:
            return False
        if wanted and record.id not in wanted and record.description not in wanted:
            return False
        return True

    # close() releases the open source when the limit stops us early
    stream = iter_records(sources, stdin)
    try:
        for record in stream:
            if not keep(record):
                continue
            writer.write(record)
            if number and writer.count >= number:
                logger.debug("record limit %d reached", number)
                break
    finally:
        stream.close()
    return writer.count
