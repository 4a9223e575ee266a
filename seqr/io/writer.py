"""Serialize records to FASTA or FASTQ, converting between them as needed."""

import logging
from typing import IO, Iterable, Optional

from seqr.config import DEFAULT_QUALITY_FILLER
from seqr.errors import WriteError
from seqr.io.record import FastxRecord, SeqFormat

logger = logging.getLogger(__name__)


class FastxWriter:
    """
    Writes records to one text sink.

    Args:
        sink: Open text stream
        out_format: Target format; None keeps each record's own format
        line_width: Wrap FASTA sequence lines at this width (0 = one line)
        quality_filler: Character repeated to build quality for FASTA
            records written as FASTQ
        name: Sink name used in error messages

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> FastxWriter(out, SeqFormat.FASTQ).write(FastxRecord("r1", "", "ACGT"))
        >>> out.getvalue()
        '@r1\\nACGT\\n+\\n----\\n'
    """

    def __init__(
        self,
        sink: IO[str],
        out_format: Optional[SeqFormat] = None,
        line_width: int = 0,
        quality_filler: str = DEFAULT_QUALITY_FILLER,
        name: str = "<output>",
    ):
        if line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {line_width}")
        self.sink = sink
        self.out_format = out_format
        self.line_width = line_width
        self.quality_filler = quality_filler
        self.name = name
        self.count = 0

    def format(self, record: FastxRecord) -> str:
        """Text for one record in the target format."""
        target = self.out_format or record.format
        if target is SeqFormat.FASTQ:
            return record.to_fastq(self.quality_filler)
        return record.to_fasta(self.line_width)

    def write(self, record: FastxRecord) -> None:
        text = self.format(record)
        try:
            self.sink.write(text)
        except OSError as e:
            raise WriteError(self.name, e.strerror or str(e)) from e
        self.count += 1

    def write_all(self, records: Iterable[FastxRecord]) -> int:
        """Write every record, returning how many were written."""
        start = self.count
        for record in records:
            self.write(record)
        return self.count - start
