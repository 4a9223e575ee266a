"""
Sequence file I/O.

This module provides reading and writing for the two text formats
seqr works with:
- FASTA: Sequence storage format
- FASTQ: Sequence + quality scores (NGS data)
"""

from seqr.io.record import (
    FastxRecord,
    SeqFormat,
    split_header,
)

from seqr.io.fasta import parse_fasta

from seqr.io.fastq import (
    parse_fastq,
    quality_to_phred,
    mean_quality,
    PHRED33_OFFSET,
    PHRED64_OFFSET,
)

from seqr.io.fastx import (
    read_fastx,
    detect_format,
    open_source,
    open_sink,
    STDIN,
)

from seqr.io.writer import FastxWriter

__all__ = [
    "FastxRecord",
    "SeqFormat",
    "split_header",
    "parse_fasta",
    "parse_fastq",
    "quality_to_phred",
    "mean_quality",
    "PHRED33_OFFSET",
    "PHRED64_OFFSET",
    "read_fastx",
    "detect_format",
    "open_source",
    "open_sink",
    "STDIN",
    "FastxWriter",
]
