"""
seqr: search and count records in FASTA/FASTQ files

This package provides:
- A streaming FASTA/FASTQ reader with format detection
- Pattern matching on record headers, sequences or qualities
- A writer that converts between FASTA and FASTQ
- Multi-file grep, count, headers, stats and filter operations
"""

__version__ = "0.1.0"
__author__ = "seqr Contributors"

from seqr.errors import (
    SeqrError,
    SourceOpenError,
    FormatDetectionError,
    ParseError,
    WriteError,
    PatternError,
)

from seqr.io import (
    FastxRecord,
    FastxWriter,
    SeqFormat,
    read_fastx,
)

from seqr.search import (
    Matcher,
    Pattern,
    RecordPart,
    compile_pattern,
)

from seqr.pipeline import (
    grep,
    count,
    headers,
    filter_records,
    stream_sources,
)

__all__ = [
    # Errors
    "SeqrError",
    "SourceOpenError",
    "FormatDetectionError",
    "ParseError",
    "WriteError",
    "PatternError",
    # I/O
    "FastxRecord",
    "FastxWriter",
    "SeqFormat",
    "read_fastx",
    # Search
    "Matcher",
    "Pattern",
    "RecordPart",
    "compile_pattern",
    # Pipeline
    "grep",
    "count",
    "headers",
    "filter_records",
    "stream_sources",
]
