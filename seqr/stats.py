"""
Length and quality summaries for a record stream.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import numpy as np

from seqr.errors import SeqrError
from seqr.io.fastq import PHRED33_OFFSET, mean_quality
from seqr.io.record import FastxRecord


@dataclass
class SeqStats:
    """
    Summary of one or more sources.

    Attributes:
        num_seqs: Number of records
        smallest: Shortest sequence length
        largest: Longest sequence length
        average: Mean sequence length
        top_n: N requested for ``top_n_length``
        top_n_length: Length of the N-th longest sequence, None when there
            are fewer than N sequences
        mean_quality: Mean Phred score over all FASTQ bases, None when no
            record carried quality
    """
    num_seqs: int
    smallest: int
    largest: int
    average: float
    top_n: int
    top_n_length: Optional[int]
    mean_quality: Optional[float] = None

    def lines(self) -> List[str]:
        out = [
            f"Num seqs: {self.num_seqs}",
            f"Smallest: {self.smallest}",
            f"Largest: {self.largest}",
            f"Average: {int(round(self.average))}",
        ]
        if self.top_n_length is not None:
            out.append(f"Top {self.top_n}: {self.top_n_length}")
        if self.mean_quality is not None:
            out.append(f"Mean quality: {self.mean_quality:.2f}")
        return out


def summarize(
    records: Iterable[FastxRecord],
    top_n: int = 100,
    on_record: Optional[Callable[[FastxRecord], None]] = None,
    offset: int = PHRED33_OFFSET,
) -> SeqStats:
    """
    Compute length statistics over a record stream.

    Only lengths and running quality sums are kept, not the records.

    Args:
        records: Records to summarize
        top_n: Report the length of the N-th longest sequence
        on_record: Called with each record as it streams past
        offset: Phred offset for quality scores (PHRED33_OFFSET or
            PHRED64_OFFSET)

    Returns:
        SeqStats

    Raises:
        SeqrError: If there are no records
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    lengths: List[int] = []
    quality_total = 0.0
    quality_bases = 0

    for record in records:
        if on_record is not None:
            on_record(record)
        lengths.append(len(record))
        if record.quality is not None:
            bases = len(record.quality)
            quality_total += mean_quality(record.quality, offset) * bases
            quality_bases += bases

    if not lengths:
        raise SeqrError("No sequences found!")

    arr = np.array(lengths, dtype=np.int64)
    # Descending order: index N-1 is the N-th longest
    ordered = np.sort(arr)[::-1]
    top_n_length = int(ordered[top_n - 1]) if len(ordered) >= top_n else None

    overall_quality = None
    if quality_bases:
        overall_quality = quality_total / quality_bases

    return SeqStats(
        num_seqs=len(arr),
        smallest=int(arr.min()),
        largest=int(arr.max()),
        average=float(arr.mean()),
        top_n=top_n,
        top_n_length=top_n_length,
        mean_quality=overall_quality,
    )
