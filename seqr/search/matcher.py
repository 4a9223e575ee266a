from typing import Optional

from seqr.io.record import FastxRecord
from seqr.search.pattern import Pattern, RecordPart


class Matcher:
    """
    Decides whether a record is selected by a pattern.

    The selected part is searched for the pattern and the result is
    flipped when the pattern is inverted. Quality is absent on FASTA
    records, so a ``qual`` search never finds anything there, not even
    the empty pattern; with ``invert`` every FASTA record is selected.
    """

    def __init__(self, pattern: Pattern, part: RecordPart = RecordPart.HEAD):
        self.pattern = pattern
        self.part = part

    def extract(self, record: FastxRecord) -> Optional[str]:
        """Value of the selected part, None for quality on a FASTA record."""
        if self.part is RecordPart.HEAD:
            return record.header
        if self.part is RecordPart.SEQ:
            return record.sequence
        return record.quality

    def matches(self, record: FastxRecord) -> bool:
        value = self.extract(record)
        found = value is not None and self.pattern.found_in(value)
        return found != self.pattern.invert

    __call__ = matches

    def __repr__(self) -> str:
        return (
            f"Matcher({self.pattern.text!r}, part={self.part.value!r}, "
            f"invert={self.pattern.invert})"
        )
