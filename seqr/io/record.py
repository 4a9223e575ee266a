"""
In-memory representation of a single FASTA or FASTQ entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SeqFormat(Enum):
    """Text formats understood by seqr, keyed by their header marker."""

    FASTA = "fasta"
    FASTQ = "fastq"

    @property
    def marker(self) -> str:
        return ">" if self is SeqFormat.FASTA else "@"

    @classmethod
    def from_marker(cls, char: str) -> Optional["SeqFormat"]:
        return _MARKERS.get(char)


_MARKERS = {">": SeqFormat.FASTA, "@": SeqFormat.FASTQ}


@dataclass
class FastxRecord:
    """
    Represents a single FASTA or FASTQ record.

    Attributes:
        id: Sequence identifier (first word after the marker)
        description: Rest of the header line, may be empty
        sequence: The nucleotide/protein sequence, without line breaks
        quality: Quality string for FASTQ records, None for FASTA records
    """
    id: str
    description: str
    sequence: str
    quality: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("record id must not be empty")
        if self.quality is not None and len(self.quality) != len(self.sequence):
            raise ValueError(
                f"record {self.id!r}: quality length {len(self.quality)} "
                f"does not match sequence length {len(self.sequence)}"
            )

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def format(self) -> SeqFormat:
        """Format the record was read from."""
        return SeqFormat.FASTA if self.quality is None else SeqFormat.FASTQ

    @property
    def header(self) -> str:
        """Header text without the marker: id, plus description if any."""
        if self.description:
            return f"{self.id} {self.description}"
        return self.id

    def to_fasta(self, line_width: int = 0) -> str:
        """Format as FASTA text, wrapping the sequence when line_width > 0."""
        lines = [f">{self.header}"]
        if line_width > 0 and self.sequence:
            for i in range(0, len(self.sequence), line_width):
                lines.append(self.sequence[i:i + line_width])
        else:
            lines.append(self.sequence)
        return "\n".join(lines) + "\n"

    def to_fastq(self, filler: str = "-") -> str:
        """
        Format as FASTQ text.

        A record without quality data (read from FASTA) gets a quality line
        made of ``filler`` repeated to the sequence length.
        """
        quality = self.quality
        if quality is None:
            quality = filler * len(self.sequence)
        return f"@{self.header}\n{self.sequence}\n+\n{quality}\n"


def split_header(text: str) -> Tuple[str, str]:
    """
    Split header text (marker already removed) into id and description.

    Raises:
        ValueError: If there is no id directly after the marker
    """
    if not text or text[0].isspace():
        raise ValueError("missing sequence id after header marker")
    parts = text.split(None, 1)
    description = parts[1].strip() if len(parts) > 1 else ""
    return parts[0], description
