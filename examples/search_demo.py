#!/usr/bin/env python3
"""
Example: Searching and converting records with seqr

This example demonstrates the library API behind the command line:
- Reading FASTA and FASTQ from text streams
- Searching headers and sequences
- Converting matches from FASTA to FASTQ
- Summarizing lengths and qualities
"""

import io
import sys

from seqr import (
    FastxWriter,
    Matcher,
    RecordPart,
    SeqFormat,
    compile_pattern,
    read_fastx,
)
from seqr.stats import summarize

FASTA = """>DF0000001.4 MIR
ACAGTATAGCATAGTGGTTAAGAGCACGGACTCTGGAGCCAGACTGCC
>DF0000002.4 AluY
GGCCGGGCGCGGTGGCTCACGCCTGTAATCCCAGCACTTTGGGAGG
>DF0000004.4 alu-like
GCCGGGCGCGG
"""

FASTQ = """@read1
ACGTACGTAA
+
IIIIIHHH##
@read2
GGGGCCCCAA
+
!!!!IIIIII
"""


def demo_header_search():
    """Case-sensitive and case-insensitive header search."""
    print("\n" + "=" * 60)
    print("HEADER SEARCH")
    print("=" * 60)

    for insensitive in (False, True):
        matcher = Matcher(compile_pattern("Alu", case_insensitive=insensitive))
        hits = [rec.id for rec in read_fastx(io.StringIO(FASTA)) if matcher(rec)]
        print(f"\n'Alu' (case_insensitive={insensitive}): {hits}")


def demo_conversion():
    """Write sequence hits as FASTQ with synthesized quality."""
    print("\n" + "=" * 60)
    print("FASTA -> FASTQ")
    print("=" * 60 + "\n")

    matcher = Matcher(compile_pattern("GCGCGG"), RecordPart.SEQ)
    writer = FastxWriter(sys.stdout, out_format=SeqFormat.FASTQ)
    writer.write_all(filter(matcher, read_fastx(io.StringIO(FASTA))))
    print(f"({writer.count} records written)")


def demo_quality_search():
    """Find reads with low-quality bases."""
    print("\n" + "=" * 60)
    print("QUALITY SEARCH")
    print("=" * 60)

    matcher = Matcher(compile_pattern("[!-+]"), RecordPart.QUAL)
    for rec in read_fastx(io.StringIO(FASTQ)):
        print(f"  {rec.id}: low-quality bases = {matcher(rec)}")


def demo_stats():
    """Length and quality summary."""
    print("\n" + "=" * 60)
    print("STATS")
    print("=" * 60 + "\n")

    for line in summarize(read_fastx(io.StringIO(FASTQ)), top_n=1).lines():
        print(f"  {line}")


def main():
    print("=" * 60)
    print("seqr Demo")
    print("=" * 60)

    demo_header_search()
    demo_conversion()
    demo_quality_search()
    demo_stats()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
