"""
Command-line interface.

    seqr grep [options] PATTERN [FILE ...]
    seqr count [FILE ...]
    seqr headers [--id | --desc] [FILE ...]
    seqr stats [--top-n N] [--phred64] [FILE ...]
    seqr filter [options] [FILE ...]

A FILE of "-" (the default) reads standard input. Every error is reported
on stderr and turns into exit status 1.
"""

import argparse
import logging
import sys
from typing import IO, List, Optional, Sequence

from seqr import __version__
from seqr.config import SeqrConfig, load_config
from seqr.errors import SeqrError, WriteError
from seqr.io.fastq import PHRED33_OFFSET, PHRED64_OFFSET
from seqr.io.fastx import STDIN, open_sink, open_source
from seqr.io.record import SeqFormat
from seqr.log import configure_logging
from seqr.pipeline import count, filter_records, grep, headers, iter_records
from seqr.search.pattern import RecordPart, compile_pattern
from seqr.stats import summarize

logger = logging.getLogger(__name__)

PROG = "seqr"


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be >= 0")
    return value


def counting_number(text: str) -> int:
    value = non_negative_int(text)
    if value == 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be >= 1")
    return value


def _add_files(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        default=[STDIN],
        help="input file(s), '-' for stdin [default: -]",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Search and count records in FASTA/FASTQ files",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = subparsers.add_parser(
        "grep", aliases=["gr"], help="Search for sequences matching a pattern"
    )
    p.add_argument(
        "-o", "--output", metavar="OUTPUT", help="output file [default: stdout]"
    )
    p.add_argument(
        "-p",
        "--part",
        metavar="PART",
        choices=[part.value for part in RecordPart],
        default=RecordPart.HEAD.value,
        help="record part to search: head, seq or qual [default: head]",
    )
    p.add_argument(
        "-f",
        "--outfmt",
        metavar="OUTFMT",
        choices=[fmt.value for fmt in SeqFormat],
        help="output format: fasta or fastq [default: same as input]",
    )
    p.add_argument(
        "-v",
        "--invert-match",
        dest="invert",
        action="store_true",
        help="invert match",
    )
    p.add_argument(
        "-i", "--insensitive", action="store_true", help="case-insensitive search"
    )
    p.add_argument(
        "-F",
        "--fixed-strings",
        dest="literal",
        action="store_true",
        help="treat PATTERN as a literal string",
    )
    p.add_argument(
        "-w",
        "--width",
        metavar="WIDTH",
        type=non_negative_int,
        help="wrap FASTA sequence lines (0 = no wrapping)",
    )
    p.add_argument(
        "pattern", metavar="PATTERN", help="regular expression to search for"
    )
    _add_files(p)
    p.set_defaults(func=run_grep)

    p = subparsers.add_parser("count", aliases=["co"], help="Count records")
    _add_files(p)
    p.set_defaults(func=run_count)

    p = subparsers.add_parser("headers", aliases=["he"], help="Show headers")
    which = p.add_mutually_exclusive_group()
    which.add_argument(
        "-i", "--id", dest="id_only", action="store_true", help="print ID only"
    )
    which.add_argument(
        "-d",
        "--desc",
        dest="desc_only",
        action="store_true",
        help="print description only",
    )
    _add_files(p)
    p.set_defaults(func=run_headers)

    p = subparsers.add_parser("stats", aliases=["st"], help="File statistics")
    p.add_argument(
        "-n",
        "--top-n",
        metavar="TOP_N",
        type=counting_number,
        default=100,
        help="report the length of the N-th longest sequence [default: 100]",
    )
    p.add_argument(
        "--phred64",
        dest="offset",
        action="store_const",
        const=PHRED64_OFFSET,
        default=PHRED33_OFFSET,
        help="quality strings use the Phred+64 encoding [default: Phred+33]",
    )
    _add_files(p)
    p.set_defaults(func=run_stats)

    p = subparsers.add_parser(
        "filter", aliases=["fi"], help="Filter records by length or id"
    )
    p.add_argument(
        "-m",
        "--min-len",
        dest="min_length",
        metavar="LEN",
        type=non_negative_int,
        default=0,
    )
    p.add_argument(
        "-x",
        "--max-len",
        dest="max_length",
        metavar="LEN",
        type=non_negative_int,
        default=0,
    )
    p.add_argument(
        "-n",
        "--number",
        metavar="NUM",
        type=non_negative_int,
        default=0,
        help="maximum number of records to write",
    )
    p.add_argument(
        "-i",
        "--ids",
        metavar="IDS",
        nargs="*",
        default=[],
        help="sequence IDs/descriptions to keep",
    )
    p.add_argument(
        "-f",
        "--ids-from-file",
        metavar="FILE",
        help="read IDs to keep from FILE, one per line",
    )
    p.add_argument(
        "-o", "--output", metavar="OUT", help="output file [default: stdout]"
    )
    _add_files(p)
    p.set_defaults(func=run_filter)

    return parser


def _print(out: IO[str], text: str) -> None:
    try:
        out.write(text + "\n")
    except OSError as e:
        raise WriteError("<stdout>", e.strerror or str(e)) from e


def read_ids(path: str, stdin: Optional[IO[str]] = None) -> List[str]:
    """Non-empty, stripped lines of a file."""
    with open_source(path, stdin) as handle:
        return [line.strip() for line in handle if line.strip()]


def run_grep(args, config: SeqrConfig, stdin, stdout) -> None:
    pattern = compile_pattern(
        args.pattern,
        invert=args.invert,
        case_insensitive=args.insensitive,
        literal=args.literal,
    )
    out_format = SeqFormat(args.outfmt) if args.outfmt else None
    width = config.fasta_width if args.width is None else args.width
    with open_sink(args.output, stdout) as sink:
        grep(
            pattern,
            args.files,
            sink,
            part=RecordPart(args.part),
            out_format=out_format,
            stdin=stdin,
            line_width=width,
            quality_filler=config.quality_filler,
        )


def run_count(args, config: SeqrConfig, stdin, stdout) -> None:
    counts = count(args.files, stdin)
    with open_sink(None, stdout) as out:
        for name, num in counts:
            _print(out, f"{num:>10}" if name == STDIN else f"{num:>10} {name}")
        if len(counts) > 1:
            total = sum(num for _, num in counts)
            _print(out, f"{total:>10}: total")


def run_headers(args, config: SeqrConfig, stdin, stdout) -> None:
    with open_sink(None, stdout) as out:
        for text in headers(
            args.files, stdin, id_only=args.id_only, desc_only=args.desc_only
        ):
            _print(out, text)


def run_stats(args, config: SeqrConfig, stdin, stdout) -> None:
    with open_sink(None, stdout) as out:
        result = summarize(
            iter_records(args.files, stdin),
            top_n=args.top_n,
            offset=args.offset,
            on_record=lambda rec: _print(out, f"= {rec.id}\t{len(rec)}"),
        )
        for line in result.lines():
            _print(out, line)


def run_filter(args, config: SeqrConfig, stdin, stdout) -> None:
    ids = list(args.ids)
    if args.ids_from_file:
        ids.extend(read_ids(args.ids_from_file))
    with open_sink(args.output, stdout) as sink:
        filter_records(
            args.files,
            sink,
            min_length=args.min_length,
            max_length=args.max_length,
            number=args.number,
            ids=ids,
            stdin=stdin,
            line_width=config.fasta_width,
            quality_filler=config.quality_filler,
        )


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    """
    Run the command line and return the process exit status.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        stdin, stdout, stderr: Streams to use instead of the sys ones
    """
    stderr = stderr if stderr is not None else sys.stderr
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        parser.print_help(stderr)
        return 1

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_usage(stderr)
        return 1

    try:
        config = load_config()
        configure_logging(logging.DEBUG if args.debug else config.log_level, stderr)
        args.func(args, config, stdin, stdout)
    except SeqrError as e:
        logger.debug("run failed", exc_info=True)
        stderr.write(f"{PROG}: {e}\n")
        return 1
    return 0


def run() -> None:
    sys.exit(main())
