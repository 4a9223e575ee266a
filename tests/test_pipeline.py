import io

import pytest

from seqr.errors import FormatDetectionError, ParseError, SourceOpenError
from seqr.io.fastx import read_fastx
from seqr.io.record import SeqFormat
from seqr.pipeline import count, filter_records, grep, headers, iter_records
from seqr.search import RecordPart, compile_pattern

from tests.samples import FASTA_TEXT


def run_grep(text, sources=None, stdin=None, **kwargs):
    out = io.StringIO()
    n = grep(compile_pattern(text), sources, out, stdin=stdin, **kwargs)
    return n, out.getvalue()


def test_grep_head_example():
    n, text = run_grep("r1", ["-"], stdin=io.StringIO(FASTA_TEXT))
    assert n == 1
    assert text == ">r1 desc\nACGT\n"


def test_grep_seq_to_fastq_example():
    n, text = run_grep(
        "GGG",
        ["-"],
        stdin=io.StringIO(FASTA_TEXT),
        part=RecordPart.SEQ,
        out_format=SeqFormat.FASTQ,
    )
    assert n == 1
    assert text == "@r2\nGGGG\n+\n----\n"


@pytest.mark.parametrize("part", list(RecordPart))
def test_empty_pattern_copies_input(fastq_file, part):
    with open(fastq_file) as f:
        expected = list(read_fastx(f))
    n, text = run_grep("", [fastq_file], part=part)
    assert n == len(expected)
    assert list(read_fastx(io.StringIO(text))) == expected


def test_no_sources_reads_stdin():
    n, text = run_grep("", None, stdin=io.StringIO(FASTA_TEXT))
    assert text == FASTA_TEXT


def test_multi_source_concatenation(fasta_file, fastq_file):
    n, text = run_grep("1", [fasta_file, fastq_file])
    assert n == 2
    assert text == ">r1 desc\nACGT\n@q1 first read\nACGTN\n+\nIIII#\n"


def test_same_source_twice(fasta_file):
    n, text = run_grep("", [fasta_file, fasta_file])
    assert n == 4
    assert text == FASTA_TEXT * 2


def test_mixed_formats_keep_their_own_format(fasta_file, fastq_file):
    _, text = run_grep("", [fastq_file, fasta_file])
    assert text.startswith("@q1")
    assert ">r1 desc\nACGT\n" in text


def test_qual_search_over_fasta_inverted(fasta_file):
    n, text = run_grep("", [fasta_file], part=RecordPart.QUAL)
    assert n == 0
    out = io.StringIO()
    n = grep(compile_pattern("", invert=True), [fasta_file], out, part=RecordPart.QUAL)
    assert n == 2


def test_missing_source_aborts_before_later_sources(fasta_file, missing_file):
    out = io.StringIO()
    with pytest.raises(SourceOpenError) as info:
        grep(compile_pattern(""), [fasta_file, missing_file, fasta_file], out)
    assert info.value.source == missing_file
    # the first source was already streamed, the third was never opened
    assert out.getvalue() == FASTA_TEXT


def test_parse_error_aborts_run(tmp_path, fasta_file):
    bad = tmp_path / "bad.fq"
    bad.write_text("@a\nACGT\n+\nII\n")
    out = io.StringIO()
    with pytest.raises(ParseError) as info:
        grep(compile_pattern(""), [str(bad), fasta_file], out)
    assert info.value.source == str(bad)
    assert out.getvalue() == ""


def test_detection_error_names_source(tmp_path):
    bad = tmp_path / "notes.txt"
    bad.write_text("hello\n")
    with pytest.raises(FormatDetectionError, match="notes.txt:1"):
        count([str(bad)])


def test_count(fasta_file, fastq_file, tmp_path):
    empty = tmp_path / "empty.fa"
    empty.write_text("")
    assert count([fasta_file, fastq_file, str(empty)]) == [
        (fasta_file, 2),
        (fastq_file, 2),
        (str(empty), 0),
    ]


def test_count_stdin():
    assert count(None, io.StringIO(FASTA_TEXT)) == [("-", 2)]


def test_iter_records_order(fasta_file, fastq_file):
    ids = [r.id for r in iter_records([fastq_file, fasta_file])]
    assert ids == ["q1", "q2", "r1", "r2"]


def test_headers(fasta_file):
    assert list(headers([fasta_file])) == ["r1 desc", "r2"]
    assert list(headers([fasta_file], id_only=True)) == ["r1", "r2"]
    assert list(headers([fasta_file], desc_only=True)) == ["desc", ""]


def test_headers_flags_exclusive(fasta_file):
    with pytest.raises(ValueError):
        list(headers([fasta_file], id_only=True, desc_only=True))


class TestFilter:
    def run(self, sources, **kwargs):
        out = io.StringIO()
        n = filter_records(sources, out, **kwargs)
        return n, out.getvalue()

    def test_length_bounds(self, dfam_file):
        _, text = self.run([dfam_file], min_length=60, max_length=80)
        ids = [r.id for r in read_fastx(io.StringIO(text))]
        assert ids == ["DF0000002.4", "DF0000003.4"]

    def test_ids_match_id_or_description(self, dfam_file):
        _, text = self.run([dfam_file], ids=["DF0000001.4", "AluY"])
        ids = [r.id for r in read_fastx(io.StringIO(text))]
        assert ids == ["DF0000001.4", "DF0000002.4"]

    def test_number_limit(self, dfam_file):
        n, text = self.run([dfam_file, dfam_file], number=5)
        assert n == 5
        assert text.count(">") == 5

    def test_no_filters_keeps_all(self, fastq_file):
        n, text = self.run([fastq_file])
        assert n == 2
        assert text.startswith("@q1 first read\n")

    def test_out_format(self, fasta_file):
        _, text = self.run([fasta_file], out_format=SeqFormat.FASTQ)
        assert text == "@r1 desc\nACGT\n+\n----\n@r2\nGGGG\n+\n----\n"
