import io

import pytest

from seqr.errors import SourceOpenError, WriteError
from seqr.io.fastx import open_sink, open_source, read_fastx
from seqr.io.record import FastxRecord


def test_open_source_closes_file(fasta_file):
    with open_source(fasta_file) as handle:
        assert handle.readline() == ">r1 desc\n"
    assert handle.closed


def test_open_source_closes_file_on_error(fasta_file):
    with pytest.raises(RuntimeError):
        with open_source(fasta_file) as handle:
            raise RuntimeError("boom")
    assert handle.closed


def test_open_source_stdin_left_open():
    stdin = io.StringIO(">a\nA\n")
    with open_source("-", stdin) as handle:
        assert handle is stdin
    assert not stdin.closed


def test_open_source_missing(missing_file):
    with pytest.raises(SourceOpenError) as info:
        with open_source(missing_file):
            pass
    assert info.value.source == missing_file
    assert str(info.value).startswith(f"{missing_file}: ")


def test_open_source_directory(tmp_path):
    with pytest.raises(SourceOpenError):
        with open_source(str(tmp_path)):
            pass


def test_open_sink_file(tmp_path):
    path = tmp_path / "out.fa"
    with open_sink(str(path)) as sink:
        sink.write(">a\nA\n")
    assert sink.closed
    assert path.read_text() == ">a\nA\n"


def test_open_sink_stdout_left_open():
    stdout = io.StringIO()
    with open_sink(None, stdout) as sink:
        sink.write("x")
    assert not stdout.closed
    assert stdout.getvalue() == "x"


def test_open_sink_unwritable(tmp_path):
    with pytest.raises(WriteError):
        with open_sink(str(tmp_path / "no" / "such" / "dir.fa")):
            pass


def test_open_source_strips_byte_order_mark(tmp_path):
    path = tmp_path / "bom.fa"
    path.write_bytes(b"\xef\xbb\xbf>r1 d\nACGT\n")
    with open_source(str(path)) as handle:
        records = list(read_fastx(handle, str(path)))
    assert records == [FastxRecord("r1", "d", "ACGT")]
