import pytest

from tests.samples import DFAM_TEXT, FASTA_TEXT, FASTQ_TEXT


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "input.fa"
    path.write_text(FASTA_TEXT)
    return str(path)


@pytest.fixture
def fastq_file(tmp_path):
    path = tmp_path / "input.fq"
    path.write_text(FASTQ_TEXT)
    return str(path)


@pytest.fixture
def dfam_file(tmp_path):
    path = tmp_path / "dfam.fa"
    path.write_text(DFAM_TEXT)
    return str(path)


@pytest.fixture
def missing_file(tmp_path):
    return str(tmp_path / "does-not-exist.fa")
