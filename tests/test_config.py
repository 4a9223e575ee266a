import io
import logging

import pytest

from seqr.config import SeqrConfig, load_config
from seqr.errors import SeqrError
from seqr.log import configure_logging


def test_defaults():
    assert load_config({}) == SeqrConfig()
    assert load_config({}).quality_filler == "-"


def test_values():
    config = load_config(
        {
            "SEQR_LOG_LEVEL": "debug",
            "SEQR_FASTA_WIDTH": "60",
            "SEQR_QUALITY_FILLER": "I",
        }
    )
    assert config.log_level == logging.DEBUG
    assert config.fasta_width == 60
    assert config.quality_filler == "I"


@pytest.mark.parametrize(
    "environ",
    [
        {"SEQR_LOG_LEVEL": "chatty"},
        {"SEQR_FASTA_WIDTH": "wide"},
        {"SEQR_FASTA_WIDTH": "-1"},
        {"SEQR_QUALITY_FILLER": "II"},
        {"SEQR_QUALITY_FILLER": " "},
    ],
)
def test_invalid(environ):
    with pytest.raises(SeqrError):
        load_config(environ)


def test_configure_logging_replaces_handler():
    first, second = io.StringIO(), io.StringIO()
    before = list(logging.getLogger("seqr").handlers)
    configure_logging(logging.INFO, first)
    logger = configure_logging(logging.INFO, second)
    logging.getLogger("seqr.test").info("hello")
    assert first.getvalue() == ""
    assert "INFO" in second.getvalue() and "hello" in second.getvalue()

    # other handlers (e.g. log capture) may be attached; only ours is swapped
    added = [h for h in logger.handlers if h not in before]
    assert len(added) == 1
    assert added[0].stream is second
    streams = [getattr(h, "stream", None) for h in logger.handlers]
    assert first not in streams
    configure_logging(logging.WARNING)
