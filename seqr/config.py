"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from seqr.errors import SeqrError

DEFAULT_QUALITY_FILLER = "-"


@dataclass(frozen=True)
class SeqrConfig:
    log_level: int = logging.WARNING
    fasta_width: int = 0
    quality_filler: str = DEFAULT_QUALITY_FILLER


def _env(environ: Mapping[str, str], name: str) -> str:
    return environ.get(name, "").strip()


def load_config(environ: Optional[Mapping[str, str]] = None) -> SeqrConfig:
    """
    Build a SeqrConfig from SEQR_* environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        SeqrConfig with defaults for unset variables

    Raises:
        SeqrError: If a variable is set to an unusable value
    """
    environ = os.environ if environ is None else environ

    level_name = _env(environ, "SEQR_LOG_LEVEL").upper() or "WARNING"
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise SeqrError(f"SEQR_LOG_LEVEL: unknown level {level_name!r}")

    width_text = _env(environ, "SEQR_FASTA_WIDTH") or "0"
    try:
        fasta_width = int(width_text)
    except ValueError:
        raise SeqrError(f"SEQR_FASTA_WIDTH: not an integer: {width_text!r}") from None
    if fasta_width < 0:
        raise SeqrError(f"SEQR_FASTA_WIDTH: must be >= 0, got {fasta_width}")

    filler = environ.get("SEQR_QUALITY_FILLER", "") or DEFAULT_QUALITY_FILLER
    if len(filler) != 1 or not (33 <= ord(filler) <= 126):
        raise SeqrError(
            f"SEQR_QUALITY_FILLER: must be one printable character, got {filler!r}"
        )

    return SeqrConfig(
        log_level=log_level,
        fasta_width=fasta_width,
        quality_filler=filler,
    )
