"""Configuration: output directory and random seed from environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Env var overrides with sensible defaults.
DEFAULT_OUTPUT_PATH = '.'


def get_output_path() -> str:
    """Return directory for generated scripts (SE_OUTPUT_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('SE_OUTPUT_PATH', DEFAULT_OUTPUT_PATH)


def get_seed() -> int | None:
    """Return the random seed from SE_GENERATOR_SEED, or None when unset or invalid.

    Returns:
        Integer seed, or None to seed from OS entropy.
    """
    raw = os.environ.get('SE_GENERATOR_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning('Ignoring non-integer SE_GENERATOR_SEED=%r', raw)
        return None


def default_output_file(file_name: str) -> str:
    """Return file_name placed under the configured output directory.

    Parameters:
        file_name: Bare file name such as ``Jupiter_Moons.sc``.

    Returns:
        Path string.
    """
    return str(Path(get_output_path()) / file_name)
