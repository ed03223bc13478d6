"""Epoch conversion: Julian Dates from numbers or calendar strings via rms-julian."""

from __future__ import annotations

import logging
import math
import re

import julian

from se_script_generator.constants import JD_OF_DAY_ZERO, SECONDS_PER_DAY

logger = logging.getLogger(__name__)


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse an ``--epoch`` calendar string to UTC (day, sec).

    Besides what rms-julian reads, a trailing ``Z`` and a bare year
    (``2010`` meaning 2010-01-01 00:00) are accepted.

    Returns:
        (day, sec) with day counted from 2000-01-01, or None if no form parses.
    """
    text = string.strip()
    forms = [text]
    if text[-1:] in ('Z', 'z'):
        forms.append(text[:-1])
    if re.fullmatch(r'\d{4}', text):
        forms.append(f'{text}-01-01')
    for form in forms:
        try:
            day, sec = julian.day_sec_from_string(form)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return (int(day), float(sec))
    return None


def jd_from_day_sec(day: int, sec: float) -> float:
    """Convert (day, sec) since 2000-01-01 00:00 to a Julian Date."""
    return JD_OF_DAY_ZERO + day + sec / SECONDS_PER_DAY


def parse_epoch(value: str) -> float:
    """Return a Julian Date from a JD number or a calendar date string.

    Parameters:
        value: ``2451545.0`` or e.g. ``2000-01-01 12:00``.

    Returns:
        Finite Julian Date.

    Raises:
        ValueError: If the value is not a finite number or a parseable date.
    """
    try:
        jd = float(value)
    except ValueError:
        parsed = parse_datetime(value)
        if parsed is None:
            raise ValueError(f'Invalid epoch: {value!r}') from None
        jd = jd_from_day_sec(*parsed)
        logger.debug('Epoch %r -> JD %.8f', value, jd)
    if not math.isfinite(jd):
        raise ValueError(f'Invalid epoch: {value!r} (not finite)')
    return jd
