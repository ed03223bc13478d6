"""Input validation for generation requests (ranges, names, required fields)."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TypeVar

from se_script_generator.constants import (
    MAX_ALBEDO,
    MAX_ECCENTRICITY,
    MAX_INCLINATION,
    MAX_NAME_LENGTH,
    MIN_ALBEDO,
    MIN_ECCENTRICITY,
    MIN_INCLINATION,
)

T = TypeVar('T')

_STARTS_WITH_LETTER = re.compile(r'^[a-zA-Z]')
_VALID_CHARACTERS = re.compile(r'^[a-zA-Z0-9 ]+$')


class InvalidRangeError(ValueError):
    """A min/max pair is inverted or leaves the field's domain."""


class InvalidNameError(ValueError):
    """A user-supplied body name breaks the naming rules."""


class MissingFieldError(ValueError):
    """A generation request lacks a mandatory field."""


def validate(value: T, condition: Callable[[T], bool], message: str) -> None:
    """Raise ValueError with message unless condition(value) holds."""
    if not condition(value):
        raise ValueError(message)


def validate_range(
    lo: float,
    hi: float,
    field_name: str,
    *,
    lower: float | None = None,
    upper: float | None = None,
    upper_inclusive: bool = True,
) -> tuple[float, float]:
    """Check that ``lo <= hi`` and that both lie inside the optional domain.

    Parameters:
        lo: Range minimum.
        hi: Range maximum.
        field_name: Field label for the error message.
        lower: Inclusive domain minimum, if any.
        upper: Domain maximum, if any.
        upper_inclusive: Whether ``upper`` itself is allowed.

    Returns:
        The validated ``(lo, hi)`` pair.

    Raises:
        InvalidRangeError: On NaN, inverted, or out-of-domain bounds.
    """
    if math.isnan(lo) or math.isnan(hi) or lo > hi:
        raise InvalidRangeError(f'Invalid range for {field_name}: [{lo}, {hi}]')
    if lower is not None and lo < lower:
        raise InvalidRangeError(f'Invalid range for {field_name}: {lo} is below {lower}')
    if upper is not None:
        too_high = hi > upper if upper_inclusive else hi >= upper
        if too_high:
            bound = 'above' if upper_inclusive else 'at or above'
            raise InvalidRangeError(f'Invalid range for {field_name}: {hi} is {bound} {upper}')
    return (lo, hi)


def validate_eccentricity_range(lo: float, hi: float) -> tuple[float, float]:
    """Eccentricity range inside [0, 1)."""
    return validate_range(
        lo, hi, 'eccentricity', lower=MIN_ECCENTRICITY, upper=MAX_ECCENTRICITY, upper_inclusive=False
    )


def validate_inclination_range(lo: float, hi: float) -> tuple[float, float]:
    """Inclination range inside [-180, 180] degrees."""
    return validate_range(lo, hi, 'inclination', lower=MIN_INCLINATION, upper=MAX_INCLINATION)


def validate_albedo_range(lo: float, hi: float) -> tuple[float, float]:
    """Bond albedo range inside [0, 1]."""
    return validate_range(lo, hi, 'Bond albedo', lower=MIN_ALBEDO, upper=MAX_ALBEDO)


def validate_axis_range(lo: float, hi: float) -> tuple[float, float]:
    """Semi-major axis range with a strictly positive minimum."""
    validate_range(lo, hi, 'semi-major axis', lower=0.0)
    if lo <= 0.0:
        raise InvalidRangeError(f'Invalid range for semi-major axis: {lo} must be positive')
    return (lo, hi)


def validate_count(count: int, field_name: str = 'count') -> int:
    """Object count of at least 1."""
    if count < 1:
        raise InvalidRangeError(f'Invalid {field_name}: {count} (must be at least 1)')
    return count


def validate_name(name: str | None, field_name: str = 'Name') -> str:
    """Check a moon or parent body name.

    Rules: not None, 1 to 20 characters, starts with a letter, only letters,
    digits and spaces.

    Raises:
        InvalidNameError: On the first rule that fails.
    """
    if name is None:
        raise InvalidNameError(f'{field_name} cannot be null.')
    rules: list[tuple[Callable[[str], bool], str]] = [
        (lambda n: len(n) >= 1, f'{field_name} must be at least 1 character long.'),
        (
            lambda n: len(n) <= MAX_NAME_LENGTH,
            f'{field_name} must be at most {MAX_NAME_LENGTH} characters long.',
        ),
        (lambda n: bool(_STARTS_WITH_LETTER.match(n)), f'{field_name} must start with a letter.'),
        (
            lambda n: bool(_VALID_CHARACTERS.match(n)),
            f'{field_name} must contain only letters, digits, and spaces.',
        ),
    ]
    for condition, message in rules:
        try:
            validate(name, condition, message)
        except ValueError as e:
            raise InvalidNameError(str(e)) from None
    return name


def require(value: T | None, field_name: str) -> T:
    """Return value, or raise MissingFieldError when it is None or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingFieldError(f'Missing required field: {field_name}')
    return value
