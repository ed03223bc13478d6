"""Random sampling primitives over an explicit numpy Generator."""

from __future__ import annotations

import logging

import numpy as np

from se_script_generator.constants import MAX_ANGLE, MIN_ANGLE

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a new random generator; seeded when seed is not None.

    Parameters:
        seed: Integer seed for reproducible runs, or None for OS entropy.

    Returns:
        numpy Generator shared by every draw of one run.
    """
    if seed is not None:
        logger.debug('Seeding random generator with %d', seed)
    return np.random.default_rng(seed)


def uniform(rng: np.random.Generator, lo: float, hi: float) -> float:
    """Return ``lo + (hi - lo) * U`` with U uniform in [0, 1).

    No ordering check is made on the bounds; an inverted or empty range
    yields degenerate samples.
    """
    return lo + (hi - lo) * float(rng.random())


def random_angle(rng: np.random.Generator) -> float:
    """Return an angle uniform in [0, 360) degrees."""
    return uniform(rng, MIN_ANGLE, MAX_ANGLE)


def ascending_node(rng: np.random.Generator, inclination: float) -> float:
    """Return the ascending node for an orbit of the given inclination.

    A non-positive inclination has no defined node and yields 0; otherwise
    the node is uniform in [0, 360).
    """
    if inclination > MIN_ANGLE:
        return random_angle(rng)
    return MIN_ANGLE
