"""Generation engine: sample moons, generic objects, and grouped comets."""

from __future__ import annotations

import logging
import math

import numpy as np

from se_script_generator.constants import (
    DEFAULT_CLASSIFICATION,
    DEGREES_PER_CIRCLE,
    GENERIC_GEOM_ALBEDO_OFFSET,
    MAX_GENERIC_ALBEDO,
    MAX_GENERIC_RADIUS,
    MAX_GROUP_FRACTION,
    MAX_PAIR_OFFSET,
    MIN_GENERIC_ALBEDO,
    MIN_GENERIC_RADIUS,
    MIN_GROUP_FRACTION,
    MIN_PAIR_OFFSET,
    REGULAR_MOON_GEOM_ALBEDO_OFFSET,
)
from se_script_generator.naming import order_comets, order_generic_objects, order_regular_moons
from se_script_generator.objects import (
    CelestialObject,
    ObjectType,
    OrbitalElements,
    PhysicalProperties,
)
from se_script_generator.params import (
    CometParams,
    GenerationParams,
    GenericObjectParams,
    Range,
    RegularMoonParams,
)
from se_script_generator.sampling import ascending_node, random_angle, uniform
from se_script_generator.validation import require

logger = logging.getLogger(__name__)


def _sample_orbit(
    rng: np.random.Generator,
    epoch: float,
    axis: float,
    eccentricity_range: Range,
    inclination_range: Range,
) -> OrbitalElements:
    """Draw eccentricity, inclination, and the three angles for a fixed axis."""
    ecc = uniform(rng, *eccentricity_range)
    inc = uniform(rng, *inclination_range)
    node = ascending_node(rng, inc)
    return OrbitalElements(
        epoch=epoch,
        semi_major_axis=axis,
        eccentricity=ecc,
        inclination=inc,
        ascending_node=node,
        arg_of_pericenter=random_angle(rng),
        mean_anomaly=random_angle(rng),
    )


def generate_regular_moons(
    params: RegularMoonParams, rng: np.random.Generator
) -> list[CelestialObject]:
    """Generate one Moon per caller-described entry, in entry order.

    Radius, distance, name and class come from the entry; eccentricity,
    inclination and Bond albedo are drawn from the shared ranges, and the
    geometric albedo is the Bond albedo plus a fixed offset.

    Raises:
        MissingFieldError: If the parent body or a moon name is missing.
    """
    common = params.common
    parent = require(common.parent_body, 'parent body')
    moons: list[CelestialObject] = []
    for entry in params.moons:
        name = require(entry.name, 'moon name')
        orbit = _sample_orbit(
            rng,
            common.epoch,
            entry.distance,
            params.eccentricity_range,
            params.inclination_range,
        )
        bond = uniform(rng, *params.bond_albedo_range)
        physical = PhysicalProperties(
            radius=entry.radius,
            albedo_bond=bond,
            albedo_geom=bond + REGULAR_MOON_GEOM_ALBEDO_OFFSET,
        )
        moons.append(
            CelestialObject(
                type=ObjectType.MOON,
                name=name,
                parent_body=parent,
                classification=entry.classification,
                physical=physical,
                orbit=orbit,
            )
        )
    logger.debug('Generated %d regular moons of %s', len(moons), parent)
    return moons


def generate_generic_objects(
    params: GenericObjectParams, rng: np.random.Generator
) -> list[CelestialObject]:
    """Generate ``params.count`` placeholder-named dwarf moons or asteroids.

    Raises:
        MissingFieldError: If the parent body or object type is missing.
    """
    common = params.common
    parent = require(common.parent_body, 'parent body')
    object_type = require(params.object_type, 'object type')
    objects: list[CelestialObject] = []
    for _ in range(params.count):
        axis = uniform(rng, *params.axis_range)
        orbit = _sample_orbit(
            rng, common.epoch, axis, params.eccentricity_range, params.inclination_range
        )
        radius = uniform(rng, MIN_GENERIC_RADIUS, MAX_GENERIC_RADIUS)
        bond = uniform(rng, MIN_GENERIC_ALBEDO, MAX_GENERIC_ALBEDO)
        physical = PhysicalProperties(
            radius=radius,
            albedo_bond=bond,
            albedo_geom=bond + GENERIC_GEOM_ALBEDO_OFFSET,
        )
        objects.append(
            CelestialObject(
                type=object_type,
                parent_body=parent,
                physical=physical,
                orbit=orbit,
            )
        )
    logger.debug('Generated %d %s objects around %s', len(objects), object_type.label, parent)
    return objects


def comet_group_count(count: int, rng: np.random.Generator) -> int:
    """Return how many barycenter pairs a batch of ``count`` comets forms (at least 1)."""
    fraction = uniform(rng, MIN_GROUP_FRACTION, MAX_GROUP_FRACTION)
    return max(1, math.floor(count * fraction))


def _comet_orbit(params: CometParams, rng: np.random.Generator) -> OrbitalElements:
    bounds = params.bounds
    axis = uniform(rng, *params.axis_range)
    return _sample_orbit(
        rng,
        params.common.epoch,
        axis,
        (bounds.min_eccentricity, bounds.max_eccentricity),
        (bounds.min_inclination, bounds.max_inclination),
    )


def _comet(
    params: CometParams,
    rng: np.random.Generator,
    parent: str,
    orbit: OrbitalElements,
    *,
    is_satellite: bool,
) -> CelestialObject:
    radius = uniform(rng, params.bounds.min_radius, params.bounds.max_radius)
    return CelestialObject(
        type=ObjectType.COMET,
        parent_body=parent,
        classification=DEFAULT_CLASSIFICATION,
        physical=PhysicalProperties(radius=radius),
        orbit=orbit,
        is_satellite=is_satellite,
    )


def generate_comets(params: CometParams, rng: np.random.Generator) -> list[CelestialObject]:
    """Generate barycenter pairs followed by single comets.

    Between 10% and 20% of the base count (at least one) becomes barycenters,
    each followed by two satellite comets on the barycenter's orbit whose
    arguments of pericenter differ by 15 to 25 degrees. The rest of the base
    count are single comets with independent orbits. Every object is
    placeholder-named; the total is ``count + 2 * groups``.

    Raises:
        MissingFieldError: If the parent body is missing.
    """
    parent = require(params.common.parent_body, 'parent body')
    groups = comet_group_count(params.count, rng)
    singles = params.count - groups
    objects: list[CelestialObject] = []

    for _ in range(groups):
        orbit = _comet_orbit(params, rng)
        objects.append(
            CelestialObject(type=ObjectType.BARYCENTER, parent_body=parent, orbit=orbit)
        )
        base_arg = random_angle(rng)
        offset = uniform(rng, MIN_PAIR_OFFSET, MAX_PAIR_OFFSET)
        for arg in (base_arg, (base_arg + offset) % DEGREES_PER_CIRCLE):
            objects.append(
                _comet(params, rng, parent, orbit.with_arg_of_pericenter(arg), is_satellite=True)
            )

    for _ in range(singles):
        objects.append(_comet(params, rng, parent, _comet_orbit(params, rng), is_satellite=False))

    logger.debug(
        'Generated %d comet objects around %s (%d groups, %d singles)',
        len(objects),
        parent,
        groups,
        singles,
    )
    return objects


def generate(params: GenerationParams, rng: np.random.Generator) -> list[CelestialObject]:
    """Generate unordered, possibly placeholder-named objects for any request type."""
    if isinstance(params, RegularMoonParams):
        return generate_regular_moons(params, rng)
    if isinstance(params, GenericObjectParams):
        return generate_generic_objects(params, rng)
    if isinstance(params, CometParams):
        return generate_comets(params, rng)
    raise TypeError(f'Unsupported generation request: {type(params).__name__}')


def build_script_objects(
    params: GenerationParams, rng: np.random.Generator
) -> list[CelestialObject]:
    """Generate objects and run the ordering and naming pass.

    Returns:
        Finalized objects in ascending semi-major axis order.
    """
    objects = generate(params, rng)
    if isinstance(params, RegularMoonParams):
        return order_regular_moons(objects)
    if isinstance(params, GenericObjectParams):
        return order_generic_objects(objects, params)
    return order_comets(objects, params)
