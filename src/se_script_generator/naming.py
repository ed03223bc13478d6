"""Ordering and naming pass: sort generated objects and assign final names."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from se_script_generator.constants import SATELLITE_SUFFIXES
from se_script_generator.objects import CelestialObject, ObjectType
from se_script_generator.params import CometParams, GenericObjectParams
from se_script_generator.validation import require

logger = logging.getLogger(__name__)


def sort_by_semi_major_axis(objects: Iterable[CelestialObject]) -> list[CelestialObject]:
    """Return objects in ascending semi-major axis order (stable; no orbit sorts as 0)."""
    return sorted(objects, key=lambda obj: obj.semi_major_axis)


def assign_sequential_names(
    objects: Sequence[CelestialObject],
    parent_body: str,
    object_type: ObjectType,
    start_number: int,
) -> list[CelestialObject]:
    """Name objects ``<parent>.<prefix><n>`` in the given order.

    Parameters:
        objects: Objects already in presentation order.
        parent_body: Parent body name used as the name root.
        object_type: Supplies the one-letter prefix.
        start_number: Number given to the first object.

    Returns:
        Renamed copies, same order.
    """
    return [
        obj.renamed(f'{parent_body}.{object_type.prefix}{start_number + i}')
        for i, obj in enumerate(objects)
    ]


def _comet_units(objects: Sequence[CelestialObject]) -> list[list[CelestialObject]]:
    """Split a comet batch into units: a barycenter with its satellites, or a single comet.

    Satellites belong to the closest preceding barycenter in generation order.
    """
    units: list[list[CelestialObject]] = []
    for obj in objects:
        if obj.is_satellite and units and units[-1][0].type is ObjectType.BARYCENTER:
            units[-1].append(obj)
        else:
            if obj.is_satellite:
                logger.warning('Satellite %r has no preceding barycenter', obj.name)
            units.append([obj])
    return units


def name_comet_groups(
    objects: Sequence[CelestialObject],
    parent_body: str,
    start_number: int,
) -> list[CelestialObject]:
    """Order a comet batch by semi-major axis and assign ``C`` sequence names.

    Each barycenter or single comet gets ``<parent>.C<k>``; satellites of a
    barycenter follow it as ``<barycenter> A``, ``<barycenter> B`` with their
    parent body rebound to the barycenter.

    Parameters:
        objects: Comet batch in generation order.
        parent_body: Parent body of the barycenters and single comets.
        start_number: First number of the sequence.

    Returns:
        Finalized objects, each barycenter immediately followed by its satellites.
    """
    units = sorted(_comet_units(objects), key=lambda unit: unit[0].semi_major_axis)
    named: list[CelestialObject] = []
    for k, unit in enumerate(units, start=start_number):
        lead_name = f'{parent_body}.{ObjectType.COMET.prefix}{k}'
        named.append(unit[0].renamed(lead_name, parent_body))
        for suffix, satellite in zip(SATELLITE_SUFFIXES, unit[1:]):
            named.append(satellite.renamed(f'{lead_name} {suffix}', lead_name))
    return named


def order_regular_moons(objects: Iterable[CelestialObject]) -> list[CelestialObject]:
    """Sort regular moons; their user-given names are kept."""
    return sort_by_semi_major_axis(objects)


def order_generic_objects(
    objects: Iterable[CelestialObject], params: GenericObjectParams
) -> list[CelestialObject]:
    """Sort a dwarf moon or asteroid batch and name it ``<parent>.<D|A><n>``.

    Raises:
        MissingFieldError: If the request has no object type.
    """
    object_type = require(params.object_type, 'object type')
    return assign_sequential_names(
        sort_by_semi_major_axis(objects),
        params.common.parent_body,
        object_type,
        params.start_number,
    )


def order_comets(objects: Sequence[CelestialObject], params: CometParams) -> list[CelestialObject]:
    """Order and name a comet batch generated from params."""
    return name_comet_groups(objects, params.common.parent_body, params.start_number)
