"""SpaceEngine script formatting of celestial objects (.sc block grammar).

Each object becomes one block::

    Moon "Io"
    {
        ParentBody		"Jupiter"
        Class		"Terra"
        ...

        Orbit
        {
            Epoch		2451545.00000000
            RefPlane	"Equator"
            ...
        }
    }

Field precision is part of the format: 8 decimals for radius, albedo,
periods and angles, 16 for eccentricity, ``%e`` for mass.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from se_script_generator.constants import DEFAULT_CLASSIFICATION, PLACEHOLDER_LABEL
from se_script_generator.objects import (
    CelestialObject,
    ObjectType,
    OrbitalElements,
    PhysicalProperties,
)

INDENT = '    '


class ScriptBlock:
    """Line buffer for one object block: indented key/value lines and nested braces."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._depth = 0

    def line(self, text: str = '') -> None:
        """Append a line at the current depth; an empty text appends a blank line."""
        self._lines.append(INDENT * self._depth + text if text else '')

    def field(self, key: str, value: str, tabs: int = 1) -> None:
        """Append ``key<TAB...>value`` at the current depth."""
        self.line(key + '\t' * tabs + value)

    def open(self, header: str) -> None:
        """Append a header line and an opening brace, then indent."""
        self.line(header)
        self.line('{')
        self._depth += 1

    def close(self) -> None:
        """Dedent and append a closing brace."""
        self._depth -= 1
        self.line('}')

    def get_text(self) -> str:
        """Return the block text; every line ends with a newline."""
        return ''.join(line + '\n' for line in self._lines)


def _quoted(value: str) -> str:
    return f'"{value}"'


def _f8(value: float) -> str:
    return f'{value:.8f}'


def _classification(obj: CelestialObject) -> str:
    if obj.classification is None or not obj.classification.strip():
        return DEFAULT_CLASSIFICATION
    return obj.classification


PhysicalPolicy = Callable[[ScriptBlock, CelestialObject, PhysicalProperties], None]


def _no_physical_block(block: ScriptBlock, obj: CelestialObject, props: PhysicalProperties) -> None:
    """Barycenters are massless points: nothing to print."""


def _comet_physical_block(
    block: ScriptBlock, obj: CelestialObject, props: PhysicalProperties
) -> None:
    """Comets print class and radius; SpaceEngine derives the rest."""
    block.field('Class', _quoted(_classification(obj)), 2)
    if props.radius > 0:
        block.field('Radius', _f8(props.radius), 2)
    block.line()


def _full_physical_block(
    block: ScriptBlock, obj: CelestialObject, props: PhysicalProperties
) -> None:
    """Moons, dwarf moons, asteroids: optional values only when positive, albedos always."""
    block.field('Class', _quoted(_classification(obj)), 2)
    if props.mass > 0:
        block.field('Mass', f'{props.mass:e}', 2)
    if props.radius > 0:
        block.field('Radius', _f8(props.radius), 2)
    block.field('AlbedoBond', _f8(props.albedo_bond))
    block.field('AlbedoGeom', _f8(props.albedo_geom))
    if props.rotation_period > 0:
        block.field('RotationPeriod', _f8(props.rotation_period))
    if props.obliquity > 0:
        block.field('Obliquity', _f8(props.obliquity))
    block.line()


PHYSICAL_POLICIES: dict[ObjectType | None, PhysicalPolicy] = {
    ObjectType.MOON: _full_physical_block,
    ObjectType.DWARF_MOON: _full_physical_block,
    ObjectType.ASTEROID: _full_physical_block,
    ObjectType.COMET: _comet_physical_block,
    ObjectType.BARYCENTER: _no_physical_block,
    None: _full_physical_block,
}


def _append_orbit_block(
    block: ScriptBlock, orbit: OrbitalElements, distance_unit: str, reference_plane: str
) -> None:
    block.open('Orbit')
    block.field('Epoch', _f8(orbit.epoch), 2)
    block.field('RefPlane', _quoted(reference_plane))
    axis_key = 'SemiMajorAxisKm' if distance_unit.lower() == 'km' else 'SemiMajorAxis'
    block.field(axis_key, _f8(orbit.semi_major_axis))
    if orbit.period is not None and orbit.period > 0:
        block.field('Period', _f8(orbit.period), 2)
    block.field('Eccentricity', f'{orbit.eccentricity:.16f}')
    block.field('Inclination', _f8(orbit.inclination))
    block.field('AscendingNode', _f8(orbit.ascending_node))
    block.field('ArgOfPericen', _f8(orbit.arg_of_pericenter))
    block.field('MeanAnomaly', _f8(orbit.mean_anomaly))
    block.close()


def format_object(obj: CelestialObject, distance_unit: str, reference_plane: str) -> str:
    """Return the SpaceEngine script block for one object.

    Sections whose data is absent are skipped, so any object, however
    sparse, yields a valid block.

    Parameters:
        obj: Object to format.
        distance_unit: ``km`` (any case) selects ``SemiMajorAxisKm``; anything
            else selects ``SemiMajorAxis``.
        reference_plane: ``RefPlane`` value, printed verbatim.

    Returns:
        Block text ending with a newline.
    """
    label = obj.type.label if obj.type is not None else PLACEHOLDER_LABEL
    block = ScriptBlock()
    block.open(f'{label} {_quoted(obj.name)}')
    block.field('ParentBody', _quoted(obj.parent_body), 2)
    if obj.physical is not None:
        PHYSICAL_POLICIES[obj.type](block, obj, obj.physical)
    if obj.orbit is not None:
        _append_orbit_block(block, obj.orbit, distance_unit, reference_plane)
    block.close()
    return block.get_text()


def format_objects(
    objects: Iterable[CelestialObject], distance_unit: str, reference_plane: str
) -> str:
    """Return every object's block, blocks separated by a blank line."""
    return '\n'.join(format_object(obj, distance_unit, reference_plane) for obj in objects)
