"""Celestial object model: object types, physical properties, and orbital elements."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from se_script_generator.constants import DEFAULT_EPOCH, PLACEHOLDER_NAME


class ObjectType(Enum):
    """SpaceEngine object kinds produced by the generator.

    Each member carries the script label and the one-letter prefix used for
    sequential names (e.g. ``Jupiter.D3``).
    """

    MOON = ('Moon', 'M')
    DWARF_MOON = ('DwarfMoon', 'D')
    ASTEROID = ('Asteroid', 'A')
    COMET = ('Comet', 'C')
    BARYCENTER = ('Barycenter', 'C')

    def __init__(self, label: str, prefix: str) -> None:
        self.label = label
        self.prefix = prefix


def parse_object_type(value: str) -> ObjectType:
    """Parse an object type from a label, enum name, or CLI name (case-insensitive).

    Parameters:
        value: Token such as ``DwarfMoon``, ``dwarf_moon``, or ``dwarf-moons``.

    Returns:
        Matching ObjectType.

    Raises:
        ValueError: If the token names no object type.
    """
    key = value.strip().lower().replace('-', '').replace('_', '').replace(' ', '')
    for object_type in ObjectType:
        label = object_type.label.lower()
        if key in (label, label + 's', object_type.name.lower().replace('_', '')):
            return object_type
    raise ValueError(f'Unknown object type: {value!r}')


@dataclass(frozen=True)
class PhysicalProperties:
    """Physical properties; zero or negative means "not specified" (albedos excepted).

    Parameters:
        mass: Mass in kg.
        radius: Radius in km.
        albedo_bond: Bond albedo.
        albedo_geom: Geometric albedo.
        rotation_period: Sidereal rotation period in hours.
        obliquity: Axial tilt in degrees.
    """

    mass: float = 0.0
    radius: float = 0.0
    albedo_bond: float = 0.0
    albedo_geom: float = 0.0
    rotation_period: float = 0.0
    obliquity: float = 0.0


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian elements at an epoch; angles in degrees.

    ``ascending_node`` is 0 whenever ``inclination`` is 0.

    Parameters:
        epoch: Julian Date at which the elements are valid.
        semi_major_axis: Semi-major axis in the request's distance unit.
        eccentricity: Orbital eccentricity.
        inclination: Inclination to the reference plane.
        ascending_node: Longitude of the ascending node.
        arg_of_pericenter: Argument of pericenter.
        mean_anomaly: Mean anomaly at epoch.
        period: Orbital period in years, or None to let SpaceEngine derive it.
    """

    epoch: float = DEFAULT_EPOCH
    semi_major_axis: float = 0.0
    eccentricity: float = 0.0
    inclination: float = 0.0
    ascending_node: float = 0.0
    arg_of_pericenter: float = 0.0
    mean_anomaly: float = 0.0
    period: float | None = None

    def with_arg_of_pericenter(self, angle: float) -> OrbitalElements:
        """Return a copy with a different argument of pericenter."""
        return replace(self, arg_of_pericenter=angle)


@dataclass(frozen=True)
class CelestialObject:
    """One scriptable body.

    Generated objects may carry placeholder names; the ordering and naming
    pass produces finalized copies through :meth:`renamed`.
    """

    type: ObjectType | None
    name: str = PLACEHOLDER_NAME
    parent_body: str = ''
    classification: str | None = None
    physical: PhysicalProperties | None = None
    orbit: OrbitalElements | None = None
    is_satellite: bool = False

    @property
    def semi_major_axis(self) -> float:
        """Semi-major axis, or 0.0 for objects without an orbit."""
        return self.orbit.semi_major_axis if self.orbit is not None else 0.0

    def renamed(self, name: str, parent_body: str | None = None) -> CelestialObject:
        """Return a finalized copy with a new name and optionally a new parent body."""
        if parent_body is None:
            return replace(self, name=name)
        return replace(self, name=name, parent_body=parent_body)
