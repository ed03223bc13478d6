"""Generation requests: common and per-mode parameter dataclasses, plus token parsers."""

from __future__ import annotations

from dataclasses import dataclass, field

from se_script_generator.constants import (
    DEFAULT_COMET_MAX_ECCENTRICITY,
    DEFAULT_COMET_MAX_INCLINATION,
    DEFAULT_COMET_MAX_RADIUS,
    DEFAULT_COMET_MIN_ECCENTRICITY,
    DEFAULT_COMET_MIN_INCLINATION,
    DEFAULT_COMET_MIN_RADIUS,
    DEFAULT_DISTANCE_UNIT,
    DEFAULT_EPOCH,
    DEFAULT_REFERENCE_PLANE,
    DISTANCE_UNITS,
    MOON_CLASSES,
    REFERENCE_PLANES,
)
from se_script_generator.objects import ObjectType


Range = tuple[float, float]

# Case-insensitive token -> canonical spelling
_DISTANCE_UNIT_ALIASES: dict[str, str] = {
    'au': 'AU',
    'km': 'km',
    'kilometer': 'km',
    'kilometers': 'km',
}
_REFERENCE_PLANE_ALIASES: dict[str, str] = {p.lower(): p for p in REFERENCE_PLANES}
_MOON_CLASS_ALIASES: dict[str, str] = {c.lower(): c for c in MOON_CLASSES}


def parse_distance_unit(value: str) -> str:
    """Return canonical distance unit (``AU`` or ``km``) for a case-insensitive token.

    Raises:
        ValueError: If the token is not a known unit.
    """
    unit = _DISTANCE_UNIT_ALIASES.get(value.strip().lower())
    if unit is None:
        raise ValueError(f'Unknown distance unit {value!r}; expected one of {DISTANCE_UNITS}')
    return unit


def parse_reference_plane(value: str) -> str:
    """Return canonical reference plane name for a case-insensitive token.

    Raises:
        ValueError: If the token is not a SpaceEngine reference plane.
    """
    plane = _REFERENCE_PLANE_ALIASES.get(value.strip().lower())
    if plane is None:
        raise ValueError(
            f'Unknown reference plane {value!r}; expected one of {", ".join(REFERENCE_PLANES)}'
        )
    return plane


def parse_moon_class(value: str) -> str:
    """Return canonical moon class for a case-insensitive token.

    Raises:
        ValueError: If the token is not a known moon class.
    """
    moon_class = _MOON_CLASS_ALIASES.get(value.strip().lower())
    if moon_class is None:
        raise ValueError(f'Unknown moon class {value!r}; expected one of {", ".join(MOON_CLASSES)}')
    return moon_class


@dataclass(frozen=True)
class CommonParams:
    """Fields shared by every generation request.

    Parameters:
        parent_body: Name of the body the generated objects orbit.
        distance_unit: ``AU`` or ``km`` (case-insensitive).
        reference_plane: SpaceEngine ``RefPlane`` value, printed verbatim.
        output_file: Destination path for the script.
        epoch: Julian Date used for every generated orbit.
    """

    parent_body: str
    distance_unit: str = DEFAULT_DISTANCE_UNIT
    reference_plane: str = DEFAULT_REFERENCE_PLANE
    output_file: str = ''
    epoch: float = DEFAULT_EPOCH

    @property
    def is_km(self) -> bool:
        """True when semi-major axes are expressed in kilometers."""
        return self.distance_unit.lower() == 'km'


@dataclass(frozen=True)
class MoonEntry:
    """One caller-described regular moon."""

    name: str
    radius: float
    distance: float
    classification: str


@dataclass(frozen=True)
class RegularMoonParams:
    """Request for named regular moons with shared eccentricity/inclination/albedo ranges."""

    common: CommonParams
    moons: tuple[MoonEntry, ...] = ()
    eccentricity_range: Range = (0.0, 0.0)
    inclination_range: Range = (0.0, 0.0)
    bond_albedo_range: Range = (0.0, 0.0)


@dataclass(frozen=True)
class GenericObjectParams:
    """Request for sequentially named dwarf moons or asteroids.

    Parameters:
        common: Shared request fields.
        object_type: Type of every generated object.
        axis_range: Semi-major axis range.
        eccentricity_range: Eccentricity range.
        inclination_range: Inclination range in degrees.
        count: Number of objects.
        start_number: First number of the name sequence (e.g. ``Jupiter.D1``).
    """

    common: CommonParams
    object_type: ObjectType | None = ObjectType.ASTEROID
    axis_range: Range = (0.0, 0.0)
    eccentricity_range: Range = (0.0, 0.0)
    inclination_range: Range = (0.0, 0.0)
    count: int = 0
    start_number: int = 1


@dataclass(frozen=True)
class CometBounds:
    """Sampling bounds shared by every comet and barycenter orbit."""

    min_eccentricity: float = DEFAULT_COMET_MIN_ECCENTRICITY
    max_eccentricity: float = DEFAULT_COMET_MAX_ECCENTRICITY
    min_inclination: float = DEFAULT_COMET_MIN_INCLINATION
    max_inclination: float = DEFAULT_COMET_MAX_INCLINATION
    min_radius: float = DEFAULT_COMET_MIN_RADIUS
    max_radius: float = DEFAULT_COMET_MAX_RADIUS


@dataclass(frozen=True)
class CometParams:
    """Request for grouped comets: barycenter pairs plus single comets.

    Parameters:
        common: Shared request fields.
        axis_range: Semi-major axis range for barycenters and single comets.
        count: Base number of comet entries before grouping.
        start_number: First number of the ``C`` name sequence.
        bounds: Eccentricity, inclination and radius bounds.
    """

    common: CommonParams
    axis_range: Range = (0.0, 0.0)
    count: int = 0
    start_number: int = 1
    bounds: CometBounds = field(default_factory=CometBounds)


GenerationParams = RegularMoonParams | GenericObjectParams | CometParams

__all__ = [
    'CometBounds',
    'CometParams',
    'CommonParams',
    'GenerationParams',
    'GenericObjectParams',
    'MoonEntry',
    'Range',
    'RegularMoonParams',
    'parse_distance_unit',
    'parse_moon_class',
    'parse_reference_plane',
]
