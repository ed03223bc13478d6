"""Tests for SpaceEngine script formatting."""

from __future__ import annotations

from se_script_generator.formatter import ScriptBlock, format_object, format_objects
from se_script_generator.objects import (
    CelestialObject,
    ObjectType,
    OrbitalElements,
    PhysicalProperties,
)

_IO = CelestialObject(
    type=ObjectType.MOON,
    name='Io',
    parent_body='Jupiter',
    classification='Terra',
    physical=PhysicalProperties(radius=1821.6, albedo_bond=0.5, albedo_geom=0.54),
    orbit=OrbitalElements(
        semi_major_axis=421800.0,
        eccentricity=0.0041,
        inclination=0.05,
        ascending_node=43.977,
        arg_of_pericenter=84.129,
        mean_anomaly=342.021,
    ),
)

_IO_TEXT = (
    'Moon "Io"\n'
    '{\n'
    '    ParentBody\t\t"Jupiter"\n'
    '    Class\t\t"Terra"\n'
    '    Radius\t\t1821.60000000\n'
    '    AlbedoBond\t0.50000000\n'
    '    AlbedoGeom\t0.54000000\n'
    '\n'
    '    Orbit\n'
    '    {\n'
    '        Epoch\t\t2451545.00000000\n'
    '        RefPlane\t"Equator"\n'
    '        SemiMajorAxisKm\t421800.00000000\n'
    '        Eccentricity\t0.0041000000000000\n'
    '        Inclination\t0.05000000\n'
    '        AscendingNode\t43.97700000\n'
    '        ArgOfPericen\t84.12900000\n'
    '        MeanAnomaly\t342.02100000\n'
    '    }\n'
    '}\n'
)


def test_script_block_nesting() -> None:
    """Blocks indent four spaces per level and end every line with a newline."""
    block = ScriptBlock()
    block.open('Star "Sol"')
    block.field('Mass', '1.0', 2)
    block.line()
    block.open('Orbit')
    block.field('Period', '2.0')
    block.close()
    block.close()
    assert block.get_text() == (
        'Star "Sol"\n{\n    Mass\t\t1.0\n\n    Orbit\n    {\n        Period\t2.0\n    }\n}\n'
    )


def test_full_moon_block() -> None:
    """A moon prints its physical section, a blank line, then its orbit."""
    assert format_object(_IO, 'km', 'Equator') == _IO_TEXT


def test_format_is_idempotent() -> None:
    """Formatting the same object twice gives the same text."""
    assert format_object(_IO, 'km', 'Equator') == format_object(_IO, 'km', 'Equator')


def test_distance_unit_selects_axis_key() -> None:
    """km in any case selects SemiMajorAxisKm; anything else SemiMajorAxis."""
    assert '        SemiMajorAxisKm\t421800.00000000\n' in format_object(_IO, 'KM', 'Equator')
    text = format_object(_IO, 'AU', 'Ecliptic')
    assert '        SemiMajorAxis\t421800.00000000\n' in text
    assert 'SemiMajorAxisKm' not in text
    assert '        RefPlane\t"Ecliptic"\n' in text


def test_zero_orbit_precision() -> None:
    """A circular equatorial orbit prints zeros at full precision."""
    obj = CelestialObject(
        type=ObjectType.ASTEROID,
        name='Io.A1',
        parent_body='Io',
        physical=PhysicalProperties(radius=1.0),
        orbit=OrbitalElements(semi_major_axis=1000.0),
    )
    text = format_object(obj, 'km', 'Equator')
    assert '        Eccentricity\t0.0000000000000000\n' in text
    assert '        Inclination\t0.00000000\n' in text
    assert '        AscendingNode\t0.00000000\n' in text


def test_albedos_always_printed() -> None:
    """Albedos print even at zero; mass, rotation and obliquity only when positive."""
    obj = CelestialObject(type=ObjectType.DWARF_MOON, name='P.D1', physical=PhysicalProperties())
    text = format_object(obj, 'km', 'Equator')
    assert '    AlbedoBond\t0.00000000\n' in text
    assert '    AlbedoGeom\t0.00000000\n' in text
    assert '    Class\t\t"Asteroid"\n' in text
    for key in ('Mass', 'Radius', 'RotationPeriod', 'Obliquity', 'Orbit'):
        assert key not in text


def test_optional_physical_fields() -> None:
    """Positive mass prints in exponent form, rotation and obliquity at 8 decimals."""
    props = PhysicalProperties(mass=8.93e22, rotation_period=42.5, obliquity=1.25)
    obj = CelestialObject(type=ObjectType.MOON, name='Io', physical=props)
    text = format_object(obj, 'km', 'Equator')
    assert '    Mass\t\t8.930000e+22\n' in text
    assert '    RotationPeriod\t42.50000000\n' in text
    assert '    Obliquity\t1.25000000\n' in text


def test_period_printed_when_set() -> None:
    """Orbital period prints after the axis only when positive."""
    orbit = OrbitalElements(semi_major_axis=1.0, period=1.769)
    obj = CelestialObject(type=ObjectType.MOON, name='Io', orbit=orbit)
    text = format_object(obj, 'AU', 'Equator')
    assert '        SemiMajorAxis\t1.00000000\n        Period\t\t1.76900000\n' in text
    zero = CelestialObject(type=ObjectType.MOON, name='Io', orbit=OrbitalElements(period=0.0))
    assert 'Period' not in format_object(zero, 'AU', 'Equator')


def test_barycenter_has_no_physical_lines() -> None:
    """Barycenters print header, parent and orbit only."""
    bary = CelestialObject(
        type=ObjectType.BARYCENTER,
        name='Sun.C1',
        parent_body='Sun',
        physical=PhysicalProperties(radius=5.0, albedo_bond=0.2),
        orbit=OrbitalElements(semi_major_axis=5.0),
    )
    text = format_object(bary, 'AU', 'Ecliptic')
    assert text.startswith('Barycenter "Sun.C1"\n{\n    ParentBody\t\t"Sun"\n    Orbit\n')
    for key in ('Class', 'Mass', 'Radius', 'Albedo'):
        assert key not in text


def test_comet_prints_class_and_radius_only() -> None:
    """Comets print Class and Radius, no albedo."""
    comet = CelestialObject(
        type=ObjectType.COMET,
        name='Sun.C1 A',
        parent_body='Sun.C1',
        classification='Asteroid',
        physical=PhysicalProperties(radius=2.5, albedo_bond=0.3),
    )
    assert format_object(comet, 'AU', 'Ecliptic') == (
        'Comet "Sun.C1 A"\n'
        '{\n'
        '    ParentBody\t\t"Sun.C1"\n'
        '    Class\t\t"Asteroid"\n'
        '    Radius\t\t2.50000000\n'
        '\n'
        '}\n'
    )


def test_header_only_block() -> None:
    """An object with no physical or orbit data still yields a valid block."""
    obj = CelestialObject(type=None)
    assert format_object(obj, 'AU', 'Equator') == (
        'GeneratedObject "GeneratedObject"\n{\n    ParentBody\t\t""\n}\n'
    )


def test_format_objects_separates_blocks() -> None:
    """Blocks are joined by one blank line."""
    a = CelestialObject(type=ObjectType.ASTEROID, name='Io.A1', parent_body='Io')
    b = CelestialObject(type=ObjectType.ASTEROID, name='Io.A2', parent_body='Io')
    text = format_objects([a, b], 'km', 'Equator')
    assert text == format_object(a, 'km', 'Equator') + '\n' + format_object(b, 'km', 'Equator')
    assert format_objects([], 'km', 'Equator') == ''
