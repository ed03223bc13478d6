"""SpaceEngine script generator for moons, dwarf moons, asteroids, and comets.

This package provides:
- Generation engine: randomized orbital and physical parameters per object type,
  including comet pairs grouped around barycenters
- Ordering and naming pass: semi-major axis order and sequential names
- Serializer: SpaceEngine .sc script blocks with fixed field precision

Randomness comes from an explicit numpy Generator; epochs may be given as
calendar dates parsed with rms-julian.
"""

from se_script_generator.formatter import format_object, format_objects
from se_script_generator.generator import build_script_objects, generate
from se_script_generator.objects import (
    CelestialObject,
    ObjectType,
    OrbitalElements,
    PhysicalProperties,
)

__all__: list[str] = [
    'CelestialObject',
    'ObjectType',
    'OrbitalElements',
    'PhysicalProperties',
    'build_script_objects',
    'format_object',
    'format_objects',
    'generate',
]
