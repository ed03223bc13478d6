"""Fixed constants: default epoch, sampling bounds, and SpaceEngine vocabularies."""

# Julian Date of J2000.0 (2000-01-01 12:00 TT); default orbital epoch.
DEFAULT_EPOCH = 2451545.0
# Julian Date of 2000-01-01 00:00, i.e. day 0 / second 0 of rms-julian's day count.
JD_OF_DAY_ZERO = 2451544.5
SECONDS_PER_DAY = 86400.0

# Names for objects that are not yet finalized, and the label for untyped objects.
PLACEHOLDER_NAME = 'GeneratedObject'
PLACEHOLDER_LABEL = 'GeneratedObject'

# SpaceEngine classifies unclassified small bodies as asteroids.
DEFAULT_CLASSIFICATION = 'Asteroid'

# Angles in degrees
DEGREES_PER_CIRCLE = 360.0
MIN_ANGLE = 0.0
MAX_ANGLE = DEGREES_PER_CIRCLE
MIN_INCLINATION = -180.0
MAX_INCLINATION = 180.0

# Eccentricity domain for closed orbits: [0, 1)
MIN_ECCENTRICITY = 0.0
MAX_ECCENTRICITY = 1.0

# Albedo domain
MIN_ALBEDO = 0.0
MAX_ALBEDO = 1.0

# Generic objects (dwarf moons, asteroids)
MIN_GENERIC_RADIUS = 0.1  # km
MAX_GENERIC_RADIUS = 60.0  # km
MIN_GENERIC_ALBEDO = 0.07
MAX_GENERIC_ALBEDO = 0.09

# Empirical offsets from Bond albedo to geometric albedo
REGULAR_MOON_GEOM_ALBEDO_OFFSET = 0.04
GENERIC_GEOM_ALBEDO_OFFSET = 0.05

# Comet grouping: fraction of the base count that forms barycenter pairs
MIN_GROUP_FRACTION = 0.10
MAX_GROUP_FRACTION = 0.20
# Angular separation between the two comets of a pair (degrees)
MIN_PAIR_OFFSET = 15.0
MAX_PAIR_OFFSET = 25.0
# Satellite suffixes inside a barycenter group, in generation order
SATELLITE_SUFFIXES = ('A', 'B', 'C', 'D')

# Comet sampling defaults
DEFAULT_COMET_MIN_ECCENTRICITY = 0.4
DEFAULT_COMET_MAX_ECCENTRICITY = 0.95
DEFAULT_COMET_MIN_INCLINATION = 0.0
DEFAULT_COMET_MAX_INCLINATION = 60.0
DEFAULT_COMET_MIN_RADIUS = 0.1  # km
DEFAULT_COMET_MAX_RADIUS = 10.0  # km

# Distance units accepted by the serializer (matched case-insensitively)
DISTANCE_UNITS = ('AU', 'km')
DEFAULT_DISTANCE_UNIT = 'AU'

# SpaceEngine reference planes offered by the front ends
REFERENCE_PLANES = ('Static', 'Fixed', 'Equator', 'Ecliptic', 'Laplace', 'Extrasolar')
DEFAULT_REFERENCE_PLANE = 'Equator'

# Regular moon classes offered by the front ends
MOON_CLASSES = ('Ferria', 'Carbonia', 'Terra', 'Aquaria')

# Name validation
MAX_NAME_LENGTH = 20

# Output file extension for SpaceEngine catalogs
SCRIPT_SUFFIX = '.sc'
