"""CLI entry point: se-script-generator moons|dwarf-moons|asteroids|comets|interactive."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import NoReturn

from se_script_generator.config import default_output_file, get_seed
from se_script_generator.constants import DEFAULT_REFERENCE_PLANE, SCRIPT_SUFFIX
from se_script_generator.generator import build_script_objects
from se_script_generator.objects import parse_object_type
from se_script_generator.params import (
    CometParams,
    CommonParams,
    GenerationParams,
    GenericObjectParams,
    MoonEntry,
    RegularMoonParams,
    parse_distance_unit,
    parse_moon_class,
    parse_reference_plane,
)
from se_script_generator.sampling import make_rng
from se_script_generator.summary import write_input_parameters
from se_script_generator.time_utils import parse_epoch
from se_script_generator.validation import (
    validate_albedo_range,
    validate_axis_range,
    validate_count,
    validate_eccentricity_range,
    validate_inclination_range,
    validate_name,
)
from se_script_generator.writer import write_script

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or SE_GENERATOR_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('SE_GENERATOR_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def run_request(params: GenerationParams, seed: int | None = None) -> int:
    """Generate, order, name, and write one request; return the number of objects written.

    Parameters:
        params: Validated generation request.
        seed: Random seed; falls back to SE_GENERATOR_SEED, then OS entropy.

    Raises:
        ValueError: On a malformed request.
        RuntimeError: If the script cannot be written.
    """
    rng = make_rng(seed if seed is not None else get_seed())
    objects = build_script_objects(params, rng)
    count = write_script(objects, params.common)
    print(
        f'Script generation complete. Wrote {count} objects to file: {params.common.output_file}'
    )
    return count


def _common_params(args: argparse.Namespace, file_tag: str) -> CommonParams:
    """Build CommonParams from parsed args; default output is <parent>_<tag>.sc."""
    parent = validate_name(args.parent, 'Parent body')
    output = args.output or default_output_file(f'{parent}_{file_tag}{SCRIPT_SUFFIX}')
    common = CommonParams(
        parent_body=parent,
        distance_unit=args.unit,
        reference_plane=args.plane,
        output_file=output,
    )
    if args.epoch is not None:
        common = replace(common, epoch=parse_epoch(args.epoch))
    return common


def _parse_moon_entry(tokens: list[str]) -> MoonEntry:
    """Parse ``NAME RADIUS DISTANCE CLASS`` tokens from --moon."""
    name, radius, distance, moon_class = tokens
    return MoonEntry(
        name=validate_name(name, 'Moon name'),
        radius=float(radius),
        distance=float(distance),
        classification=parse_moon_class(moon_class),
    )


def _moons_params(args: argparse.Namespace) -> GenerationParams:
    if not args.moon:
        raise ValueError('At least one --moon NAME RADIUS DISTANCE CLASS is required')
    return RegularMoonParams(
        common=_common_params(args, 'Moons'),
        moons=tuple(_parse_moon_entry(tokens) for tokens in args.moon),
        eccentricity_range=validate_eccentricity_range(*args.ecc),
        inclination_range=validate_inclination_range(*args.inc),
        bond_albedo_range=validate_albedo_range(*args.albedo),
    )


def _generic_params(args: argparse.Namespace) -> GenerationParams:
    object_type = parse_object_type(args.command)
    return GenericObjectParams(
        common=_common_params(args, object_type.label),
        object_type=object_type,
        axis_range=validate_axis_range(*args.axis),
        eccentricity_range=validate_eccentricity_range(*args.ecc),
        inclination_range=validate_inclination_range(*args.inc),
        count=validate_count(args.count),
        start_number=args.start,
    )


def _comets_params(args: argparse.Namespace) -> GenerationParams:
    return CometParams(
        common=_common_params(args, 'Comets'),
        axis_range=validate_axis_range(*args.axis),
        count=validate_count(args.count),
        start_number=args.start,
    )


def _generate_cmd(args: argparse.Namespace) -> int:
    """Build the request for the chosen subcommand and run it.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        params = args.build_params(args)
        write_input_parameters(sys.stdout, params)
        run_request(params, args.seed)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _interactive_cmd(args: argparse.Namespace) -> int:
    """Run the interactive menu on stdin/stdout."""
    from se_script_generator.cli.interactive import InteractiveSession

    InteractiveSession(seed=args.seed).run()
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--parent', type=str, required=True, help='Parent body name')
    parser.add_argument(
        '--unit',
        type=parse_distance_unit,
        default='AU',
        help='Distance unit for semi-major axes: AU or km (case-insensitive)',
    )
    parser.add_argument(
        '--plane',
        type=parse_reference_plane,
        default=DEFAULT_REFERENCE_PLANE,
        help='Reference plane: Static, Fixed, Equator, Ecliptic, Laplace, Extrasolar',
    )
    parser.add_argument(
        '-o', '--output', type=str, default=None, help='Output file; dir env: SE_OUTPUT_PATH'
    )
    parser.add_argument('--epoch', type=str, default=None, help='Epoch as JD or date string')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def _add_seed_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--seed', type=int, default=None, help='Random seed; env: SE_GENERATOR_SEED'
    )


def _add_range(
    parser: argparse.ArgumentParser,
    flag: str,
    default: tuple[float, float] | None,
    help_text: str,
) -> None:
    parser.add_argument(
        flag,
        type=float,
        nargs=2,
        metavar=('MIN', 'MAX'),
        default=default,
        required=default is None,
        help=help_text,
    )


def main() -> int:
    """Entry point for se-script-generator CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='se-script-generator',
        description='Generate moons, asteroids, and comets as SpaceEngine .sc scripts.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    moons_parser = subparsers.add_parser('moons', help='Regular (named) moons')
    _add_common_arguments(moons_parser)
    _add_seed_argument(moons_parser)
    moons_parser.add_argument(
        '--moon',
        type=str,
        nargs=4,
        action='append',
        metavar=('NAME', 'RADIUS', 'DISTANCE', 'CLASS'),
        help='One moon: name, radius (km), distance, class (Ferria|Carbonia|Terra|Aquaria)',
    )
    _add_range(moons_parser, '--ecc', (0.0, 0.0), 'Eccentricity range (0-1)')
    _add_range(moons_parser, '--inc', (0.0, 0.0), 'Inclination range (deg)')
    _add_range(moons_parser, '--albedo', (0.1, 0.3), 'Bond albedo range (0-1)')
    moons_parser.set_defaults(func=_generate_cmd, build_params=_moons_params)

    for command, help_text in (
        ('dwarf-moons', 'Sequentially named dwarf moons'),
        ('asteroids', 'Sequentially named asteroids'),
    ):
        generic_parser = subparsers.add_parser(command, help=help_text)
        _add_common_arguments(generic_parser)
        _add_seed_argument(generic_parser)
        _add_range(generic_parser, '--axis', None, 'Semi-major axis range')
        _add_range(generic_parser, '--ecc', (0.0, 0.0), 'Eccentricity range (0-1)')
        _add_range(generic_parser, '--inc', (0.0, 0.0), 'Inclination range (deg)')
        generic_parser.add_argument('--count', type=int, required=True, help='Number of objects')
        generic_parser.add_argument(
            '--start', type=int, default=1, help='First number of the name sequence'
        )
        generic_parser.set_defaults(func=_generate_cmd, build_params=_generic_params)

    comets_parser = subparsers.add_parser('comets', help='Comets with barycenter pairs')
    _add_common_arguments(comets_parser)
    _add_seed_argument(comets_parser)
    _add_range(comets_parser, '--axis', None, 'Semi-major axis range')
    comets_parser.add_argument('--count', type=int, required=True, help='Base comet count')
    comets_parser.add_argument(
        '--start', type=int, default=1, help='First number of the name sequence'
    )
    comets_parser.set_defaults(func=_generate_cmd, build_params=_comets_params)

    interactive_parser = subparsers.add_parser('interactive', help='Menu-driven prompts')
    _add_seed_argument(interactive_parser)
    interactive_parser.add_argument(
        '-v', '--verbose', action='store_true', help='Show DEBUG logs'
    )
    interactive_parser.set_defaults(func=_interactive_cmd)

    args = parser.parse_args()
    _configure_logging(args.verbose)
    return int(args.func(args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
