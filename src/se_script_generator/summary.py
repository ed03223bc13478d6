"""Input Parameters section echoed before a generation run."""

from __future__ import annotations

from typing import TextIO

from se_script_generator.params import (
    CometParams,
    CommonParams,
    GenerationParams,
    GenericObjectParams,
    Range,
    RegularMoonParams,
)


def _w(stream: TextIO, line: str) -> None:
    """Write a line to the stream (helper for input parameters section)."""
    stream.write(line + '\n')


def _range(r: Range) -> str:
    return f'{r[0]:g} to {r[1]:g}'


def _write_common(stream: TextIO, common: CommonParams) -> None:
    _w(stream, f'    Parent body: {common.parent_body}')
    _w(stream, f'  Distance unit: {common.distance_unit}')
    _w(stream, f'Reference plane: {common.reference_plane}')
    _w(stream, f'          Epoch: {common.epoch:.8f}')
    _w(stream, f'    Output file: {common.output_file or "(stream)"}')


def write_input_parameters(stream: TextIO, params: GenerationParams) -> None:
    """Write the Input Parameters section for any generation request.

    Parameters:
        stream: Output text stream.
        params: Request to summarize.
    """
    _w(stream, 'Input Parameters')
    _w(stream, '----------------')
    _w(stream, ' ')
    _write_common(stream, params.common)
    _w(stream, ' ')
    if isinstance(params, RegularMoonParams):
        _w(stream, f'          Moons: {len(params.moons)}')
        for entry in params.moons:
            _w(
                stream,
                f'                 {entry.name} (radius {entry.radius:g} km, '
                f'distance {entry.distance:g}, {entry.classification})',
            )
        _w(stream, f'   Eccentricity: {_range(params.eccentricity_range)}')
        _w(stream, f'    Inclination: {_range(params.inclination_range)} deg')
        _w(stream, f'    Bond albedo: {_range(params.bond_albedo_range)}')
    elif isinstance(params, GenericObjectParams):
        label = params.object_type.label if params.object_type is not None else ' '
        _w(stream, f'    Object type: {label}')
        _w(stream, f'          Count: {params.count}')
        _w(stream, f'  Starting from: {params.start_number}')
        _w(stream, f'Semi-major axis: {_range(params.axis_range)}')
        _w(stream, f'   Eccentricity: {_range(params.eccentricity_range)}')
        _w(stream, f'    Inclination: {_range(params.inclination_range)} deg')
    elif isinstance(params, CometParams):
        bounds = params.bounds
        _w(stream, f'     Base count: {params.count}')
        _w(stream, f'  Starting from: {params.start_number}')
        _w(stream, f'Semi-major axis: {_range(params.axis_range)}')
        _w(stream, f'   Eccentricity: {bounds.min_eccentricity:g} to {bounds.max_eccentricity:g}')
        _w(
            stream,
            f'    Inclination: {bounds.min_inclination:g} to {bounds.max_inclination:g} deg',
        )
        _w(stream, f'         Radius: {bounds.min_radius:g} to {bounds.max_radius:g} km')
    _w(stream, ' ')
