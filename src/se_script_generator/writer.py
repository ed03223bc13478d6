"""Output sink: write formatted object blocks to a script file or stream."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

from se_script_generator.formatter import format_objects
from se_script_generator.objects import CelestialObject
from se_script_generator.params import CommonParams

logger = logging.getLogger(__name__)


class ScriptWriteError(RuntimeError):
    """The script file could not be written."""


def write_objects(
    stream: TextIO,
    objects: Sequence[CelestialObject],
    distance_unit: str,
    reference_plane: str,
) -> int:
    """Write each object's block followed by a blank line; return the object count."""
    if objects:
        stream.write(format_objects(objects, distance_unit, reference_plane))
        stream.write('\n')
    return len(objects)


def write_script(
    objects: Sequence[CelestialObject],
    common: CommonParams,
    stream: TextIO | None = None,
) -> int:
    """Write objects to stream, or to ``common.output_file`` when stream is None.

    Parameters:
        objects: Finalized objects in presentation order.
        common: Supplies distance unit, reference plane, and output file.
        stream: Optional already-open text stream.

    Returns:
        Number of objects written.

    Raises:
        ScriptWriteError: If the output file cannot be opened or written. A
            partial file may remain.
    """
    if stream is not None:
        return write_objects(stream, objects, common.distance_unit, common.reference_plane)
    if not common.output_file:
        raise ScriptWriteError('No output file given')
    try:
        with open(common.output_file, 'w', encoding='utf-8') as f:
            count = write_objects(f, objects, common.distance_unit, common.reference_plane)
    except OSError as e:
        logger.error('Error writing file %s: %s', common.output_file, e)
        raise ScriptWriteError(f'Error writing file {common.output_file}: {e}') from e
    logger.info('Wrote %d objects to file: %s', count, common.output_file)
    return count
