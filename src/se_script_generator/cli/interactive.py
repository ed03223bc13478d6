"""Interactive menu: prompt for a request, validate it, and run the generator."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from se_script_generator.config import default_output_file
from se_script_generator.constants import MOON_CLASSES, REFERENCE_PLANES, SCRIPT_SUFFIX
from se_script_generator.objects import ObjectType
from se_script_generator.params import (
    CometParams,
    CommonParams,
    GenericObjectParams,
    MoonEntry,
    RegularMoonParams,
)
from se_script_generator.validation import (
    validate_albedo_range,
    validate_axis_range,
    validate_count,
    validate_eccentricity_range,
    validate_inclination_range,
    validate_name,
)

logger = logging.getLogger(__name__)

N = TypeVar('N', int, float)

_MENU = (
    '\nSelect what you\'d like to generate:\n'
    '1. Dwarf Moon\n'
    '2. Asteroid\n'
    '3. Moon (Regular Moons)\n'
    '4. Comets\n'
    '0. Exit'
)
_DISTANCE_UNIT_CHOICES = ('AU', 'km')


class InteractiveSession:
    """Menu loop over injectable text streams.

    Parameters:
        stdin: Stream prompts are answered from.
        stdout: Stream prompts and messages are written to.
        seed: Random seed passed to every run.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        seed: int | None = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._seed = seed

    def _print(self, text: str = '') -> None:
        self._out.write(text + '\n')

    def _readline(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def prompt_string(self, prompt: str) -> str:
        """Return one stripped line of input."""
        return self._readline(prompt)

    def _prompt_number(self, prompt: str, parser: Callable[[str], N]) -> N:
        while True:
            try:
                return parser(self._readline(prompt))
            except ValueError:
                self._print('Invalid input. Please enter a valid number.')

    def prompt_float(self, prompt: str) -> float:
        """Prompt until a float is entered."""
        return self._prompt_number(prompt, float)

    def prompt_int(self, prompt: str) -> int:
        """Prompt until an integer is entered."""
        return self._prompt_number(prompt, int)

    def prompt_range(self, label: str) -> tuple[float, float]:
        """Prompt for ``- Min <label>`` then ``- Max <label>``."""
        lo = self.prompt_float(f'- Min {label}: ')
        hi = self.prompt_float(f'- Max {label}: ')
        return (lo, hi)

    def prompt_choice(self, title: str, options: Sequence[str]) -> str:
        """Show a numbered list and prompt until a listed number is chosen."""
        while True:
            self._print(f'\n{title}')
            for i, option in enumerate(options, start=1):
                self._print(f'{i}. {option}')
            choice = self.prompt_int(f'- Enter your choice (1-{len(options)}): ')
            if 1 <= choice <= len(options):
                return options[choice - 1]
            numbers = ', '.join(str(i) for i in range(1, len(options) + 1))
            self._print(f'Invalid choice. Please select {numbers}.')

    def prompt_distance_unit(self) -> str:
        return self.prompt_choice('Distance unit selection:', _DISTANCE_UNIT_CHOICES)

    def prompt_reference_plane(self) -> str:
        return self.prompt_choice('Reference plane selection', REFERENCE_PLANES)

    def prompt_moon_class(self) -> str:
        return self.prompt_choice('Class selection', MOON_CLASSES)

    def _common(self, parent: str, unit: str, plane: str, file_tag: str) -> CommonParams:
        return CommonParams(
            parent_body=parent,
            distance_unit=unit,
            reference_plane=plane,
            output_file=default_output_file(f'{parent}_{file_tag}{SCRIPT_SUFFIX}'),
        )

    def _generic_request(
        self, object_type: ObjectType, parent: str, unit: str, plane: str
    ) -> GenericObjectParams:
        axis = validate_axis_range(*self.prompt_range('semi-major axis'))
        ecc = validate_eccentricity_range(*self.prompt_range('eccentricity (0-1)'))
        inc = validate_inclination_range(*self.prompt_range('inclination (deg)'))
        count = validate_count(self.prompt_int('- Number of objects: '))
        start = self.prompt_int('- Starting sequence number: ')
        return GenericObjectParams(
            common=self._common(parent, unit, plane, object_type.label),
            object_type=object_type,
            axis_range=axis,
            eccentricity_range=ecc,
            inclination_range=inc,
            count=count,
            start_number=start,
        )

    def _moon_request(self, parent: str, unit: str, plane: str) -> RegularMoonParams:
        count = validate_count(self.prompt_int('- Enter the number of Regular Moons: '))
        entries: list[MoonEntry] = []
        for i in range(count):
            self._print(f'\n--- Moon {i + 1} ---')
            name = validate_name(self.prompt_string('- Moon name: '), 'Moon name')
            radius = self.prompt_float('- Radius (km): ')
            distance = self.prompt_float(f'- Orbital distance ({unit}): ')
            entries.append(MoonEntry(name, radius, distance, self.prompt_moon_class()))
        ecc = validate_eccentricity_range(*self.prompt_range('eccentricity (0-1)'))
        inc = validate_inclination_range(*self.prompt_range('inclination (deg)'))
        albedo = validate_albedo_range(*self.prompt_range('Bond albedo (0-1)'))
        return RegularMoonParams(
            common=self._common(parent, unit, plane, 'Moons'),
            moons=tuple(entries),
            eccentricity_range=ecc,
            inclination_range=inc,
            bond_albedo_range=albedo,
        )

    def _comet_request(self, parent: str, unit: str, plane: str) -> CometParams:
        axis = validate_axis_range(*self.prompt_range('semi-major axis'))
        count = validate_count(self.prompt_int('- Number of comets: '))
        start = self.prompt_int('- Starting sequence number: ')
        return CometParams(
            common=self._common(parent, unit, plane, 'Comets'),
            axis_range=axis,
            count=count,
            start_number=start,
        )

    def run_once(self, choice: int) -> None:
        """Prompt for and run one request of the chosen menu entry.

        Raises:
            ValueError: On invalid names or ranges.
            RuntimeError: If the script cannot be written.
        """
        from se_script_generator.cli.main import run_request

        parent = validate_name(self.prompt_string('- Enter the parent body name: '), 'Parent body')
        unit = self.prompt_distance_unit()
        plane = self.prompt_reference_plane()
        if choice == 1:
            params = self._generic_request(ObjectType.DWARF_MOON, parent, unit, plane)
        elif choice == 2:
            params = self._generic_request(ObjectType.ASTEROID, parent, unit, plane)
        elif choice == 3:
            params = self._moon_request(parent, unit, plane)
        else:
            params = self._comet_request(parent, unit, plane)
        count = run_request(params, self._seed)
        logger.info('Interactive run wrote %d objects', count)

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        self._print('Welcome! Use this tool to generate asteroids, moons, or comets for SpaceEngine.')
        try:
            while True:
                self._print(_MENU)
                choice = self.prompt_int('- Enter your choice: ')
                if choice == 0:
                    self._print('Exiting...')
                    return
                if choice not in (1, 2, 3, 4):
                    self._print('Invalid choice. Please try again.')
                    continue
                try:
                    self.run_once(choice)
                except (ValueError, RuntimeError) as e:
                    self._print(f'Error: {e}')
        except EOFError:
            logger.debug('Input ended; leaving interactive session')
