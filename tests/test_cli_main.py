"""Tests for the se-script-generator command line."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from se_script_generator.cli.main import main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['se-script-generator', *args])
    return main()


def test_asteroids_to_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Asteroids are written sorted and named from the start number."""
    out = tmp_path / 'io.sc'
    code = _run(
        monkeypatch,
        'asteroids',
        '--parent', 'Io',
        '--unit', 'km',
        '--axis', '1000', '5000',
        '--count', '5',
        '--start', '3',
        '--seed', '1',
        '-o', str(out),
    )  # fmt: skip
    assert code == 0
    text = out.read_text(encoding='utf-8')
    for n in range(3, 8):
        assert f'Asteroid "Io.A{n}"' in text
    assert 'SemiMajorAxisKm' in text
    stdout = capsys.readouterr().out
    assert 'Input Parameters' in stdout
    assert f'Script generation complete. Wrote 5 objects to file: {out}' in stdout


def test_seed_reproducible(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The same seed writes the same script."""
    outputs = []
    for name in ('a.sc', 'b.sc'):
        out = tmp_path / name
        args = ('dwarf-moons', '--parent', 'Pluto', '--axis', '1', '2', '--count', '4')
        assert _run(monkeypatch, *args, '--ecc', '0', '0.2', '--seed', '5', '-o', str(out)) == 0
        outputs.append(out.read_text(encoding='utf-8'))
    assert outputs[0] == outputs[1]
    assert 'DwarfMoon "Pluto.D1"' in outputs[0]


def test_moons_default_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Without -o the file is <parent>_Moons.sc under SE_OUTPUT_PATH."""
    monkeypatch.setenv('SE_OUTPUT_PATH', str(tmp_path))
    code = _run(
        monkeypatch,
        'moons',
        '--parent', 'Jupiter',
        '--unit', 'KM',
        '--moon', 'Europa', '1560.8', '671100', 'aquaria',
        '--moon', 'Io', '1821.6', '421800', 'Terra',
        '--epoch', '2000-01-01 12:00:00',
    )  # fmt: skip
    assert code == 0
    text = (tmp_path / 'Jupiter_Moons.sc').read_text(encoding='utf-8')
    assert text.index('Moon "Io"') < text.index('Moon "Europa"')
    assert 'Class\t\t"Aquaria"' in text
    assert 'Eccentricity\t0.0000000000000000' in text
    assert 'AscendingNode\t0.00000000' in text
    assert 'Epoch\t\t2451545.00000000' in text


def test_comets_default_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Comet runs write barycenters and their A/B comets."""
    monkeypatch.setenv('SE_OUTPUT_PATH', str(tmp_path))
    monkeypatch.setenv('SE_GENERATOR_SEED', '3')
    code = _run(
        monkeypatch, 'comets', '--parent', 'Sun', '--plane', 'ecliptic', '--axis', '5', '50',
        '--count', '10',
    )  # fmt: skip
    assert code == 0
    text = (tmp_path / 'Sun_Comets.sc').read_text(encoding='utf-8')
    assert 'Barycenter "Sun.C' in text
    assert ' A"\n{\n    ParentBody\t\t"Sun.C' in text
    assert 'RefPlane\t"Ecliptic"' in text


def test_invalid_name_returns_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Validation errors print to stderr and exit 1 without writing."""
    out = tmp_path / 'bad.sc'
    code = _run(
        monkeypatch, 'asteroids', '--parent', '2Io', '--axis', '1', '2', '--count', '1',
        '-o', str(out),
    )  # fmt: skip
    assert code == 1
    assert 'Error: Parent body must start with a letter.' in capsys.readouterr().err
    assert not out.exists()


def test_inverted_range_returns_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """An inverted axis range is rejected."""
    code = _run(monkeypatch, 'comets', '--parent', 'Sun', '--axis', '5', '1', '--count', '3')
    assert code == 1
    assert 'Invalid range for semi-major axis' in capsys.readouterr().err


def test_moons_requires_moon(monkeypatch: pytest.MonkeyPatch) -> None:
    """The moons command needs at least one --moon."""
    assert _run(monkeypatch, 'moons', '--parent', 'Jupiter') == 1


def test_unknown_unit_is_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Argument type errors exit with argparse's usage code."""
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, 'comets', '--parent', 'Sun', '--unit', 'pc', '--axis', '1', '2',
             '--count', '1')  # fmt: skip
    assert excinfo.value.code == 2


def test_nan_epoch_returns_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A non-finite --epoch is rejected before any script is written."""
    out = tmp_path / 'nan.sc'
    code = _run(
        monkeypatch, 'comets', '--parent', 'Sun', '--axis', '1', '2', '--count', '3',
        '--epoch', 'nan', '-o', str(out),
    )  # fmt: skip
    assert code == 1
    assert 'Invalid epoch' in capsys.readouterr().err
    assert not out.exists()


@pytest.mark.parametrize(
    ('command', 'file_name', 'header'),
    [
        ('dwarf-moons', 'Pluto_DwarfMoon.sc', 'DwarfMoon "Pluto.D1"'),
        ('asteroids', 'Pluto_Asteroid.sc', 'Asteroid "Pluto.A1"'),
    ],
)
def test_generic_command_selects_object_type(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, command: str, file_name: str, header: str
) -> None:
    """The subcommand name picks the object type, file name and name prefix."""
    monkeypatch.setenv('SE_OUTPUT_PATH', str(tmp_path))
    assert _run(monkeypatch, command, '--parent', 'Pluto', '--axis', '1', '2', '--count', '2') == 0
    assert header in (tmp_path / file_name).read_text(encoding='utf-8')
