"""
Tests for the command-line interface.
"""

import os
import subprocess
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hexamine import __version__
from hexamine import cli
from hexamine.cli import main


@pytest.fixture
def rom_file(tmp_path):
    test_file = tmp_path / "rom.bin"
    test_file.write_bytes(b'\x00\xf0' + b'HELLO' + bytes(3))
    return test_file


def test_default_dump(rom_file, capsys):
    assert main([str(rom_file)]) == 0
    out, err = capsys.readouterr()
    assert out.startswith('0000:  00 F0 48 45 4C 4C 4F 00  00 00')
    assert out.endswith('  ..HELLO...\n')
    assert err == ''


def test_woz_flag(rom_file, capsys):
    assert main(['--woz', str(rom_file)]) == 0
    out, _ = capsys.readouterr()
    assert out == '0000: 00 F0 48 45 4C 4C 4F 00\n0008: 00 00\n'


def test_origin_from_file(rom_file, capsys):
    assert main(['-w', '-o', '0', str(rom_file)]) == 0
    out, _ = capsys.readouterr()
    assert out == 'F000: 48 45 4C 4C 4F 00 00 00\n'


def test_explicit_origin(rom_file, capsys):
    assert main(['--origin', 'C000', '-w', str(rom_file)]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines()[0].startswith('C000: 00 F0')


def test_invalid_origin(rom_file, capsys):
    assert main(['-o', 'zz', str(rom_file)]) == 0
    out, err = capsys.readouterr()
    assert out == ''
    assert 'Invalid hexadecimal value "zz"' in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin")]) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert err.startswith('Error:')


def test_truncated_origin(tmp_path, capsys):
    test_file = tmp_path / "short.bin"
    test_file.write_bytes(b'\x01')
    assert main(['-o', '0', str(test_file)]) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert 'too short' in err


def test_empty_file(tmp_path, capsys):
    test_file = tmp_path / "empty.bin"
    test_file.write_bytes(b'')
    assert main([str(test_file)]) == 0
    assert capsys.readouterr().out == ''


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--version'])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f'hexamine {__version__}'


def test_file_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize('origin', ['0x10', '$10', '0x0'])
def test_prefixed_origin_rejected(rom_file, capsys, origin):
    assert main(['-o', origin, str(rom_file)]) == 0
    out, err = capsys.readouterr()
    assert out == ''
    assert f'Invalid hexadecimal value "{origin}": invalid digit found in string' in err


def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(cli, 'main', lambda: 1)
    with pytest.raises(SystemExit) as excinfo:
        cli.run()
    assert excinfo.value.code == 1


def test_run_keyboard_interrupt(monkeypatch):
    def interrupted():
        raise KeyboardInterrupt
    
    monkeypatch.setattr(cli, 'main', interrupted)
    with pytest.raises(SystemExit) as excinfo:
        cli.run()
    assert excinfo.value.code == 130


def test_broken_pipe_exits_quietly(tmp_path):
    """Closing the reading end of stdout mid-dump is not an error."""
    test_file = tmp_path / "big.bin"
    test_file.write_bytes(bytes(range(256)) * 4096)
    
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    env = dict(os.environ, PYTHONPATH=str(project_root))
    try:
        result = subprocess.run(
            [sys.executable, '-m', 'hexamine', str(test_file)],
            stdout=write_fd, stderr=subprocess.PIPE, env=env,
            cwd=str(project_root), timeout=60)
    finally:
        os.close(write_fd)
    
    assert result.returncode == 0
    assert result.stderr == b''


if __name__ == '__main__':
    pytest.main([__file__])
