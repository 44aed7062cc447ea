"""Unit tests for the command line entry point."""

import importlib

import pytest
from qrsvg import config
from qrsvg.main import main


@pytest.fixture
def reload_config(monkeypatch):
    """Re-read config after setenv, restore it afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_main_writes_text_to_stdout(capsys):
    """Text format prints a block-character code."""
    status = main(["hello", "-f", "text", "-m", "1"])

    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("\n")
    assert status == 0
    assert len(lines) == 23
    # first row is quiet zone, second starts the finder pattern
    assert lines[0].strip() == ""
    assert lines[1].startswith("  ██")


def test_main_logs_to_stderr_when_writing_stdout(capsys):
    main(["hello", "-f", "text"])

    captured = capsys.readouterr()
    assert "INFO:" in captured.err
    assert "INFO:" not in captured.out


def test_main_writes_svg_file(tmp_path):
    target = tmp_path / "code.svg"

    status = main(["hello", "-W", "200", "-H", "200", "-o", str(target)])

    assert status == 0
    content = target.read_text()
    assert 'width="200"' in content
    assert "<rect" in content


def test_main_writes_png_file(tmp_path):
    target = tmp_path / "code.png"

    status = main(["hello", "-f", "png", "-e", "H", "-o", str(target)])

    assert status == 0
    assert target.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'


def test_main_missing_directory(tmp_path, capsys):
    target = tmp_path / "missing" / "code.svg"

    status = main(["hello", "-o", str(target)])

    assert status == 1
    assert "Could not find a container directory" in capsys.readouterr().err


def test_main_rejects_empty_contents(capsys):
    status = main([""])

    assert status == 1
    assert "ERROR: Found empty contents" in capsys.readouterr().err


def test_main_rejects_negative_width(capsys):
    status = main(["hello", "-W", "-5"])

    assert status == 1
    assert "too small" in capsys.readouterr().err


def test_main_bad_log_level_env(monkeypatch, reload_config, capsys):
    """Unknown log level is reported, not raised."""
    monkeypatch.setenv("QRSVG_LOG_LEVEL", "verbose")
    reload_config()

    status = main(["hello", "-f", "text"])

    assert status == 1
    assert "ERROR: Unknown log level" in capsys.readouterr().err


def test_main_bad_quiet_zone_env(monkeypatch, reload_config, capsys):
    """Non-numeric quiet zone loads fine and fails the write."""
    monkeypatch.setenv("QRSVG_QUIET_ZONE", "wide")
    reload_config()

    status = main(["hello", "-f", "text"])

    assert status == 1
    assert "ERROR: Invalid margin" in capsys.readouterr().err


def test_main_quiet_zone_env(monkeypatch, reload_config, capsys):
    monkeypatch.setenv("QRSVG_QUIET_ZONE", "0")
    reload_config()

    status = main(["hello", "-f", "text"])

    assert status == 0
    assert len(capsys.readouterr().out.rstrip("\n").split("\n")) == 21


def test_main_text_file_is_utf8(tmp_path):
    target = tmp_path / "code.txt"

    status = main(["hello", "-f", "text", "-o", str(target)])

    assert status == 0
    assert "██" in target.read_bytes().decode("utf-8")


def test_main_text_stdout_is_utf8(capsysbinary):
    """Block characters reach stdout as UTF-8 bytes."""
    status = main(["hello", "-f", "text"])

    assert status == 0
    assert "██" in capsysbinary.readouterr().out.decode("utf-8")


def test_main_lowercase_error_correction(capsys):
    status = main(["hello", "-e", "h", "-f", "text"])

    assert status == 0
    assert "level H" in capsys.readouterr().err


def test_main_qr_version_option(capsys):
    """--qr-version pins the symbol size."""
    status = main(["hello", "--qr-version", "2", "-m", "0", "-f", "text"])

    assert status == 0
    assert len(capsys.readouterr().out.rstrip("\n").split("\n")) == 25


def test_main_bad_mask_pattern(capsys):
    status = main(["hello", "--mask-pattern", "9"])

    assert status == 1
    assert "mask pattern" in capsys.readouterr().err
