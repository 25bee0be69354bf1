"""Tests for main entry point."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from chef_knife.__main__ import format_summary, main
from chef_knife.models import KnifeConfig


@pytest.fixture(autouse=True)
def plain_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give each test a fresh chef_knife logger writing to the captured stderr."""
    monkeypatch.setenv("KNIFE_LOG_COLORS", "false")
    logger = logging.getLogger("chef_knife")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    logger.handlers.clear()
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_main_prints_summary(
    tmp_path: Path, client_key_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """main prints the parsed settings and exits 0."""
    knife_rb = tmp_path / "knife.rb"
    knife_rb.write_text(
        "chef_server_url 'https://chef.example.com:8443'\n"
        "node_name 'jdoe'\n"
        f"client_key '{client_key_file}'\n"
    )

    assert main([str(knife_rb)]) == 0

    out = capsys.readouterr().out
    assert "chef.example.com:8443" in out
    assert "jdoe" in out
    assert "RSA 2048 bits" in out


def test_main_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """main exits 1 when the config cannot be loaded."""
    knife_rb = tmp_path / "knife.rb"
    knife_rb.write_text("chef_server_url ftp://chef.example.com\n")

    assert main([str(knife_rb)]) == 1
    assert "Failed to load knife config" in capsys.readouterr().err


def test_main_missing_file(tmp_path: Path) -> None:
    """main exits 1 for a missing file."""
    assert main([str(tmp_path / "missing.rb")]) == 1


def test_format_summary_unset_fields() -> None:
    """Unset values are shown as placeholders."""
    summary = format_summary(KnifeConfig())
    assert "<unset>" in summary
    assert "client_key:       <none>" in summary
    assert "local_mode:       false" in summary
