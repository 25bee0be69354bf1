"""Tests for the console log formatter."""

import logging
import sys

from chef_knife.utils.console import COLORS, ColorfulFormatter


def make_record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_without_colors():
    """No ANSI codes when colors are disabled."""
    formatter = ColorfulFormatter(use_colors=False)
    record = make_record("chef_knife.config.parser", logging.INFO, "Parsed %s", "knife.rb")

    line = formatter.format(record)

    assert "\033[" not in line
    assert "INFO" in line
    assert "config.parser" in line
    assert "chef_knife." not in line
    assert line.endswith("Parsed knife.rb")


def test_colored_format_highlights_urls():
    """URLs are highlighted when colors are enabled."""
    formatter = ColorfulFormatter(use_colors=True)
    record = make_record(
        "chef_knife.config.parser", logging.DEBUG, "server https://chef.example.com"
    )

    line = formatter.format(record)

    assert f"{COLORS['bright_blue']}https://chef.example.com{COLORS['reset']}" in line


def test_component_color_by_prefix():
    """Key loader messages get their own color."""
    formatter = ColorfulFormatter(use_colors=True)
    assert formatter._get_component_color("chef_knife.config.keys") == COLORS["bright_magenta"]
    assert formatter._get_component_color("other") == COLORS["white"]


def test_format_includes_exception():
    """Tracebacks are appended to the line."""
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "chef_knife", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    assert "ValueError: boom" in formatter.format(record)
