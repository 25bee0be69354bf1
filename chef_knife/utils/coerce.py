"""Value coercion for knife.rb settings.

The strict parsers raise ValueError. The coerce_* wrappers are the
best-effort variants the config parser uses: a value that fails to parse
falls back to the default.
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(text: str) -> int:
    """Parse an integer literal with base detection.

    Accepts an optional sign, 0x/0o/0b prefixes, legacy leading-zero
    octal ("017") and underscore digit separators.

    Args:
        text: Literal to parse

    Returns:
        Parsed value in signed 64-bit range

    Raises:
        ValueError: If text is not a valid literal or out of range
    """
    if not text or not text.isascii():
        raise ValueError(f"invalid integer literal: {text!r}")

    sign = ""
    body = text
    if body[0] in "+-":
        sign, body = body[0], body[1:]

    # Leading zero without a letter prefix means octal
    if len(body) > 1 and body[0] == "0" and body[1] not in "xXoObB":
        body = "0o" + body[1:]

    value = int(sign + body, 0)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_bool(text: str) -> bool:
    """Parse a boolean literal.

    Raises:
        ValueError: If text is not a recognized boolean literal
    """
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def coerce_int(text: str, default: int = 0) -> int:
    """Parse an integer, returning default on failure."""
    try:
        return parse_int(text)
    except ValueError:
        logger.debug("Ignoring invalid integer %r, using %d", text, default)
        return default


def coerce_bool(text: str, default: bool = False) -> bool:
    """Parse a boolean, returning default on failure."""
    try:
        return parse_bool(text)
    except ValueError:
        logger.debug("Ignoring invalid boolean %r, using %s", text, default)
        return default
