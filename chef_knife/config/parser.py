"""knife.rb parser.

Reads knife.rb line by line and builds a KnifeConfig. Only flat
``identifier value`` statements are understood; any other Ruby is skipped.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Final

from chef_knife.config.keys import load_key_from_path
from chef_knife.config.locator import find_knife_config
from chef_knife.models import KnifeConfig
from chef_knife.utils.coerce import coerce_bool, coerce_int
from chef_knife.utils.url import split_server_url

logger = logging.getLogger(__name__)

QUOTES: Final[str] = "'\""

# Only ASCII whitespace separates tokens; other Unicode spaces belong to values
WHITESPACE: Final[str] = " \t\n\f\r"
_TO_SPACE: Final[dict[int, int]] = str.maketrans(WHITESPACE, " " * len(WHITESPACE))

STRING_KEYS: Final[frozenset[str]] = frozenset(
    {
        "cookbook_copyright",
        "cookbook_email",
        "cookbook_license",
        "node_name",
        "syntax_check_cache_path",
        "validation_client_name",
        "validation_key",
    }
)
INT_KEYS: Final[frozenset[str]] = frozenset({"data_bag_encrypt_version"})
BOOL_KEYS: Final[frozenset[str]] = frozenset({"local_mode", "versioned_cookbooks"})


def strip_quotes(value: str) -> str:
    """Remove one leading and one trailing quote character.

    Each end is stripped on its own, so mismatched quotes are removed too.
    """
    if value[:1] and value[0] in QUOTES:
        value = value[1:]
    if value[-1:] and value[-1] in QUOTES:
        value = value[:-1]
    return value


def split_statement(line: str) -> tuple[str, str] | None:
    """Split a line into a (key, value) statement.

    Returns:
        Tuple of key and quote-stripped value, or None if the line does
        not consist of exactly two whitespace-separated tokens
    """
    tokens = [token for token in line.translate(_TO_SPACE).split(" ") if token]
    if len(tokens) != 2:
        return None
    key, value = tokens
    return key, strip_quotes(value)


class KnifeConfigParser:
    """Parser for knife.rb files.

    Builds an immutable KnifeConfig in a single pass. The client key named
    by ``client_key`` is loaded while parsing.
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        *,
        cwd: Path | str | None = None,
        home: Path | str | None = None,
    ):
        """Initialize knife.rb parser.

        Args:
            config_path: Path to knife.rb (default: search .chef directories)
            cwd: Working directory for the search and relative key paths
            home: Home directory for the search and ~ expansion
        """
        self.config_path = Path(config_path) if config_path else None
        self.cwd = Path(cwd) if cwd is not None else None
        self.home = Path(home) if home is not None else None

    def resolve_path(self) -> Path:
        """Get the knife.rb path to read.

        Returns:
            Explicit config path, or the first knife.rb found

        Raises:
            ConfigNotFoundError: If no path was given and none was found
        """
        if self.config_path is not None:
            return self.config_path
        return find_knife_config(cwd=self.cwd, home=self.home)

    def parse(self) -> KnifeConfig:
        """Parse knife.rb and return its settings.

        Returns:
            Parsed configuration

        Raises:
            ConfigNotFoundError: If no knife.rb could be located
            OSError: If knife.rb or the client key cannot be read
            InvalidURLError: If chef_server_url is malformed
            KeyLoadError: If the client key cannot be parsed
        """
        path = self.resolve_path()
        logger.debug("Reading knife config from %s", path)
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
            config = self.parse_stream(stream)
        logger.debug("Parsed knife config from %s", path)
        return config

    def parse_stream(self, stream: Iterable[str] | Iterable[bytes]) -> KnifeConfig:
        """Parse knife.rb statements from an open stream.

        Args:
            stream: Text or binary stream, or any iterable of lines

        Returns:
            Parsed configuration
        """
        fields: dict[str, Any] = {}
        for lineno, line in enumerate(stream, start=1):
            if isinstance(line, bytes):
                line = line.decode("utf-8", errors="surrogateescape")
            statement = split_statement(line)
            if statement is None:
                continue
            key, value = statement
            if self._apply(fields, key, value):
                logger.debug("Line %d: set %s", lineno, key)
            else:
                logger.debug("Line %d: ignoring unknown setting %s", lineno, key)
        return KnifeConfig(**fields)

    def _apply(self, fields: dict[str, Any], key: str, value: str) -> bool:
        """Apply one statement to the accumulated fields.

        Returns:
            True if key is a recognized setting
        """
        if key == "chef_server_url":
            host, port = split_server_url(value)
            fields.update(chef_server_url=value, host=host, port=port)
        elif key == "client_key":
            key_path = self._resolve_key_path(value)
            fields["client_key"] = load_key_from_path(key_path)
            fields["client_key_path"] = str(key_path)
        elif key in STRING_KEYS:
            fields[key] = value
        elif key in INT_KEYS:
            fields[key] = coerce_int(value)
        elif key in BOOL_KEYS:
            fields[key] = coerce_bool(value)
        else:
            return False
        return True

    def _resolve_key_path(self, value: str) -> Path:
        """Expand ~ and anchor relative key paths at the working directory."""
        if value == "~" or value.startswith("~/"):
            home = self.home if self.home is not None else Path.home()
            path = home / value[2:]
        else:
            path = Path(value)
        if not path.is_absolute() and self.cwd is not None:
            path = self.cwd / path
        return path


def parse_config(
    config_path: Path | str | None = None,
    *,
    cwd: Path | str | None = None,
    home: Path | str | None = None,
) -> KnifeConfig:
    """Parse a knife.rb file.

    Args:
        config_path: Path to knife.rb; searched for when omitted
        cwd: Working directory for the search and relative key paths
        home: Home directory for the search and ~ expansion

    Returns:
        Parsed configuration
    """
    return KnifeConfigParser(config_path, cwd=cwd, home=home).parse()
