"""Read knife.rb configuration and client keys for Chef server tooling."""

from chef_knife.config import (
    KnifeConfigParser,
    find_knife_config,
    load_key_from_bytes,
    load_key_from_path,
    parse_config,
)
from chef_knife.errors import (
    ConfigNotFoundError,
    InvalidHostFormatError,
    InvalidSchemeError,
    InvalidURLError,
    KeyLoadError,
    KnifeConfigError,
    MalformedKeyEncodingError,
    MalformedKeyStructureError,
)
from chef_knife.models import KnifeConfig

__all__ = [
    "ConfigNotFoundError",
    "find_knife_config",
    "InvalidHostFormatError",
    "InvalidSchemeError",
    "InvalidURLError",
    "KeyLoadError",
    "KnifeConfig",
    "KnifeConfigError",
    "KnifeConfigParser",
    "load_key_from_bytes",
    "load_key_from_path",
    "MalformedKeyEncodingError",
    "MalformedKeyStructureError",
    "parse_config",
]
