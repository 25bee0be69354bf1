"""Configuration module for chef_knife.

Provides focused pieces for reading knife configuration:
- KnifeConfigParser: Parses knife.rb files
- find_knife_config: Locates knife.rb in the usual .chef directories
- load_key_from_path / load_key_from_bytes: Load the client key
- Settings: Environment variable configuration for the CLI
"""

from chef_knife.config.keys import load_key_from_bytes, load_key_from_path
from chef_knife.config.locator import candidate_paths, find_knife_config
from chef_knife.config.parser import KnifeConfigParser, parse_config
from chef_knife.config.settings import Settings

__all__ = [
    "candidate_paths",
    "find_knife_config",
    "KnifeConfigParser",
    "load_key_from_bytes",
    "load_key_from_path",
    "parse_config",
    "Settings",
]
