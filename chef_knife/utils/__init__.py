"""Utilities for chef_knife."""

from chef_knife.utils.coerce import coerce_bool, coerce_int, parse_bool, parse_int
from chef_knife.utils.console import ColorfulFormatter
from chef_knife.utils.url import split_server_url

__all__ = [
    "coerce_bool",
    "coerce_int",
    "ColorfulFormatter",
    "parse_bool",
    "parse_int",
    "split_server_url",
]
