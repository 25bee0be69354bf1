"""Chef server URL decomposition."""

import string
from typing import Final
from urllib.parse import urlsplit

from chef_knife.errors import InvalidHostFormatError, InvalidSchemeError, InvalidURLError

DEFAULT_PORTS: Final[dict[str, str]] = {
    "http": "80",
    "https": "443",
}

# Unreserved and sub-delim characters allowed in host[:port], plus IPv6 brackets
HOST_CHARS: Final[frozenset[str]] = frozenset(
    string.ascii_letters + string.digits + "-._~!$&'()*+,;=:[]<>\"%"
)


def _has_control_chars(url: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url)


def _check_escapes(text: str, url: str) -> None:
    """Reject % not followed by two hex digits."""
    start = 0
    while (i := text.find("%", start)) != -1:
        escape = text[i + 1 : i + 3]
        if len(escape) != 2 or not all(ch in string.hexdigits for ch in escape):
            raise InvalidURLError(f"Invalid URL escape {text[i : i + 3]!r} in URL {url!r}")
        start = i + 3


def _check_host_chars(authority: str, url: str) -> None:
    for ch in authority:
        # Non-ASCII host names are left to the resolver
        if ch.isascii() and ch not in HOST_CHARS:
            raise InvalidURLError(f"Invalid character {ch!r} in host name of URL {url!r}")


def split_server_url(url: str) -> tuple[str, str]:
    """Split a server URL into host and port.

    An explicit port always wins. Without one, the port is derived
    from the scheme (http -> 80, https -> 443).

    Args:
        url: Server URL, e.g. "https://chef.example.com/organizations/acme"

    Returns:
        Tuple of (host, port)

    Raises:
        InvalidURLError: If url cannot be parsed
        InvalidSchemeError: If no port is given and the scheme is not http(s)
        InvalidHostFormatError: If the authority is not host[:port]
    """
    if _has_control_chars(url):
        raise InvalidURLError(f"Invalid control character in URL: {url!r}")
    if url.startswith(":"):
        raise InvalidURLError(f"Missing protocol scheme in URL {url!r}")

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL {url!r}: {e}") from e

    # Drop userinfo; only host[:port] is relevant
    authority = parts.netloc.rpartition("@")[2]
    _check_host_chars(authority, url)
    for component in (authority, parts.path, parts.fragment):
        _check_escapes(component, url)

    host_port = authority.split(":")

    if len(host_port) == 2:
        host, port = host_port
        if port and not (port.isascii() and port.isdigit()):
            raise InvalidURLError(f"Invalid port {port!r} in URL {url!r}")
        return host, port

    if len(host_port) == 1:
        host = host_port[0]
        port = DEFAULT_PORTS.get(parts.scheme.lower())
        if port is None:
            raise InvalidSchemeError(f"Invalid http scheme {parts.scheme!r} in URL {url!r}")
        return host, port

    raise InvalidHostFormatError(f"Invalid host format {authority!r} in URL {url!r}")
