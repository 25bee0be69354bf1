"""Exceptions raised while loading knife configuration."""


class KnifeConfigError(Exception):
    """Base class for knife configuration errors."""

    pass


class ConfigNotFoundError(KnifeConfigError, FileNotFoundError):
    """No knife.rb could be located."""

    def __init__(self, searched: list[str]):
        self.searched = searched
        locations = ", ".join(searched) if searched else "<none>"
        super().__init__(f"knife.rb configuration file not found (searched: {locations})")


class InvalidURLError(KnifeConfigError, ValueError):
    """chef_server_url could not be parsed as a URL."""

    pass


class InvalidSchemeError(InvalidURLError):
    """Server URL has no explicit port and an unsupported scheme."""

    pass


class InvalidHostFormatError(InvalidURLError):
    """Server URL authority is not of the form host[:port]."""

    pass


class KeyLoadError(KnifeConfigError, ValueError):
    """Private key material could not be loaded."""

    pass


class MalformedKeyEncodingError(KeyLoadError):
    """No PEM block found in key material."""

    pass


class MalformedKeyStructureError(KeyLoadError):
    """PEM payload is not a PKCS#1 RSA private key."""

    pass
