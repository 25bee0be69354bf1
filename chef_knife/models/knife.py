"""Knife configuration data models."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey


@dataclass(frozen=True)
class KnifeConfig:
    """Settings read from a knife.rb file.

    Every field is optional. Fields not present in the file keep their
    zero value.
    """

    chef_server_url: str = ""
    host: str = ""
    port: str = ""
    client_key: "RSAPrivateKey | None" = field(default=None, compare=False, repr=False)
    client_key_path: str = ""
    cookbook_copyright: str = ""
    cookbook_email: str = ""
    cookbook_license: str = ""
    data_bag_encrypt_version: int = 0
    local_mode: bool = False
    node_name: str = ""
    syntax_check_cache_path: str = ""
    validation_client_name: str = ""
    validation_key: str = ""
    versioned_cookbooks: bool = False

    @property
    def has_client_key(self) -> bool:
        """Check if a client key was loaded."""
        return self.client_key is not None

    @property
    def server_address(self) -> str:
        """Get the server address as host:port.

        Returns:
            "host:port", or an empty string if no server URL was set
        """
        if not self.host:
            return ""
        return f"{self.host}:{self.port}" if self.port else self.host
