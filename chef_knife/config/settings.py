"""Application settings from environment variables.

Only the command-line entry point reads these; the parser itself takes
everything it needs as arguments.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Command-line settings from environment."""

    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level("KNIFE_LOG_LEVEL", "WARNING"),
            log_colors=cls._get_bool("KNIFE_LOG_COLORS", True),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_log_level(key: str, default: str) -> str:
        value = os.getenv(key, "").strip().upper()
        if not value:
            return default
        if value not in VALID_LOG_LEVELS:
            logger.warning("Invalid log level for %s: %s, using default %s", key, value, default)
            return default
        return value
