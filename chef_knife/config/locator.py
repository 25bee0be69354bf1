"""knife.rb discovery.

Searches the same locations as the knife command: a .chef directory in
the working directory, then one in the user's home directory.
"""

import logging
from pathlib import Path

from chef_knife.errors import ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_DIR = ".chef"
CONFIG_FILE = "knife.rb"


def candidate_paths(cwd: Path | None = None, home: Path | None = None) -> list[Path]:
    """List knife.rb locations in search order.

    Args:
        cwd: Working directory (default: Path.cwd())
        home: Home directory (default: Path.home())

    Returns:
        Candidate paths, working directory first
    """
    if cwd is None:
        cwd = Path.cwd()
    if home is None:
        home = Path.home()
    return [
        Path(cwd) / CONFIG_DIR / CONFIG_FILE,
        Path(home) / CONFIG_DIR / CONFIG_FILE,
    ]


def find_knife_config(cwd: Path | None = None, home: Path | None = None) -> Path:
    """Find the first existing knife.rb.

    Args:
        cwd: Working directory (default: Path.cwd())
        home: Home directory (default: Path.home())

    Returns:
        Path to the knife.rb that was found

    Raises:
        ConfigNotFoundError: If no candidate exists
    """
    candidates = candidate_paths(cwd, home)
    for path in candidates:
        if path.exists():
            logger.debug("Found knife config at %s", path)
            return path
    raise ConfigNotFoundError([str(p) for p in candidates])
