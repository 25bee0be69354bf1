"""Entry point for inspecting a knife.rb file.

Usage: python -m chef_knife [path/to/knife.rb]
"""

import argparse
import logging
import sys

from chef_knife.config import Settings, parse_config
from chef_knife.errors import KnifeConfigError
from chef_knife.models import KnifeConfig
from chef_knife.utils.console import ColorfulFormatter

logger = logging.getLogger("chef_knife")


def configure_logging(settings: Settings) -> None:
    """Attach a console handler to the chef_knife logger.

    Colors are disabled when stderr is not a TTY.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        logger.addHandler(handler)
        logger.propagate = False


def format_summary(config: KnifeConfig) -> str:
    """Render the settings a client needs to reach the Chef server."""
    if config.client_key is not None:
        key = f"{config.client_key_path} (RSA {config.client_key.key_size} bits)"
    else:
        key = "<none>"
    lines = [
        f"chef_server_url:  {config.chef_server_url or '<unset>'}",
        f"server:           {config.server_address or '<unset>'}",
        f"node_name:        {config.node_name or '<unset>'}",
        f"client_key:       {key}",
        f"local_mode:       {str(config.local_mode).lower()}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Parse a knife.rb and print a summary.

    Returns:
        Process exit code
    """
    arg_parser = argparse.ArgumentParser(
        prog="python -m chef_knife",
        description="Show the settings read from a knife.rb file.",
    )
    arg_parser.add_argument(
        "config",
        nargs="?",
        help="path to knife.rb (default: ./.chef/knife.rb, then ~/.chef/knife.rb)",
    )
    args = arg_parser.parse_args(argv)

    configure_logging(Settings.from_env())

    try:
        config = parse_config(args.config)
    except (KnifeConfigError, OSError) as e:
        logger.error("Failed to load knife config: %s", e)
        return 1

    print(format_summary(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
