"""CLI argument parser configuration.

This module provides the argument parser for the bridge CLI. Bridge
options must come before the command; option parsing stops at the first
non-option token (or ``--``) and everything after it belongs to the
dispatched command, even tokens that look like bridge options.
"""

import argparse

from sidecar_bridge import __version__

__all__ = ["create_parser", "parse_command_line", "split_command_line"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with the bridge's own options.

    """
    parser = argparse.ArgumentParser(
        prog="bridge",
        usage="%(prog)s [flags] <command> [args...]\n       %(prog)s --init-wrappers <dir>",
        description="bridge - Execute commands in sidecar containers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  bridge npm install           Run npm install in the configured container
  bridge php artisan migrate   Run php artisan migrate in the PHP container
  bridge --config ./my.yaml npm test
  bridge --init-wrappers /scripts/wrappers   Generate symlinks at startup
  bridge --dry-run go build ./...            Show the resolved plan as JSON

The bridge reads configuration from $SIDECAR_CONFIG_DIR/bridge.yaml (or the
BRIDGE_CONFIG env var). SIDECAR_CONFIG_DIR defaults to $PWD/.sidecar if not set.
""",
    )

    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s version {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        metavar="PATH",
        help="Path to bridge config file (default: $SIDECAR_CONFIG_DIR/bridge.yaml)",
    )

    parser.add_argument(
        "--init-wrappers",
        type=str,
        metavar="DIR",
        dest="init_wrappers",
        help="Generate dispatcher symlinks in the specified directory",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Print the resolved execution plan as JSON instead of running it",
    )

    return parser


def _value_options(parser: argparse.ArgumentParser) -> set[str]:
    """Option strings that consume the following token as their value."""
    return {
        option
        for action in parser._actions
        if action.option_strings and action.nargs != 0
        for option in action.option_strings
    }


def split_command_line(
    parser: argparse.ArgumentParser, argv: list[str]
) -> tuple[list[str], list[str]]:
    """Split argv into bridge options and the dispatched command line.

    Args:
        parser: Parser whose options are recognized.
        argv: Raw arguments (without the program name).

    Returns:
        Tuple of (bridge options, command line).

    """
    value_options = _value_options(parser)
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            return argv[:index], argv[index + 1 :]
        if token == "-" or not token.startswith("-"):
            return argv[:index], argv[index:]
        index += 2 if token in value_options else 1
    return argv, []


def parse_command_line(
    parser: argparse.ArgumentParser, argv: list[str]
) -> argparse.Namespace:
    """Parse bridge options and attach the command line.

    Returns:
        Namespace with the bridge options plus ``command_line``.

    """
    options, command_line = split_command_line(parser, argv)
    args = parser.parse_args(options)
    args.command_line = command_line
    return args
