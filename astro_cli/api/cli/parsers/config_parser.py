"""Config command argument parser for the Astro CLI."""

import argparse

from .main_parser import add_common_arguments


def add_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Add config command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured config subparser
    """
    config_parser = subparsers.add_parser(
        "config",
        help="Read and write CLI configuration",
        description="Get or set values in the home (~/.astro) or project config"
    )

    add_common_arguments(config_parser)

    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        help="Configuration commands",
        required=True
    )

    get_parser = config_subparsers.add_parser(
        "get",
        help="Print a config value"
    )
    get_parser.add_argument(
        "key",
        help="Dotted config key, e.g. cloud.domain"
    )
    get_parser.add_argument(
        "--global", "-g",
        dest="global_scope",
        action="store_true",
        help="Read the home config only"
    )

    set_parser = config_subparsers.add_parser(
        "set",
        help="Set a config value"
    )
    set_parser.add_argument(
        "key",
        help="Dotted config key, e.g. cloud.domain"
    )
    set_parser.add_argument(
        "value",
        help="Value to store"
    )
    set_parser.add_argument(
        "--global", "-g",
        dest="global_scope",
        action="store_true",
        help="Write to the home config instead of the project config"
    )

    return config_parser
