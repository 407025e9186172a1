"""Deployment command argument parser for the Astro CLI."""

import argparse

from astro_cli.houston import Role
from .main_parser import add_common_arguments


def _add_user_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--deployment-id", "-d",
        required=True,
        help="ID of the deployment"
    )
    parser.add_argument(
        "--email", "-e",
        required=True,
        help="Email of the user"
    )


def add_deployment_subparser(subparsers) -> argparse.ArgumentParser:
    """Add deployment command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured deployment subparser
    """
    deployment_parser = subparsers.add_parser(
        "deployment",
        help="Manage Astronomer deployments",
        description="Manage users and roles on Astronomer deployments"
    )

    add_common_arguments(deployment_parser)

    deployment_subparsers = deployment_parser.add_subparsers(
        dest="deployment_command",
        help="Deployment commands",
        required=True
    )

    user_parser = deployment_subparsers.add_parser(
        "user",
        help="Manage deployment user roles"
    )
    user_subparsers = user_parser.add_subparsers(
        dest="user_command",
        help="Deployment user commands",
        required=True
    )

    role_names = ", ".join(role.value for role in Role)

    add_parser = user_subparsers.add_parser(
        "add",
        help="Add a user to a deployment"
    )
    _add_user_target_arguments(add_parser)
    add_parser.add_argument(
        "--role", "-r",
        default=Role.DEPLOYMENT_VIEWER.value,
        help=f"Role for the user ({role_names}; default: {Role.DEPLOYMENT_VIEWER.value})"
    )

    remove_parser = user_subparsers.add_parser(
        "remove",
        aliases=["delete"],
        help="Remove a user's role from a deployment"
    )
    _add_user_target_arguments(remove_parser)

    update_parser = user_subparsers.add_parser(
        "update",
        help="Change a user's role on a deployment"
    )
    _add_user_target_arguments(update_parser)
    update_parser.add_argument(
        "--role", "-r",
        required=True,
        help=f"New role for the user ({role_names})"
    )

    return deployment_parser
