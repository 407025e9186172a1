"""Deployment user role management.

Each operation sends a single mutation to Houston and writes one confirmation
line to ``out``. Errors from Houston propagate unchanged so the server's
message reaches the user as-is.
"""

from typing import TextIO

from loguru import logger

from astro_cli.houston import HoustonClient


async def add_user(deployment_id: str, email: str, role: str, client: HoustonClient, out: TextIO) -> None:
    """Give ``email`` the ``role`` on a deployment."""
    binding = await client.add_deployment_user(deployment_id, email, role)
    logger.debug(f"Role binding {binding.id} created on {binding.deployment.release_name or deployment_id}")
    out.write(f"Successfully added {email} as a {role}\n")


async def delete_user(deployment_id: str, email: str, client: HoustonClient, out: TextIO) -> None:
    """Remove ``email``'s role from a deployment.

    The role named in the confirmation is the one Houston reports as removed.
    """
    binding = await client.delete_deployment_user(deployment_id, email)
    out.write(
        f"Successfully removed the {binding.role} role for {email} from deployment {deployment_id}\n"
    )


async def update_user(deployment_id: str, email: str, role: str, client: HoustonClient, out: TextIO) -> None:
    """Change ``email``'s role on a deployment."""
    await client.update_deployment_user(deployment_id, email, role)
    out.write(f"Successfully updated {email} to a {role}\n")
