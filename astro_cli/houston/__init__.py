"""Client for Houston, the Astronomer platform's GraphQL API."""

from .client import HoustonClient
from .types import DeploymentUserRole, Role

__all__ = [
    "HoustonClient",
    "DeploymentUserRole",
    "Role",
]
