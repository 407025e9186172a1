"""Houston response types."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Deployment roles known to Houston.

    The CLI passes role strings through untouched; this enum only names the
    common values.
    """

    DEPLOYMENT_ADMIN = "DEPLOYMENT_ADMIN"
    DEPLOYMENT_EDITOR = "DEPLOYMENT_EDITOR"
    DEPLOYMENT_VIEWER = "DEPLOYMENT_VIEWER"

    def __str__(self) -> str:
        return self.value


class _HoustonModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class RoleBindingUser(_HoustonModel):
    id: Optional[str] = None
    username: str = ''


class RoleBindingDeployment(_HoustonModel):
    id: Optional[str] = None
    release_name: str = Field(default='', alias='releaseName')


class DeploymentUserRole(_HoustonModel):
    """A user's role binding on a deployment, as echoed back by Houston."""

    id: str = ''
    role: str
    user: RoleBindingUser = Field(default_factory=RoleBindingUser)
    deployment: RoleBindingDeployment = Field(default_factory=RoleBindingDeployment)
