"""Houston GraphQL client.

Each call opens a short-lived aiohttp session, posts one GraphQL document and
returns the ``data`` object. Transport failures and GraphQL errors are both
raised as ``HoustonError``; for GraphQL errors the first error's message is
used verbatim.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from astro_cli.core.config import ConfigContext
from astro_cli.core.exceptions import HoustonError, ValidationError
from . import queries
from .types import DeploymentUserRole


def _extract_errors(body: Any) -> list:
    """Pull the GraphQL error list out of a decoded response body.

    Houston reports errors either at the top level (``{"errors": [...]}``)
    or, for requests rejected before execution, wrapped in
    ``{"error": {"errors": [...]}}``.
    """
    if not isinstance(body, dict):
        return []

    errors = body.get("errors")
    if not errors and isinstance(body.get("error"), dict):
        errors = body["error"].get("errors")

    if isinstance(errors, list):
        return [e for e in errors if isinstance(e, dict)]
    return []


class HoustonClient:
    """Client for the Houston GraphQL API."""

    def __init__(self, url: str, token: Optional[str] = None, timeout: float = 30.0):
        """Initialize Houston client.

        Args:
            url: Fully qualified GraphQL endpoint, e.g. https://houston.example.com:443/v1
            token: Value sent in the ``authorization`` header, if any
            timeout: Total request timeout in seconds
        """
        self._url = url
        self._token = token
        self._timeout = timeout

    @classmethod
    def from_config(cls, ctx: ConfigContext, timeout: float = 30.0) -> "HoustonClient":
        """Build a client from the resolved CLI configuration."""
        settings = ctx.settings
        missing = settings.get_missing_config()
        if missing:
            raise ValidationError(
                missing[0], "", "not set, run `astro config set cloud.domain <domain> --global`"
            )

        token = settings.user.api_auth_token.get_secret_value() or None
        return cls(settings.api_url, token=token, timeout=timeout)

    @property
    def url(self) -> str:
        return self._url

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run a GraphQL document and return its ``data`` object.

        Raises:
            HoustonError: On transport failure, HTTP error or GraphQL error
        """
        payload = {"query": query, "variables": variables or {}}
        headers = {"Accept": "application/json"}
        if self._token:
            headers["authorization"] = self._token

        logger.debug(f"POST {self._url} variables={list((variables or {}).keys())}")

        try:
            timeout = aiohttp.ClientTimeout(total=self._timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._url, json=payload, headers=headers) as response:
                    status = response.status
                    text = await response.text()
        except asyncio.TimeoutError as e:
            raise HoustonError(f"Request to {self._url} timed out after {self._timeout}s", cause=e) from e
        except aiohttp.ClientError as e:
            raise HoustonError(str(e) or e.__class__.__name__, cause=e) from e

        logger.debug(f"Houston responded with status {status}")
        return self._decode(status, text)

    @staticmethod
    def _decode(status: int, text: str) -> Dict[str, Any]:
        try:
            body = json.loads(text) if text else None
        except ValueError:
            body = None

        errors = _extract_errors(body)
        if errors:
            first = errors[0]
            extensions = first.get("extensions") or {}
            raise HoustonError(
                str(first.get("message", "")),
                code=extensions.get("code") if isinstance(extensions, dict) else None,
                status_code=status,
            )

        if status < 200 or status >= 300:
            raise HoustonError(f"API error ({status}): {text}", status_code=status)

        if not isinstance(body, dict):
            raise HoustonError(f"Failed to JSON decode Houston response: {text}", status_code=status)

        data = body.get("data")
        if not isinstance(data, dict):
            raise HoustonError("Houston response did not include any data", status_code=status)
        return data

    async def _role_binding(self, query: str, field: str, variables: Dict[str, Any]) -> DeploymentUserRole:
        data = await self.execute(query, variables)
        result = data.get(field)
        if result is None:
            raise HoustonError(f"Houston response did not include {field}")

        try:
            return DeploymentUserRole.model_validate(result)
        except PydanticValidationError as e:
            raise HoustonError(f"Failed to decode {field} response: {e}", cause=e) from e

    async def add_deployment_user(self, deployment_id: str, email: str, role: str) -> DeploymentUserRole:
        return await self._role_binding(
            queries.DEPLOYMENT_USER_ADD_REQUEST,
            "deploymentAddUserRole",
            {"deploymentId": deployment_id, "email": email, "role": str(role)},
        )

    async def delete_deployment_user(self, deployment_id: str, email: str) -> DeploymentUserRole:
        return await self._role_binding(
            queries.DEPLOYMENT_USER_DELETE_REQUEST,
            "deploymentRemoveUserRole",
            {"deploymentId": deployment_id, "email": email},
        )

    async def update_deployment_user(self, deployment_id: str, email: str, role: str) -> DeploymentUserRole:
        return await self._role_binding(
            queries.DEPLOYMENT_USER_UPDATE_REQUEST,
            "deploymentUpdateUserRole",
            {"deploymentId": deployment_id, "email": email, "role": str(role)},
        )
