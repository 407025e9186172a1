"""Tests for the Houston GraphQL client."""

import json

import pytest

from astro_cli.core.config import init_config
from astro_cli.core.exceptions import HoustonError, ValidationError
from astro_cli.houston import DeploymentUserRole, HoustonClient
from astro_cli.houston import queries

ROLE_BINDING = {
    "id": "ckggzqj5f4157qtc9lescmehm",
    "user": {"username": "somebody@astronomer.com"},
    "role": "DEPLOYMENT_ADMIN",
    "deployment": {"releaseName": "prehistoric-gravity-9229"},
}


class TestExecute:
    """Test request encoding and response decoding."""

    @pytest.mark.asyncio
    async def test_returns_data_and_sends_query(self, houston_server):
        requests = []
        body = json.dumps({"data": {"deploymentAddUserRole": ROLE_BINDING}})

        async with houston_server(200, body, requests) as url:
            client = HoustonClient(url, token="secret-token")
            data = await client.execute(
                queries.DEPLOYMENT_USER_ADD_REQUEST,
                {"deploymentId": "dep", "email": "a@b.c", "role": "DEPLOYMENT_ADMIN"},
            )

        assert data["deploymentAddUserRole"]["role"] == "DEPLOYMENT_ADMIN"
        assert len(requests) == 1
        sent = requests[0]
        assert "deploymentAddUserRole" in sent["json"]["query"]
        assert sent["json"]["variables"]["email"] == "a@b.c"
        assert sent["headers"]["authorization"] == "secret-token"

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self, houston_server):
        requests = []

        async with houston_server(200, json.dumps({"data": {}}), requests) as url:
            await HoustonClient(url).execute("query { ok }")

        assert "authorization" not in {k.lower() for k in requests[0]["headers"]}

    @pytest.mark.asyncio
    async def test_first_graphql_error_is_raised_verbatim(self, houston_server):
        body = json.dumps({
            "errors": [
                {"message": "first problem", "extensions": {"code": "BAD_USER_INPUT"}},
                {"message": "second problem"},
            ],
            "data": {"deploymentAddUserRole": None},
        })

        async with houston_server(200, body) as url:
            with pytest.raises(HoustonError) as exc_info:
                await HoustonClient(url).execute("mutation { x }")

        assert str(exc_info.value) == "first problem"
        assert exc_info.value.raw_message == "first problem"
        assert exc_info.value.code == "BAD_USER_INPUT"
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_wrapped_error_list(self, houston_server):
        body = json.dumps({"error": {"errors": [{"message": "Variable \"$role\" got invalid value"}]}})

        async with houston_server(400, body) as url:
            with pytest.raises(HoustonError, match="got invalid value") as exc_info:
                await HoustonClient(url).execute("mutation { x }")

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_http_error_without_graphql_errors(self, houston_server):
        async with houston_server(502, "Bad Gateway") as url:
            with pytest.raises(HoustonError, match=r"API error \(502\): Bad Gateway"):
                await HoustonClient(url).execute("query { ok }")

    @pytest.mark.asyncio
    async def test_undecodable_success_body(self, houston_server):
        async with houston_server(200, "<html>") as url:
            with pytest.raises(HoustonError, match="Failed to JSON decode"):
                await HoustonClient(url).execute("query { ok }")

    @pytest.mark.asyncio
    async def test_transport_error(self):
        # Port 9 (discard) is closed on test machines
        client = HoustonClient("http://127.0.0.1:9/v1", timeout=5)

        with pytest.raises(HoustonError):
            await client.execute("query { ok }")


class TestRoleBindingHelpers:
    """Test the typed mutation helpers."""

    @pytest.mark.asyncio
    async def test_add_deployment_user_decodes_binding(self, houston_server):
        body = json.dumps({"data": {"deploymentAddUserRole": ROLE_BINDING}})

        async with houston_server(200, body) as url:
            binding = await HoustonClient(url).add_deployment_user("dep", "somebody@astronomer.com", "DEPLOYMENT_ADMIN")

        assert isinstance(binding, DeploymentUserRole)
        assert binding.role == "DEPLOYMENT_ADMIN"
        assert binding.user.username == "somebody@astronomer.com"
        assert binding.deployment.release_name == "prehistoric-gravity-9229"

    @pytest.mark.asyncio
    async def test_missing_payload_field(self, houston_server):
        body = json.dumps({"data": {"deploymentRemoveUserRole": None}})

        async with houston_server(200, body) as url:
            with pytest.raises(HoustonError, match="deploymentRemoveUserRole"):
                await HoustonClient(url).delete_deployment_user("dep", "a@b.c")


class TestFromConfig:
    """Test building a client from configuration."""

    def test_uses_api_url_and_token(self, home_dir, work_dir):
        ctx = init_config(home_dir=home_dir, cwd=work_dir)
        ctx.set_home_string("cloud.domain", "example.com")
        ctx.set_home_string("user.apiAuthToken", "tok")

        client = HoustonClient.from_config(ctx)

        assert client.url == "https://houston.example.com:443/v1"
        assert client._token == "tok"

    def test_requires_cloud_domain(self, home_dir, work_dir):
        ctx = init_config(home_dir=home_dir, cwd=work_dir)

        with pytest.raises(ValidationError, match="cloud.domain"):
            HoustonClient.from_config(ctx)
