"""Tests for the astro command-line entry point."""

import json
import sys

import pytest
import yaml
from loguru import logger

import astro_cli.api.cli
from astro_cli.api.cli.commands.deployment import deployment_command
from astro_cli.api.cli.main import create_parser, main
from astro_cli.core.config import CONFIG_DIR, CONFIG_FILE_NAME_WITH_EXT, init_config
from astro_cli.core.exceptions import HoustonError
from astro_cli.houston import HoustonClient


@pytest.fixture(autouse=True)
def cli_env(clean_astro_env, home_dir, work_dir, monkeypatch):
    """Run every command from work_dir with a fake home."""
    monkeypatch.setenv("ASTRO_HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    yield
    # setup_logging bound a sink to the captured stderr
    logger.remove()
    logger.add(sys.stderr)


def run(argv):
    """Run the CLI, returning the exit code (0 when it returns normally)."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


class TestParser:

    def test_package_exports_resolve(self):
        for name in getattr(astro_cli.api.cli, "__all__", []):
            assert hasattr(astro_cli.api.cli, name)

    def test_no_command_prints_help(self, capsys):
        assert run([]) == 1
        assert "usage: astro" in capsys.readouterr().out

    def test_add_role_defaults_to_viewer(self):
        args = create_parser().parse_args(
            ["deployment", "user", "add", "--deployment-id", "dep", "--email", "a@b.c"]
        )
        assert args.role == "DEPLOYMENT_VIEWER"

    def test_update_requires_role(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(
                ["deployment", "user", "update", "--deployment-id", "dep", "--email", "a@b.c"]
            )


class TestConfigCommands:

    def test_get_default(self, capsys):
        assert run(["config", "get", "cloud.api.port"]) == 0
        assert capsys.readouterr().out.strip() == "443"

    def test_set_global_then_get(self, home_dir, capsys):
        assert run(["config", "set", "cloud.domain", "example.com", "--global"]) == 0
        capsys.readouterr()

        assert run(["config", "get", "cloud.domain"]) == 0
        assert capsys.readouterr().out.strip() == "example.com"

        home_file = home_dir / CONFIG_DIR / CONFIG_FILE_NAME_WITH_EXT
        assert yaml.safe_load(home_file.read_text())["cloud"]["domain"] == "example.com"

    def test_set_project_without_project_fails(self, capsys):
        assert run(["config", "set", "cloud.domain", "example.com"]) == 1
        assert "project init" in capsys.readouterr().err

    def test_get_unknown_key_fails(self, capsys):
        assert run(["config", "get", "not.a.key"]) == 1
        assert "Config does not exist" in capsys.readouterr().err


class TestProjectCommands:

    def test_init_then_project_scoped_set(self, work_dir, capsys):
        assert run(["project", "init"]) == 0
        assert (work_dir / CONFIG_DIR / CONFIG_FILE_NAME_WITH_EXT).is_file()

        assert run(["config", "set", "postgres.user", "airflow"]) == 0
        capsys.readouterr()

        assert run(["config", "get", "postgres.user"]) == 0
        assert capsys.readouterr().out.strip() == "airflow"

        assert run(["config", "get", "postgres.user", "--global"]) == 0
        assert capsys.readouterr().out.strip() == "postgres"

    def test_init_nested_project_starts_empty(self, work_dir, capsys):
        assert run(["project", "init"]) == 0
        assert run(["config", "set", "project.name", "parent"]) == 0
        nested = work_dir / "sub"
        nested.mkdir()

        assert run(["project", "init", str(nested)]) == 0

        nested_file = nested / CONFIG_DIR / CONFIG_FILE_NAME_WITH_EXT
        assert yaml.safe_load(nested_file.read_text()) == {}

    def test_root(self, work_dir, capsys):
        assert run(["project", "root"]) == 1

        run(["project", "init"])
        capsys.readouterr()

        assert run(["project", "root"]) == 0
        assert capsys.readouterr().out.strip() == str(work_dir.absolute())


class TestDeploymentCommands:

    def test_missing_domain_reported(self, capsys):
        code = run(["deployment", "user", "remove", "--deployment-id", "dep", "--email", "a@b.c"])

        assert code == 1
        assert "cloud.domain" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_user_add_writes_to_stdout(self, home_dir, work_dir, houston_server, capsys):
        ctx = init_config(home_dir=home_dir, cwd=work_dir)
        args = create_parser().parse_args([
            "deployment", "user", "add",
            "--deployment-id", "dep",
            "--email", "somebody@astronomer.com",
            "--role", "DEPLOYMENT_EDITOR",
        ])
        body = json.dumps({"data": {"deploymentAddUserRole": {
            "id": "binding",
            "user": {"username": "somebody@astronomer.com"},
            "role": "DEPLOYMENT_EDITOR",
            "deployment": {"releaseName": "prehistoric-gravity-9229"},
        }}})

        async with houston_server(200, body) as url:
            await deployment_command(args, ctx, client=HoustonClient(url))

        assert "Successfully added somebody@astronomer.com as a DEPLOYMENT_EDITOR" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_user_delete_alias_propagates_errors(self, home_dir, work_dir, houston_server):
        ctx = init_config(home_dir=home_dir, cwd=work_dir)
        args = create_parser().parse_args(
            ["deployment", "user", "delete", "--deployment-id", "dep", "--email", "a@b.c"]
        )
        body = json.dumps({"errors": [{"message": "The role binding does not exist for this user"}]})

        async with houston_server(400, body) as url:
            with pytest.raises(HoustonError, match="The role binding does not exist for this user"):
                await deployment_command(args, ctx, client=HoustonClient(url))
