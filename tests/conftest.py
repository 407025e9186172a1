"""Shared fixtures for Astro CLI tests."""

import os
import tempfile
from collections.abc import Generator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


@pytest.fixture(autouse=True)
def clean_astro_env(monkeypatch):
    """Keep the developer's ASTRO_* environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("ASTRO_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def home_dir(temp_dir: Path) -> Path:
    """Fake user home directory."""
    path = temp_dir / "home"
    path.mkdir()
    return path


@pytest.fixture
def work_dir(temp_dir: Path) -> Path:
    """Directory outside the fake home to run commands from."""
    path = temp_dir / "work"
    path.mkdir()
    return path


@asynccontextmanager
async def _serve_houston(status: int, body: str, requests: Optional[List[Dict[str, Any]]] = None):
    """Serve a canned Houston response on a local port, yielding its URL."""

    async def graphql_handler(request: web.Request) -> web.Response:
        if requests is not None:
            requests.append({
                "headers": {k.lower(): v for k, v in request.headers.items()},
                "json": await request.json(),
            })
        return web.Response(status=status, text=body, content_type="application/json")

    app = web.Application()
    app.router.add_post("/v1", graphql_handler)

    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/v1"))
    finally:
        await server.close()


@pytest.fixture
def houston_server():
    """Factory for a mock Houston endpoint.

    Usage::

        async with houston_server(200, body) as url:
            client = HoustonClient(url)
    """
    return _serve_houston
