"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import tarfile
import tempfile
from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest

from create_mosaia_tool.models.config import ScaffoldConfig
from create_mosaia_tool.models.inputs import UserInputs
from create_mosaia_tool.sources.remote import RemoteFetcher

WRAPPER_DIR = "mosaia-tools-starter-main"

MOSAIA_TEMPLATE = """{
    "name": "TOOL_DISPLAY_NAME",
    "description": "SHORT_TOOL_DESCRIPTION",
    "llm_description": "LONG_TOOL_DESCRIPTION",
    "entrypoint": "dist/index.js",
    "schema": {"type": "object", "properties": {}}
}
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_tarball() -> Callable[..., bytes]:
    """Build an in-memory tar-gzip archive with a single wrapper directory."""

    def build(files: dict[str, str], wrapper: str = WRAPPER_DIR) -> bytes:
        buf = io.BytesIO()
        with tarfile.open(fileobj=buf, mode="w:gz") as tar:
            root = tarfile.TarInfo(wrapper)
            root.type = tarfile.DIRTYPE
            root.mode = 0o755
            tar.addfile(root)
            for name, content in files.items():
                data = content.encode("utf-8")
                info = tarfile.TarInfo(f"{wrapper}/{name}")
                info.size = len(data)
                info.mode = 0o644
                tar.addfile(info, io.BytesIO(data))
        return buf.getvalue()

    return build


@pytest.fixture
def mosaia_template() -> str:
    """Contents of the starter .mosaia file before interpolation."""
    return MOSAIA_TEMPLATE


@pytest.fixture
def starter_files(mosaia_template) -> dict[str, str]:
    """Files of a minimal starter template."""
    return {
        ".mosaia": mosaia_template,
        "package.json": '{"name": "mosaia-tools-starter"}\n',
        "src/index.ts": "export default async function handler() {}\n",
    }


@pytest.fixture
def starter_tarball(make_tarball, starter_files) -> bytes:
    return make_tarball(starter_files)


@pytest.fixture
def scaffold_config() -> ScaffoldConfig:
    return ScaffoldConfig(tarball_url="https://example.test/starter.tar.gz")


@pytest.fixture
def valid_inputs() -> UserInputs:
    return UserInputs(
        display_name="Weather Tool",
        short_description="A tool that reports current weather",
        long_description="Fetches weather data for a city by name.",
    )


@pytest.fixture
def make_fetcher() -> Callable[..., tuple[RemoteFetcher, list[httpx.Request]]]:
    """Create a fetcher backed by httpx.MockTransport.

    Returns the fetcher and the list of requests it received.
    """

    def build(
        status_code: int = 200,
        content: bytes = b"",
        error: Exception | None = None,
    ) -> tuple[RemoteFetcher, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status_code, content=content)

        return RemoteFetcher(transport=httpx.MockTransport(handler)), requests

    return build


# Markers for test categories
def pytest_configure(config):
    config.addinivalue_line("markers", "mock: tests using mocked HTTP responses")
