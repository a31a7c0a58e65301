"""
Pytest configuration and shared fixtures.

- fake_figma: in-memory Figma API served through httpx.MockTransport
- make_config: SyncConfig wired to fake_figma
"""
import json

import httpx
import pytest

from figma_index.client import FIGMA_API_BASE, FigmaConfig
from figma_index.config import SyncConfig


class FakeFigma:
    """Serves canned JSON per URL path and records every request."""

    def __init__(self):
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload: object, status: int = 200):
        self.routes[path] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1")
        if path not in self.routes:
            return httpx.Response(404, text=f"no route for {path}")
        status, payload = self.routes[path]
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, content=json.dumps(payload).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> list[str]:
        return [r.url.path.removeprefix("/v1") for r in self.requests]


@pytest.fixture
def fake_figma() -> FakeFigma:
    return FakeFigma()


@pytest.fixture
def make_config(fake_figma, tmp_path):
    """Build a SyncConfig that talks to fake_figma and writes into tmp_path."""

    def _make(**overrides) -> SyncConfig:
        values = {
            "team_id": "team-1",
            "output_path": str(tmp_path / "design-index.json"),
        }
        values.update(overrides)
        figma = FigmaConfig(api_key="test-token", api_base=FIGMA_API_BASE, transport=fake_figma.transport)
        return SyncConfig(figma=figma, **values)

    return _make


@pytest.fixture
def sample_files() -> list[dict]:
    """Files as returned by /projects/{id}/files."""
    return [
        {
            "key": "abc123",
            "name": "My File",
            "last_modified": "2024-06-01T10:00:00Z",
            "thumbnail_url": "https://s3.example.com/thumb/abc123.png",
        },
        {
            "key": "def456",
            "name": "Checkout Flow",
            "last_modified": "2023-01-01T00:00:00Z",
            "thumbnail_url": "https://s3.example.com/thumb/def456.png",
        },
    ]
