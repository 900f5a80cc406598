"""Shared fixtures: an in-process stand-in for the Local REST API."""

from __future__ import annotations

from typing import Any, Optional

import httpx
import pytest

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.tools.registry import ToolRegistry

API_KEY = "test-api-key"
API_HOST = "https://vault.test:27124"


class StubBackend:
    """Records every request and answers from a table of canned responses.

    Routes are keyed by method and the encoded request path (query excluded).
    Unknown routes get the API's 404 error body.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        text: Optional[str] = None,
        status_code: int = 200,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body)
        self.routes[(method, path)] = response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.split(b"?", 1)[0].decode("ascii")
        response = self.routes.get((request.method, path))
        if response is None:
            return httpx.Response(404, json={"errorCode": 40400, "message": f"Not Found: {path}"})
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers={"Content-Type": response.headers.get("Content-Type", "application/json")},
        )


def _note_payload(path: str, content: str = "# Note\n", **overrides: Any) -> dict[str, Any]:
    """A note body as the API returns it for ``application/vnd.olrapi.note+json``."""
    payload = {
        "content": content,
        "frontmatter": {"status": "active"},
        "path": path,
        "stat": {"ctime": 1700000000000, "mtime": 1700000500000, "size": len(content.encode("utf-8"))},
        "tags": ["project"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def client(backend: StubBackend) -> ObsidianClient:
    return ObsidianClient(API_KEY, API_HOST, transport=httpx.MockTransport(backend))


@pytest.fixture
def registry(client: ObsidianClient) -> ToolRegistry:
    return ToolRegistry(client)


@pytest.fixture
def make_note():
    """Factory for note bodies as returned by the API."""
    return _note_payload
