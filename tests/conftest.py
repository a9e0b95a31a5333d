"""Shared pytest fixtures for tanebi-mcp test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from tanebi_mcp import tools
from tanebi_mcp.api_client import TanebiClient
from tanebi_mcp.config import Settings

API_KEY = "test-key"
BASE_URL = "https://tanebi.test"


def json_response(data: object, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json"},
    )


def make_user(user_id: int = 1, name: str = "Aki") -> dict[str, Any]:
    return {"id": user_id, "display_name": name, "avatar_path": None}


def make_summary(idea_id: int = 1, title: str = "Solar kettle", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": idea_id,
        "title": title,
        "visibility": "public",
        "current_stage": "seed",
        "reactions_count": 3,
        "comments_count": 2,
        "is_bookmarked": False,
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-02T10:00:00Z",
        "user": make_user(),
    }
    data.update(overrides)
    return data


def make_line(
    line_id: int, position: int, content: str, line_type: str = "paragraph", comments: int = 0
) -> dict[str, Any]:
    return {
        "id": line_id,
        "line_type": line_type,
        "content": content,
        "position": position,
        "comments_count": comments,
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-01T10:00:00Z",
    }


def make_detail(idea_id: int = 7, **overrides: Any) -> dict[str, Any]:
    data = make_summary(idea_id, title="Solar kettle")
    del data["comments_count"]
    data["lines"] = [
        make_line(11, 2, "Boils water with sunlight."),
        make_line(10, 1, "Overview", line_type="heading"),
    ]
    data["reactions"] = [
        {
            "id": 5,
            "reaction_type": "fire",
            "created_at": "2024-05-01T11:00:00Z",
            "user": make_user(2, "Mio"),
        }
    ]
    data.update(overrides)
    return data


class FakeApi:
    """Records requests and answers them through a pluggable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: json_response(
            {}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, data: object, status_code: int = 200) -> None:
        self.handler = lambda request: json_response(data, status_code)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=API_KEY, api_base_url=BASE_URL)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(settings: Settings, fake_api: FakeApi) -> TanebiClient:
    return TanebiClient(settings, transport=httpx.MockTransport(fake_api))


@pytest.fixture
def configured_tools(client: TanebiClient, monkeypatch):
    """Point the tool handlers at the mocked API for the duration of a test."""
    monkeypatch.setattr(tools, "_client", client)
    return tools
