"""Async Tanebi REST API client using httpx.

Features:
- API key sent as ``X-API-Key`` on every request
- Non-2xx responses raised as :class:`ApiError` with status and raw body
- One short-lived AsyncClient per request, no retries
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tanebi_mcp.config import Settings
from tanebi_mcp.models import IdeaDetail, IdeasListResponse, parse_idea_response

log = logging.getLogger("tanebi-mcp")

_IDEAS_PATH = "/api/v1/ideas"


class ApiError(Exception):
    """The Tanebi API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"API request failed: {status_code} {reason} - {body}")


class TanebiClient:
    """Thin wrapper over the ``/api/v1`` endpoints.

    Args:
        settings: Credentials and origin, built once at startup.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "X-API-Key": self._settings.api_key,
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _make_client(self, has_body: bool) -> httpx.AsyncClient:
        """Create an AsyncClient for a single request (caller manages lifecycle)."""
        return httpx.AsyncClient(headers=self._headers(has_body), transport=self._transport)

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            ApiError: on any non-2xx status.
            httpx.HTTPError: on connection or protocol failures.
        """
        has_body = body is not None
        kwargs: dict[str, Any] = {}
        if has_body:
            kwargs["json"] = body
        if params:
            kwargs["params"] = params

        url = f"{self.base_url}{path}"
        async with self._make_client(has_body) as client:
            resp = await client.request(method, url, **kwargs)
            if not resp.is_success:
                log.warning("%s %s -> %d", method, path, resp.status_code)
                raise ApiError(resp.status_code, resp.reason_phrase, resp.text)
            return resp.json()

    async def list_ideas(self, page: int = 1, per_page: int = 20) -> IdeasListResponse:
        data = await self.request(_IDEAS_PATH, params={"page": page, "per_page": per_page})
        return IdeasListResponse.model_validate(data)

    async def get_idea(self, idea_id: int) -> IdeaDetail:
        data = await self.request(f"{_IDEAS_PATH}/{idea_id}")
        return parse_idea_response(data)

    async def create_idea(
        self,
        title: str,
        visibility: str = "public",
        content: str | None = None,
    ) -> IdeaDetail:
        """POST a new idea. Empty *content* is left out of the body entirely."""
        body: dict[str, Any] = {"title": title, "visibility": visibility}
        if content:
            body["content"] = content
        data = await self.request(_IDEAS_PATH, method="POST", body=body)
        return parse_idea_response(data)
