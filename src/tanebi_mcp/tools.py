"""MCP tool implementations: list_ideas, get_idea and create_idea.

Parameter bounds are declared with pydantic ``Field`` so FastMCP rejects
bad arguments before a handler runs (and before any HTTP request).
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal

import httpx
from mcp.types import ToolAnnotations
from pydantic import Field

from tanebi_mcp.api_client import ApiError, TanebiClient
from tanebi_mcp.formatters import format_idea_detail, format_ideas_list
from tanebi_mcp.server import mcp

log = logging.getLogger("tanebi-mcp")

_client: TanebiClient | None = None


def configure(client: TanebiClient) -> None:
    """Install the API client shared by every tool invocation."""
    global _client  # noqa: PLW0603
    _client = client


def _get_client() -> TanebiClient:
    if _client is None:
        raise RuntimeError("Tanebi API client is not configured; call tools.configure() first.")
    return _client


# ---------------------------------------------------------------------------
# Tool 1: list_ideas
# ---------------------------------------------------------------------------


@mcp.tool(
    name="list_ideas",
    annotations=ToolAnnotations(
        title="List Tanebi Ideas",
        readOnlyHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def list_ideas(
    page: Annotated[int, Field(strict=True, ge=1, description="Page number (default: 1)")] = 1,
    per_page: Annotated[
        int,
        Field(strict=True, ge=1, le=100, description="Items per page (default: 20, max: 100)"),
    ] = 20,
) -> str:
    """List ideas from Tanebi. Returns summaries with title, stage, author, and counts.

    Args:
        page: 1-based page number.
        per_page: Page size, at most 100.

    Returns:
        One summary block per idea followed by a
        ``Page X of Y (Z total ideas)`` footer.
    """
    try:
        data = await _get_client().list_ideas(page=page, per_page=per_page)
    except (ApiError, httpx.HTTPError) as exc:
        log.error("list_ideas failed (page=%d, per_page=%d): %s", page, per_page, exc)
        raise
    return format_ideas_list(data)


# ---------------------------------------------------------------------------
# Tool 2: get_idea
# ---------------------------------------------------------------------------


@mcp.tool(
    name="get_idea",
    annotations=ToolAnnotations(
        title="Get Tanebi Idea",
        readOnlyHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def get_idea(
    idea_id: Annotated[
        int, Field(strict=True, ge=1, description="The ID of the idea to retrieve")
    ],
) -> str:
    """Get detailed information about a specific idea, including its content lines and reactions."""
    try:
        idea = await _get_client().get_idea(idea_id)
    except (ApiError, httpx.HTTPError) as exc:
        log.error("get_idea failed for %d: %s", idea_id, exc)
        raise
    return format_idea_detail(idea)


# ---------------------------------------------------------------------------
# Tool 3: create_idea
# ---------------------------------------------------------------------------


@mcp.tool(
    name="create_idea",
    annotations=ToolAnnotations(
        title="Create Tanebi Idea",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def create_idea(
    title: Annotated[str, Field(min_length=1, description="Title of the idea")],
    content: Annotated[
        str | None,
        Field(
            description=(
                "Content of the idea. Paragraphs are separated by blank lines. "
                "Lines starting with # become headings."
            )
        ),
    ] = None,
    visibility: Annotated[
        Literal["public", "private"],
        Field(description='Visibility: "public" or "private" (default: "public")'),
    ] = "public",
) -> str:
    """Create a new idea on Tanebi. Content is split into paragraphs (separated by blank lines) and stored as lines."""
    try:
        idea = await _get_client().create_idea(title, visibility=visibility, content=content)
    except (ApiError, httpx.HTTPError) as exc:
        log.error("create_idea failed for %r: %s", title, exc)
        raise
    log.info("Created idea %d", idea.id)
    return f"Idea created successfully!\n\n{format_idea_detail(idea)}"
