"""Response shapes returned by the Tanebi REST API.

Fields the formatters render are required. The rest carry defaults so a
sparse payload still renders, and anything undeclared is ignored.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, TypeAdapter


class SimplifiedUser(BaseModel):
    id: int | None = None
    display_name: str
    avatar_path: str | None = None


class IdeaSummary(BaseModel):
    """One row of the paginated idea listing."""

    id: int
    title: str
    visibility: str
    current_stage: str
    reactions_count: int
    comments_count: int
    is_bookmarked: bool = False
    created_at: str
    updated_at: str | None = None
    user: SimplifiedUser


class IdeaLine(BaseModel):
    """A paragraph or heading inside an idea body, ordered by ``position``."""

    id: int | None = None
    line_type: str
    content: str
    position: int
    comments_count: int = 0
    created_at: str | None = None
    updated_at: str | None = None


class Reaction(BaseModel):
    id: int | None = None
    reaction_type: str
    created_at: str | None = None
    user: SimplifiedUser


class IdeaDetail(BaseModel):
    """Full idea record including body lines and reactions."""

    id: int
    title: str
    visibility: str
    current_stage: str
    reactions_count: int
    is_bookmarked: bool = False
    created_at: str
    updated_at: str
    user: SimplifiedUser
    lines: list[IdeaLine] = Field(default_factory=list)
    reactions: list[Reaction] = Field(default_factory=list)


class PaginationMeta(BaseModel):
    current_page: int
    total_pages: int
    total_count: int


class IdeasListResponse(BaseModel):
    ideas: list[IdeaSummary]
    meta: PaginationMeta


class IdeaEnvelope(BaseModel):
    """``{"idea": {...}}`` wrapper some endpoints put around an idea."""

    idea: IdeaDetail


IdeaResponse = Union[IdeaEnvelope, IdeaDetail]

_IDEA_RESPONSE: TypeAdapter[IdeaResponse] = TypeAdapter(IdeaResponse)


def parse_idea_response(data: Any) -> IdeaDetail:
    """Validate a single-idea payload, unwrapping the envelope if present."""
    parsed = _IDEA_RESPONSE.validate_python(data)
    if isinstance(parsed, IdeaEnvelope):
        return parsed.idea
    return parsed
