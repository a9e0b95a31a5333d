"""Plain-text renderers that turn API models into Markdown for the agent."""

from __future__ import annotations

from tanebi_mcp.models import IdeaDetail, IdeaLine, IdeasListResponse, IdeaSummary

_NO_CONTENT = "(No content yet)"


def format_idea_summary(idea: IdeaSummary) -> str:
    return "\n".join(
        [
            f"[ID: {idea.id}] {idea.title}",
            f"  Stage: {idea.current_stage} | Visibility: {idea.visibility}",
            f"  Author: {idea.user.display_name}",
            f"  Reactions: {idea.reactions_count} | Comments: {idea.comments_count}",
            f"  Created: {idea.created_at}",
        ]
    )


def _format_line(line: IdeaLine) -> str:
    prefix = "### " if line.line_type == "heading" else ""
    comments = f" [{line.comments_count} comments]" if line.comments_count > 0 else ""
    return f"{prefix}{line.content}{comments}"


def format_idea_detail(idea: IdeaDetail) -> str:
    """Render the header, body lines (by position) and reactions of an idea.

    The reactions section is omitted when there are none.
    """
    header = "\n".join(
        [
            f"# {idea.title}",
            "",
            f"ID: {idea.id}",
            f"Stage: {idea.current_stage} | Visibility: {idea.visibility}",
            f"Author: {idea.user.display_name}",
            f"Reactions: {idea.reactions_count}",
            f"Created: {idea.created_at} | Updated: {idea.updated_at}",
        ]
    )

    if idea.lines:
        # sorted() is stable, so equal positions keep API order
        ordered = sorted(idea.lines, key=lambda line: line.position)
        content = "\n\n## Content\n\n" + "\n\n".join(_format_line(line) for line in ordered)
    else:
        content = f"\n\n{_NO_CONTENT}"

    reactions = ""
    if idea.reactions:
        reactions = "\n\n## Reactions\n\n" + "\n".join(
            f"- {r.reaction_type} by {r.user.display_name}" for r in idea.reactions
        )

    return header + content + reactions


def format_ideas_list(data: IdeasListResponse) -> str:
    """Join idea summaries and append the pagination footer."""
    if data.ideas:
        body = "\n\n".join(format_idea_summary(idea) for idea in data.ideas)
    else:
        body = "No ideas found."
    meta = data.meta
    footer = f"Page {meta.current_page} of {meta.total_pages} ({meta.total_count} total ideas)"
    return f"{body}\n\n{footer}"
