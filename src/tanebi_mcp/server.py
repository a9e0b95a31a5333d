"""MCP Server definition — registers all tools via FastMCP."""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    name="tanebi",
    instructions=(
        "Tanebi MCP server. Provides list_ideas, get_idea and create_idea tools "
        "backed by the Tanebi ideas API."
    ),
)

# Import tools module so @mcp.tool() decorators execute at import time.
import tanebi_mcp.tools as _tools  # noqa: F401, E402
