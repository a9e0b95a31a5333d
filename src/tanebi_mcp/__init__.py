"""tanebi-mcp: MCP server exposing Tanebi ideas to AI agents."""

import logging
import sys

from tanebi_mcp.server import mcp
from tanebi_mcp import tools
from tanebi_mcp.api_client import TanebiClient
from tanebi_mcp.config import ConfigError, load_settings

__version__ = "1.0.0"

log = logging.getLogger("tanebi-mcp")


def main() -> None:
    """CLI entry point — starts the MCP server over stdio."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    # stdout carries the protocol stream; logs go to stderr only.
    logging.basicConfig(
        stream=sys.stderr,
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    tools.configure(TanebiClient(settings))
    log.info("Serving Tanebi API at %s", settings.api_base_url)

    try:
        mcp.run(transport="stdio")
    except Exception:
        log.exception("Failed to start MCP server")
        sys.exit(1)
