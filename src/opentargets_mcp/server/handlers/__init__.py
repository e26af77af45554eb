"""
Open Targets MCP Tool Handlers

Each module implements one family of methods of the unified tool.
All handlers expose an async `handle(...)` returning a CallToolResult.
"""

from opentargets_mcp.server.handlers import (
    associations,
    details,
    disease_summary,
    search,
)

__all__ = [
    "associations",
    "details",
    "disease_summary",
    "search",
]
