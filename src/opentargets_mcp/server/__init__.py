"""
Open Targets MCP Server

Main entry point for the MCP server.
Exports the main() function for running the server.
"""

from opentargets_mcp.server.core import (
    cleanup_backend,
    handle_call_tool,
    handle_list_resource_templates,
    handle_list_tools,
    handle_read_resource,
    initialize_backend,
    main,
    run,
    server,
)

__all__ = [
    "main",
    "run",
    "server",
    "initialize_backend",
    "cleanup_backend",
    "handle_list_tools",
    "handle_call_tool",
    "handle_list_resource_templates",
    "handle_read_resource",
]
