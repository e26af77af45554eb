"""
Open Targets MCP Server

Model Context Protocol server for the Open Targets Platform GraphQL API.

Provides one unified tool (six operations) for searching targets and diseases,
retrieving target-disease associations, and fetching entity details, plus
resource templates for direct entity reads.
"""

__version__ = "0.1.0"
__author__ = "Open Targets MCP Team"

# Lazy import to avoid MCP dependency for standalone usage
def __getattr__(name):
    if name == "server":
        from opentargets_mcp.server import server
        return server
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = ["server", "__version__"]
