#!/usr/bin/env python3
"""
Open Targets MCP Server - Core Infrastructure

Contains:
- Server initialization
- Tool listing handler and tool call router
- Resource template listing and resource reads
- Backend lifecycle management
"""

import asyncio
import logging
import sys
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.config import settings
from opentargets_mcp.constants import JSON_MIME_TYPE, TOOL_NAME
from opentargets_mcp.exceptions import (
    InvalidParamsError,
    InvalidResourceURIError,
    UpstreamError,
)
from opentargets_mcp.server.dispatcher import Dispatcher
from opentargets_mcp.server.tools_registry import (
    get_all_tools,
    get_resource_templates,
)

# Configure logging (stdout carries the stdio transport)
logging.basicConfig(
    level=getattr(logging, settings.effective_log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if settings.log_format == "text"
    else '{"time":"%(asctime)s","name":"%(name)s","level":"%(levelname)s","message":"%(message)s"}',
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

# Initialize MCP server
server = Server(settings.mcp_server_name)

# Global state
_client: GraphQLClient | None = None
_dispatcher: Dispatcher | None = None


async def initialize_backend() -> Dispatcher:
    """Initialize the GraphQL client and dispatcher."""
    global _client, _dispatcher

    if _dispatcher is not None:
        return _dispatcher

    logger.info("Starting Open Targets MCP Server")
    logger.info(
        f"Configuration: endpoint={settings.opentargets_graphql_url}, "
        f"timeout={settings.request_timeout_seconds}s"
    )

    _client = GraphQLClient(settings)
    await _client.initialize()
    _dispatcher = Dispatcher(_client)

    logger.info("Server initialization complete")
    return _dispatcher


async def cleanup_backend() -> None:
    """Cleanup backend connections."""
    global _client, _dispatcher

    logger.info("Shutting down Open Targets MCP Server")

    if _client is not None:
        await _client.close()
    _client = None
    _dispatcher = None
    logger.info("Connections closed")


async def get_dispatcher() -> Dispatcher:
    """Return the dispatcher, initializing the backend on first use."""
    if _dispatcher is None:
        return await initialize_backend()
    return _dispatcher


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """
    List all available MCP tools.

    Tool definitions are in tools_registry module.
    Method implementations are in server/handlers/.
    """
    return get_all_tools()


async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> types.CallToolResult:
    """
    Route tool calls to the dispatcher.

    Args:
        name: Tool name (must be "opentargets_info")
        arguments: Flat argument bag including "method"

    Returns:
        CallToolResult; isError is set for upstream failures

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for
            unknown methods or invalid arguments
    """
    if name != TOOL_NAME:
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    arguments = arguments or {}
    dispatcher = await get_dispatcher()

    try:
        return await dispatcher.dispatch(arguments.get("method"), arguments)
    except InvalidParamsError as e:
        logger.warning(f"Invalid parameters for {name}: {e}")
        raise McpError(
            types.ErrorData(code=types.INVALID_PARAMS, message=str(e))
        ) from e


async def handle_call_tool_request(req: types.CallToolRequest) -> types.ServerResult:
    """
    tools/call request handler.

    McpError propagates to the session and is sent as a JSON-RPC error, not
    as an isError tool result.
    """
    result = await handle_call_tool(req.params.name, req.params.arguments)
    return types.ServerResult(result)


server.request_handlers[types.CallToolRequest] = handle_call_tool_request


@server.list_resource_templates()
async def handle_list_resource_templates() -> list[types.ResourceTemplate]:
    """List opentargets:// resource templates."""
    return get_resource_templates()


@server.read_resource()
async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
    """
    Resolve an opentargets:// URI.

    Raises:
        McpError: INVALID_REQUEST for unknown URIs, INTERNAL_ERROR for
            upstream failures
    """
    dispatcher = await get_dispatcher()

    try:
        text = await dispatcher.read_resource(str(uri))
    except InvalidResourceURIError as e:
        raise McpError(
            types.ErrorData(code=types.INVALID_REQUEST, message=str(e))
        ) from e
    except UpstreamError as e:
        logger.error(f"Resource read failed: {e}")
        raise McpError(
            types.ErrorData(code=types.INTERNAL_ERROR, message=str(e))
        ) from e

    return [ReadResourceContents(content=text, mime_type=JSON_MIME_TYPE)]


async def main():
    """Main entry point."""
    logger.info("=" * 80)
    logger.info(f"Open Targets MCP Server v{settings.server_version}")
    logger.info("=" * 80)
    logger.info("Transport: stdio")
    logger.info(f"Debug mode: {settings.debug_mode}")
    logger.info("=" * 80)

    try:
        # Initialize backend
        await initialize_backend()

        # Run server
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=settings.mcp_server_name,
                    server_version=settings.server_version,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        await cleanup_backend()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
