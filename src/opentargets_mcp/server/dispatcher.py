"""
Dispatcher - routes the unified tool's method to its handler.

Holds the shared, read-only GraphQL client; carries no other state between
invocations.
"""

import logging
from typing import Any

import mcp.types as types

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import Method
from opentargets_mcp.server import resources
from opentargets_mcp.server.handlers import (
    associations,
    details,
    disease_summary,
    search,
)
from opentargets_mcp.services.pagination import PaginationService
from opentargets_mcp.services.validation import parse_method

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Route method names to validation/query/aggregation/formatting pipelines.

    Unknown methods and invalid arguments raise InvalidParamsError (or its
    UnknownMethodError subclass) before any network access.
    """

    def __init__(
        self,
        client: GraphQLClient,
        pagination: PaginationService | None = None,
    ):
        self.client = client
        self.pagination = pagination

    async def dispatch(
        self,
        method: Any,
        args: dict[str, Any] | None,
    ) -> types.CallToolResult:
        """
        Run one method invocation.

        Args:
            method: Method name from the tool arguments
            args: Flat argument bag (includes the method key)

        Returns:
            CallToolResult (isError set on upstream failure)

        Raises:
            UnknownMethodError: If method is missing or not recognized
            InvalidParamsError: If arguments fail validation
        """
        resolved = parse_method(method)
        args = args or {}

        logger.debug(f"Dispatching {resolved.value}")

        if resolved in (Method.SEARCH_TARGETS, Method.SEARCH_DISEASES):
            return await search.handle(resolved, args, self.client)
        elif resolved == Method.GET_TARGET_DISEASE_ASSOCIATIONS:
            return await associations.handle(args, self.client, self.pagination)
        elif resolved == Method.GET_DISEASE_TARGETS_SUMMARY:
            return await disease_summary.handle(args, self.client, self.pagination)
        elif resolved in (Method.GET_TARGET_DETAILS, Method.GET_DISEASE_DETAILS):
            return await details.handle(resolved, args, self.client)

        # parse_method only returns known members
        raise AssertionError(f"Unhandled method: {resolved}")

    async def read_resource(self, uri: str) -> str:
        """Resolve an opentargets:// resource URI to JSON text."""
        return await resources.read_resource(uri, self.client)
