"""
Entity Details Handler

Handles get_target_details and get_disease_details. The upstream payload is
returned unchanged; no aggregation or filtering.
"""

import logging
from typing import Any

import mcp.types as types

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import Method
from opentargets_mcp.exceptions import UpstreamError
from opentargets_mcp.services.formatter import get_formatter
from opentargets_mcp.services.query_builder import build_query
from opentargets_mcp.services.validation import validate_arguments

logger = logging.getLogger(__name__)

_LABELS = {
    Method.GET_TARGET_DETAILS: "target",
    Method.GET_DISEASE_DETAILS: "disease",
}


async def handle(
    method: Method,
    args: dict[str, Any],
    client: GraphQLClient,
) -> types.CallToolResult:
    """Handle a target or disease details lookup."""
    params = validate_arguments(method, args)
    formatter = get_formatter()
    label = _LABELS[method]

    try:
        payload = await client.execute(build_query(method, params))
    except UpstreamError as e:
        logger.error(f"{label.title()} details for {params.id} failed: {e}", exc_info=True)
        return formatter.error_result(f"Error getting {label} details: {e}")

    return formatter.text_result(payload)
