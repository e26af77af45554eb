"""
Search Handler

Handles search_targets and search_diseases: free-text search over one
entity type, hit list capped client-side to the requested size and
reported alongside the upstream match count.
"""

import logging
from typing import Any

import mcp.types as types

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import Method
from opentargets_mcp.exceptions import UpstreamError
from opentargets_mcp.services.formatter import get_formatter
from opentargets_mcp.services.pagination import get_pagination
from opentargets_mcp.services.query_builder import build_query
from opentargets_mcp.services.validation import validate_arguments

logger = logging.getLogger(__name__)

_LABELS = {
    Method.SEARCH_TARGETS: "targets",
    Method.SEARCH_DISEASES: "diseases",
}


async def handle(
    method: Method,
    args: dict[str, Any],
    client: GraphQLClient,
) -> types.CallToolResult:
    """Handle a target or disease search."""
    params = validate_arguments(method, args)
    formatter = get_formatter()
    label = _LABELS[method]

    try:
        payload = await client.execute(build_query(method, params))
    except UpstreamError as e:
        logger.error(f"Search for {label} failed: {e}", exc_info=True)
        return formatter.error_result(f"Error searching {label}: {e}")

    search = (payload.get("data") or {}).get("search") or {}
    hits = search.get("hits") or []
    limited = get_pagination().slice_results(hits, offset=0, limit=params.size)

    # Upstream match count; falls back to the fetched hit count
    total = search.get("total")
    if not isinstance(total, int) or total < len(hits):
        total = len(hits)

    logger.info(f"Search {label} '{params.query}': {len(limited)}/{total} hits")

    envelope = formatter.search_envelope(payload, limited, total=total)
    return formatter.text_result(envelope, params.format)
