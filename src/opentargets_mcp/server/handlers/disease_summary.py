"""
Disease Targets Summary Handler

Handles get_disease_targets_summary: a flattened, score-filterable list of
the targets associated with one disease.
"""

import logging
from typing import Any

import mcp.types as types
from pydantic import ValidationError

from opentargets_mcp.clients.association_fetcher import disease_page_fetcher
from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import Method
from opentargets_mcp.exceptions import UpstreamError
from opentargets_mcp.schemas import DiseaseTargetsSummaryQuery
from opentargets_mcp.services.formatter import get_formatter
from opentargets_mcp.services.pagination import PaginationService, get_pagination
from opentargets_mcp.services.validation import validate_arguments

logger = logging.getLogger(__name__)


async def handle(
    args: dict[str, Any],
    client: GraphQLClient,
    pagination: PaginationService | None = None,
) -> types.CallToolResult:
    """Handle disease targets summary."""
    params: DiseaseTargetsSummaryQuery = validate_arguments(
        Method.GET_DISEASE_TARGETS_SUMMARY, args
    )
    formatter = get_formatter()
    pagination = pagination or get_pagination()

    try:
        result = await pagination.aggregate(
            disease_page_fetcher(client, params.disease_id),
            requested_size=params.size,
            min_score=params.min_score,
        )
    except (UpstreamError, ValidationError) as e:
        logger.error(f"Disease targets summary failed: {e}", exc_info=True)
        return formatter.error_result(f"Error getting disease targets summary: {e}")

    return formatter.text_result(
        formatter.disease_targets_summary(params.disease_id, result)
    )
