"""
Target-Disease Associations Handler

Handles get_target_disease_associations.

Directions:
- targetId only: diseases associated with the target
- diseaseId only: targets associated with the disease
- both: pair lookup stub (not an error)
"""

import logging
from typing import Any

import mcp.types as types
from pydantic import ValidationError

from opentargets_mcp.clients.association_fetcher import (
    disease_page_fetcher,
    target_page_fetcher,
)
from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import PAIR_LOOKUP_STUB, Method
from opentargets_mcp.exceptions import UpstreamError
from opentargets_mcp.schemas import AssociationQuery
from opentargets_mcp.services.formatter import get_formatter
from opentargets_mcp.services.pagination import PaginationService, get_pagination
from opentargets_mcp.services.validation import validate_arguments

logger = logging.getLogger(__name__)


async def handle(
    args: dict[str, Any],
    client: GraphQLClient,
    pagination: PaginationService | None = None,
) -> types.CallToolResult:
    """Handle association lookup for a target or a disease."""
    params: AssociationQuery = validate_arguments(
        Method.GET_TARGET_DISEASE_ASSOCIATIONS, args
    )
    formatter = get_formatter()

    if params.has_both:
        logger.info(
            f"Pair lookup requested ({params.target_id}, {params.disease_id}); returning stub"
        )
        return formatter.text_result(PAIR_LOOKUP_STUB)

    pagination = pagination or get_pagination()

    try:
        if params.target_id:
            result = await pagination.aggregate(
                target_page_fetcher(client, params.target_id),
                requested_size=params.size,
                min_score=params.min_score,
            )
            envelope = formatter.target_associations_envelope(result)
        else:
            result = await pagination.aggregate(
                disease_page_fetcher(client, params.disease_id),
                requested_size=params.size,
                min_score=params.min_score,
            )
            envelope = formatter.disease_associations_envelope(result)

    except (UpstreamError, ValidationError) as e:
        logger.error(f"Association lookup failed: {e}", exc_info=True)
        return formatter.error_result(f"Error getting associations: {e}")

    return formatter.text_result(envelope)
