"""
Page fetchers for association lookups.

Adapts GraphQLClient and the query builder to the aggregator's
(page_index, page_size) -> PagedBatch signature.
"""

from typing import Any

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.schemas import PagedBatch
from opentargets_mcp.services.pagination import PageFetcher
from opentargets_mcp.services.query_builder import (
    build_disease_associations_query,
    build_target_associations_query,
)


def parse_batch(
    payload: dict[str, Any],
    entity_key: str,
    connection_key: str,
    name_key: str,
    page_index: int,
    page_size: int,
) -> PagedBatch:
    """
    Parse one association page from a GraphQL payload.

    A null entity (unknown identifier) yields an empty batch with count 0.

    Raises:
        pydantic.ValidationError: If rows do not match AssociationRow
    """
    entity = (payload.get("data") or {}).get(entity_key) or {}
    associations = entity.get(connection_key) or {}

    return PagedBatch(
        rows=associations.get("rows") or [],
        total_count=associations.get("count") or 0,
        page_index=page_index,
        page_size=page_size,
        entity_id=entity.get("id"),
        entity_name=entity.get(name_key),
    )


def target_page_fetcher(client: GraphQLClient, ensembl_id: str) -> PageFetcher:
    """Fetcher for diseases associated with a target."""

    async def fetch(page_index: int, page_size: int) -> PagedBatch:
        request = build_target_associations_query(ensembl_id, page_index, page_size)
        payload = await client.execute(request)
        return parse_batch(
            payload, "target", "associatedDiseases", "approvedSymbol", page_index, page_size
        )

    return fetch


def disease_page_fetcher(client: GraphQLClient, efo_id: str) -> PageFetcher:
    """Fetcher for targets associated with a disease."""

    async def fetch(page_index: int, page_size: int) -> PagedBatch:
        request = build_disease_associations_query(efo_id, page_index, page_size)
        payload = await client.execute(request)
        return parse_batch(
            payload, "disease", "associatedTargets", "name", page_index, page_size
        )

    return fetch
