"""
Resource reads for opentargets:// URIs.

Each URI template resolves to one direct GraphQL fetch (no aggregation):
- opentargets://target/{id}
- opentargets://disease/{id}
- opentargets://drug/{id}
- opentargets://association/{targetId}/{diseaseId}
- opentargets://search/{query}
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import unquote

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.exceptions import InvalidResourceURIError, UpstreamError
from opentargets_mcp.services.formatter import get_formatter
from opentargets_mcp.services.query_builder import (
    GraphQLRequest,
    build_association_pair_query,
    build_disease_details_query,
    build_drug_query,
    build_resource_search_query,
    build_target_details_query,
)

logger = logging.getLogger(__name__)

_URI_PATTERNS = [
    ("target", re.compile(r"^opentargets://target/([^/]+)$")),
    ("disease", re.compile(r"^opentargets://disease/([^/]+)$")),
    ("drug", re.compile(r"^opentargets://drug/([^/]+)$")),
    ("association", re.compile(r"^opentargets://association/([^/]+)/([^/]+)$")),
    ("search", re.compile(r"^opentargets://search/(.+)$")),
]


@dataclass(frozen=True)
class ResourceMatch:
    """A parsed resource URI."""

    kind: str
    identifiers: tuple[str, ...]

    @property
    def label(self) -> str:
        return "/".join(self.identifiers)

    def to_request(self) -> GraphQLRequest:
        if self.kind == "target":
            return build_target_details_query(self.identifiers[0])
        elif self.kind == "disease":
            return build_disease_details_query(self.identifiers[0])
        elif self.kind == "drug":
            return build_drug_query(self.identifiers[0])
        elif self.kind == "association":
            target_id, disease_id = self.identifiers
            return build_association_pair_query(target_id, disease_id)
        elif self.kind == "search":
            return build_resource_search_query(self.identifiers[0])
        raise ValueError(f"Unknown resource kind: {self.kind}")


def match_uri(uri: str) -> ResourceMatch:
    """
    Match a URI against the resource templates.

    Raises:
        InvalidResourceURIError: If no template matches
    """
    for kind, pattern in _URI_PATTERNS:
        match = pattern.match(uri)
        if match:
            identifiers = tuple(unquote(group).strip() for group in match.groups())
            if all(identifiers):
                return ResourceMatch(kind, identifiers)
    raise InvalidResourceURIError(uri)


async def read_resource(uri: str, client: GraphQLClient) -> str:
    """
    Resolve a resource URI to pretty-printed JSON.

    Raises:
        InvalidResourceURIError: If the URI matches no template
        UpstreamError: If the fetch fails
    """
    resource = match_uri(uri)
    logger.info(f"Reading {resource.kind} resource: {resource.label}")

    try:
        payload = await client.execute(resource.to_request())
    except UpstreamError as e:
        raise UpstreamError(
            f"Failed to fetch {resource.kind} {resource.label}: {e}",
            status_code=e.status_code,
        ) from e

    return get_formatter().format_response(payload)
