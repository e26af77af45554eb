"""
Services layer for business logic and utilities.

Includes argument validation, GraphQL query building, pagination
aggregation, and response formatting.
"""

from opentargets_mcp.services.formatter import ResponseFormatter
from opentargets_mcp.services.pagination import PaginationService
from opentargets_mcp.services.query_builder import GraphQLRequest, build_query
from opentargets_mcp.services.validation import validate_arguments

__all__ = [
    "GraphQLRequest",
    "PaginationService",
    "ResponseFormatter",
    "build_query",
    "validate_arguments",
]
