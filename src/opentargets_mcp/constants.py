"""
Constants used throughout the application.

Includes operation names, size bounds, page size, and standard messages.
"""

from enum import Enum

# ============================================================================
# MCP Protocol Constants
# ============================================================================

TOOL_NAME = "opentargets_info"
RESOURCE_SCHEME = "opentargets"
JSON_MIME_TYPE = "application/json"

# Read-only tools (no modifications)
READONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

# ============================================================================
# Operations
# ============================================================================


class Method(str, Enum):
    """Operations exposed through the unified tool."""

    SEARCH_TARGETS = "search_targets"
    SEARCH_DISEASES = "search_diseases"
    GET_TARGET_DISEASE_ASSOCIATIONS = "get_target_disease_associations"
    GET_DISEASE_TARGETS_SUMMARY = "get_disease_targets_summary"
    GET_TARGET_DETAILS = "get_target_details"
    GET_DISEASE_DETAILS = "get_disease_details"


METHOD_NAMES = [m.value for m in Method]

# ============================================================================
# Response Format
# ============================================================================


class ResponseFormat(str, Enum):
    """Output format for search results."""

    JSON = "json"  # Structured
    TSV = "tsv"  # Tabular

# ============================================================================
# Pagination and Size Bounds
# ============================================================================

# Fixed upstream page size for association aggregation
ASSOCIATION_PAGE_SIZE = 100

MAX_RESULT_SIZE = 50000
MAX_SUMMARY_SIZE = 500

DEFAULT_SEARCH_SIZE = 25
DEFAULT_ASSOCIATION_SIZE = 100
DEFAULT_SUMMARY_SIZE = 50

# Largest search page requested upstream
MAX_SEARCH_PAGE_SIZE = 500

# Associated diseases embedded in the target details payload
DETAILS_ASSOCIATION_SIZE = 50

# ============================================================================
# Messages
# ============================================================================

ERROR_UNKNOWN_METHOD = (
    "method parameter is required and must be one of: " + ", ".join(METHOD_NAMES)
)

PAIR_LOOKUP_STUB = {
    "message": "Specific target-disease pair association lookup not yet implemented",
    "suggestion": "Use targetId OR diseaseId to get associations for that entity",
}

UNKNOWN_DISEASE_NAME = "Unknown"
