"""
Tool Registry - MCP tool and resource template definitions.

This module contains the unified Open Targets tool schema and the
opentargets:// resource templates.
"""

import mcp.types as types

from opentargets_mcp.constants import (
    JSON_MIME_TYPE,
    MAX_RESULT_SIZE,
    METHOD_NAMES,
    READONLY_ANNOTATIONS,
    TOOL_NAME,
)


def get_all_tools() -> list[types.Tool]:
    """Return list of all tool definitions."""
    return TOOL_DEFINITIONS


def get_resource_templates() -> list[types.ResourceTemplate]:
    """Return list of all resource templates."""
    return RESOURCE_TEMPLATES


TOOL_DEFINITIONS = [
    types.Tool(
        name=TOOL_NAME,
        description="""Unified tool for Open Targets operations: search targets and diseases,
retrieve associations, and get detailed information. Access gene-drug-disease
associations from the Open Targets Platform. Use the method parameter to
specify the operation type.

**Methods:**
- search_targets: search for therapeutic targets by gene symbol/name
- search_diseases: search for diseases by name/synonym
- get_target_disease_associations: target-disease associations with evidence
  scores (give targetId OR diseaseId)
- get_disease_targets_summary: overview of all targets associated with a disease
- get_target_details: comprehensive target information
- get_disease_details: comprehensive disease information

Examples:
- Find BRCA1: method="search_targets", query="BRCA1"
- Asthma targets scoring >= 0.5: method="get_disease_targets_summary",
  diseaseId="MONDO_0004979", minScore=0.5
- Diseases linked to BRAF: method="get_target_disease_associations",
  targetId="ENSG00000157764", size=50
""",
        inputSchema={
            "type": "object",
            "properties": {
                "method": {
                    "type": "string",
                    "enum": METHOD_NAMES,
                    "description": "The operation to perform",
                },
                "query": {
                    "type": "string",
                    "description": "For search_targets and search_diseases: search query (gene symbol, name, description for targets; disease name, synonym, description for diseases)",
                },
                "targetId": {
                    "type": "string",
                    "description": "For get_target_disease_associations: target Ensembl gene ID (e.g., ENSG00000012048)",
                },
                "diseaseId": {
                    "type": "string",
                    "description": "For get_target_disease_associations and get_disease_targets_summary: disease EFO ID (e.g., EFO_0000305)",
                },
                "minScore": {
                    "type": "number",
                    "description": "For get_target_disease_associations and get_disease_targets_summary: minimum association score (0-1)",
                    "minimum": 0,
                    "maximum": 1,
                },
                "id": {
                    "type": "string",
                    "description": "For get_target_details and get_disease_details: target Ensembl gene ID or disease EFO ID",
                },
                "size": {
                    "type": "integer",
                    "description": "Number of results to return (default: 25 for searches, 100 for associations, 50 for disease targets summary; at most 500 for the summary)",
                    "minimum": 1,
                    "maximum": MAX_RESULT_SIZE,
                },
                "format": {
                    "type": "string",
                    "enum": ["json", "tsv"],
                    "description": "Output format for searches (default: json)",
                    "default": "json",
                },
            },
            "required": ["method"],
        },
        annotations=types.ToolAnnotations(
            title="Open Targets Platform",
            **READONLY_ANNOTATIONS,
        ),
    ),
]


RESOURCE_TEMPLATES = [
    types.ResourceTemplate(
        uriTemplate="opentargets://target/{id}",
        name="Open Targets target information",
        mimeType=JSON_MIME_TYPE,
        description="Complete target information for an Ensembl gene ID",
    ),
    types.ResourceTemplate(
        uriTemplate="opentargets://disease/{id}",
        name="Open Targets disease information",
        mimeType=JSON_MIME_TYPE,
        description="Complete disease information for an EFO ID",
    ),
    types.ResourceTemplate(
        uriTemplate="opentargets://drug/{id}",
        name="Open Targets drug information",
        mimeType=JSON_MIME_TYPE,
        description="Complete drug information for a ChEMBL ID",
    ),
    types.ResourceTemplate(
        uriTemplate="opentargets://association/{targetId}/{diseaseId}",
        name="Target-disease association",
        mimeType=JSON_MIME_TYPE,
        description="Target-disease association evidence and scoring",
    ),
    types.ResourceTemplate(
        uriTemplate="opentargets://search/{query}",
        name="Search results",
        mimeType=JSON_MIME_TYPE,
        description="Search results across targets, diseases, and drugs",
    ),
]
