"""
Response formatting service.

Shapes upstream payloads and aggregated associations into the caller-facing
envelopes, and renders them as JSON or TSV tool results. Field names and
values from the upstream API are passed through unchanged.
"""

import json
import logging
from datetime import datetime
from typing import Any

import mcp.types as types

from opentargets_mcp.constants import UNKNOWN_DISEASE_NAME, ResponseFormat
from opentargets_mcp.schemas import AggregatedAssociations

logger = logging.getLogger(__name__)

SEARCH_TSV_COLUMNS = ["id", "name", "entity", "description"]


class ResponseFormatter:
    """
    Format responses as JSON or TSV and wrap them as MCP tool results.

    Features:
    - JSON: pretty-printed, pydantic-aware
    - TSV: tabular rendering of search hits
    - Envelope builders for every tool method
    """

    @staticmethod
    def format_response(
        data: Any,
        format_type: ResponseFormat = ResponseFormat.JSON,
    ) -> str:
        """
        Format data in requested format.

        Args:
            data: Data to format
            format_type: Output format (JSON or TSV)

        Returns:
            Formatted string
        """
        if format_type == ResponseFormat.TSV:
            hits = ResponseFormatter._extract_hits(data)
            if hits is not None:
                return ResponseFormatter.format_tsv(hits, SEARCH_TSV_COLUMNS)
            logger.debug("TSV requested for non-tabular data, falling back to JSON")

        return ResponseFormatter._format_json(data)

    @staticmethod
    def _format_json(data: Any) -> str:
        """
        Format data as JSON.

        Args:
            data: Data to format

        Returns:
            JSON string
        """
        # Handle Pydantic models
        if hasattr(data, "model_dump"):
            data = data.model_dump()

        return json.dumps(data, indent=2, default=ResponseFormatter._json_serializer)

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        """Custom JSON serializer for non-standard types."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        elif hasattr(obj, "model_dump"):
            return obj.model_dump(exclude_none=True)
        elif hasattr(obj, "value"):
            return obj.value
        else:
            return str(obj)

    @staticmethod
    def _extract_hits(data: Any) -> list[dict[str, Any]] | None:
        """Find the search hit list inside a search envelope."""
        if not isinstance(data, dict):
            return None
        search = (data.get("data") or {}).get("search")
        if isinstance(search, dict) and isinstance(search.get("hits"), list):
            return search["hits"]
        return None

    @staticmethod
    def format_tsv(rows: list[dict[str, Any]], columns: list[str]) -> str:
        """
        Render rows as tab-separated values with a header line.

        Tabs and newlines inside values are replaced by spaces; missing
        values render as empty cells.
        """
        lines = ["\t".join(columns)]
        for row in rows:
            cells = []
            for column in columns:
                value = row.get(column) if isinstance(row, dict) else None
                text = "" if value is None else str(value)
                for char in ("\t", "\r", "\n"):
                    text = text.replace(char, " ")
                cells.append(text)
            lines.append("\t".join(cells))
        return "\n".join(lines)

    # ========================================================================
    # Envelopes
    # ========================================================================

    @staticmethod
    def search_envelope(
        payload: dict[str, Any],
        hits: list[dict[str, Any]],
        total: int,
    ) -> dict[str, Any]:
        """Search payload with the hit list capped and the pre-cap count as total."""
        return {
            **payload,
            "data": {
                "search": {
                    "hits": hits,
                    "total": total,
                }
            },
        }

    @staticmethod
    def target_associations_envelope(result: AggregatedAssociations) -> dict[str, Any]:
        """Diseases associated with one target."""
        return {
            "data": {
                "target": {
                    "id": result.entity_id,
                    "approvedSymbol": result.entity_name,
                    "associatedDiseases": {
                        "count": result.total_count,
                        "rows": result.row_payloads(),
                    },
                }
            },
            "pagination": result.pagination.model_dump(),
        }

    @staticmethod
    def disease_associations_envelope(result: AggregatedAssociations) -> dict[str, Any]:
        """Targets associated with one disease."""
        return {
            "data": {
                "disease": {
                    "id": result.entity_id,
                    "name": result.entity_name,
                    "associatedTargets": {
                        "count": result.total_count,
                        "rows": result.row_payloads(),
                    },
                }
            },
            "pagination": result.pagination.model_dump(),
        }

    @staticmethod
    def disease_targets_summary(
        disease_id: str,
        result: AggregatedAssociations,
    ) -> dict[str, Any]:
        """Flattened target list for one disease."""
        targets = []
        for row in result.rows:
            target = row.target
            targets.append({
                "targetId": target.id if target else None,
                "targetSymbol": target.approvedSymbol if target else None,
                "targetName": target.approvedName if target else None,
                "associationScore": row.score,
            })

        return {
            "diseaseId": disease_id,
            "diseaseName": result.entity_name or UNKNOWN_DISEASE_NAME,
            "totalTargets": result.total_count,
            "returnedTargets": len(result.rows),
            "targets": targets,
            "pagination": result.pagination.model_dump(),
        }

    # ========================================================================
    # Tool results
    # ========================================================================

    @staticmethod
    def text_result(
        data: Any,
        format_type: ResponseFormat = ResponseFormat.JSON,
    ) -> types.CallToolResult:
        """Successful tool result carrying formatted data."""
        text = data if isinstance(data, str) else ResponseFormatter.format_response(data, format_type)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=text)],
            isError=False,
        )

    @staticmethod
    def error_result(message: str) -> types.CallToolResult:
        """Failed tool result with a human-readable message."""
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=message)],
            isError=True,
        )


# Global formatter instance
_formatter: ResponseFormatter | None = None


def get_formatter() -> ResponseFormatter:
    """
    Get global formatter instance (singleton).

    Returns:
        ResponseFormatter instance
    """
    global _formatter

    if _formatter is None:
        _formatter = ResponseFormatter()

    return _formatter
