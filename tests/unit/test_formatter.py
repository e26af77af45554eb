"""
Unit tests for ResponseFormatter.

Tests JSON/TSV rendering, the per-method envelopes, and tool result wrapping.

Run with: pytest tests/unit/test_formatter.py -v
"""

import json

import pytest

from opentargets_mcp.constants import ResponseFormat
from opentargets_mcp.schemas import AggregatedAssociations, AssociationRow
from opentargets_mcp.services.formatter import (
    SEARCH_TSV_COLUMNS,
    ResponseFormatter,
    get_formatter,
)


@pytest.fixture
def search_hits():
    """Realistic target search hits."""
    return [
        {
            "id": "ENSG00000012048",
            "name": "BRCA1",
            "description": "BRCA1 DNA repair associated",
            "entity": "target",
        },
        {
            "id": "ENSG00000139618",
            "name": "BRCA2",
            "description": "BRCA2 DNA repair\tassociated\nprotein",
            "entity": "target",
        },
    ]


@pytest.fixture
def asthma_summary_result():
    """Aggregated targets for asthma."""
    return AggregatedAssociations(
        entity_id="MONDO_0004979",
        entity_name="asthma",
        total_count=250,
        filtered_count=40,
        requested=2,
        pages_fetched=1,
        rows=[
            AssociationRow(
                score=0.83,
                target={"id": "ENSG00000113302", "approvedSymbol": "IL12B", "approvedName": "interleukin 12B"},
            ),
            AssociationRow(
                score=0.81,
                target={"id": "ENSG00000113525", "approvedSymbol": "IL5", "approvedName": "interleukin 5"},
            ),
        ],
    )


class TestFormatResponse:
    """JSON and TSV rendering."""

    def test_json_is_pretty_printed(self):
        text = ResponseFormatter.format_response({"a": 1, "b": [1, 2]})

        assert text == json.dumps({"a": 1, "b": [1, 2]}, indent=2)

    def test_json_accepts_models(self):
        row = AssociationRow(score=0.5, disease={"id": "EFO_0000305", "name": "breast carcinoma"})

        data = json.loads(ResponseFormatter.format_response({"row": row}))

        assert data == {"row": {"score": 0.5, "disease": {"id": "EFO_0000305", "name": "breast carcinoma"}}}

    def test_json_serializes_enums(self):
        data = json.loads(ResponseFormatter.format_response({"format": ResponseFormat.TSV}))
        assert data == {"format": "tsv"}

    def test_tsv_for_search_envelope(self, search_hits):
        envelope = ResponseFormatter.search_envelope({"data": {}}, search_hits, total=2)

        text = ResponseFormatter.format_response(envelope, ResponseFormat.TSV)
        lines = text.split("\n")

        assert lines[0] == "\t".join(SEARCH_TSV_COLUMNS)
        assert lines[1] == "ENSG00000012048\tBRCA1\ttarget\tBRCA1 DNA repair associated"
        assert lines[2] == "ENSG00000139618\tBRCA2\ttarget\tBRCA2 DNA repair associated protein"
        assert len(lines) == 3

    def test_tsv_falls_back_to_json(self):
        data = {"message": "not tabular"}

        text = ResponseFormatter.format_response(data, ResponseFormat.TSV)

        assert json.loads(text) == data

    def test_tsv_missing_values(self):
        text = ResponseFormatter.format_tsv([{"id": "EFO_1", "name": None}], ["id", "name", "entity"])

        assert text.split("\n")[1] == "EFO_1\t\t"

    def test_tsv_no_rows(self):
        assert ResponseFormatter.format_tsv([], ["id", "name"]) == "id\tname"


class TestEnvelopes:
    """Per-method output envelopes."""

    def test_search_envelope_keeps_extra_keys(self, search_hits):
        payload = {"data": {"search": {"hits": search_hits, "total": 4211}}, "extensions": {"x": 1}}

        envelope = ResponseFormatter.search_envelope(payload, search_hits[:1], total=2)

        assert envelope["extensions"] == {"x": 1}
        assert envelope["data"]["search"] == {"hits": search_hits[:1], "total": 2}

    def test_target_associations_envelope(self):
        result = AggregatedAssociations(
            entity_id="ENSG00000157764",
            entity_name="BRAF",
            total_count=3000,
            filtered_count=1,
            requested=1,
            pages_fetched=1,
            rows=[AssociationRow(score=0.79, disease={"id": "EFO_0000756", "name": "melanoma"})],
        )

        envelope = ResponseFormatter.target_associations_envelope(result)

        assert envelope == {
            "data": {
                "target": {
                    "id": "ENSG00000157764",
                    "approvedSymbol": "BRAF",
                    "associatedDiseases": {
                        "count": 3000,
                        "rows": [{"score": 0.79, "disease": {"id": "EFO_0000756", "name": "melanoma"}}],
                    },
                }
            },
            "pagination": {"requested": 1, "returned": 1, "total": 3000, "filtered": 1},
        }

    def test_disease_associations_envelope(self, asthma_summary_result):
        envelope = ResponseFormatter.disease_associations_envelope(asthma_summary_result)

        disease = envelope["data"]["disease"]
        assert disease["id"] == "MONDO_0004979"
        assert disease["name"] == "asthma"
        assert disease["associatedTargets"]["count"] == 250
        assert disease["associatedTargets"]["rows"][0]["target"]["approvedSymbol"] == "IL12B"
        assert envelope["pagination"] == {
            "requested": 2,
            "returned": 2,
            "total": 250,
            "filtered": 40,
        }

    def test_disease_targets_summary(self, asthma_summary_result):
        summary = ResponseFormatter.disease_targets_summary("MONDO_0004979", asthma_summary_result)

        assert summary["diseaseId"] == "MONDO_0004979"
        assert summary["diseaseName"] == "asthma"
        assert summary["totalTargets"] == 250
        assert summary["returnedTargets"] == 2
        assert summary["targets"][0] == {
            "targetId": "ENSG00000113302",
            "targetSymbol": "IL12B",
            "targetName": "interleukin 12B",
            "associationScore": 0.83,
        }
        assert summary["pagination"]["filtered"] == 40

    def test_summary_for_unknown_disease(self):
        result = AggregatedAssociations(requested=50)

        summary = ResponseFormatter.disease_targets_summary("EFO_9999999", result)

        assert summary["diseaseName"] == "Unknown"
        assert summary["totalTargets"] == 0
        assert summary["returnedTargets"] == 0
        assert summary["targets"] == []


class TestToolResults:
    """CallToolResult wrapping."""

    def test_text_result(self):
        result = ResponseFormatter.text_result({"ok": True})

        assert result.isError is False
        assert json.loads(result.content[0].text) == {"ok": True}

    def test_text_result_passes_strings_through(self):
        result = ResponseFormatter.text_result("id\tname")
        assert result.content[0].text == "id\tname"

    def test_error_result(self):
        result = ResponseFormatter.error_result("Error getting associations: boom")

        assert result.isError is True
        assert result.content[0].type == "text"
        assert result.content[0].text == "Error getting associations: boom"

    def test_singleton(self):
        assert get_formatter() is get_formatter()
