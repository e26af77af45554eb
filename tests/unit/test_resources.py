"""
Unit tests for opentargets:// resource reads.

Run with: pytest tests/unit/test_resources.py -v
"""

import json

import httpx
import pytest

from opentargets_mcp.exceptions import InvalidResourceURIError, UpstreamError
from opentargets_mcp.server.resources import match_uri, read_resource
from opentargets_mcp.services.query_builder import (
    ASSOCIATION_PAIR_QUERY,
    DISEASE_DETAILS_QUERY,
    DRUG_QUERY,
    SEARCH_QUERY,
    TARGET_DETAILS_QUERY,
)


class TestMatchUri:
    """URI template matching."""

    @pytest.mark.parametrize(
        "uri,kind,identifiers",
        [
            ("opentargets://target/ENSG00000157764", "target", ("ENSG00000157764",)),
            ("opentargets://disease/EFO_0000756", "disease", ("EFO_0000756",)),
            ("opentargets://drug/CHEMBL1229517", "drug", ("CHEMBL1229517",)),
            (
                "opentargets://association/ENSG00000157764/EFO_0000756",
                "association",
                ("ENSG00000157764", "EFO_0000756"),
            ),
            ("opentargets://search/breast%20cancer", "search", ("breast cancer",)),
            ("opentargets://search/a/b", "search", ("a/b",)),
        ],
    )
    def test_known_templates(self, uri, kind, identifiers):
        match = match_uri(uri)

        assert match.kind == kind
        assert match.identifiers == identifiers

    @pytest.mark.parametrize(
        "uri",
        [
            "opentargets://variant/1_154453788_C_T",
            "opentargets://target/",
            "opentargets://association/ENSG00000157764",
            "opentargets://target/ENSG1/extra",
            "https://platform.opentargets.org/target/ENSG00000157764",
            "opentargets://search/%20",
        ],
    )
    def test_invalid_uri(self, uri):
        with pytest.raises(InvalidResourceURIError) as exc_info:
            match_uri(uri)

        assert str(exc_info.value) == f"Invalid URI format: {uri}"

    def test_label(self):
        match = match_uri("opentargets://association/ENSG00000157764/EFO_0000756")
        assert match.label == "ENSG00000157764/EFO_0000756"

    @pytest.mark.parametrize(
        "uri,query,variables",
        [
            ("opentargets://target/ENSG1", TARGET_DETAILS_QUERY, {"ensemblId": "ENSG1", "associationSize": 50}),
            ("opentargets://disease/EFO_1", DISEASE_DETAILS_QUERY, {"efoId": "EFO_1"}),
            ("opentargets://drug/CHEMBL1", DRUG_QUERY, {"chemblId": "CHEMBL1"}),
            ("opentargets://association/ENSG1/EFO_1", ASSOCIATION_PAIR_QUERY, {"efoId": "EFO_1", "ensemblId": "ENSG1"}),
        ],
    )
    def test_to_request(self, uri, query, variables):
        request = match_uri(uri).to_request()

        assert request.query == query
        assert request.variables == variables

    def test_search_request(self):
        request = match_uri("opentargets://search/BRAF").to_request()

        assert request.query == SEARCH_QUERY
        assert request.variables["entityNames"] == ["target", "disease", "drug"]


class TestReadResource:
    """Resource reads against the fake endpoint."""

    async def test_drug_resource(self, fake_api, make_client):
        payload = {"data": {"drug": {"id": "CHEMBL1229517", "name": "VEMURAFENIB"}}}
        fake = fake_api(lambda body: httpx.Response(200, json=payload))
        client = await make_client(fake)

        text = await read_resource("opentargets://drug/CHEMBL1229517", client)

        assert json.loads(text) == payload
        assert fake.requests[0]["variables"] == {"chemblId": "CHEMBL1229517"}

    async def test_upstream_failure(self, fake_api, make_client):
        client = await make_client(fake_api(lambda body: httpx.Response(502, text="Bad Gateway")))

        with pytest.raises(UpstreamError) as exc_info:
            await read_resource("opentargets://disease/EFO_0000756", client)

        assert str(exc_info.value).startswith("Failed to fetch disease EFO_0000756: ")
        assert exc_info.value.status_code == 502

    async def test_invalid_uri_makes_no_request(self, fake_api, make_client):
        fake = fake_api(lambda body: httpx.Response(200, json={}))
        client = await make_client(fake)

        with pytest.raises(InvalidResourceURIError):
            await read_resource("opentargets://gene/BRAF", client)

        assert fake.requests == []
