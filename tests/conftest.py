"""
Shared pytest fixtures.

Provides:
- Settings pointing at a fake GraphQL endpoint
- A recording fake of the Open Targets GraphQL API (httpx.MockTransport)
- Realistic association row factories
"""

import json
from typing import Any, Callable

import httpx
import pytest

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.config import Settings

TEST_ENDPOINT = "https://platform.test/api/v4/graphql"

Responder = Callable[[dict[str, Any]], httpx.Response]


class FakeOpenTargets:
    """
    Fake GraphQL endpoint.

    Records every request body and answers it with a responder function.
    Responders may raise httpx errors to simulate transport failures.
    """

    def __init__(self, responder: Responder):
        self.responder = responder
        self.requests: list[dict[str, Any]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        return self.responder(body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def page_indexes(self) -> list[int]:
        return [r["variables"]["index"] for r in self.requests]


def association_responder(
    entity_key: str,
    connection_key: str,
    entity: dict[str, Any] | None,
    rows: list[dict[str, Any]],
    count: int | None = None,
    fail_on_page: int | None = None,
) -> Responder:
    """
    Serve association pages sliced by the index/size variables.

    Args:
        entity_key: "target" or "disease"
        connection_key: "associatedDiseases" or "associatedTargets"
        entity: Entity fields (id, name...) or None for an unknown entity
        rows: Full upstream row list
        count: Reported total (defaults to len(rows))
        fail_on_page: Page index answered with HTTP 503
    """

    def respond(body: dict[str, Any]) -> httpx.Response:
        variables = body["variables"]
        index, size = variables["index"], variables["size"]

        if fail_on_page is not None and index == fail_on_page:
            return httpx.Response(503, text="Service Unavailable")

        if entity is None:
            return httpx.Response(200, json={"data": {entity_key: None}})

        page = rows[index * size : (index + 1) * size]
        return httpx.Response(
            200,
            json={
                "data": {
                    entity_key: {
                        **entity,
                        connection_key: {
                            "count": len(rows) if count is None else count,
                            "rows": page,
                        },
                    }
                }
            },
        )

    return respond


def make_target_rows(n: int, top_score: float = 0.95, step: float = 0.002) -> list[dict[str, Any]]:
    """Targets associated with a disease, score-descending."""
    return [
        {
            "target": {
                "id": f"ENSG{i:011d}",
                "approvedSymbol": f"GENE{i}",
                "approvedName": f"gene {i}",
            },
            "score": round(max(top_score - i * step, 0.0), 6),
        }
        for i in range(n)
    ]


def make_disease_rows(n: int, top_score: float = 0.9, step: float = 0.002) -> list[dict[str, Any]]:
    """Diseases associated with a target, score-descending."""
    return [
        {
            "disease": {"id": f"EFO_{i:07d}", "name": f"disease {i}"},
            "score": round(max(top_score - i * step, 0.0), 6),
        }
        for i in range(n)
    ]


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the fake endpoint."""
    return Settings(
        opentargets_graphql_url=TEST_ENDPOINT,
        request_timeout_seconds=5,
    )


@pytest.fixture
async def make_client(test_settings):
    """
    Factory for initialized GraphQL clients backed by a FakeOpenTargets.

    Clients are closed after the test.
    """
    clients: list[GraphQLClient] = []

    async def factory(fake: FakeOpenTargets) -> GraphQLClient:
        client = GraphQLClient(test_settings, transport=fake.transport)
        await client.initialize()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.close()


@pytest.fixture
def fake_api():
    """Build a FakeOpenTargets from a responder function."""
    return FakeOpenTargets


@pytest.fixture
def association_api():
    """Build a FakeOpenTargets serving paged association rows."""

    def build(*args, **kwargs) -> FakeOpenTargets:
        return FakeOpenTargets(association_responder(*args, **kwargs))

    return build


@pytest.fixture
def target_rows():
    return make_target_rows


@pytest.fixture
def disease_rows():
    return make_disease_rows


@pytest.fixture
def asthma_rows() -> list[dict[str, Any]]:
    """250 targets for a disease; only the first 40 score >= 0.5."""
    rows = make_target_rows(250, top_score=0.9, step=0.01)
    for i, row in enumerate(rows):
        row["score"] = round(0.9 - i * 0.01, 4) if i < 40 else round(0.45 - i * 0.001, 4)
    return rows
