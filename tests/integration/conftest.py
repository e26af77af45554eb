"""
Pytest fixtures and configuration for integration tests.

Provides fixtures for:
- A dispatcher connected to the live Open Targets API
- Known-good identifiers across targets, diseases, and drugs

Live tests are skipped unless OPENTARGETS_LIVE_TESTS=1.
"""

import logging
import os

import pytest

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.config import settings
from opentargets_mcp.server.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def pytest_collection_modifyitems(config, items):
    if os.environ.get("OPENTARGETS_LIVE_TESTS") == "1":
        return

    skip_live = pytest.mark.skip(reason="set OPENTARGETS_LIVE_TESTS=1 to call the live API")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
async def live_client() -> GraphQLClient:
    """
    GraphQL client for the configured Open Targets endpoint.

    Function-scoped so each test gets a client in its own event loop.
    """
    logger.info(f"Connecting to {settings.opentargets_graphql_url}")
    async with GraphQLClient(settings) as client:
        yield client


@pytest.fixture
async def live_dispatcher(live_client) -> Dispatcher:
    return Dispatcher(live_client)


@pytest.fixture(scope="session")
def known_entities() -> dict[str, str]:
    """
    Identifiers guaranteed to exist in the Open Targets Platform.

    Returns:
        Mapping of role to identifier
    """
    return {
        "target": "ENSG00000157764",  # BRAF
        "target_symbol": "BRAF",
        "disease": "EFO_0000756",  # melanoma
        "asthma": "MONDO_0004979",
        "drug": "CHEMBL1229517",  # vemurafenib
    }
