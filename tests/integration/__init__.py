"""
Integration tests for the Open Targets MCP Server.

These tests call the live Open Targets Platform GraphQL API.

Running Tests:
    # Run live integration tests
    OPENTARGETS_LIVE_TESTS=1 pytest tests/integration/ -v -m integration

    # Skip integration tests (run unit tests only)
    pytest -m "not integration"

Requirements:
- Network access to api.platform.opentargets.org
- pytest-asyncio for async test support
"""
