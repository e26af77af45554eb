"""
GraphQL client for the Open Targets Platform API.

Provides a single long-lived async HTTP client with:
- Connection pooling
- Timeout enforcement
- Uniform error reporting (transport, HTTP status, GraphQL errors)
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from opentargets_mcp.config import Settings
from opentargets_mcp.exceptions import UpstreamError
from opentargets_mcp.services.query_builder import GraphQLRequest

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    HTTP client for the Open Targets GraphQL endpoint.

    Configuration is captured from Settings at construction and never
    changes afterwards. No retries: failures surface as UpstreamError.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_connections: int = 10,
        max_keepalive_connections: int = 5,
    ):
        """
        Initialize GraphQL client.

        Args:
            settings: Frozen application settings (endpoint, timeout, headers)
            transport: Optional transport override (e.g. httpx.MockTransport)
            max_connections: Maximum total connections
            max_keepalive_connections: Maximum keepalive connections
        """
        self.endpoint = settings.opentargets_graphql_url
        self.timeout = settings.request_timeout_seconds
        self.headers = {
            "User-Agent": settings.user_agent,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self.transport = transport

        self.client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

        # Connection pool configuration
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )

    async def initialize(self) -> None:
        """Initialize HTTP client with connection pooling."""
        async with self._lock:
            if self.client is not None:
                return

            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self.limits,
                headers=self.headers,
                transport=self.transport,
                follow_redirects=True,
            )

            logger.info(f"GraphQL client initialized for {self.endpoint}")

    async def close(self) -> None:
        """Close HTTP client and connections."""
        async with self._lock:
            if self.client:
                await self.client.aclose()
                self.client = None
                logger.info("GraphQL client closed")

    async def __aenter__(self) -> "GraphQLClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def is_initialized(self) -> bool:
        return self.client is not None

    async def execute(self, request: GraphQLRequest) -> dict[str, Any]:
        """
        Execute a GraphQL request.

        Args:
            request: Query text and variable bindings

        Returns:
            Decoded JSON payload (contains a "data" key)

        Raises:
            UpstreamError: On network failure, HTTP error status, invalid
                JSON, or a non-empty GraphQL "errors" array
            RuntimeError: If not initialized
        """
        if self.client is None:
            raise RuntimeError("GraphQL client not initialized")

        logger.debug(f"POST {self.endpoint} variables={request.variables}")

        try:
            response = await self.client.post(self.endpoint, json=request.to_payload())
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                f"GraphQL request failed: {e.response.status_code} - {e.response.text[:500]}"
            )
            raise UpstreamError(str(e), status_code=e.response.status_code) from e

        except httpx.HTTPError as e:
            # Timeouts can carry an empty message
            message = str(e) or type(e).__name__
            logger.error(f"GraphQL request error: {message}")
            raise UpstreamError(message) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"GraphQL response was not JSON: {response.text[:200]}")
            raise UpstreamError(f"Invalid JSON response: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError("Unexpected GraphQL response shape")

        errors = payload.get("errors")
        if errors:
            message = self._format_errors(errors)
            logger.error(f"GraphQL errors: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        logger.debug(f"GraphQL request succeeded (status={response.status_code})")
        return payload

    @staticmethod
    def _format_errors(errors: Any) -> str:
        """Join GraphQL error messages into one string."""
        if not isinstance(errors, list):
            return str(errors)

        messages = []
        for error in errors:
            if isinstance(error, dict) and error.get("message"):
                messages.append(str(error["message"]))
            else:
                messages.append(str(error))
        return "; ".join(messages)
