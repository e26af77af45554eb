"""
Client for the Open Targets Platform GraphQL API.
"""

from opentargets_mcp.clients.graphql_client import GraphQLClient

__all__ = ["GraphQLClient"]
