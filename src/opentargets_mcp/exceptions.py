"""
Exception hierarchy for the Open Targets MCP server.

Caller errors (invalid parameters, unknown methods) are raised before any
network access. Upstream errors collapse network, HTTP-status and GraphQL
failures into a single type.
"""


class OpenTargetsError(Exception):
    """Base exception for Open Targets MCP errors."""

    pass


class InvalidParamsError(OpenTargetsError):
    """Caller-supplied arguments failed shape or range checks."""

    def __init__(self, message: str, details: list[str] | None = None):
        self.details = details or []
        if self.details:
            message = f"{message}: {'; '.join(self.details)}"
        super().__init__(message)


class UnknownMethodError(InvalidParamsError):
    """Operation name is not one of the supported methods."""

    def __init__(self, method: object, message: str):
        self.method = method
        super().__init__(message)


class UpstreamError(OpenTargetsError):
    """Open Targets request failed (transport, HTTP status, or GraphQL errors)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidResourceURIError(OpenTargetsError):
    """Resource URI does not match any known template."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid URI format: {uri}")
