"""Civic MCP server exceptions.

Each exception carries the HTTP status and the ``error`` title that the
server's error handler puts into the JSON envelope.
"""


class CivicMcpError(Exception):
    """Base exception for the server."""

    status_code = 500
    title = "Internal server error"


class AuthenticationError(CivicMcpError):
    """Request could not be tied to an identity."""

    status_code = 401
    title = "Authentication required"


class AuthenticationMissingError(AuthenticationError):
    """No ``Authorization: Bearer`` header."""

    pass


class AuthenticationInvalidError(AuthenticationError):
    """Bearer token present but unusable."""

    title = "Invalid Civic token"


class InvalidRequestError(CivicMcpError):
    """Request body could not be parsed."""

    status_code = 400
    title = "Invalid request"


class ConfigurationError(CivicMcpError):
    """Missing or malformed configuration."""

    title = "Server configuration error"


class ToolError(CivicMcpError):
    """Failure raised while handling a tool call."""

    pass


class ToolArgumentError(ToolError):
    """Tool arguments have the wrong shape."""

    pass


class UnknownToolError(ToolError):
    """Tool name is not one of the registered tools."""

    pass


class TodoNotFoundError(ToolError):
    """Toggle target does not exist for this identity."""

    pass
