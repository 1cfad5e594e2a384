"""HTTP client for the Civic todo MCP server."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class McpClientError(Exception):
    """Server answered with an error envelope or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class McpClient:
    """
    Thin wrapper over the server's HTTP surface.

    Tool calls go through ``POST /mcp`` with ``{"method", "params"}`` bodies and a
    bearer token.
    """

    def __init__(self, base_url: str = "http://localhost:3000", token: Optional[str] = None, timeout: float = 10):
        """
        Args:
            base_url: server URL
            token: bearer token sent to /mcp
            timeout: per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise McpClientError(str(e)) from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.status_code >= 400:
            message = payload.get("message") or payload.get("error") or f"HTTP {response.status_code}"
            raise McpClientError(str(message), status_code=response.status_code)
        return payload

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def auth_config(self) -> Dict[str, Any]:
        return self._request("GET", "/auth-config")

    def rpc(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send one envelope to /mcp."""
        if not self.token:
            raise McpClientError("A bearer token is required for /mcp", status_code=401)

        body: Dict[str, Any] = {"method": method}
        if params is not None:
            body["params"] = params
        return self._request(
            "POST",
            "/mcp",
            json=body,
            headers={"Authorization": f"Bearer {self.token}"},
        )

    def list_tools(self) -> list[Dict[str, Any]]:
        return self.rpc("tools/list").get("tools", [])

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """Call a tool and return the joined text of its content blocks."""
        result = self.rpc("tools/call", {"name": name, "arguments": arguments or {}})
        return "\n".join(
            block.get("text", "") for block in result.get("content", []) if block.get("type") == "text"
        )

    def info(self) -> Dict[str, Any]:
        return self.rpc("info")
