"""MCP tool endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request

from src.civic_mcp.config import Config
from src.civic_mcp.exceptions import CivicMcpError, InvalidRequestError, ToolArgumentError
from src.civic_mcp.identity import AuthenticatedUser
from src.civic_mcp.tools import ToolDispatcher

from ..dependencies import get_config, get_current_user, get_tool_dispatcher
from ..schemas import ErrorResponse

logger = logging.getLogger(__name__)

TOOLS_LIST = "tools/list"
TOOLS_CALL = "tools/call"


def service_info(config: Config, user: AuthenticatedUser) -> Dict[str, Any]:
    """Payload returned for any method other than tools/list and tools/call."""
    return {
        "message": "Civic Auth MCP Server endpoint",
        "user": user.summary(),
        "availableMethods": [TOOLS_LIST, TOOLS_CALL],
        "instructions": "Send POST requests with { method, params } in body",
        "service": config.service_name,
        "version": config.version,
    }


async def read_envelope(request: Request) -> Dict[str, Any]:
    """Parse the JSON body. An empty or non-object body is an empty envelope."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise InvalidRequestError(f"Request body is not valid JSON: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def register_mcp_routes(app: FastAPI) -> None:
    """Register the authenticated /mcp endpoint."""

    @app.post(
        "/mcp",
        responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def mcp(
        request: Request,
        user: AuthenticatedUser = Depends(get_current_user),
        dispatcher: ToolDispatcher = Depends(get_tool_dispatcher),
        config: Config = Depends(get_config),
    ) -> Dict[str, Any]:
        """Dispatch on ``method``: tools/list, tools/call, otherwise service info."""
        body = await read_envelope(request)
        method = body.get("method")
        logger.info("MCP request: method=%s from %s (%s)", method, user.id, user.email)

        try:
            if method == TOOLS_LIST:
                return dispatcher.list_tools()

            if method == TOOLS_CALL:
                params = body.get("params")
                if not isinstance(params, dict):
                    raise ToolArgumentError("params with a tool name is required for tools/call")
                return dispatcher.call(params.get("name"), params.get("arguments"), user)

            return service_info(config, user)
        except CivicMcpError as exc:
            logger.error("MCP endpoint error: %s", exc)
            raise
        except Exception as exc:
            logger.exception("Unhandled MCP endpoint error: %s", exc)
            raise CivicMcpError(str(exc)) from exc
