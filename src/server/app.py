"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.civic_mcp.config import Config
from src.civic_mcp.exceptions import AuthenticationError, CivicMcpError
from src.civic_mcp.identity import IdentityResolver, PlaceholderIdentityResolver
from src.civic_mcp.tools import ToolDispatcher
from src.todo import UserStore
from src.todo.models import utc_now_iso

from .dependencies import load_config
from .routes import (
    register_auth_config_routes,
    register_health_routes,
    register_mcp_routes,
    register_static_routes,
)

logger = logging.getLogger(__name__)


async def handle_civic_error(request: Request, exc: CivicMcpError) -> JSONResponse:
    """Render any server error as ``{error, message[, timestamp]}``."""
    content = {"error": exc.title, "message": str(exc)}
    if not isinstance(exc, AuthenticationError):
        content["timestamp"] = utc_now_iso()
    return JSONResponse(status_code=exc.status_code, content=content)


def create_app(
    config: Optional[Config] = None,
    store: Optional[UserStore] = None,
    identity_resolver: Optional[IdentityResolver] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: settings (defaults to ``load_config()``)
        store: user store shared by every request of this app
        identity_resolver: bearer token resolver (defaults to the placeholder)
    """
    config = config or load_config()
    store = store or UserStore()

    app = FastAPI(title="Civic Todo MCP Server", version=config.version)
    app.state.config = config
    app.state.user_store = store
    app.state.identity_resolver = identity_resolver or PlaceholderIdentityResolver()
    app.state.tool_dispatcher = ToolDispatcher(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CivicMcpError, handle_civic_error)

    register_health_routes(app)
    register_auth_config_routes(app)
    register_mcp_routes(app)
    # Mounted last so API routes take precedence over "/".
    register_static_routes(app, config.public_dir)

    return app
