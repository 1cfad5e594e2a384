"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, Request

from src.civic_mcp.config import Config
from src.civic_mcp.exceptions import AuthenticationInvalidError, AuthenticationMissingError
from src.civic_mcp.identity import AuthenticatedUser, IdentityResolver
from src.civic_mcp.tools import ToolDispatcher
from src.todo import UserStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@lru_cache(maxsize=1)
def load_config() -> Config:
    """Process-wide configuration loaded from .env files, YAML and the environment."""
    return Config.load()


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


def get_tool_dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.tool_dispatcher


def get_current_user(
    request: Request,
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> AuthenticatedUser:
    """Resolve the bearer token into a user and attach it to ``request.state``."""
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        raise AuthenticationMissingError("Please provide a valid Bearer token from Civic Auth")

    token = header[len(BEARER_PREFIX):]
    try:
        user = resolver.resolve(token)
    except AuthenticationInvalidError:
        raise
    except Exception as exc:
        logger.exception("Civic Auth verification error: %s", exc)
        raise AuthenticationInvalidError("The provided Civic Auth token is invalid") from exc

    request.state.user = user
    return user
