"""Civic Auth configuration endpoint used by the browser client."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI

from src.civic_mcp.config import Config
from src.civic_mcp.exceptions import ConfigurationError

from ..dependencies import get_config
from ..schemas import AuthConfigResponse, ErrorResponse

logger = logging.getLogger(__name__)


def register_auth_config_routes(app: FastAPI) -> None:
    """Register the public /auth-config endpoint."""

    @app.get(
        "/auth-config",
        response_model=AuthConfigResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def auth_config(config: Config = Depends(get_config)) -> AuthConfigResponse:
        """Expose the Civic client id and scopes; 500 when CLIENT_ID is unset."""
        if not config.client_id:
            logger.warning("Auth config requested but CLIENT_ID is not configured")
            raise ConfigurationError("CLIENT_ID not configured in environment variables")
        return AuthConfigResponse(
            clientId=config.client_id,
            authEndpoint=config.auth_endpoint,
            scopes=list(config.scopes),
        )
