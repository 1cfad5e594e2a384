"""Health check endpoint."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from src.civic_mcp.config import Config
from src.todo.models import utc_now_iso

from ..dependencies import get_config
from ..schemas import HealthResponse


def register_health_routes(app: FastAPI) -> None:
    """Register the public health endpoint."""

    @app.get("/health", response_model=HealthResponse)
    async def health(config: Config = Depends(get_config)) -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(
            status="ok",
            timestamp=utc_now_iso(),
            service=config.service_name,
            version=config.version,
        )
