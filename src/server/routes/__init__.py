"""Route registration helpers."""

from .auth_config import register_auth_config_routes
from .health import register_health_routes
from .mcp import register_mcp_routes
from .static import register_static_routes

__all__ = [
    "register_auth_config_routes",
    "register_health_routes",
    "register_mcp_routes",
    "register_static_routes",
]
