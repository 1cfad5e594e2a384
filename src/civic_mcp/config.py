"""
Configuration for the Civic todo MCP server.

Values come from config/app_config.yaml and are overridden by environment
variables. ``Config.load`` also reads .env.local and .env from the project root.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "app_config.yaml"

DEFAULT_SCOPES = ["openid", "profile", "email"]


@dataclass
class Config:
    """Application settings."""

    # Civic Auth
    client_id: Optional[str] = None
    auth_endpoint: str = "https://auth.civic.com"
    scopes: List[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: Path = PROJECT_ROOT / "public"

    # Service identity
    service_name: str = "civic-todo-mcp-server"
    version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/civic_todo_mcp.log"

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Read settings from YAML. A missing file yields the defaults.

        Args:
            config_path: settings file (defaults to config/app_config.yaml)
        """
        config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        auth_data = yaml_data.get("auth", {})
        log_data = yaml_data.get("log", {})

        defaults = cls()
        public_dir = server_data.get("public_dir")
        return cls(
            client_id=auth_data.get("client_id") or None,
            auth_endpoint=auth_data.get("endpoint", defaults.auth_endpoint),
            scopes=list(auth_data.get("scopes", defaults.scopes)),
            host=server_data.get("host", defaults.host),
            port=int(server_data.get("port", defaults.port)),
            public_dir=PROJECT_ROOT / public_dir if public_dir else defaults.public_dir,
            service_name=server_data.get("name", defaults.service_name),
            version=str(server_data.get("version", defaults.version)),
            log_level=log_data.get("level", defaults.log_level),
            log_file=log_data.get("file", defaults.log_file),
        )

    @classmethod
    def from_env(cls, base: Optional["Config"] = None) -> "Config":
        """Overlay environment variables on ``base`` (or the defaults)."""
        config = base or cls()
        overrides: Dict[str, Any] = {}

        client_id = os.getenv("CLIENT_ID")
        if client_id:
            overrides["client_id"] = client_id

        port = os.getenv("PORT")
        if port:
            try:
                overrides["port"] = int(port)
            except ValueError as exc:
                raise ConfigurationError(f"PORT must be an integer, got {port!r}") from exc

        if os.getenv("HOST"):
            overrides["host"] = os.environ["HOST"]
        if os.getenv("LOG_LEVEL"):
            overrides["log_level"] = os.environ["LOG_LEVEL"]
        if "LOG_FILE" in os.environ:
            overrides["log_file"] = os.environ["LOG_FILE"] or None
        if os.getenv("PUBLIC_DIR"):
            overrides["public_dir"] = Path(os.environ["PUBLIC_DIR"])

        return replace(config, **overrides)

    @classmethod
    def load(cls, config_path: Optional[Path] = None, env_dir: Optional[Path] = None) -> "Config":
        """.env.local, then .env, then YAML, then the process environment."""
        env_dir = Path(env_dir) if env_dir else PROJECT_ROOT
        load_dotenv(env_dir / ".env.local")
        load_dotenv(env_dir / ".env")
        return cls.from_env(cls.from_yaml(config_path))
