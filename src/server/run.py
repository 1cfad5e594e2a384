"""CLI entry point for launching the FastAPI app with uvicorn."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from src.civic_mcp.logger import setup_logger

from .dependencies import load_config

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Civic todo MCP server.")
    parser.add_argument("--host", default=None, help="Bind address (default: config / HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port (default: config / PORT, 3000)")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes (development)")
    return parser.parse_args(argv)


def log_banner(host: str, port: int, client_id: Optional[str], version: str) -> None:
    base = f"http://localhost:{port}"
    logger.info("Civic Auth MCP Server v%s starting on %s:%d", version, host, port)
    logger.info("Health check: %s/health", base)
    logger.info("MCP endpoint: %s/mcp", base)
    logger.info("Client UI: %s/", base)
    if client_id:
        logger.info("Civic Client ID: %s", client_id)
    else:
        logger.warning("Civic Client ID: not configured, /auth-config will return 500")


def main(argv: Optional[List[str]] = None) -> None:
    """Run the server."""
    args = parse_args(argv)
    config = load_config()
    setup_logger(log_level=config.log_level, log_file=config.log_file)

    host = args.host or config.host
    port = args.port or config.port
    log_banner(host, port, config.client_id, config.version)

    try:
        uvicorn.run(
            "src.server.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=args.reload,
            reload_dirs=["src"] if args.reload else None,
            log_config=None,
        )
    except SystemExit as exc:
        # uvicorn exits with its own status when startup (e.g. port binding) fails
        if exc.code in (0, None):
            raise
        logger.critical("Failed to start Civic Auth MCP Server on %s:%d (exit status %s)", host, port, exc.code)
        sys.exit(1)
    except OSError as exc:
        logger.critical("Failed to start Civic Auth MCP Server: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
