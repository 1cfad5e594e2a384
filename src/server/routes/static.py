"""Bundled browser client."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def register_static_routes(app: FastAPI, public_dir: Path) -> None:
    """Serve ``public_dir`` at "/" (index.html for the root). Must be registered last."""
    public_dir = Path(public_dir)
    if not public_dir.is_dir():
        logger.warning("Static directory %s not found; client UI disabled", public_dir)
        return
    app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
