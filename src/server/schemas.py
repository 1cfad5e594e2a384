"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    timestamp: str
    service: str
    version: str


class AuthConfigResponse(BaseModel):
    """Public Civic Auth settings for the browser client."""

    clientId: str
    authEndpoint: str
    message: str = "Use Civic Auth SDK for secure authentication"
    scopes: List[str]


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    error: str
    message: str
    timestamp: Optional[str] = None
