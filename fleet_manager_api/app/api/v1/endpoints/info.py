"""
Information and health endpoints for API v1.

``GET /`` describes the API and where each resource lives.
``GET /health`` answers with the standard envelope and a timestamp;
``GET /healthz`` answers with plain ``ok`` for load balancers that
only look at the body.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from fleet_manager_api.app.core.config import settings
from fleet_manager_api.app.core.responses import envelope

router = APIRouter()

RESOURCES = ("vessels", "crew", "maintenance", "bookings", "inventory", "analytics")


@router.get("/")
async def get_info() -> Dict[str, Any]:
    """Return the API name, version and resource paths."""
    prefix = settings.api_prefix.rstrip("/")
    return {
        "message": settings.project_name,
        "version": settings.api_version,
        "endpoints": {name: f"{prefix}/{name}" for name in RESOURCES},
    }


@router.get("/health")
async def health() -> Dict[str, Any]:
    return envelope({"ok": True, "ts": datetime.now(timezone.utc).isoformat()})


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> str:
    return "ok"
