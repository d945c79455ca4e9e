"""
Analytics endpoints for API v1.

Read-only aggregate views over the fleet, intended for dashboards
and downstream analysis.  Each report is computed in full on every
request; see ``AnalyticsService`` for the exact shapes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from fleet_manager_api.app.core.db import FleetDatabase, get_db
from fleet_manager_api.app.core.responses import envelope
from fleet_manager_api.app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/fleet-overview")
async def fleet_overview(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    """Vessel counts by status and type, total capacity and average length."""
    return envelope(AnalyticsService.fleet_overview(db))


@router.get("/maintenance-insights")
async def maintenance_insights(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    """Maintenance counts by status and type plus pending work due within 30 days."""
    return envelope(AnalyticsService.maintenance_insights(db))


@router.get("/booking-insights")
async def booking_insights(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    """Booking counts by status and vessel plus confirmed bookings yet to start."""
    return envelope(AnalyticsService.booking_insights(db))


@router.get("/crew-utilization")
async def crew_utilization(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    return envelope(AnalyticsService.crew_utilization(db))


@router.get("/inventory-status")
async def inventory_status(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    """Item counts by category and vessel plus the number of low-stock items."""
    return envelope(AnalyticsService.inventory_status(db))


@router.get("/dashboard")
async def dashboard(db: FleetDatabase = Depends(get_db)) -> Dict[str, Any]:
    """Composite snapshot of every entity kind."""
    return envelope(AnalyticsService.dashboard(db))
