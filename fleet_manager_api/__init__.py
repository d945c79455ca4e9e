"""
Top‑level package for the Fleet Management API.

The package provides no public exports; the application lives in
``fleet_manager_api.app`` (``fleet_manager_api.app.main:app`` for ASGI
servers).
"""

__all__ = []
