"""
Application package initializer.

The application is split into ``core`` (configuration, logging,
errors and the in-memory record store), ``schemas`` (per-entity
validation rules), ``services`` (CRUD, join expansion and analytics)
and ``api`` (versioned FastAPI routers, one per entity kind).
"""

from .main import app  # noqa: F401
