from __future__ import annotations

from app.api.routes.audit import router as audit_router
from app.api.routes.health import router as health_router
from app.api.routes.integrations import router as integrations_router

__all__ = ["audit_router", "health_router", "integrations_router"]
