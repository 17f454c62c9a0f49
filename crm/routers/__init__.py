"""
FastAPI routers grouped by entity (clients, orders).

Each module inside this package exposes an APIRouter that is included in the
application built by crm.app.create_app. Handlers reach the service through
app.state instead of a module-level instance.
"""

from fastapi import Request

from crm.services.crm_service import CrmService


def get_crm_service(request: Request) -> CrmService:
    svc = getattr(getattr(request.app, "state", None), "crm_service", None)
    if not svc:
        raise RuntimeError("CrmService not configured")
    return svc
