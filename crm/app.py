"""HTTP entry point exposing the CRM service."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crm.core.utils import configure_logging
from crm.repositories.json_storage import StorageWriteError
from crm.routers import clients as clients_router
from crm.routers import orders as orders_router
from crm.services.crm_service import CrmError, CrmService, create_service
from crm.services.notifier import log_client_added

logger = logging.getLogger(__name__)


def create_app(service: CrmService | None = None) -> FastAPI:
    if service is None:
        configure_logging()
        service = create_service()
        service.subscribe(log_client_added)

    app = FastAPI(title="CRM API")
    app.state.crm_service = service

    @app.exception_handler(StorageWriteError)
    async def _storage_write_error(request: Request, exc: StorageWriteError):
        logger.error("Write to %s failed: %s", exc.path, exc.message)
        return JSONResponse({"detail": "Storage unavailable"}, status_code=503)

    @app.exception_handler(CrmError)
    async def _crm_error(request: Request, exc: CrmError):
        return JSONResponse({"detail": exc.message}, status_code=400)

    app.include_router(clients_router.router)
    app.include_router(orders_router.router)
    return app


_default_app: FastAPI | None = None


def __getattr__(name: str):
    # "uvicorn crm.app:app" builds the configured app on first access only,
    # so importing create_app does not touch the data files.
    global _default_app
    if name == "app":
        if _default_app is None:
            _default_app = create_app()
        return _default_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
