"""
Application entry point.

Creates the FastAPI application and wires together:
- The management router (static route table)
- The health router
- Error handlers (centralized domain-to-HTTP mapping)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from mdm_management.core.config import settings
from mdm_management.domain.management.ports import ManagementService
from mdm_management.interfaces.health import router as health_router
from mdm_management.interfaces.management.dependencies import (
    build_management_service,
)
from mdm_management.interfaces.management.transport import build_router
from mdm_management.shared.errors.handlers import register_error_handlers
from mdm_management.shared.logging import configure_logging


def create_app(service: Optional[ManagementService] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        service: Business logic behind the management routes. Built from
            settings when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    if service is None:
        service = build_management_service(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(build_router(service))

    return app


app = create_app()
