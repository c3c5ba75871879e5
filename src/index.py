from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from .academics import AcademicsService, router as academics_router
from .config import Settings, load_settings
from .middleware.error_handler import install_error_handlers
from .middleware.request_logging import RequestLoggingMiddleware
from .routes.system import router as system_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[AcademicsService] = None,
) -> FastAPI:
    """Build the application around one explicitly owned ``AcademicsService``."""
    settings = settings or load_settings()
    app = FastAPI(title="Academic Records API", version="1.0.0")

    app.state.settings = settings
    app.state.academics = service or AcademicsService(seed=settings.seed_data)

    install_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(system_router)
    app.include_router(academics_router)

    logger.info("Academic Records API ready (seed_data=%s)", settings.seed_data)
    return app


app = create_app()
