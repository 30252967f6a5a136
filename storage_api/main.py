import logging

from fastapi import FastAPI

from storage_api.api.router import router as api_router
from storage_api.core.config import settings
from storage_api.core.errors import register_exception_handlers
from storage_api.core.telemetry import setup_telemetry


def create_app(*, is_production: bool | None = None) -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(title="Storage Listings API", version="0.1.0")

    if is_production is None:
        is_production = settings.is_production
    register_exception_handlers(app, is_production=is_production)

    setup_telemetry(app)
    app.include_router(api_router)
    return app


app = create_app()
