from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from apple_model_names.core.settings import Settings
from apple_model_names.device import Device
from apple_model_names.utils.logging import log_json, setup_logging
from apple_model_names.web.routers import (
    health,
    device,
    models,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    setup_logging(settings.log_level.upper())

    app.state.settings = settings
    # Tests may pre-seed a Device with a fake provider
    if getattr(app.state, "device", None) is None:
        app.state.device = Device.from_settings(settings)

    log_json("inspector_started", runtime=settings.runtime, simulated=app.state.device.simulated)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Apple Model Names Inspector API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.device = None
    app.include_router(health.router)
    app.include_router(device.router)
    app.include_router(models.router)
    return app


app = create_app()
