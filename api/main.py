from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, errors, log
from core.middleware import request_id_middleware
from equipment import router as equipment_router
from legacy import router as legacy_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    log.setup_logging()

    app = FastAPI(title="alatpertanian api", lifespan=lifespan)

    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(legacy_router.deprecation_middleware)
    app.middleware("http")(request_id_middleware)
    errors.register(app)

    app.include_router(equipment_router.router, tags=["equipment"])
    app.include_router(legacy_router.router, tags=["equipment-legacy"], deprecated=True)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "alatpertanian api"}

    return app


app = create_app()
