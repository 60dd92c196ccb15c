# app/main.py
import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, get_settings
from app.core.logging_setup import setup_logging
from app.db.init_db import init_models
from app.db.session import build_engine, build_sessionmaker

# routers
from app.users.router import router as users_router
from app.videos.router import router as videos_router
from app.comments.router import router as comments_router
from app.profile.router import router as profile_router

log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("🚀 Iniciando servicio…")
    settings: Settings = app.state.settings
    engine = build_engine(settings.DATABASE_URL)
    await init_models(engine)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    log.info("✅ Startup listo.")
    try:
        yield
    finally:
        await engine.dispose()
        log.info("👋 Engine cerrado.")


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # body/form mal formado → 400 (no 422)
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("❌ error no manejado en %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "internal error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Construye la app. Sin SECRET_KEY, get_settings() lanza y la app no arranca.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Short Video API", lifespan=lifespan)
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/health")
    async def health():
        return {"ok": True}

    app.include_router(users_router)     # /register, /login
    app.include_router(videos_router)    # /videos, /recommended, /duets
    app.include_router(comments_router)  # /videos/{id}/comments
    app.include_router(profile_router)   # /profile/{user_id}

    # uploads servidos como estáticos; va al final para no tapar /videos/{id}/...
    os.makedirs(settings.VIDEOS_DIR, exist_ok=True)
    app.mount(
        settings.VIDEOS_URL_PREFIX,
        StaticFiles(directory=settings.VIDEOS_DIR, html=False),
        name="videos",
    )

    return app
