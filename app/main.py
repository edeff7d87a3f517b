import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import models  # noqa: F401  registers BusinessCard on Base.metadata
from app.db import Base, make_engine, make_session_factory
from app.errors import CardScannerError, ValidationError
from app.routers.cards import router as cards_router
from app.routers.scan import router as scan_router
from app.services import ExtractionClient, UploadHandler
from app.settings import Settings
from app.setup_logging import setup_logging

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI app.
    Settings come from the environment unless given; a ConfigError here
    means the process should not start.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    # ----------------------------------------------------------------
    # Lifespan: process-scoped resources, created once and torn down
    # ----------------------------------------------------------------
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = make_engine(settings.database_url)
        # Create tables if they don’t exist.
        Base.metadata.create_all(bind=engine)
        app.state.engine = engine
        app.state.session_factory = make_session_factory(engine)
        app.state.extraction_client = ExtractionClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
            timeout=settings.openai_timeout_seconds,
        )
        log.info("card scanner ready (model=%s)", settings.openai_model)
        yield
        engine.dispose()

    app = FastAPI(title="Business Card Scanner", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.upload_handler = UploadHandler(
        settings.upload_dir, keep_files=settings.keep_uploads
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

    # ----------------------------------------------------------------
    # Error handling
    # ----------------------------------------------------------------
    @app.exception_handler(CardScannerError)
    async def card_scanner_error_handler(request: Request, exc: CardScannerError):
        log.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies get the same 400 shape as hand-checked ones
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        log.warning("%s %s rejected: %s", request.method, request.url.path, details)
        return JSONResponse(
            status_code=400,
            content=ValidationError("Invalid data format", details).to_dict(),
        )

    @app.get("/healthz")
    def health():
        """Simple health probe for monitoring."""
        return {"ok": True, "service": "card-scanner", "version": 1}

    app.include_router(scan_router)
    app.include_router(cards_router)
    return app
