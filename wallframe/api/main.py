"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallframe.api.logging_config import setup_logging
from wallframe.api.routes import router
from wallframe.config import Settings
from wallframe.errors import FramingError

logger = logging.getLogger(__name__)


async def framing_error_handler(request: Request, exc: FramingError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "code": exc.code},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Wall Framing Estimator",
        description="Wall framing layout and stock-length cut optimization",
        version="0.1.0",
    )

    # CORS — allow the editor front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FramingError, framing_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
