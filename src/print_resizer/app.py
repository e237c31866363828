"""FastAPI application factory."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from . import __version__
from .common.config import Settings, get_settings
from .common.errors import ResizeError
from .logging_setup import configure_logging
from .master import create_master_router
from .plugins.print_resize.service import ResizeService
from .utils.admission import ResizeLimiter


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Example:
        app = create_app()
        uvicorn.run(app, host="0.0.0.0", port=3001)
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    service = ResizeService(settings.resize_config())
    limiter = ResizeLimiter(settings.max_concurrent_resizes)

    app = FastAPI(title="print_resizer", version=__version__)
    app.state.settings = settings
    app.state.service = service
    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Image-Width", "X-Image-Height", "X-Image-DPI"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(ResizeError)
    async def resize_error_handler(request: Request, exc: ResizeError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"Processing error: {exc}")
        else:
            logger.info(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": details},
        )

    app.include_router(create_master_router(service, limiter, settings))

    _ = (log_requests, resize_error_handler, validation_error_handler)
    return app
