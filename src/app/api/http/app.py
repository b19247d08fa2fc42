"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.app.api.http.app_data import ApplicationDependencies
from src.app.api.http.routers.health import router as health_router
from src.app.api.http.routers.service.book import router as book_router
from src.app.api.utils.app_startup import configure_logging
from src.app.core.errors import NotFoundError, StorageError, ValidationError
from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        return response


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def _error_response(
    request: Request, status_code: int, detail: str, errors: list | None = None
) -> JSONResponse:
    """Build the error body shared by every handler.

    ``detail`` is always a message string; 400 responses add an ``errors`` list
    with one entry per rejected field.
    """
    request_id = _request_id(request)
    content = {"detail": detail, "request_id": request_id}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={"X-Request-ID": request_id},
    )


# --- Domain error translation ---
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, str(exc), errors=exc.errors
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies, missing fields and bad path ids are client errors
    logger.bind(error_type=type(exc).__name__).info("request.validation_error")
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Malformed request",
        errors=jsonable_encoder(exc.errors()),
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logger.bind(error_type=type(exc.__cause__).__name__).error(
        "request.storage_error: {}", exc
    )
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return _error_response(
                request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
            )


# --- Lifecycle hooks ---
def startup(
    app: FastAPI,
    config: ConfigData,
    database_service: DbSessionService | None = None,
) -> ApplicationDependencies:
    """Build application-wide dependencies and attach them to ``app.state``."""
    logger.info("Starting up application in {} environment", config.app.environment)

    if database_service is None:
        database_service = DbSessionService(config.database, config.app.environment)

    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    deps = ApplicationDependencies(config=config, database_service=database_service)
    app.state.app_dependencies = deps
    return deps


def shutdown(app: FastAPI, dispose_database: bool = True) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    if dispose_database:
        app_dependencies.database_service.dispose()


def create_app(
    config: ConfigData | None = None,
    database_service: DbSessionService | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Configuration to use; the current context's configuration when omitted.
        database_service: Pre-built database service. When given, the caller owns
            its lifetime and it is not disposed at shutdown.
    """
    main_config = config or get_config()

    if main_config.app.environment == "production" and (
        "*" in main_config.app.cors.origins
    ):
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup(app, main_config, database_service)
        try:
            yield
        finally:
            shutdown(app, dispose_database=database_service is None)

    is_production = main_config.app.environment == "production"
    application = FastAPI(
        title="Book Service",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=main_config.app.cors.origins,
        allow_credentials=main_config.app.cors.allow_credentials,
        allow_methods=main_config.app.cors.allow_methods,
        allow_headers=main_config.app.cors.allow_headers,
    )
    application.middleware("http")(log_requests)

    application.add_exception_handler(ValidationError, handle_validation_error)
    application.add_exception_handler(
        RequestValidationError, handle_request_validation_error
    )
    application.add_exception_handler(NotFoundError, handle_not_found)
    application.add_exception_handler(StorageError, handle_storage_error)

    application.include_router(health_router)
    application.include_router(book_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    main_config = get_config()
    configure_logging(main_config)

    uvicorn.run(
        app,
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # Request logging middleware covers access logs
    )
