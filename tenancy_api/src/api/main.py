from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.deps import resolve_tenant_context
from src.core.errors import DomainError
from src.core.logging import configure_logging, correlation_id_var, tenant_id_var, tenant_slug_var
from src.core.settings import get_app_settings
from src.core.tenant_context import TENANT_SLUG_HEADER
from src.db.run_migrations import main as run_alembic
from src.db.seed import seed_all
from src.db.session import dispose_engine
from src.repositories.tenants import normalize_slug
from src.schemas.common import ErrorInfo, ErrorResponse

# Routers
from src.api.routes.health import router as health_router
from src.api.routes.tenants import router as tenants_router
from src.api.routes.tenant_users import router as tenant_users_router

settings = get_app_settings()

# Configure structured logging once at import
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Liveness probe and tenant context echo."},
    {"name": "Tenants", "description": "Tenant administration endpoints."},
    {"name": "Tenant Users", "description": "Users belonging to a tenant."},
]

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
)

# CORS - avoid wildcard with credentials
cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
if settings.CORS_ORIGINS == ["*"] and cors_allow_credentials:
    logger.warning("CORS_ALLOW_CREDENTIALS=True with '*' origins is not permitted; disabling credentials.")
    cors_allow_credentials = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=cors_allow_credentials,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
    expose_headers=["X-Correlation-ID", "Location"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Enrich request context with correlation_id and the normalized tenant slug for logging
    and error responses. Adds 'X-Correlation-ID' to every response.

    Tenant resolution itself happens in the resolve_tenant_context dependency.
    """
    corr = request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or str(uuid4())
    slug = normalize_slug(request.headers.get(TENANT_SLUG_HEADER) or "") or None
    token_corr = correlation_id_var.set(corr)
    token_slug = tenant_slug_var.set(slug)
    token_tid = tenant_id_var.set(None)
    request.state.correlation_id = corr
    request.state.tenant_slug = slug

    logger.info("Incoming request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = corr
        return response
    finally:
        correlation_id_var.reset(token_corr)
        tenant_slug_var.reset(token_slug)
        tenant_id_var.reset(token_tid)


def _build_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    """Build a standardized ErrorResponse JSONResponse."""
    err = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(request.state, "correlation_id", None),
        tenant_slug=getattr(request.state, "tenant_slug", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=err.model_dump(mode="json", by_alias=True))


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """
    Map domain errors to their HTTP status: NotFoundError -> 404, ConflictError -> 400.
    """
    return _build_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        message=exc.message,
        details=exc.details,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Global handler for HTTPException to produce a standardized error envelope.
    """
    detail = exc.detail if isinstance(exc.detail, str) else "HTTP Error"
    return _build_error_response(
        request=request,
        status_code=exc.status_code,
        error_type="http_error",
        message=str(detail),
        details=None if isinstance(exc.detail, str) else exc.detail,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Request validation errors (missing fields, bad UUIDs, oversized strings) are 400s.
    """
    return _build_error_response(
        request=request,
        status_code=400,
        error_type="validation_error",
        message="Request validation failed",
        details=_jsonable_errors(exc),
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Strip non-serializable context (e.g. exception instances) from validation errors."""
    errors = []
    for e in exc.errors():
        item = {k: v for k, v in e.items() if k in ("type", "loc", "msg")}
        item["loc"] = list(item.get("loc", ()))
        errors.append(item)
    return errors


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler to avoid leaking stack traces and to return a structured error.
    """
    logger.exception("Unhandled error processing request")
    return _build_error_response(
        request=request,
        status_code=500,
        error_type="internal_error",
        message="An unexpected error occurred",
        details=None,
    )


@app.on_event("startup")
async def on_startup() -> None:
    """
    Run migrations and optional seeding on service startup.

    This ensures the database schema is up to date. Seeding is opt-in via settings.
    """
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        try:
            logger.info("Running Alembic migrations: upgrade head")
            # Alembic's env.py drives its own event loop.
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
            logger.info("Migrations completed.")
        except Exception as exc:
            logger.exception("Migration step failed: %s", exc)
            # Do not crash the app in case of transient DB issues; rely on retries or later readiness probes.

    if settings.AUTO_SEED:
        try:
            logger.info("Running database seeding...")
            await seed_all(settings)
            logger.info("Seeding completed.")
        except Exception as exc:
            logger.exception("Seeding step failed: %s", exc)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await dispose_engine()


# Every /api request has its tenant context resolved before the handler runs.
api = APIRouter(prefix="/api", dependencies=[Depends(resolve_tenant_context)])
api.include_router(health_router)
api.include_router(tenants_router)
api.include_router(tenant_users_router)

app.include_router(api)
