"""
FastAPI application entry point for the Contractor Risk backend.

This module creates the FastAPI app instance, wires the store client
lifecycle, error handlers and CORS, and registers all routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contractor_risk.config import settings
from contractor_risk.db.client import create_store_client
from contractor_risk.routes.contractors import router as contractors_router
from contractor_risk.routes.health import router as health_router
from contractor_risk.routes.recommendations import router as recommendations_router
from contractor_risk.utils.errors import ServiceError, UpstreamModelError
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Acquire the contractor store client once at startup.

    Handlers receive it through contractor_risk.db.client.get_store_client.
    """
    app.state.store_client = create_store_client()

    yield

    app.state.store_client = None


# Create FastAPI app
app = FastAPI(
    title="Contractor Risk API",
    description="Contractor risk listing and LLM-generated remediation recommendations",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """
    Map service errors to {"error": <public message>}.

    The detailed message (and upstream status/body) is logged, never returned.
    """
    if isinstance(exc, UpstreamModelError):
        logger.error(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc} "
            f"(upstream status={exc.upstream_status}, body={exc.upstream_body[:500]})"
        )
    elif exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.public_message}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep the {"error": ...} body shape for framework and route HTTP errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    Only reachable when the body is not valid JSON; field checks happen in
    validate_contractor_payload.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"}
    )


# Configure CORS (permissive "*" unless CORS_ORIGINS lists origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def allow_any_origin_header(request: Request, call_next):
    """CORSMiddleware skips requests without an Origin header; add it to every response."""
    response = await call_next(request)
    if "*" in settings.CORS_ORIGINS:
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
    return response


# Register routers
app.include_router(health_router)
app.include_router(contractors_router)
app.include_router(recommendations_router)

logger.info("FastAPI app initialized successfully")
