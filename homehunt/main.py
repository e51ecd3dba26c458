"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
import logging

from homehunt.config import settings
from homehunt.database import DatabaseManager
from homehunt.routers import (
    auth_router,
    users_router,
    properties_router,
    wishlist_router,
    reviews_router,
    offers_router,
    payments_router,
    reports_router
)
from homehunt.services.error_handler import ErrorHandlerService
from homehunt.services.payment_gateway import PaymentGateway
from homehunt.middleware.request_context import RequestContextMiddleware
from homehunt.utils.dependencies import enforce_route_policy
from homehunt.utils.exceptions import APIException

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Owns the database engine and the payment gateway client.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    db = DatabaseManager()
    db.init(settings.database_url, echo=settings.debug)
    if settings.create_tables_on_startup:
        await db.create_tables()

    if not await db.ping():
        logger.error("Failed to connect to database on startup")

    app.state.db = db
    app.state.payment_gateway = PaymentGateway()

    yield

    logger.info("Shutting down application")
    await app.state.payment_gateway.aclose()
    await db.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Real-estate marketplace API.

    ## Features

    * **Listings**: Agents publish properties; admins verify or reject them
    * **Wishlist and reviews**: Buyers save and review listings
    * **Offers**: Buyers make offers; agents accept one and the rest are rejected
    * **Payments**: Card payments through the payment gateway, recorded per offer
    * **Reports**: Sold properties per agent

    ## Authentication

    Exchange an email verified by the external identity provider for a token at
    `POST /jwt`, then send it in the Authorization header as `Bearer <token>`.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Authentication", "description": "Token issuance"},
        {"name": "Users", "description": "Registration and role management"},
        {"name": "Properties", "description": "Listings and verification"},
        {"name": "Wishlist", "description": "Saved properties"},
        {"name": "Reviews", "description": "Property reviews"},
        {"name": "Offers", "description": "Purchase offers"},
        {"name": "Payments", "description": "Payment intents and records"},
        {"name": "Reports", "description": "Agent sales"},
        {"name": "Health", "description": "Service health"},
    ],
    dependencies=[Depends(enforce_route_policy)],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(
    RequestContextMiddleware,
    max_request_size=settings.max_request_size,
    enable_request_logging=settings.debug
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(properties_router)
app.include_router(wishlist_router)
app.include_router(reviews_router)
app.include_router(offers_router)
app.include_router(payments_router)
app.include_router(reports_router)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    return ErrorHandlerService.handle_database_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/", tags=["Health"])
async def root():
    """
    Root endpoint providing basic API information.
    """
    return {
        "message": f"{settings.app_name} is running",
        "version": settings.app_version,
        "environment": settings.environment,
        "status": "healthy",
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment
    }


@app.get("/health/db", tags=["Health"])
async def database_health_check(request: Request):
    """
    Database connectivity check. Returns 503 when the database is unreachable.
    """
    db: DatabaseManager = getattr(request.app.state, "db", None)
    if db is None or not await db.ping():
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "disconnected"}
        )
    return {"status": "healthy", "database": "connected"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "homehunt.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
