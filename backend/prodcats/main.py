from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager
from prodcats.core.config import settings
from prodcats.core.database import engine, Base, SessionLocal
from prodcats.core.errors import register_error_handlers
from prodcats.core.logging_config import setup_logging, CorrelationIdMiddleware
from prodcats.core.rate_limit import limiter
from prodcats.api.endpoints import products, categories
from prodcats.services.catalog_seeder import seed_catalog
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

import prodcats.models  # noqa: F401  registers tables on Base.metadata

APP_NAME = "ProdCats"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "API for managing products and categories"

audit_logger = setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if settings.ENABLE_HSTS and settings.is_production:
            response.headers["Strict-Transport-Security"] = (
                f"max-age={settings.HSTS_MAX_AGE}; includeSubDomains"
            )

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


def seed_database() -> None:
    """Seed the demo catalog; failures are logged and do not block startup."""
    db = SessionLocal()
    try:
        seed_catalog(db)
    except Exception:
        db.rollback()
        logger.exception("An error occurred while seeding the database")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(f"Starting {APP_NAME} application...")

    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")

    if settings.SEED_DATA:
        seed_database()

    yield

    logger.info(f"Shutting down {APP_NAME} application...")
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{APP_NAME} API",
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # Add correlation ID middleware (first, so all logs have correlation IDs)
    app.add_middleware(CorrelationIdMiddleware)

    # Add rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(SecurityHeadersMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(
        categories.router, prefix="/api/categories", tags=["categories"]
    )

    @app.get("/")
    def root():
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "description": APP_DESCRIPTION,
        }

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
