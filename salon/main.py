from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from salon.config import settings
from salon.database import session_scope, init_db, close_db
from salon.api import api_router
from salon.api.errors import status_for
from salon.exceptions import SalonError
from salon.repositories import ServiceRepository
from salon.services import CatalogService

logger = logging.getLogger(__name__)

# Initialize Logfire - auto-instruments FastAPI
if settings.logfire_token:
    logfire.configure(
        token=settings.logfire_token,
        service_name="hair-salon-api",
        environment=settings.app_env,
        console=False,
    )
    logger.info("Logfire initialized")
else:
    logger.info("Logfire token not set - observability disabled")


async def seed_catalog():
    """Insert the default services on first start."""
    async with session_scope() as session:
        inserted = await CatalogService(ServiceRepository(session)).seed_defaults()
    if inserted:
        logger.info(f"Seeded {inserted} default services")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Hair Salon API...")
    await init_db()
    if settings.seed_services:
        await seed_catalog()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Hair salon appointment booking API",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.logfire_token:
    logfire.instrument_fastapi(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SalonError)
async def salon_exception_handler(request: Request, exc: SalonError):
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": "1.0.0",
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected",
        "observability": "configured" if settings.logfire_token else "not_configured",
    }
