"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.

Run with ``uvicorn clinic_records.main:app``.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .container import ClinicServices, build_services
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .patients.router import router as patients_router
from .doctors.router import router as doctors_router
from .health_records.router import router as health_records_router
from .prescriptions.router import router as prescriptions_router
from .lab_tests.router import router as lab_tests_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the record tables on startup unless services were supplied."""
    if getattr(app.state, "services", None) is None:
        app.state.services = build_services(app.state.settings)
    logger.info("🚀 Starting Clinic Records API...")
    yield
    logger.info("Clinic Records API stopped")


def create_app(settings: Optional[Settings] = None, services: Optional[ClinicServices] = None) -> FastAPI:
    """
    Build the FastAPI application.
    
    Args:
        settings: Application settings (loaded from the environment when omitted)
        services: Pre-built services (built from the settings on startup when omitted)
        
    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="API for patient, doctor, health record, prescription and lab test records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    # Register exception handlers
    register_exception_handlers(app)

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware
    setup_middlewares(app)

    # Include routers
    app.include_router(patients_router, prefix="/api/v1/patients", tags=["Patients"])
    app.include_router(doctors_router, prefix="/api/v1/doctors", tags=["Doctors"])
    app.include_router(health_records_router, prefix="/api/v1/health-records", tags=["Health Records"])
    app.include_router(prescriptions_router, prefix="/api/v1/prescriptions", tags=["Prescriptions"])
    app.include_router(lab_tests_router, prefix="/api/v1/lab-tests", tags=["Lab Tests"])

    # Root endpoint
    @app.get("/")
    def root():
        """
        Root endpoint for API health check.
        
        Returns:
            dict: Welcome message and version
        """
        return {"message": f"Welcome to {settings.app_name}", "version": __version__}

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """
        Health check endpoint for monitoring.
        
        Returns:
            dict: Health status and the number of records in each table
        """
        return {
            "status": "healthy",
            "database": "connected",
            "records": app.state.services.counts(),
        }

    return app


app = create_app()
