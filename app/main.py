"""
Jobly API - Main Application

FastAPI backend with:
- PostgreSQL for companies, jobs, users and applications
- JWT authentication (admin-only and self-or-admin routes)
- Typed errors mapped to 400/401/404 responses

Run: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.db.postgres import test_postgres_connection

settings = get_settings()
setup_logging(settings.log_level, settings.json_logs)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Jobly",
    description="""
    A job board API.

    ## Features
    - **Authentication**: JWT tokens from /auth/token and /auth/register
    - **Companies**: Filter by name and employee count
    - **Jobs**: Filter by title, minimum salary and equity
    - **Users**: Admin management, self-service profile, job applications
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    postgres_ok = test_postgres_connection()
    return {
        "status": "healthy" if postgres_ok else "degraded",
        "postgres": "connected" if postgres_ok else "disconnected",
    }


logger.info("Jobly API %s ready", __version__)
