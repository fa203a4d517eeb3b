#!/usr/bin/env python3
"""
PlacementIQ - FastAPI Application

Career readiness tracker: students record skills, projects, mock tests and
certifications and get a 0-100 readiness score.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:3000/docs - API Documentation (Swagger UI)
    - http://localhost:3000/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from database.database import init_db
from .config import get_config
from .dependencies import get_db_engine
from .security import check_jwt_secret
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    auth_router,
    skills_router,
    projects_router,
    mock_tests_router,
    certifications_router,
    stats_router
)
from .routers.auth import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_jwt_secret(get_config().auth)
    init_db(get_db_engine())
    logger.info("Database tables ready")
    yield


# Create FastAPI app
app = FastAPI(
    title="PlacementIQ API",
    description="Student career readiness tracking and scoring",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(auth_router)
app.include_router(skills_router)
app.include_router(projects_router)
app.include_router(mock_tests_router)
app.include_router(certifications_router)
app.include_router(stats_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "placementiq-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting PlacementIQ Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
