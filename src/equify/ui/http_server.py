"""
Main HTTP server for the Equify APIs.

Serves the insights function and dashboard stats endpoints.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_config
from .dashboard_api import router as dashboard_router
from .insights_api import router as insights_router

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Equify API",
    description="Relationship health scoring and insights API",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type",
                   "x-user-id", "x-theme", "accept-language"],
)

# Include routers
app.include_router(insights_router)
app.include_router(dashboard_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Equify API",
        "version": __version__,
        "endpoints": {
            "insights": "/functions/generate-ai-insights",
            "dashboard": "/dashboard/stats",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def main():
    """Main entry point for HTTP server."""
    host = config.api.host
    port = config.api.port

    logger.info("=" * 60)
    logger.info("Equify - API Server")
    logger.info("=" * 60)
    logger.info(f"Host: {host}")
    logger.info(f"Port: {port}")
    logger.info(f"Recent activity window: {config.insights.recent_window_days}d")
    logger.info("=" * 60)
    logger.info(f"API Documentation: http://{host}:{port}/docs")
    logger.info("=" * 60)

    uvicorn.run(
        "equify.ui.http_server:app",
        host=host,
        port=port,
        reload=config.api.reload,
    )


if __name__ == "__main__":
    main()
