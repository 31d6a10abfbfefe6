"""
NUBAN API Application Factory
"""

import uvicorn
from fastapi import FastAPI

from .. import __version__
from ..config import get_config
from ..logging_config import setup_logging
from .accounts import router as accounts_router
from .banks import router as banks_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    config = get_config()
    setup_logging(level=config.log_level, log_format=config.log_format)

    app = FastAPI(
        title="NUBAN API",
        description="Generation and validation of Nigerian Uniform Bank Account Numbers",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    app.include_router(banks_router, prefix="/banks", tags=["Banks"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "nuban_api",
            "version": __version__
        }

    # Root endpoint
    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "NUBAN API",
            "version": __version__,
            "description": "NUBAN generation, validation and bank inference",
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "generate": "/accounts/generate",
                "validate": "/accounts/validate",
                "banks": "/banks",
                "infer": "/banks/infer/{account_number}",
            }
        }

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False):
    """Run the FastAPI server"""
    uvicorn.run(
        "nuban.api:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
