"""
Movie Review API - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviereviews.settings import Settings, get_settings
from api.dependencies import AppState, lifespan_factory
from api.routers import movies, reviews, users, health

# Get settings
cfg = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, cfg.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ENDPOINTS = {
    "health": "/health",
    "movies": {
        "popular": "/api/movies/popular",
        "nowPlaying": "/api/movies/now-playing",
        "topRated": "/api/movies/top-rated",
        "search": "/api/movies/search?query=term",
        "details": "/api/movies/:id",
    },
    "reviews": {
        "getByMovie": "/api/reviews/:movieId",
        "getByUser": "/api/user-reviews/:userId",
        "create": "POST /api/reviews",
        "update": "PUT /api/reviews/:id",
        "delete": "DELETE /api/reviews/:id?userId=",
    },
    "users": {
        "get": "/api/users/:userId",
        "upsert": "POST /api/users",
    },
}


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Every error leaves the API as {"error": message}"""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(settings: Optional[Settings] = None, state: Optional[AppState] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Overrides the settings read from the environment
        state: Prebuilt clients and repositories; built on startup when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or cfg
    app = FastAPI(
        title="Movie Review API",
        description="TMDB catalog proxy with user reviews and profiles stored in Firestore",
        version="0.1.0",
        lifespan=lifespan_factory(settings),  # Handles startup/shutdown
    )
    if state is not None:
        app.state.services = state

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Mount routers
    app.include_router(movies.router, prefix="/api/movies", tags=["movies"])
    app.include_router(reviews.router, prefix="/api", tags=["reviews"])
    app.include_router(users.router, prefix="/api", tags=["users"])
    app.include_router(health.router, tags=["health"])

    @app.get("/")
    def root():
        """Root endpoint - directory of available endpoints"""
        return {
            "message": "Movie Review API - IMDb Style",
            "status": "running",
            "environment": settings.env,
            "endpoints": ENDPOINTS,
        }

    logger.info(f"FastAPI application created (env={settings.env})")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )
