"""
API Dependencies - Process-scoped clients and FastAPI dependency injection

The TMDB wrapper and the repositories are built once at startup and stored on
``app.state``; routes receive them through ``Depends``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, Request

from moviereviews.adapters.tmdb.client import TMDB_APIClient
from moviereviews.adapters.tmdb.tmdb import TMDB_API
from moviereviews.settings import Settings, get_firebase_settings, get_tmdb_settings
from api.repositories.base import ReviewRepository, UserRepository
from api.repositories.memory import InMemoryReviewRepository, InMemoryUserRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - holds the clients shared by all requests.

    Built once per process; nothing on it is mutated after startup.
    """

    def __init__(
        self,
        tmdb_api: TMDB_API,
        reviews: ReviewRepository,
        users: UserRepository,
    ):
        self.tmdb_api = tmdb_api
        self.reviews = reviews
        self.users = users


def build_app_state(cfg: Settings) -> AppState:
    """
    Construct the TMDB wrapper and the repositories from settings.

    Raises:
        pydantic.ValidationError: If TMDB_API_KEY is not configured
    """
    tmdb_api = TMDB_API(TMDB_APIClient(get_tmdb_settings(cfg), verify_ssl=cfg.verify_ssl))

    if cfg.storage_backend == "memory":
        logger.warning("Using in-memory storage: reviews and users are lost on restart")
        return AppState(tmdb_api, InMemoryReviewRepository(), InMemoryUserRepository())

    # Imported lazily so the memory backend runs without Google credentials
    from moviereviews.adapters.firestore.client import create_firestore_client
    from api.repositories.firestore import FirestoreReviewRepository, FirestoreUserRepository

    client = create_firestore_client(get_firebase_settings(cfg))
    return AppState(
        tmdb_api,
        FirestoreReviewRepository(client, cfg.reviews_collection),
        FirestoreUserRepository(client, cfg.users_collection),
    )


def lifespan_factory(cfg: Settings):
    """
    Build the FastAPI lifespan context manager.

    State already installed on the app (tests) is kept; otherwise it is built
    from ``cfg`` on startup.
    """

    @asynccontextmanager
    async def lifespan_handler(app):
        logger.info("FastAPI starting up...")
        if getattr(app.state, "services", None) is None:
            app.state.services = build_app_state(cfg)
        logger.info(f"Storage backend: {cfg.storage_backend}")

        yield  # App is now running

        logger.info("FastAPI shutting down...")
        app.state.services.tmdb_api.close()
        logger.info("Shutdown complete")

    return lifespan_handler


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        def example(state: AppState = Depends(get_app_state)):
            ...
    """
    state = getattr(request.app.state, "services", None)
    if state is None:
        raise RuntimeError("AppState not initialized")
    return state


def get_tmdb_api(state: AppState = Depends(get_app_state)) -> TMDB_API:
    return state.tmdb_api


def get_review_repository(state: AppState = Depends(get_app_state)) -> ReviewRepository:
    return state.reviews


def get_user_repository(state: AppState = Depends(get_app_state)) -> UserRepository:
    return state.users
