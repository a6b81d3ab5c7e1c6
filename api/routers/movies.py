"""
Movies Router - Read-only proxy to the TMDB catalog

Upstream bodies are returned unchanged. Upstream failures are logged and
answered with a fixed 500 message.
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from moviereviews.adapters.tmdb.tmdb import TMDB_API, DEFAULT_PAGE
from api.dependencies import get_tmdb_api

router = APIRouter()
logger = logging.getLogger(__name__)


def _proxy(fetch: Callable[[], Dict[str, Any]], what: str, failure: str) -> Dict[str, Any]:
    try:
        return fetch()
    except Exception as e:
        logger.error(f"Error fetching {what}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=failure)


@router.get("/popular")
def popular_movies(
    page: str = Query(DEFAULT_PAGE, description="Result page, forwarded as-is"),
    tmdb: TMDB_API = Depends(get_tmdb_api),
) -> Dict[str, Any]:
    return _proxy(lambda: tmdb.list_popular(page), "popular movies", "Failed to fetch movies")


@router.get("/now-playing")
def now_playing_movies(
    page: str = Query(DEFAULT_PAGE, description="Result page, forwarded as-is"),
    tmdb: TMDB_API = Depends(get_tmdb_api),
) -> Dict[str, Any]:
    return _proxy(lambda: tmdb.list_now_playing(page), "now playing movies", "Failed to fetch movies")


@router.get("/top-rated")
def top_rated_movies(
    page: str = Query(DEFAULT_PAGE, description="Result page, forwarded as-is"),
    tmdb: TMDB_API = Depends(get_tmdb_api),
) -> Dict[str, Any]:
    return _proxy(lambda: tmdb.list_top_rated(page), "top rated movies", "Failed to fetch movies")


@router.get("/search")
def search_movies(
    query: Optional[str] = Query(None, description="Title search terms"),
    page: str = Query(DEFAULT_PAGE, description="Result page, forwarded as-is"),
    tmdb: TMDB_API = Depends(get_tmdb_api),
) -> Dict[str, Any]:
    """Search TMDB by title. An absent or empty query answers 400 without calling TMDB."""
    if not query:
        raise HTTPException(status_code=400, detail="Search query is required")
    return _proxy(lambda: tmdb.search_movies(query, page), "search results", "Failed to search movies")


@router.get("/{movie_id}")
def movie_details(movie_id: str, tmdb: TMDB_API = Depends(get_tmdb_api)) -> Dict[str, Any]:
    """Single movie with its credits and videos"""
    return _proxy(lambda: tmdb.get_movie_details(movie_id), "movie details", "Failed to fetch movie details")
