from moviereviews.adapters.tmdb.client import TMDB_APIClient
from typing import Any, Dict
import logging


logger = logging.getLogger(__name__)

DEFAULT_PAGE = "1"
DETAILS_APPENDED = "credits,videos"


class TMDB_API():
    """Wrapper class for TMDB API interactions. Responses are returned unchanged."""
    def __init__(self, client: TMDB_APIClient):
        self._client = client

    def _list(self, path: str, page: Any) -> Dict[str, Any]:
        return self._client.get(path, params={'page': page})

    def list_popular(self, page: Any = DEFAULT_PAGE) -> Dict[str, Any]:
        return self._list('movie/popular', page)

    def list_now_playing(self, page: Any = DEFAULT_PAGE) -> Dict[str, Any]:
        return self._list('movie/now_playing', page)

    def list_top_rated(self, page: Any = DEFAULT_PAGE) -> Dict[str, Any]:
        return self._list('movie/top_rated', page)

    def search_movies(self, query: str, page: Any = DEFAULT_PAGE) -> Dict[str, Any]:
        """Searches for movies by title. An empty query is rejected before any upstream call."""
        if not query:
            raise ValueError("Search query is required")
        logger.debug(f"Searching TMDB for '{query}' (page {page})")
        return self._client.get('search/movie', params={'query': query, 'page': page})

    def get_movie_details(self, movie_id: str) -> Dict[str, Any]:
        """Fetches full movie details together with its credits and videos"""
        return self._client.get(f'movie/{movie_id}', params={'append_to_response': DETAILS_APPENDED})

    def close(self) -> None:
        self._client.close()
