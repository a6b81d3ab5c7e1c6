"""
Unit tests for the TMDB client and API wrapper.

The HTTP session is mocked: nothing here reaches TMDB.
"""
from unittest.mock import MagicMock

import pytest
import requests

from moviereviews.adapters.tmdb.client import TMDB_APIClient
from moviereviews.adapters.tmdb.tmdb import TMDB_API
from moviereviews.settings import TMDBSettings


def make_response(status_code=200, content=b'{"page": 1}', url="https://api.example.test/3/movie/popular"):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = content
    resp.url = url
    return resp


@pytest.fixture
def http_client():
    settings = TMDBSettings(api_key="secret-key", api_base_url="https://api.example.test/3/")
    client = TMDB_APIClient(settings)
    client.session = MagicMock()
    return client


class TestTMDBAPIClient:
    """Test request building and response handling."""

    def test_get_adds_key_and_language(self, http_client):
        http_client.session.get.return_value = make_response()

        http_client.get("/movie/popular", params={"page": "3"})

        args, kwargs = http_client.session.get.call_args
        assert args[0] == "https://api.example.test/3/movie/popular"
        assert kwargs["params"] == {"api_key": "secret-key", "language": "en-US", "page": "3"}
        assert kwargs["timeout"] is None

    def test_get_returns_body_unchanged(self, http_client):
        http_client.session.get.return_value = make_response(content=b'{"page": 2, "results": [{"id": 7}]}')

        assert http_client.get("movie/popular") == {"page": 2, "results": [{"id": 7}]}

    def test_http_error_is_raised(self, http_client):
        http_client.session.get.return_value = make_response(status_code=401, content=b'{"status_message": "bad key"}')

        with pytest.raises(requests.HTTPError):
            http_client.get("movie/popular")

    def test_invalid_json_raises_value_error(self, http_client):
        http_client.session.get.return_value = make_response(content=b"<html>oops</html>")

        with pytest.raises(ValueError, match="Invalid JSON"):
            http_client.get("movie/popular")

    def test_empty_body_returns_empty_dict(self, http_client):
        http_client.session.get.return_value = make_response(content=b"")

        assert http_client.get("movie/popular") == {}


class TestTMDBAPI:
    """Test that each query shape hits the right upstream path."""

    @pytest.fixture
    def api(self, tmdb_client):
        return TMDB_API(tmdb_client)

    @pytest.mark.parametrize("method, path", [
        ("list_popular", "movie/popular"),
        ("list_now_playing", "movie/now_playing"),
        ("list_top_rated", "movie/top_rated"),
    ])
    def test_lists_forward_page(self, api, tmdb_client, method, path):
        getattr(api, method)("4")
        tmdb_client.get.assert_called_once_with(path, params={"page": "4"})

    def test_list_defaults_to_first_page(self, api, tmdb_client):
        api.list_popular()
        tmdb_client.get.assert_called_once_with("movie/popular", params={"page": "1"})

    def test_empty_page_is_not_rewritten(self, api, tmdb_client):
        api.search_movies("alien", "")
        tmdb_client.get.assert_called_once_with("search/movie", params={"query": "alien", "page": ""})

    def test_search_forwards_query_and_page(self, api, tmdb_client):
        api.search_movies("alien", "2")
        tmdb_client.get.assert_called_once_with("search/movie", params={"query": "alien", "page": "2"})

    @pytest.mark.parametrize("query", [None, ""])
    def test_search_without_query_makes_no_call(self, api, tmdb_client, query):
        with pytest.raises(ValueError, match="Search query is required"):
            api.search_movies(query)
        tmdb_client.get.assert_not_called()

    def test_details_append_credits_and_videos(self, api, tmdb_client):
        api.get_movie_details("550")
        tmdb_client.get.assert_called_once_with("movie/550", params={"append_to_response": "credits,videos"})
