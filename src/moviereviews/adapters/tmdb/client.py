import logging
from typing import Any, Optional

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3

from moviereviews.settings import TMDBSettings

logger = logging.getLogger(__name__)


class TMDB_APIClient:
    def __init__(self, tmdb: TMDBSettings, verify_ssl: bool = True):
        """
        Initializes a requests.Session with:
            - JSON accept header
            - the v3 API key sent as the ``api_key`` query parameter on every call

        No retry adapter is mounted: a failed upstream call fails the request.
        """
        self.tmdb = tmdb
        self.session = requests.Session()

        if verify_ssl:
            self.verify: Any = certifi.where()
        else:
            self.verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session.headers.update({"Accept": "application/json"})

    def _handle_response(self, resp: requests.Response) -> Any:
        """
            Handle API response with proper error checking and JSON parsing.

            Args:
                resp: HTTP response object

            Returns:
                Parsed JSON data

            Raises:
                requests.HTTPError: For 4xx/5xx HTTP status codes
                ValueError: If response is not valid JSON
            """
        try:
            resp.raise_for_status()

            if not resp.content:
                logger.warning(f"Empty response received for {resp.url}")
                return {}

            return resp.json()

        except requests.HTTPError:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text}")
            raise

        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response: {e}")

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        """
        Perform a GET request to the TMDb API, returning parsed JSON.

        The API key and language are added to ``params``; caller values win
        for everything else.
        """
        api_base_url: str = str(self.tmdb.api_base_url)
        url = f"{api_base_url.rstrip('/')}/{path.lstrip('/')}"

        query = {
            "api_key": self.tmdb.api_key.get_secret_value(),
            "language": self.tmdb.language,
        }
        query.update(params or {})

        resp = self.session.get(url, params=query, timeout=self.tmdb.request_timeout, verify=self.verify)
        return self._handle_response(resp)

    def close(self) -> None:
        self.session.close()
