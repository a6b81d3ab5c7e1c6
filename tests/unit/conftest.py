"""Shared fixtures: in-memory repositories, a mocked TMDB client and a TestClient."""
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from moviereviews.adapters.tmdb.client import TMDB_APIClient
from moviereviews.adapters.tmdb.tmdb import TMDB_API
from api.dependencies import AppState
from api.main import create_app
from api.repositories.memory import InMemoryReviewRepository, InMemoryUserRepository


class StepClock:
    """Clock that moves forward by ``step`` on every call."""

    def __init__(self, start=datetime(2025, 1, 1, tzinfo=timezone.utc), step=timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def review_repo(clock):
    return InMemoryReviewRepository(clock=clock)


@pytest.fixture
def user_repo(clock):
    return InMemoryUserRepository(clock=clock)


@pytest.fixture
def tmdb_client():
    """TMDB HTTP client whose ``get`` returns whatever the test sets."""
    client = MagicMock(spec=TMDB_APIClient)
    client.get.return_value = {"page": 1, "results": []}
    return client


@pytest.fixture
def client(tmdb_client, review_repo, user_repo):
    state = AppState(TMDB_API(tmdb_client), review_repo, user_repo)
    return TestClient(create_app(state=state))
