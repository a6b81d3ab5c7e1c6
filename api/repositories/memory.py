"""
In-Memory Repositories - Process-local document storage

Used for local development (``APP_STORAGE_BACKEND=memory``) and tests.
Mirrors the Firestore behaviour: generated ids, repository-assigned
timestamps, merge semantics for user upserts.
"""

import copy
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, List, Dict, Any

from api.errors import ReviewNotFoundError
from api.repositories.base import ReviewRepository, UserRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryReviewRepository(ReviewRepository):
    """Review repository implementation using a dict"""

    def __init__(self, clock: Clock = utcnow):
        self._clock = clock
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        logger.info("InMemoryReviewRepository initialized")

    def _record(self, review_id: str) -> Dict[str, Any]:
        record = copy.deepcopy(self._docs[review_id])
        record["id"] = review_id
        return record

    def find_by_field(self, field: str, value: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [
                self._record(review_id)
                for review_id, doc in self._docs.items()
                if doc.get(field) == value
            ]

    def get(self, review_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            if review_id not in self._docs:
                return None
            return self._record(review_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = self._clock()
        review_id = uuid.uuid4().hex
        with self._lock:
            self._docs[review_id] = {**copy.deepcopy(data), "createdAt": now, "updatedAt": now}
            return self._record(review_id)

    def update(self, review_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        now = self._clock()
        with self._lock:
            if review_id not in self._docs:
                raise ReviewNotFoundError(review_id)
            self._docs[review_id].update(copy.deepcopy(updates))
            self._docs[review_id]["updatedAt"] = now
            return self._record(review_id)

    def delete(self, review_id: str) -> None:
        with self._lock:
            self._docs.pop(review_id, None)


class InMemoryUserRepository(UserRepository):
    """User repository implementation using a dict"""

    def __init__(self, clock: Clock = utcnow):
        self._clock = clock
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()
        logger.info("InMemoryUserRepository initialized")

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            if user_id not in self._docs:
                return None
            return {**copy.deepcopy(self._docs[user_id]), "id": user_id}

    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            if user_id not in self._docs:
                self._docs[user_id] = {"createdAt": self._clock()}
            doc = self._docs[user_id]
            doc.update(copy.deepcopy(fields))
            return {**copy.deepcopy(doc), "id": user_id}
