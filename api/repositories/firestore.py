"""
Firestore Repositories - Document access backed by Google Cloud Firestore

Timestamps use ``SERVER_TIMESTAMP`` so Firestore assigns them; every write is
read back so callers see the values actually stored.
"""

import logging
from typing import Optional, List, Dict, Any

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from api.errors import ReviewNotFoundError
from api.repositories.base import ReviewRepository, UserRepository

logger = logging.getLogger(__name__)


def snapshot_to_record(snapshot) -> Dict[str, Any]:
    """Flatten a DocumentSnapshot into a record dict with its id."""
    data = snapshot.to_dict() or {}
    data["id"] = snapshot.id
    return data


class FirestoreReviewRepository(ReviewRepository):
    """Review documents in a single top-level collection"""

    def __init__(self, client: firestore.Client, collection: str = "reviews"):
        self._collection = client.collection(collection)
        logger.info(f"FirestoreReviewRepository using collection '{collection}'")

    def find_by_field(self, field: str, value: str) -> List[Dict[str, Any]]:
        query = self._collection.where(filter=FieldFilter(field, "==", value))
        return [snapshot_to_record(doc) for doc in query.stream()]

    def get(self, review_id: str) -> Optional[Dict[str, Any]]:
        snapshot = self._collection.document(review_id).get()
        if not snapshot.exists:
            return None
        return snapshot_to_record(snapshot)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        document = {
            **data,
            "createdAt": firestore.SERVER_TIMESTAMP,
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }
        _, doc_ref = self._collection.add(document)
        return snapshot_to_record(doc_ref.get())

    def update(self, review_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        doc_ref = self._collection.document(review_id)
        try:
            doc_ref.update({**updates, "updatedAt": firestore.SERVER_TIMESTAMP})
        except gcp_exceptions.NotFound:
            # Deleted between the ownership check and this write
            logger.warning(f"Review {review_id} disappeared before update")
            raise ReviewNotFoundError(review_id)
        return snapshot_to_record(doc_ref.get())

    def delete(self, review_id: str) -> None:
        self._collection.document(review_id).delete()


class FirestoreUserRepository(UserRepository):
    """User profiles keyed by the caller-supplied user id"""

    def __init__(self, client: firestore.Client, collection: str = "users"):
        self._collection = client.collection(collection)
        logger.info(f"FirestoreUserRepository using collection '{collection}'")

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        snapshot = self._collection.document(user_id).get()
        if not snapshot.exists:
            return None
        return snapshot_to_record(snapshot)

    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        doc_ref = self._collection.document(user_id)
        try:
            # create() fails if the document exists, so createdAt is written once
            doc_ref.create({**fields, "createdAt": firestore.SERVER_TIMESTAMP})
        except gcp_exceptions.AlreadyExists:
            doc_ref.set(dict(fields), merge=True)
        return snapshot_to_record(doc_ref.get())
