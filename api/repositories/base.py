"""
Base Repositories - Abstract interfaces for document access

Records are plain dicts keyed by the stored (camelCase) field names plus an
``id`` entry holding the document key. Timestamps are assigned by the
repository, never by callers.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any


class ReviewRepository(ABC):
    """Abstract base class for the review collection"""

    @abstractmethod
    def find_by_field(self, field: str, value: str) -> List[Dict[str, Any]]:
        """
        Get every review whose ``field`` equals ``value``.

        Returns:
            Records in storage order (callers sort)
        """
        pass

    @abstractmethod
    def get(self, review_id: str) -> Optional[Dict[str, Any]]:
        """Get a single review, or None when the document does not exist."""
        pass

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a new review under a generated id.

        Sets createdAt and updatedAt to the current server time.

        Returns:
            The stored record, read back with its id and timestamps
        """
        pass

    @abstractmethod
    def update(self, review_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overwrite ``updates`` on an existing review and refresh updatedAt.

        Raises:
            ReviewNotFoundError: If the document vanished since it was read
        """
        pass

    @abstractmethod
    def delete(self, review_id: str) -> None:
        """Remove the review permanently."""
        pass


class UserRepository(ABC):
    """Abstract base class for the user profile collection"""

    @abstractmethod
    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a profile, or None when no document exists at that key."""
        pass

    @abstractmethod
    def upsert(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge ``fields`` into the profile, creating it if absent.

        createdAt is written only when the document is created.

        Returns:
            The stored profile, read back
        """
        pass
