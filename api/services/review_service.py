"""
Review Service - Validation, ordering and ownership rules for reviews

Functions take the repository explicitly and raise errors from api.errors;
routers translate those into HTTP status codes.
"""

import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from api.errors import InvalidRatingError, MissingFieldsError, OwnershipError, ReviewNotFoundError
from api.repositories.base import ReviewRepository
from api.schemas.reviews import Review, ReviewCreateRequest, ReviewUpdateRequest

logger = logging.getLogger(__name__)


def coerce_rating(value: Any) -> float:
    """
    Convert a submitted rating to a float.

    Numbers and numeric strings are accepted. Booleans, non-numeric strings
    and NaN/infinity are rejected.
    """
    if isinstance(value, bool):
        raise InvalidRatingError(value)
    try:
        rating = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidRatingError(value)
    if not math.isfinite(rating):
        raise InvalidRatingError(value)
    return rating


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _created_sort_key(record: Dict[str, Any]) -> float:
    created_at: Optional[datetime] = record.get("createdAt")
    return created_at.timestamp() if created_at else 0


def _sorted_reviews(records: List[Dict[str, Any]]) -> List[Review]:
    records = sorted(records, key=_created_sort_key, reverse=True)
    return [Review.model_validate(record) for record in records]


def list_reviews_for_movie(repo: ReviewRepository, movie_id: str) -> List[Review]:
    """All reviews of one movie, most recent first"""
    return _sorted_reviews(repo.find_by_field("movieId", movie_id))


def list_reviews_by_user(repo: ReviewRepository, user_id: str) -> List[Review]:
    """All reviews written by one user, most recent first"""
    return _sorted_reviews(repo.find_by_field("userId", user_id))


def create_review(repo: ReviewRepository, request: ReviewCreateRequest) -> Review:
    """
    Validate and store a new review.

    Raises:
        MissingFieldsError: movieId, userId or rating absent (nothing is stored)
        InvalidRatingError: rating is not numeric
    """
    missing = [
        name for name, value in (
            ("movieId", request.movie_id),
            ("userId", request.user_id),
            ("rating", request.rating),
        )
        if _is_missing(value)
    ]
    if missing:
        raise MissingFieldsError(missing)

    data = {
        "movieId": request.movie_id,
        "movieTitle": request.movie_title,
        "moviePoster": request.movie_poster,
        "userId": request.user_id,
        "userName": request.user_name,
        "rating": coerce_rating(request.rating),
        "comment": request.comment or "",
    }
    record = repo.create(data)

    logger.info(
        f"Review created successfully: id={record['id']} movieId={data['movieId']} "
        f"userName={data['userName']} rating={data['rating']}"
    )
    return Review.model_validate(record)


def _owned_review(repo: ReviewRepository, review_id: str, user_id: Optional[str]) -> Dict[str, Any]:
    record = repo.get(review_id)
    if record is None:
        raise ReviewNotFoundError(review_id)
    if record.get("userId") != user_id:
        logger.warning(f"User {user_id!r} is not the author of review {review_id}")
        raise OwnershipError(review_id)
    return record


def update_review(repo: ReviewRepository, review_id: str, request: ReviewUpdateRequest) -> Review:
    """
    Overwrite rating and comment of a review owned by ``request.user_id``.

    movieId, userId and createdAt are never touched.

    Raises:
        ReviewNotFoundError: No review with that id
        OwnershipError: The review belongs to someone else
        MissingFieldsError / InvalidRatingError: Bad rating
    """
    _owned_review(repo, review_id, request.user_id)

    if _is_missing(request.rating):
        raise MissingFieldsError(["rating"])
    updates = {
        "rating": coerce_rating(request.rating),
        "comment": request.comment or "",
    }
    return Review.model_validate(repo.update(review_id, updates))


def delete_review(repo: ReviewRepository, review_id: str, user_id: Optional[str]) -> None:
    """
    Permanently remove a review owned by ``user_id``.

    Raises:
        ReviewNotFoundError: No review with that id
        OwnershipError: The review belongs to someone else
    """
    _owned_review(repo, review_id, user_id)
    repo.delete(review_id)
    logger.info(f"Review {review_id} deleted by {user_id}")
