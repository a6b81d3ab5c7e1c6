"""
Reviews Router - Review CRUD endpoints
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_review_repository
from api.errors import InvalidRatingError, MissingFieldsError, OwnershipError, ReviewNotFoundError
from api.repositories.base import ReviewRepository
from api.schemas.reviews import Review, ReviewCreateRequest, ReviewDeleteResponse, ReviewUpdateRequest
from api.services import review_service

router = APIRouter()
logger = logging.getLogger(__name__)


def _raise_for(e: Exception, failure: str):
    """Translate a service error into the matching HTTPException."""
    if isinstance(e, (MissingFieldsError, InvalidRatingError)):
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ReviewNotFoundError):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, OwnershipError):
        raise HTTPException(status_code=403, detail=str(e))
    logger.error(f"{failure}: {e}", exc_info=True)
    raise HTTPException(status_code=500, detail=failure)


@router.get("/reviews/{movie_id}", response_model=List[Review])
def reviews_for_movie(
    movie_id: str,
    repo: ReviewRepository = Depends(get_review_repository),
) -> List[Review]:
    """All reviews of a movie, most recent first"""
    try:
        return review_service.list_reviews_for_movie(repo, movie_id)
    except Exception as e:
        _raise_for(e, "Failed to fetch reviews")


@router.get("/user-reviews/{user_id}", response_model=List[Review])
def reviews_by_user(
    user_id: str,
    repo: ReviewRepository = Depends(get_review_repository),
) -> List[Review]:
    """All reviews written by a user, most recent first"""
    try:
        return review_service.list_reviews_by_user(repo, user_id)
    except Exception as e:
        _raise_for(e, "Failed to fetch user reviews")


@router.post("/reviews", response_model=Review, status_code=201)
def create_review(
    request: ReviewCreateRequest,
    repo: ReviewRepository = Depends(get_review_repository),
) -> Review:
    """
    Create a review.

    movieId, userId and rating are required; rating must be numeric.
    """
    try:
        return review_service.create_review(repo, request)
    except Exception as e:
        _raise_for(e, "Failed to create review")


@router.put("/reviews/{review_id}", response_model=Review)
def update_review(
    review_id: str,
    request: ReviewUpdateRequest,
    repo: ReviewRepository = Depends(get_review_repository),
) -> Review:
    """Update rating and comment. Only the author (body ``userId``) may do this."""
    try:
        return review_service.update_review(repo, review_id, request)
    except Exception as e:
        _raise_for(e, "Failed to update review")


@router.delete("/reviews/{review_id}", response_model=ReviewDeleteResponse)
def delete_review(
    review_id: str,
    user_id: Optional[str] = Query(None, alias="userId", description="Requesting user id"),
    repo: ReviewRepository = Depends(get_review_repository),
) -> ReviewDeleteResponse:
    """Delete a review. Only the author (query ``userId``) may do this."""
    try:
        review_service.delete_review(repo, review_id, user_id)
    except Exception as e:
        _raise_for(e, "Failed to delete review")
    return ReviewDeleteResponse(message="Review deleted successfully")
