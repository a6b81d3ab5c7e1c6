"""
Review API Schemas - Request/response models for review endpoints

Request models leave every field optional: presence and rating checks happen
in the review service so that they answer 400 with the service's message.
"""

from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class ReviewCreateRequest(CamelModel):
    """New review submitted by a user"""

    movie_id: Optional[str] = Field(None, description="TMDB movie id")
    movie_title: Optional[str] = Field(None, description="Movie title, denormalized for display")
    movie_poster: Optional[str] = Field(None, description="Poster path, denormalized for display")
    user_id: Optional[str] = Field(None, description="Author's user id")
    user_name: Optional[str] = Field(None, description="Author's display name")
    rating: Optional[Any] = Field(None, description="Rating as a number or numeric string")
    comment: Optional[str] = Field(None, description="Free text, defaults to empty")


class ReviewUpdateRequest(CamelModel):
    """Edit of an existing review. ``user_id`` must match the stored author."""

    user_id: Optional[str] = Field(None, description="Requesting user id")
    rating: Optional[Any] = Field(None, description="New rating")
    comment: Optional[str] = Field(None, description="New comment, defaults to empty")


class Review(CamelModel):
    """A stored review"""

    id: str = Field(..., description="Document id assigned on creation")
    movie_id: str
    movie_title: Optional[str] = None
    movie_poster: Optional[str] = None
    user_id: str
    user_name: Optional[str] = None
    rating: float
    comment: str = ""
    created_at: Optional[datetime] = Field(None, description="Set once on creation")
    updated_at: Optional[datetime] = Field(None, description="Set on creation and every update")


class ReviewDeleteResponse(BaseModel):
    """Response after deleting a review"""

    message: str = Field(..., description="Human-readable message")
