"""
User API Schemas - Request/response models for user profiles
"""

from typing import Optional
from datetime import datetime
from pydantic import Field

from api.schemas.reviews import CamelModel


class UserUpsertRequest(CamelModel):
    """Create or update a profile. Omitted fields are left untouched."""

    user_id: Optional[str] = Field(None, description="Profile key, chosen by the caller")
    email: Optional[str] = None
    display_name: Optional[str] = None


class User(CamelModel):
    """A stored user profile"""

    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    created_at: Optional[datetime] = Field(None, description="Set on first write only")
