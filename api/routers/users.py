"""
Users Router - Profile endpoints
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_user_repository
from api.errors import MissingFieldsError, UserNotFoundError
from api.repositories.base import UserRepository
from api.schemas.users import User, UserUpsertRequest
from api.services import user_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, repo: UserRepository = Depends(get_user_repository)) -> User:
    try:
        return user_service.get_user(repo, user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch user")


@router.post("/users", response_model=User)
def upsert_user(request: UserUpsertRequest, repo: UserRepository = Depends(get_user_repository)) -> User:
    """Create the profile or merge the given fields into it"""
    try:
        return user_service.upsert_user(repo, request)
    except MissingFieldsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create user")
