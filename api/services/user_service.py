"""
User Service - Profile lookup and upsert
"""

import logging

from api.errors import MissingFieldsError, UserNotFoundError
from api.repositories.base import UserRepository
from api.schemas.users import User, UserUpsertRequest

logger = logging.getLogger(__name__)


def get_user(repo: UserRepository, user_id: str) -> User:
    record = repo.get(user_id)
    if record is None:
        raise UserNotFoundError(user_id)
    return User.model_validate(record)


def upsert_user(repo: UserRepository, request: UserUpsertRequest) -> User:
    """
    Merge the supplied profile fields into the user's document.

    Fields left out of the request keep their stored value; createdAt is only
    written when the document is first created.
    """
    if not request.user_id:
        raise MissingFieldsError(["userId"])

    fields = {}
    if request.email is not None:
        fields["email"] = request.email
    if request.display_name is not None:
        fields["displayName"] = request.display_name

    record = repo.upsert(request.user_id, fields)
    logger.info(f"User profile {request.user_id} saved")
    return User.model_validate(record)
