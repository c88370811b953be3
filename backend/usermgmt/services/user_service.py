"""
User Service

CRUD over User entities with two rules on top of the repository:

1. **Existence**: find/update/delete of an unknown id raise ObjectNotFoundError
2. **Email uniqueness**: create, and update to a new email, raise
   DataConflictError when another user already owns the email

The uniqueness check is a read followed by a write with no locking, so two
concurrent callers can both pass it. Passwords are stored exactly as given.
"""

import logging
from typing import List

from fastapi import Depends
from sqlmodel import Session

from usermgmt.database import get_session
from usermgmt.models.user import User, UserDTO, UserPrivateDTO
from usermgmt.repositories.user_repository import SqlUserRepository, UserRepository

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user service errors"""

    pass


class ObjectNotFoundError(UserServiceError):
    """No user exists with the requested id"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User not found with id {user_id}")


class DataConflictError(UserServiceError):
    """The change would give two users the same email"""

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


def to_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, name=user.name, email=user.email)


def to_entity(data: UserPrivateDTO) -> User:
    return User(name=data.name, email=data.email, password=data.password)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def find_by_id(self, user_id: int) -> UserDTO:
        user = self.repository.get(user_id)
        if user is None:
            raise ObjectNotFoundError(user_id)
        return to_dto(user)

    def create_user(self, data: UserPrivateDTO) -> UserDTO:
        if self.repository.get_by_email(data.email) is not None:
            logger.warning(f"Rejected user creation: email {data.email!r} already exists")
            raise DataConflictError()

        user = self.repository.save(to_entity(data))
        logger.info(f"Created user {user.id}")
        return to_dto(user)

    def update_user(self, user_id: int, data: UserDTO) -> UserDTO:
        """
        Overwrite name and email of an existing user.

        data.id is ignored; user_id is authoritative. Keeping the current email
        skips the uniqueness check, so a user never conflicts with itself.
        The password is left untouched.
        """
        existing = self.repository.get(user_id)
        if existing is None:
            raise ObjectNotFoundError(user_id)

        if existing.email != data.email and self.repository.get_by_email(data.email) is not None:
            logger.warning(f"Rejected update of user {user_id}: email {data.email!r} already exists")
            raise DataConflictError()

        existing.name = data.name
        existing.email = data.email
        existing = self.repository.save(existing)
        logger.info(f"Updated user {user_id}")
        return to_dto(existing)

    def delete_user(self, user_id: int) -> None:
        if not self.repository.exists_by_id(user_id):
            raise ObjectNotFoundError(user_id)
        self.repository.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")

    def find_all_users(self) -> List[UserDTO]:
        return [to_dto(user) for user in self.repository.list_all()]


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Build a UserService over the request's database session."""
    return UserService(SqlUserRepository(session))
