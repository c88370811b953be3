"""
User persistence adapters.

UserRepository is the contract UserService depends on: lookup by id and by
email, an existence check, upsert, delete and a full listing.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlmodel import Session, select

from usermgmt.models.user import User


class UserRepository(ABC):
    """Abstract store of User entities keyed by id, with lookup by email."""

    @abstractmethod
    def get(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert or update a user. An id is assigned on first insert."""
        pass

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        pass

    @abstractmethod
    def list_all(self) -> List[User]:
        pass


class SqlUserRepository(UserRepository):
    """SQLModel session-backed repository. Each save commits."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def exists_by_id(self, user_id: int) -> bool:
        return self.session.get(User, user_id) is not None

    def save(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> None:
        user = self.session.get(User, user_id)
        if user is None:
            return
        self.session.delete(user)
        self.session.commit()

    def list_all(self) -> List[User]:
        return list(self.session.exec(select(User).order_by(User.id)).all())


def _clone(user: User) -> User:
    return User(id=user.id, name=user.name, email=user.email, password=user.password)


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed repository.

    Ids start at 1 and are never reused. Stored users are copies, so a caller
    mutating a returned User does not change the store until it saves it.
    Listing follows insertion order.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def get(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return _clone(user) if user is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return _clone(user)
        return None

    def exists_by_id(self, user_id: int) -> bool:
        return user_id in self._users

    def save(self, user: User) -> User:
        if user.id is None:
            user.id = self._next_id
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, user.id + 1)
        self._users[user.id] = _clone(user)
        return _clone(user)

    def delete_by_id(self, user_id: int) -> None:
        self._users.pop(user_id, None)

    def list_all(self) -> List[User]:
        return [_clone(user) for user in self._users.values()]
