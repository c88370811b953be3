"""Tests for the SQL and in-memory UserRepository adapters."""

import pytest
from sqlmodel import Session

from usermgmt.models.user import User, UserDTO
from usermgmt.repositories.user_repository import InMemoryUserRepository, SqlUserRepository
from usermgmt.services.user_service import DataConflictError, UserService


@pytest.fixture(params=["sql", "memory"])
def repository(request, session: Session):
    if request.param == "sql":
        return SqlUserRepository(session)
    return InMemoryUserRepository()


def test_save_assigns_id_on_first_insert(repository):
    user = repository.save(User(name="John Doe", email="john@example.com", password="pw"))

    assert user.id is not None
    assert repository.exists_by_id(user.id)


def test_save_existing_user_keeps_id(repository):
    user = repository.save(User(name="John Doe", email="john@example.com", password="pw"))
    user.name = "Johnny"

    saved = repository.save(user)

    assert saved.id == user.id
    assert repository.get(user.id).name == "Johnny"
    assert len(repository.list_all()) == 1


def test_get_missing_returns_none(repository):
    assert repository.get(42) is None
    assert not repository.exists_by_id(42)


def test_get_by_email(repository):
    user = repository.save(User(name="John Doe", email="john@example.com", password="pw"))

    found = repository.get_by_email("john@example.com")

    assert found is not None
    assert found.id == user.id
    assert repository.get_by_email("nobody@example.com") is None


def test_delete_by_id(repository):
    user = repository.save(User(name="John Doe", email="john@example.com", password="pw"))

    repository.delete_by_id(user.id)

    assert repository.get(user.id) is None
    assert repository.list_all() == []


def test_delete_missing_id_is_a_no_op(repository):
    repository.save(User(name="John Doe", email="john@example.com", password="pw"))

    repository.delete_by_id(999)

    assert len(repository.list_all()) == 1


def test_list_all_in_insertion_order(repository):
    for i in range(3):
        repository.save(User(name=f"User {i}", email=f"user{i}@example.com", password="pw"))

    assert [u.name for u in repository.list_all()] == ["User 0", "User 1", "User 2"]


def test_in_memory_store_is_not_aliased():
    repository = InMemoryUserRepository()
    user = repository.save(User(name="John Doe", email="john@example.com", password="pw"))

    fetched = repository.get(user.id)
    fetched.name = "Changed without save"

    assert repository.get(user.id).name == "John Doe"


def test_failed_sql_update_leaves_row_unchanged(session: Session):
    """A conflicting update must not leak a half-applied change into the database."""
    repository = SqlUserRepository(session)
    john = repository.save(User(name="John Doe", email="john@example.com", password="pw"))
    repository.save(User(name="Jane Doe", email="jane@example.com", password="pw"))
    service = UserService(repository)

    with pytest.raises(DataConflictError):
        service.update_user(john.id, UserDTO(name="Jane Doe", email="jane@example.com"))

    session.expire_all()
    stored = session.get(User, john.id)
    assert stored.name == "John Doe"
    assert stored.email == "john@example.com"
    assert stored.password == "pw"
