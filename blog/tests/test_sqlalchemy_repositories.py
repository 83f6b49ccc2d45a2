from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from blog.domain.posts.entities import Post, PostDraft
from blog.infrastructure.db import Database
from blog.infrastructure.repositories import SqlAlchemyPostRepository, SqlAlchemyUserRepository
from blog.shared.config import DatabaseConfig


@pytest.fixture()
def database(tmp_path: Path) -> Iterator[Database]:
    database = Database(DatabaseConfig(_env_file=None, url=f"sqlite:///{tmp_path / 'repo.db'}"))
    database.create_tables()
    yield database
    database.dispose()


def test_create_tables_is_idempotent(database: Database) -> None:
    database.create_tables()

    tables = set(inspect(database.engine).get_table_names())
    assert {"posts", "users"} <= tables


def test_in_memory_database_keeps_schema_across_sessions() -> None:
    database = Database(DatabaseConfig(_env_file=None, url="sqlite://"))
    database.create_tables()
    posts = SqlAlchemyPostRepository(database)

    created = posts.add(PostDraft(title="A", body="B", author="C", created_at=1))

    assert posts.get(created.id) == created
    database.dispose()


def test_post_lifecycle(database: Database) -> None:
    posts = SqlAlchemyPostRepository(database)

    created = posts.add(PostDraft(title="A", body="B", author="C", created_at=10))
    assert created == Post(id=1, title="A", body="B", author="C", created_at=10)
    assert posts.get(1) == created

    updated = posts.update(1, PostDraft(title="A2", body="B2", author="C2", created_at=20))
    assert updated == Post(id=1, title="A2", body="B2", author="C2", created_at=20)
    assert posts.get(1) == updated

    assert posts.delete(1) is True
    assert posts.get(1) is None
    assert posts.delete(1) is False


def test_ids_are_not_reused_after_delete(database: Database) -> None:
    posts = SqlAlchemyPostRepository(database)
    first = posts.add(PostDraft(title="A", body="B", author="C", created_at=1))
    second = posts.add(PostDraft(title="D", body="E", author="F", created_at=2))
    posts.delete(second.id)

    third = posts.add(PostDraft(title="G", body="H", author="I", created_at=3))

    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_list_and_update_missing(database: Database) -> None:
    posts = SqlAlchemyPostRepository(database)
    assert posts.list() == []

    posts.add(PostDraft(title="one", body="1", author="x", created_at=1))
    posts.add(PostDraft(title="two", body="2", author="y", created_at=2))

    assert [post.title for post in posts.list()] == ["one", "two"]
    assert posts.update(99, PostDraft(title="t", body="b", author="a", created_at=3)) is None


def test_user_repository(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)

    assert users.find_by_username("alice") is None
    created = users.add("alice", "hash", 5)

    found = users.find_by_username("alice")
    assert found == created
    assert found is not None and found.password_hash == "hash"


def test_usernames_are_unique(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)
    users.add("alice", "hash", 5)

    with pytest.raises(IntegrityError):
        users.add("alice", "other", 6)
