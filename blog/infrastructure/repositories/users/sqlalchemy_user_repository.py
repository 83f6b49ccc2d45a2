# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.users.entities import User
from blog.domain.users.repositories import UserRepository
from blog.infrastructure.db import Database, UserRow


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_by_username(self, username: str) -> User | None:
        with self._database.session_scope() as session:
            row = session.query(UserRow).filter(UserRow.username == username).first()
            if not row:
                return None
            return User(
                id=row.id,
                username=row.username,
                password_hash=row.password_hash,
                created_at=row.created_at,
            )

    def add(self, username: str, password_hash: str, created_at: int) -> User:
        with self._database.session_scope() as session:
            row = UserRow(username=username, password_hash=password_hash, created_at=created_at)
            session.add(row)
            session.flush()
            return User(
                id=row.id,
                username=row.username,
                password_hash=row.password_hash,
                created_at=row.created_at,
            )
