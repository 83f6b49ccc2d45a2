# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select

from blog.domain.posts.entities import Post, PostDraft
from blog.domain.posts.repositories import PostRepository
from blog.infrastructure.db import Database, PostRow


def _to_domain(row: PostRow) -> Post:
    return Post(
        id=row.id,
        title=row.title,
        body=row.body,
        author=row.author,
        created_at=row.created_at,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def add(self, draft: PostDraft) -> Post:
        with self._database.session_scope() as session:
            row = PostRow(
                title=draft.title,
                body=draft.body,
                author=draft.author,
                created_at=draft.created_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def get(self, post_id: int) -> Post | None:
        with self._database.session_scope() as session:
            row = session.get(PostRow, post_id)
            if row is None:
                return None
            return _to_domain(row)

    def list(self) -> list[Post]:
        with self._database.session_scope() as session:
            rows = session.scalars(select(PostRow).order_by(PostRow.id)).all()
            return [_to_domain(row) for row in rows]

    def update(self, post_id: int, draft: PostDraft) -> Post | None:
        with self._database.session_scope() as session:
            row = session.get(PostRow, post_id)
            if row is None:
                return None
            row.title = draft.title
            row.body = draft.body
            row.author = draft.author
            row.created_at = draft.created_at
            session.flush()
            return _to_domain(row)

    def delete(self, post_id: int) -> bool:
        with self._database.session_scope() as session:
            row = session.get(PostRow, post_id)
            if row is None:
                return False
            session.delete(row)
            return True
