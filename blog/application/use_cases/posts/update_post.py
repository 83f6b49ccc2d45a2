# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from blog.domain.posts.entities import Post
from blog.domain.posts.repositories import PostRepository
from blog.shared.errors.base import PostNotFoundError

from .create_post import build_draft


class UpdatePostUseCase:
    """Overwrite every field of a post, including its timestamp."""

    def __init__(
        self,
        *,
        posts: PostRepository,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, post_id: int, title: str, body: str, author: str) -> Post:
        draft = build_draft(title, body, author, int(self._clock()))
        updated = self._posts.update(post_id, draft)
        if updated is None:
            raise PostNotFoundError(post_id)
        return updated
