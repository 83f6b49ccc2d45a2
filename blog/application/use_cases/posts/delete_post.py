# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.posts.repositories import PostRepository
from blog.shared.errors.base import PostNotFoundError


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> None:
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
