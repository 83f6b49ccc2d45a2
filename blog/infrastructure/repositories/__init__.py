# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts.sqlalchemy_post_repository import SqlAlchemyPostRepository
from .users.sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyPostRepository", "SqlAlchemyUserRepository"]
