# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.domain.users.repositories import PasswordHasher, UserRepository
from blog.shared.logging import logger


class AuthenticateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        # Unknown usernames are checked against this so both failure paths cost one verify.
        self._dummy_hash = password_hasher.hash("blog-dummy-password")

    def execute(self, username: str, password: str) -> bool:
        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash)
            logger.info(f"auth.authenticate: unknown user (username={username})")
            return False

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.authenticate: bad password (username={username})")
            return False

        return True
