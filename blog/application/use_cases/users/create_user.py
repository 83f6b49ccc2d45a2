# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from blog.domain.users.entities import User
from blog.domain.users.exceptions import UserAlreadyExistsError
from blog.domain.users.repositories import PasswordHasher, UserRepository
from blog.shared.errors.base import ValidationError


class CreateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, username: str, password: str) -> User:
        username = username.strip()
        if not username or not password:
            raise ValidationError(context={"fields": ["username", "password"]})
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError(context={"username": username})
        hashed = self._password_hasher.hash(password)
        return self._users.add(username, hashed, int(self._clock()))
