# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User
from .repositories import PasswordHasher, UserRepository

__all__ = ["PasswordHasher", "User", "UserRepository"]
