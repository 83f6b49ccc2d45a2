# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Flask

from blog.shared.errors import register_error_handler


def configure_error_handling(
    app: Flask,
    *,
    is_authenticated: Callable[[], bool] = lambda: False,
    debug_mode: bool = False,
) -> None:
    register_error_handler(app, is_authenticated=is_authenticated, debug_mode=debug_mode)
