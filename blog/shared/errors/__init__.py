from .base import (
    AppError,
    BadPostIdError,
    DomainError,
    InfrastructureError,
    PostNotFoundError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "BadPostIdError",
    "DomainError",
    "InfrastructureError",
    "PostNotFoundError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
