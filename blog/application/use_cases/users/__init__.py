from .authenticate_user import AuthenticateUserUseCase
from .create_user import CreateUserUseCase

__all__ = ["AuthenticateUserUseCase", "CreateUserUseCase"]
