from .auth import LoginFormDTO
from .posts import PostFormDTO

__all__ = ["LoginFormDTO", "PostFormDTO"]
