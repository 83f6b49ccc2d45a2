from .create_post import CreatePostUseCase
from .delete_post import DeletePostUseCase
from .get_post import GetPostUseCase, ListPostsUseCase
from .update_post import UpdatePostUseCase

__all__ = [
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
]
