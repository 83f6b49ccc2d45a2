from .auth_controller import AuthController
from .posts_controller import PostsController, parse_post_id

__all__ = ["AuthController", "PostsController", "parse_post_id"]
