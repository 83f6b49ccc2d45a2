"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from blog.application.services.password_hashing import WerkzeugPasswordHasher
from blog.application.use_cases.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.use_cases.users import AuthenticateUserUseCase, CreateUserUseCase
from blog.infrastructure.db import Database
from blog.infrastructure.repositories import SqlAlchemyPostRepository, SqlAlchemyUserRepository
from blog.infrastructure.session_store import CookieSessionStore
from blog.interfaces.http.controllers import AuthController, PostsController
from blog.shared.config import AppConfig


class Container:
    """Everything a request needs, built once per application and shared by reference."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def session_store(self) -> CookieSessionStore:
        return CookieSessionStore()

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.database)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    # Post use cases

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(posts=self.post_repository)

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(posts=self.post_repository)

    # User use cases

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    # Controllers

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_posts=self.list_posts_use_case,
            get_post=self.get_post_use_case,
            create_post=self.create_post_use_case,
            update_post=self.update_post_use_case,
            delete_post=self.delete_post_use_case,
            sessions=self.session_store,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            authenticate_use_case=self.authenticate_user_use_case,
            sessions=self.session_store,
        )
