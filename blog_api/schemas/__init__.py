"""Pydantic schemas package."""

from blog_api.schemas.post import PostCreate, PostRead, PostSummary
from blog_api.schemas.responses import (
    PostCreatedResponse,
    PostListResponse,
    PostWithUser,
    UserCreatedResponse,
    UserDeletedResponse,
    UserDetailResponse,
    UserListResponse,
    UserProjection,
    UserUpdatedResponse,
    UserWithPosts,
)
from blog_api.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "PostCreate",
    "PostCreatedResponse",
    "PostListResponse",
    "PostRead",
    "PostSummary",
    "PostWithUser",
    "UserCreate",
    "UserCreatedResponse",
    "UserDeletedResponse",
    "UserDetailResponse",
    "UserListResponse",
    "UserProjection",
    "UserRead",
    "UserUpdate",
    "UserUpdatedResponse",
    "UserWithPosts",
]
