"""Response envelopes returned by the routers."""

from blog_api.core.roles import Role
from blog_api.schemas.base import CamelModel
from blog_api.schemas.post import PostRead, PostSummary
from blog_api.schemas.user import UserRead


class UserWithPosts(UserRead):
    """User record with every post it owns."""

    posts: list[PostRead]


class UserProjection(CamelModel):
    """Public view of a single user. Email and timestamps are left out."""

    uuid: str
    name: str
    role: Role
    posts: list[PostSummary]


class PostWithUser(PostRead):
    """Post record with its owning user."""

    user: UserRead


class UserCreatedResponse(CamelModel):
    user: UserRead
    message: str


class UserListResponse(CamelModel):
    message: str
    data: list[UserWithPosts]


class UserDetailResponse(CamelModel):
    status: str
    data: UserProjection


class UserUpdatedResponse(CamelModel):
    message: str
    data: UserRead


class UserDeletedResponse(CamelModel):
    message: str


class PostCreatedResponse(CamelModel):
    message: str
    data: PostRead


class PostListResponse(CamelModel):
    status: str
    message: str
    data: list[PostWithUser]
