"""Post schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.schemas.base import CamelModel


class PostCreate(CamelModel):
    """Post creation request schema. ``userUuid`` names the owning user."""

    title: str
    body: str | None = None
    user_uuid: str | None = Field(None, description="uuid of the user that owns the post")


class PostRead(CamelModel):
    """Full post record."""

    id: int
    title: str
    body: str | None
    user_id: int
    created_at: datetime
    updated_at: datetime


class PostSummary(CamelModel):
    """Title and body only, as nested in a single-user lookup."""

    title: str
    body: str | None
