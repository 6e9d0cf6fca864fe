"""User schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.core.roles import Role
from blog_api.schemas.base import CamelModel


class UserCreate(CamelModel):
    """User creation request schema."""

    name: str
    email: str
    role: Role | None = None


class UserUpdate(CamelModel):
    """User update request schema.

    Values are written as given. Keys missing from the request body are left
    untouched, so callers should dump with ``exclude_unset=True``.
    """

    name: str | None = None
    email: str | None = None
    role: str | None = None


class UserRead(CamelModel):
    """Full user record."""

    id: int
    uuid: str
    name: str
    email: str
    role: Role
    created_at: datetime = Field(..., description="Timestamp when the user was created")
    updated_at: datetime = Field(..., description="Timestamp when the user was last updated")
