"""User model."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from blog_api.core.roles import Role
from blog_api.database import Base


class User(Base):
    """User model. Exposed to clients by ``uuid``; ``id`` stays internal."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(
        String(36),
        unique=True,
        index=True,
        nullable=False,
        default=lambda: str(uuid4()),
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(
        Enum(Role, name="role", validate_strings=True),
        default=Role.USER,
        nullable=False,
    )
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    posts = relationship("Post", back_populates="user", order_by="Post.id")

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, uuid={self.uuid}, email={self.email}, role={self.role})>"
