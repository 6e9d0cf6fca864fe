"""Pytest fixtures for blog_api tests."""

import os

# Settings are read at import time; keep the module-level engine off disk
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from typing import Callable, Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import blog_api.models  # noqa: E402, F401
from blog_api.core.roles import Role  # noqa: E402
from blog_api.database import Base, get_db  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.models.post import Post  # noqa: E402
from blog_api.models.user import User  # noqa: E402


@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite engine shared by every connection in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    yield engine

    # Cleanup: drop all tables
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine,
    )

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def test_client(test_db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database dependency override."""

    def override_get_db() -> Generator[Session, None, None]:
        """Override get_db dependency to use test database session."""
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    client = TestClient(app)

    try:
        yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def create_user(test_db_session: Session) -> Callable:
    """Factory function to create users directly in the database.

    Example:
        ```python
        def test_example(create_user):
            user = create_user(email="ann@example.com", name="Ann")
            assert user.uuid
        ```
    """

    def _create_user(email: str, name: str, role: Role = Role.USER) -> User:
        user = User(email=email, name=name, role=role)
        test_db_session.add(user)
        test_db_session.commit()
        test_db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture(scope="function")
def create_post(test_db_session: Session) -> Callable:
    """Factory function to create posts directly in the database."""

    def _create_post(user: User, title: str, body: str | None = None) -> Post:
        post = Post(title=title, body=body, user=user)
        test_db_session.add(post)
        test_db_session.commit()
        test_db_session.refresh(post)
        return post

    return _create_post
