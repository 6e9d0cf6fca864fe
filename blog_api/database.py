"""Database connection and session management."""

from typing import Any, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from blog_api.config import settings


def engine_options(database_url: str, echo: bool = False) -> dict[str, Any]:
    """Build create_engine keyword arguments for the given URL.

    SQLite connections are shared across the threads FastAPI runs sync work on,
    so they need ``check_same_thread`` disabled. Server databases get a pooled,
    pre-pinged engine.

    Args:
        database_url: SQLAlchemy connection URL
        echo: Whether to log every SQL statement

    Returns:
        dict: Keyword arguments for ``sqlalchemy.create_engine``
    """
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "echo": echo}

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,  # Number of connections to maintain
        "max_overflow": 20,  # Maximum number of connections beyond pool_size
        "echo": echo,
    }


# Create database engine
engine = create_engine(
    settings.database_url,
    **engine_options(settings.database_url, echo=settings.database_echo),
)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Base class for declarative models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency for getting database session.

    Yields:
        Session: SQLAlchemy database session

    Example:
        ```python
        from blog_api.database import get_db

        @router.get("/users")
        def list_users(db: Session = Depends(get_db)):
            return db.query(User).all()
        ```
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create any missing tables for the registered models."""
    # Importing the package registers every model on Base.metadata
    import blog_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Close all pooled connections."""
    engine.dispose()
