import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import uvicorn

from blog_api.config import settings
from blog_api.core.errors import register_exception_handlers
from blog_api.database import create_tables, dispose_engine
from blog_api.routers import posts, users

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    if settings.create_tables_on_startup:
        create_tables()
    logger.info(f"{settings.app_name} started ({settings.app_env})")
    try:
        yield
    finally:
        dispose_engine()
        logger.info(f"{settings.app_name} stopped")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users.router)
app.include_router(posts.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy", "service": "blog_api"}


def run() -> None:
    """Start the API with uvicorn."""
    configure_logging()
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        loop="asyncio",  # Explicitly use asyncio instead of auto (which tries uvloop)
    )


if __name__ == "__main__":
    run()
