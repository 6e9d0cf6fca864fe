"""Tests for the application entry point."""

import inspect
from unittest.mock import patch

from fastapi.testclient import TestClient

from blog_api.config import settings
from blog_api.main import app, run
from blog_api.routers import posts, users

client = TestClient(app)


def test_health_endpoint():
    """Test that the /health endpoint returns the correct response."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"status": "healthy", "service": "blog_api"}


def test_routes_registered():
    """Test that every endpoint is mounted."""
    routes = {(method, route.path) for route in app.routes for method in (getattr(route, "methods", None) or ())}

    assert ("POST", "/users") in routes
    assert ("GET", "/users") in routes
    assert ("GET", "/users/{uuid}") in routes
    assert ("PUT", "/users/{uuid}") in routes
    assert ("DELETE", "/users/{uuid}") in routes
    assert ("POST", "/posts") in routes
    assert ("GET", "/posts") in routes


def test_lifespan_creates_tables_and_disposes_engine():
    """Test startup and shutdown hooks."""
    with (
        patch.object(settings, "create_tables_on_startup", True),
        patch("blog_api.main.create_tables") as mock_create,
        patch("blog_api.main.dispose_engine") as mock_dispose,
    ):
        with TestClient(app) as lifespan_client:
            mock_create.assert_called_once()
            assert lifespan_client.get("/health").status_code == 200
        mock_dispose.assert_called_once()


def test_lifespan_skips_table_creation_when_disabled():
    with (
        patch.object(settings, "create_tables_on_startup", False),
        patch("blog_api.main.create_tables") as mock_create,
        patch("blog_api.main.dispose_engine"),
    ):
        with TestClient(app):
            pass

    mock_create.assert_not_called()


@patch("blog_api.main.uvicorn.run")
def test_run_uses_configured_host_and_port(mock_run):
    with patch("blog_api.main.configure_logging"):
        run()

    mock_run.assert_called_once()
    _, kwargs = mock_run.call_args
    assert kwargs["host"] == settings.host
    assert kwargs["port"] == settings.port


def test_route_handlers_run_in_threadpool():
    """Test that handlers doing blocking database work are plain functions.

    FastAPI runs ``def`` endpoints in its threadpool, so a slow query holds up
    only its own request instead of the event loop.
    """
    handlers = [
        users.create_user,
        users.list_users,
        users.get_user,
        users.update_user,
        users.delete_user,
        posts.create_post,
        posts.list_posts,
    ]

    for handler in handlers:
        assert not inspect.iscoroutinefunction(handler), handler.__name__
