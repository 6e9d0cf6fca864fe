"""Tests for API errors and exception handlers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError

from blog_api.core.errors import (
    ApiError,
    email_taken,
    error_kind,
    not_found,
    register_exception_handlers,
    sanitized_error,
    server_error,
    validation_failed,
)


def _db_error(cls):
    return cls("SELECT secret FROM users", {}, Exception("password=hunter2"))


def test_error_kind():
    assert error_kind(_db_error(IntegrityError)) == "constraint_violation"
    assert error_kind(_db_error(OperationalError)) == "database_error"
    assert error_kind(LookupError("missing")) == "record_not_found"
    assert error_kind(KeyError("missing")) == "record_not_found"
    assert error_kind(RuntimeError("boom")) == "internal_error"


def test_sanitized_error_hides_exception_text():
    error = sanitized_error(_db_error(OperationalError))

    assert error == {
        "kind": "database_error",
        "detail": "The database could not complete the operation",
    }
    assert "hunter2" not in str(error)
    assert "SELECT" not in str(error)


def test_api_error_content():
    assert not_found().to_content() == {"message": "User not found"}
    assert not_found().status_code == 404
    assert email_taken().status_code == 401
    assert email_taken().to_content() == {"message": "Email already exists!!"}

    error = validation_failed({"title": "required"})
    assert error.status_code == 400
    assert error.to_content() == {
        "message": "Error Make sure you entered the correct fields",
        "error": {"title": "required"},
    }

    error = server_error("Something Wrong", RuntimeError("boom"))
    assert error.status_code == 500
    assert error.to_content()["error"]["kind"] == "internal_error"


class _Item(BaseModel):
    name: str


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/api-error")
    async def raise_api_error():
        raise ApiError(418, "Short and stout", {"kind": "teapot"})

    @app.post("/items")
    async def create_item(item: _Item):
        return item

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internals")

    return app


def test_api_error_handler():
    client = TestClient(_build_app())

    response = client.get("/api-error")

    assert response.status_code == 418
    assert response.json() == {"message": "Short and stout", "error": {"kind": "teapot"}}


def test_request_validation_rendered_as_400():
    client = TestClient(_build_app())

    response = client.post("/items", json={})

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Error Make sure you entered the correct fields"
    assert list(data["error"]) == ["name"]


def test_malformed_json_rendered_as_400():
    client = TestClient(_build_app())

    response = client.post("/items", content=b"{not json", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_unhandled_exception_is_sanitized():
    client = TestClient(_build_app(), raise_server_exceptions=False)

    response = client.get("/crash")

    assert response.status_code == 500
    assert response.json() == {
        "message": "Something went wrong",
        "error": {"kind": "internal_error", "detail": "An unexpected error occurred"},
    }
    assert "secret internals" not in response.text
