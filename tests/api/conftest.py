"""
tests.api.conftest

Shared pytest fixtures for FastAPI error handler tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from api_errors import ErrorTypeName, new_api_error, with_internal_error
from api_errors.error_handlers import register_error_handlers
from api_errors.settings import Settings


class CreateUserRequest(BaseModel):
    email: str


def create_app(settings: Settings | None = None, **kwargs) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app, settings, **kwargs)

    @app.get("/users/{user_id}")
    def get_user(user_id: int) -> dict:
        raise new_api_error(
            ErrorTypeName.NOT_FOUND,
            "User not found",
            with_internal_error(RuntimeError("database connection failed")),
        )

    @app.post("/users")
    def create_user(req: CreateUserRequest) -> dict:
        return {"email": req.email}

    @app.get("/teapot")
    def teapot() -> dict:
        raise new_api_error("UserError", "Brewing refused")

    @app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("secret connection string")

    return app


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Used when tests need custom Settings or env vars before app creation.
        Server exceptions are not re-raised so the 500 handler can be asserted.
    """

    def _make(settings: Settings | None = None, **kwargs) -> TestClient:
        return TestClient(create_app(settings, **kwargs), raise_server_exceptions=False)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Back-compat alias for simple tests."""
    return client_factory(Settings())
