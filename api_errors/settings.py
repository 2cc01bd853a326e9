# api_errors/settings.py
"""
api_errors.settings

Purpose:
    Centralized configuration for the HTTP error adapter.
    Keeps response policy (cause exposure, fallback messages) out of handler code.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


EXPOSE_INTERNAL_ERROR_ENV = "API_ERRORS_EXPOSE_INTERNAL_ERROR"


def _as_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    v = value.strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    return None


class Settings(BaseModel):
    # Wire contract includes internal_error; services may turn it off for public APIs.
    expose_internal_error: bool = Field(default=True)

    validation_error_message: str = Field(default="Request validation failed")
    unhandled_error_message: str = Field(default="Internal server error")


def get_settings() -> Settings:
    overrides: dict[str, object] = {}

    expose = _as_bool(os.getenv(EXPOSE_INTERNAL_ERROR_ENV))
    if expose is not None:
        overrides["expose_internal_error"] = expose

    return Settings(**overrides)
