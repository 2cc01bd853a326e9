"""
api_errors.error_handlers

Purpose:
    Register global exception handlers so a FastAPI app answers every failure
    with the ApiError wire format.

Notes:
    - ApiError is returned as-is (status = error_code).
    - Framework HTTP errors are classified through the registry by status code.
    - Validation failures map to UnprocessableEntityError.
    - Anything else becomes InternalServerError; its cause is never exposed.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_errors.contracts.error_contract import GENERIC_ERROR_TYPE, ErrorTypeName
from api_errors.errors import ApiError, new_api_error, with_internal_error
from api_errors.registry import ERROR_REGISTRY, ErrorRegistry
from api_errors.settings import Settings, get_settings
from api_errors.utils.logging import get_logger

logger = get_logger(__name__)


def api_error_response(exc: ApiError, *, expose_internal_error: bool = True) -> JSONResponse:
    """Project an ApiError onto an HTTP response carrying the wire body."""
    code, _ = exc.http_error()
    body = exc.to_dict()
    if not expose_internal_error:
        body.pop("internal_error", None)
    return JSONResponse(status_code=code, content=body)


def _from_http_exception(exc: StarletteHTTPException, registry: ErrorRegistry) -> ApiError:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    name = registry.find_by_code(exc.status_code)
    if name is not None:
        return new_api_error(name, message, registry=registry)

    # Unregistered status: keep the framework's code rather than degrading to 500.
    return ApiError(error_type=GENERIC_ERROR_TYPE, message=message, error_code=exc.status_code)


def register_error_handlers(
    app: FastAPI,
    settings: Settings | None = None,
    *,
    registry: ErrorRegistry | None = None,
) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """
    cfg = settings or get_settings()
    reg = registry if registry is not None else ERROR_REGISTRY

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning(
            "Handled ApiError method=%s path=%s error_type=%s error_code=%s",
            request.method,
            request.url.path,
            exc.error_type,
            exc.error_code,
        )
        return api_error_response(exc, expose_internal_error=cfg.expose_internal_error)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        api_exc = _from_http_exception(exc, reg)
        response = api_error_response(api_exc, expose_internal_error=False)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request validation failed path=%s errors=%s", request.url.path, exc.errors())

        api_exc = new_api_error(
            ErrorTypeName.UNPROCESSABLE_ENTITY,
            cfg.validation_error_message,
            with_internal_error(exc),
            registry=reg,
        )
        return api_error_response(api_exc, expose_internal_error=False)

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        api_exc = new_api_error(
            ErrorTypeName.INTERNAL_SERVER_ERROR,
            cfg.unhandled_error_message,
            with_internal_error(exc),
            registry=reg,
        )
        return api_error_response(api_exc, expose_internal_error=False)
