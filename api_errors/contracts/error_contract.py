"""
api_errors.contracts.error_contract

Purpose:
    Stable wire contract for structured API errors (type names + payload model).
    Every service in the family encodes and decodes errors through ApiErrorPayload.

Notes:
    - Member order is part of the contract: internal_error (optional), error_type,
      message, error_code.
    - Fields are strict so a malformed payload is rejected instead of coerced.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


GENERIC_ERROR_TYPE = "GenericError"


class ErrorTypeName(str, Enum):
    NOT_FOUND = "NotFoundError"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    BAD_REQUEST = "BadRequestError"
    UNAUTHORIZED = "UnauthorizedError"
    FORBIDDEN = "ForbiddenError"
    CONFLICT = "ConflictError"
    METHOD_NOT_ALLOWED = "MethodNotAllowedError"
    REQUEST_TIMEOUT = "RequestTimeoutError"
    UNPROCESSABLE_ENTITY = "UnprocessableEntityError"
    TOO_MANY_REQUESTS = "TooManyRequestsError"


class ApiErrorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    internal_error: StrictStr | None = Field(
        default=None, description="Rendered text of the wrapped cause, if any"
    )
    error_type: StrictStr = Field(..., description="Symbolic error category")
    message: StrictStr = Field(..., description="Human-readable error message")
    error_code: StrictInt = Field(..., description="HTTP status code for the category")
