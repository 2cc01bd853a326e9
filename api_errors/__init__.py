"""
api_errors

Shared structured error type for HTTP APIs: one JSON shape and one mapping from
symbolic error type to HTTP status code for every service in the family.
"""

from __future__ import annotations

from .contracts.error_contract import GENERIC_ERROR_TYPE, ApiErrorPayload, ErrorTypeName
from .errors import (
    FALLBACK_ERROR_CODE,
    ApiError,
    ApiErrorDecodeError,
    ApiErrorDraft,
    ErrorOption,
    TextError,
    new_api_error,
    with_internal_error,
)
from .registry import (
    ERROR_REGISTRY,
    ErrorRegistry,
    ErrorType,
    lookup_error_type,
    register_error_type,
)

__all__ = [
    "ERROR_REGISTRY",
    "FALLBACK_ERROR_CODE",
    "GENERIC_ERROR_TYPE",
    "ApiError",
    "ApiErrorDecodeError",
    "ApiErrorDraft",
    "ApiErrorPayload",
    "ErrorOption",
    "ErrorRegistry",
    "ErrorType",
    "ErrorTypeName",
    "TextError",
    "__version__",
    "lookup_error_type",
    "new_api_error",
    "register_error_type",
    "with_internal_error",
]

__version__ = "0.1.0"
