"""
api_errors.registry

Purpose:
    Process-wide registry mapping symbolic error type names to an HTTP status
    code and a default message. Seeded with the standard HTTP failure categories
    and extendable at runtime.

Notes:
    - Registering an existing name overwrites it (last write wins).
    - Entries are never removed.
    - Reads and writes are guarded by a lock, so registration after startup is
      safe while other threads look names up.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

from api_errors.contracts.error_contract import ErrorTypeName
from api_errors.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorType:
    error_code: int
    message: str


def _entry(status: HTTPStatus, message: str) -> ErrorType:
    return ErrorType(int(status), message)


_DEFAULT_ERROR_TYPES: dict[str, ErrorType] = {
    ErrorTypeName.NOT_FOUND.value: _entry(HTTPStatus.NOT_FOUND, "Resource not found"),
    ErrorTypeName.INTERNAL_SERVER_ERROR.value: _entry(
        HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error"
    ),
    ErrorTypeName.BAD_REQUEST.value: _entry(HTTPStatus.BAD_REQUEST, "Bad request"),
    ErrorTypeName.UNAUTHORIZED.value: _entry(HTTPStatus.UNAUTHORIZED, "Unauthorized access"),
    ErrorTypeName.FORBIDDEN.value: _entry(HTTPStatus.FORBIDDEN, "Forbidden"),
    ErrorTypeName.CONFLICT.value: _entry(HTTPStatus.CONFLICT, "Conflict occurred"),
    ErrorTypeName.METHOD_NOT_ALLOWED.value: _entry(
        HTTPStatus.METHOD_NOT_ALLOWED, "Method not allowed"
    ),
    ErrorTypeName.REQUEST_TIMEOUT.value: _entry(HTTPStatus.REQUEST_TIMEOUT, "Request timed out"),
    ErrorTypeName.UNPROCESSABLE_ENTITY.value: _entry(
        HTTPStatus.UNPROCESSABLE_ENTITY, "Unprocessable entity"
    ),
    ErrorTypeName.TOO_MANY_REQUESTS.value: _entry(
        HTTPStatus.TOO_MANY_REQUESTS, "Too many requests"
    ),
}


def type_name(name: str | Enum) -> str:
    """Normalize an ErrorTypeName (or any str enum) to its plain string value."""
    if isinstance(name, Enum):
        return str(name.value)
    return name


class ErrorRegistry:
    """
    Mapping of symbolic error type name -> ErrorType.

    Lookups and registrations are linearizable per key.
    """

    def __init__(self, entries: dict[str, ErrorType] | None = None) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, ErrorType] = dict(entries or {})

    @classmethod
    def with_defaults(cls) -> ErrorRegistry:
        return cls(_DEFAULT_ERROR_TYPES)

    def lookup(self, name: str | Enum) -> ErrorType | None:
        with self._lock:
            return self._entries.get(type_name(name))

    def register(self, name: str | Enum, error_code: int, message: str) -> None:
        """
        Insert or overwrite an entry. No validation is performed on code or message.
        """
        key = type_name(name)
        with self._lock:
            overwritten = key in self._entries
            self._entries[key] = ErrorType(int(error_code), message)

        logger.debug(
            "Registered error type name=%s error_code=%s overwritten=%s",
            key,
            error_code,
            overwritten,
        )

    def find_by_code(self, error_code: int) -> str | None:
        """First registered name (insertion order) whose status code matches."""
        with self._lock:
            for name, entry in self._entries.items():
                if entry.error_code == error_code:
                    return name
        return None

    def snapshot(self) -> dict[str, ErrorType]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return type_name(name) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


ERROR_REGISTRY = ErrorRegistry.with_defaults()


def lookup_error_type(name: str | Enum) -> ErrorType | None:
    return ERROR_REGISTRY.lookup(name)


def register_error_type(name: str | Enum, error_code: int, message: str) -> None:
    """Add (or overwrite) a project-specific error type in the shared registry."""
    ERROR_REGISTRY.register(name, error_code, message)
