"""
api_errors.errors

Purpose:
    Structured API error value shared by every service in the API family.
    Routes raise ApiError; handlers project it onto HTTP or encode it for the wire.

Notes:
    - new_api_error never fails: unknown type names degrade to GenericError / 500.
    - The wrapped cause is flattened into the payload as its rendered text only.
    - Decoding rebuilds the cause as a TextError and never consults the registry.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError

from api_errors.contracts.error_contract import GENERIC_ERROR_TYPE, ApiErrorPayload
from api_errors.registry import ERROR_REGISTRY, ErrorRegistry, type_name


FALLBACK_ERROR_CODE = int(HTTPStatus.INTERNAL_SERVER_ERROR)


class ApiErrorDecodeError(ValueError):
    """Raised when wire bytes are not a well-formed ApiError payload."""


class TextError(Exception):
    """
    Text-only stand-in for a wrapped cause read back from the wire.

    The original cause's type and chain are not recoverable; only its text is.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ApiError(Exception):
    error_type: str
    message: str
    error_code: int
    internal_error: BaseException | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "error_type", type_name(self.error_type))
        object.__setattr__(self, "error_code", int(self.error_code))
        # Chain the cause so tracebacks show it when the error is raised.
        if self.internal_error is not None and self.__cause__ is None:
            object.__setattr__(self, "__cause__", self.internal_error)

    def __str__(self) -> str:
        return f"Error {self.error_code}: {self.message}"

    def http_error(self) -> tuple[int, str]:
        """(status code, message) for handlers writing a response without JSON."""
        return self.error_code, self.message

    # ------------------------------------------------------------------
    # Wire encoding
    # ------------------------------------------------------------------

    def to_payload(self) -> ApiErrorPayload:
        return ApiErrorPayload(
            internal_error=str(self.internal_error) if self.internal_error is not None else None,
            error_type=self.error_type,
            message=self.message,
            error_code=self.error_code,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(exclude_none=True)

    def to_json(self) -> str:
        return self.to_payload().model_dump_json(exclude_none=True)

    # ------------------------------------------------------------------
    # Wire decoding
    # ------------------------------------------------------------------

    @classmethod
    def from_payload(cls, payload: ApiErrorPayload) -> ApiError:
        cause = TextError(payload.internal_error) if payload.internal_error is not None else None
        return cls(
            error_type=payload.error_type,
            message=payload.message,
            error_code=payload.error_code,
            internal_error=cause,
        )

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> ApiError:
        """
        Decode a wire payload.

        Raises:
            ApiErrorDecodeError: the input is not valid JSON or does not match
            the payload shape (missing member, non-integer error_code, ...).
        """
        try:
            payload = ApiErrorPayload.model_validate_json(data)
        except ValidationError as exc:
            raise ApiErrorDecodeError(f"Invalid ApiError payload: {exc}") from exc
        return cls.from_payload(payload)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApiError:
        try:
            payload = ApiErrorPayload.model_validate(data)
        except ValidationError as exc:
            raise ApiErrorDecodeError(f"Invalid ApiError payload: {exc}") from exc
        return cls.from_payload(payload)


@dataclass
class ApiErrorDraft:
    """Mutable value under construction; options edit it before it is frozen."""

    error_type: str
    message: str
    error_code: int
    internal_error: BaseException | None = None

    def freeze(self) -> ApiError:
        return ApiError(
            error_type=self.error_type,
            message=self.message,
            error_code=self.error_code,
            internal_error=self.internal_error,
        )


ErrorOption = Callable[[ApiErrorDraft], None]


def with_internal_error(err: BaseException | None) -> ErrorOption:
    """Attach a wrapped cause. Passing None clears one set by an earlier option."""

    def _apply(draft: ApiErrorDraft) -> None:
        draft.internal_error = err

    return _apply


def new_api_error(
    error_type: str | Enum,
    message: str,
    *options: ErrorOption,
    registry: ErrorRegistry | None = None,
) -> ApiError:
    """
    Build an ApiError from a symbolic type name.

    The registry supplies the status code only; the caller's message is always kept.
    Unknown type names fall back to GenericError with a 500 code. Options run in
    the order given, so a later option wins.
    """
    reg = registry if registry is not None else ERROR_REGISTRY

    draft = ApiErrorDraft(
        error_type=GENERIC_ERROR_TYPE,
        message=message,
        error_code=FALLBACK_ERROR_CODE,
    )

    entry = reg.lookup(error_type)
    if entry is not None:
        draft.error_type = type_name(error_type)
        draft.error_code = entry.error_code

    for option in options:
        option(draft)

    return draft.freeze()
