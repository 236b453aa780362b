"""Error kinds surfaced by the dispatch layer."""

from __future__ import annotations

from typing import Iterable, Tuple

from .client import (
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
)


class OperationError(Exception):
    """Base error for a failed invocation; ``kind`` names the error category."""

    kind = "OperationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownOperationError(OperationError):
    kind = "UnknownOperation"


class InvalidArgumentsError(OperationError):
    kind = "InvalidArguments"

    def __init__(self, message: str, *, missing: Iterable[str] = ()):
        super().__init__(message)
        self.missing: Tuple[str, ...] = tuple(missing)


class UpstreamError(OperationError):
    kind = "UpstreamError"


class AuthenticationError(OperationError):
    """Raised once at startup when the upstream session cannot be established."""

    kind = "AuthenticationFailure"


__all__ = [
    "OperationError",
    "UnknownOperationError",
    "InvalidArgumentsError",
    "UpstreamError",
    "AuthenticationError",
    "LinearClientError",
    "LinearHTTPError",
    "LinearGraphQLError",
    "LinearParseError",
]
