"""Error kinds and the exception hierarchy.

Fatal kinds (unknown transformation, invalid domain, missing dictionary) stop
a run before any generation starts. Network kinds are per-candidate only and
are folded into a check status by the status checker.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Stable error codes, surfaced as ``ServiceError.code``."""

    UNKNOWN_TRANSFORMATION = "UNKNOWN_TRANSFORMATION"
    INVALID_DOMAIN = "INVALID_DOMAIN"
    MISSING_DICTIONARY = "MISSING_DICTIONARY"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    RESOLUTION_FAILURE = "RESOLUTION_FAILURE"

    @property
    def is_fatal(self) -> bool:
        return self not in (ErrorKind.NETWORK_TIMEOUT, ErrorKind.RESOLUTION_FAILURE)


class DomfuzzError(Exception):
    """Base class for every error raised by domfuzz itself."""

    kind: ErrorKind

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class UnknownTransformationError(DomfuzzError):
    kind = ErrorKind.UNKNOWN_TRANSFORMATION


class InvalidDomainError(DomfuzzError):
    kind = ErrorKind.INVALID_DOMAIN


class MissingDictionaryError(DomfuzzError):
    kind = ErrorKind.MISSING_DICTIONARY


class NetworkTimeoutError(DomfuzzError):
    kind = ErrorKind.NETWORK_TIMEOUT


class ResolutionFailureError(DomfuzzError):
    kind = ErrorKind.RESOLUTION_FAILURE
