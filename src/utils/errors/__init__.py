"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ClientError,
    DestinationNotConfiguredError,
    InvalidJsonError,
    InvalidSignatureError,
    MethodNotAllowedError,
    PayloadTooLargeError,
    RateLimitedError,
    SubmissionValidationError,
)

__all__ = [
    "ClientError",
    "DestinationNotConfiguredError",
    "InvalidJsonError",
    "InvalidSignatureError",
    "MethodNotAllowedError",
    "PayloadTooLargeError",
    "RateLimitedError",
    "SubmissionValidationError",
]
