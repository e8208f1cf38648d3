"""Error taxonomy for gglas-linker.

Issuance-side problems (no secret, no payload source, a bad expiry string)
surface as exceptions. Verification never raises for a bad token: the
envelope engine converts :class:`DecodeError` and :class:`MalformedTokenError`
into a :class:`~gglas_linker.envelope.result.VerificationResult`, and
signature or expiry rejections are plain result statuses.
"""
from __future__ import annotations


class LinkerError(Exception):
    """Base class for all gglas-linker errors."""


class DecodeError(LinkerError):
    """Raised when a base64url string cannot be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid base64url input: {reason}")


class MalformedTokenError(LinkerError):
    """Raised when a token URI or its payload is structurally invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed token: {reason}")


class MissingSecretError(LinkerError):
    """Raised when no secret could be resolved from any source."""

    def __init__(self) -> None:
        super().__init__(
            "No secret resolved; use --secret, --secret-file or --secret-env"
        )


class MissingPayloadSourceError(LinkerError):
    """Raised when neither a payload file nor any payload flag was given."""

    def __init__(self) -> None:
        super().__init__(
            "No payload source; use --payload-file or --name/--role/--scopes/--exp"
        )


class InvalidExpiryFormatError(LinkerError):
    """Raised when an expiry timestamp cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid expiry timestamp: {value!r}")


class PayloadFileError(LinkerError):
    """Raised when a payload file cannot be read or does not validate."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid payload file {path!r}: {reason}")


__all__ = [
    "DecodeError",
    "InvalidExpiryFormatError",
    "LinkerError",
    "MalformedTokenError",
    "MissingPayloadSourceError",
    "MissingSecretError",
    "PayloadFileError",
]
