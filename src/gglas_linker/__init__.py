"""gglas-linker — signed capability tokens carried in a custom URI scheme.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import gglas_linker
>>> gglas_linker.__version__
'0.1.0'

Quick start
-----------
::

    from gglas_linker import AgentPayload, issue, verify, parse_expiry

    payload = AgentPayload(
        agent={"name": "Alice", "role": "research"},
        scopes=["web", "files"],
        exp=parse_expiry("2099-01-01T00:00:00Z"),
    )
    uri = issue(payload, secret=b"mysupersecret")
    result = verify(uri, secret=b"mysupersecret")
    assert result.ok
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Codec
# ------------------------------------------------------------------
from gglas_linker.codec import b64url_decode, b64url_encode, canonical_json, parse_query

# ------------------------------------------------------------------
# Payload
# ------------------------------------------------------------------
from gglas_linker.payload import AgentPayload, format_expiry, generate_nonce, parse_expiry

# ------------------------------------------------------------------
# Envelope engine
# ------------------------------------------------------------------
from gglas_linker.envelope import (
    DEFAULT_PATH,
    DEFAULT_SCHEME,
    EnvelopeEngine,
    VerificationResult,
    VerificationStatus,
    constant_time_equals,
    issue,
    verify,
)

# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------
from gglas_linker.errors import (
    DecodeError,
    InvalidExpiryFormatError,
    LinkerError,
    MalformedTokenError,
    MissingPayloadSourceError,
    MissingSecretError,
    PayloadFileError,
)

__all__ = [
    # version
    "__version__",
    # codec
    "b64url_decode",
    "b64url_encode",
    "canonical_json",
    "parse_query",
    # payload
    "AgentPayload",
    "format_expiry",
    "generate_nonce",
    "parse_expiry",
    # envelope
    "DEFAULT_PATH",
    "DEFAULT_SCHEME",
    "EnvelopeEngine",
    "VerificationResult",
    "VerificationStatus",
    "constant_time_equals",
    "issue",
    "verify",
    # errors
    "DecodeError",
    "InvalidExpiryFormatError",
    "LinkerError",
    "MalformedTokenError",
    "MissingPayloadSourceError",
    "MissingSecretError",
    "PayloadFileError",
]
