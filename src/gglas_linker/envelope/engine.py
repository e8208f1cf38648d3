"""Envelope engine — issue and verify signed agent token URIs.

Token format
------------
::

    <scheme>://<path>?payload=<p64>&sig=<sig>

- ``p64``: base64url of the canonical payload JSON (UTF-8)
- ``sig``: base64url of HMAC-SHA256(secret, UTF-8 bytes of ``p64``)

The signature covers the encoded ``p64`` string, not the raw JSON, so a
verifier never has to re-serialize the payload. ``scheme`` and ``path``
are echoed on issuance and ignored on verification.

Both operations are pure: no shared state, no I/O, safe to call from any
number of threads at once.
"""
from __future__ import annotations

import datetime
import hashlib
import hmac
import json
import logging
from urllib.parse import urlsplit

from pydantic import ValidationError

from gglas_linker.codec.base64url import decode as b64url_decode
from gglas_linker.codec.base64url import encode as b64url_encode
from gglas_linker.codec.query import parse_query
from gglas_linker.envelope.compare import constant_time_equals
from gglas_linker.envelope.result import VerificationResult
from gglas_linker.errors import DecodeError, MalformedTokenError
from gglas_linker.payload.agent_payload import AgentPayload

logger = logging.getLogger(__name__)

DEFAULT_SCHEME: str = "gglas"
DEFAULT_PATH: str = "agent/new"

PAYLOAD_PARAM: str = "payload"
SIGNATURE_PARAM: str = "sig"


def compute_signature(p64: str, secret: bytes) -> bytes:
    """Return the raw HMAC-SHA256 digest of *p64* under *secret*."""
    return hmac.new(secret, p64.encode("utf-8"), hashlib.sha256).digest()


# ---------------------------------------------------------------------------
# Issuance
# ---------------------------------------------------------------------------


def issue(
    payload: AgentPayload,
    secret: bytes,
    scheme: str = DEFAULT_SCHEME,
    path: str = DEFAULT_PATH,
) -> str:
    """Sign *payload* and return the token URI.

    Parameters
    ----------
    payload:
        The claims to sign. Not mutated.
    secret:
        Non-empty HMAC key.
    scheme:
        URI scheme written into the token.
    path:
        URI authority/path written into the token.

    Returns
    -------
    str
        ``"{scheme}://{path}?payload={p64}&sig={sig}"``

    Raises
    ------
    ValueError
        When *secret* is empty.
    """
    if not secret:
        raise ValueError("secret must be a non-empty byte string")

    p64 = b64url_encode(payload.to_json().encode("utf-8"))
    sig = b64url_encode(compute_signature(p64, secret))

    logger.debug(
        "Issued token for agent %r (scopes=%s, exp=%s)",
        payload.agent.get("name"),
        payload.scopes,
        payload.exp.isoformat() if payload.exp else None,
    )
    return f"{scheme}://{path}?{PAYLOAD_PARAM}={p64}&{SIGNATURE_PARAM}={sig}"


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------


def verify(
    token_uri: str,
    secret: bytes,
    now: datetime.datetime | None = None,
) -> VerificationResult:
    """Verify a token URI and report its outcome.

    Parameters
    ----------
    token_uri:
        Absolute URI as produced by :func:`issue`.
    secret:
        Non-empty HMAC key; must equal the issuing key.
    now:
        Instant to evaluate expiry against. Defaults to the current UTC time.

    Returns
    -------
    VerificationResult
        One of ``MALFORMED``, ``INVALID_SIGNATURE``, ``EXPIRED`` or
        ``VALID``. Bad tokens never raise.

    Raises
    ------
    ValueError
        When *secret* is empty.
    """
    if not secret:
        raise ValueError("secret must be a non-empty byte string")

    try:
        p64, sig = _extract_envelope(token_uri)
        received = b64url_decode(sig)
    except (DecodeError, MalformedTokenError) as exc:
        logger.info("Rejected malformed token: %s", exc)
        return VerificationResult.malformed(exc.reason)

    expected = compute_signature(p64, secret)
    if not constant_time_equals(received, expected):
        logger.info("Rejected token with invalid signature")
        return VerificationResult.invalid_signature()

    try:
        payload_json, payload = _decode_payload(p64)
    except (DecodeError, MalformedTokenError) as exc:
        logger.info("Rejected signed token with undecodable payload: %s", exc)
        return VerificationResult.malformed(exc.reason)

    current = now or datetime.datetime.now(datetime.timezone.utc)
    if payload.is_expired(current):
        logger.info(
            "Rejected expired token for agent %r (exp=%s)",
            payload.agent.get("name"),
            payload.exp.isoformat() if payload.exp else None,
        )
        return VerificationResult.expired(payload, payload_json)

    logger.debug("Verified token for agent %r", payload.agent.get("name"))
    return VerificationResult.valid(payload, payload_json)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _extract_envelope(token_uri: str) -> tuple[str, str]:
    """Return the ``(payload, sig)`` query values of *token_uri*."""
    try:
        parts = urlsplit(token_uri.strip())
    except ValueError as exc:
        raise MalformedTokenError(f"unparsable URI: {exc}") from exc
    if not parts.scheme:
        raise MalformedTokenError("URI is not absolute")

    params = parse_query(parts.query)
    p64 = params.get(PAYLOAD_PARAM)
    sig = params.get(SIGNATURE_PARAM)
    if p64 is None or sig is None:
        raise MalformedTokenError(
            f"query must carry both {PAYLOAD_PARAM!r} and {SIGNATURE_PARAM!r}"
        )
    return p64, sig


def _decode_payload(p64: str) -> tuple[str, AgentPayload]:
    """Decode *p64* into its JSON text and the AgentPayload it describes."""
    try:
        payload_json = b64url_decode(p64).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTokenError(f"payload is not UTF-8: {exc}") from exc

    try:
        data = json.loads(payload_json)
    except json.JSONDecodeError as exc:
        raise MalformedTokenError(f"payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedTokenError("payload JSON is not an object")

    try:
        payload = AgentPayload.from_dict(data)
    except ValidationError as exc:
        raise MalformedTokenError(
            f"payload does not match the agent schema ({exc.error_count()} error(s))"
        ) from exc
    return payload_json, payload


# ---------------------------------------------------------------------------
# EnvelopeEngine
# ---------------------------------------------------------------------------


class EnvelopeEngine:
    """Issuer/verifier bound to one secret and one URI prefix.

    Holds only read-only configuration; every call is independent.

    Parameters
    ----------
    secret:
        Non-empty HMAC key shared by issuer and verifier.
    scheme:
        URI scheme used on issuance.
    path:
        URI path used on issuance.

    Examples
    --------
    >>> engine = EnvelopeEngine(b"mysupersecret")
    >>> uri = engine.issue(AgentPayload(agent={"name": "Alice"}))
    >>> engine.verify(uri).ok
    True
    """

    def __init__(
        self,
        secret: bytes,
        scheme: str = DEFAULT_SCHEME,
        path: str = DEFAULT_PATH,
    ) -> None:
        if not secret:
            raise ValueError("secret must be a non-empty byte string")
        self._secret = secret
        self.scheme = scheme
        self.path = path

    def issue(self, payload: AgentPayload) -> str:
        """Sign *payload* into a token URI."""
        return issue(payload, self._secret, scheme=self.scheme, path=self.path)

    def verify(
        self,
        token_uri: str,
        now: datetime.datetime | None = None,
    ) -> VerificationResult:
        """Verify *token_uri* against this engine's secret."""
        return verify(token_uri, self._secret, now=now)
