"""VerificationResult — the outcome of a single token verification."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gglas_linker.payload.agent_payload import AgentPayload


class VerificationStatus(str, Enum):
    """Terminal state of a verification call."""

    VALID = "valid"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class VerificationResult:
    """Result of verifying a token URI.

    Parameters
    ----------
    status:
        Which terminal state verification reached.
    payload:
        The decoded payload. Set for ``VALID`` and ``EXPIRED`` (the
        signature held in both cases), None otherwise.
    payload_json:
        The payload JSON text exactly as carried in the token, or None when
        the signature did not hold.
    detail:
        Diagnostic detail for ``MALFORMED`` results, empty otherwise.
    """

    status: VerificationStatus
    payload: Optional[AgentPayload] = None
    payload_json: Optional[str] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        """True only for ``VALID`` results."""
        return self.status is VerificationStatus.VALID

    @property
    def signature_valid(self) -> bool:
        """True when the HMAC matched, whether or not the payload expired."""
        return self.status in (VerificationStatus.VALID, VerificationStatus.EXPIRED)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def valid(cls, payload: AgentPayload, payload_json: str) -> "VerificationResult":
        return cls(VerificationStatus.VALID, payload=payload, payload_json=payload_json)

    @classmethod
    def expired(cls, payload: AgentPayload, payload_json: str) -> "VerificationResult":
        return cls(VerificationStatus.EXPIRED, payload=payload, payload_json=payload_json)

    @classmethod
    def invalid_signature(cls) -> "VerificationResult":
        return cls(VerificationStatus.INVALID_SIGNATURE)

    @classmethod
    def malformed(cls, detail: str) -> "VerificationResult":
        return cls(VerificationStatus.MALFORMED, detail=detail)
