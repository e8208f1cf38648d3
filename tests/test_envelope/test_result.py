"""Tests for VerificationResult and VerificationStatus."""
from __future__ import annotations

from gglas_linker.envelope.result import VerificationResult, VerificationStatus
from gglas_linker.payload.agent_payload import AgentPayload


class TestVerificationStatus:
    def test_values(self) -> None:
        assert VerificationStatus.VALID.value == "valid"
        assert VerificationStatus.MALFORMED.value == "malformed"
        assert VerificationStatus.INVALID_SIGNATURE.value == "invalid_signature"
        assert VerificationStatus.EXPIRED.value == "expired"

    def test_is_str_enum(self) -> None:
        assert VerificationStatus("expired") is VerificationStatus.EXPIRED


class TestVerificationResult:
    def test_valid(self) -> None:
        payload = AgentPayload(agent={"name": "Alice"})
        result = VerificationResult.valid(payload, "{}")
        assert result.ok is True
        assert result.signature_valid is True
        assert result.payload is payload
        assert result.payload_json == "{}"

    def test_expired(self) -> None:
        result = VerificationResult.expired(AgentPayload(), "{}")
        assert result.ok is False
        assert result.signature_valid is True

    def test_invalid_signature(self) -> None:
        result = VerificationResult.invalid_signature()
        assert result.ok is False
        assert result.signature_valid is False
        assert result.payload is None

    def test_malformed_keeps_detail(self) -> None:
        result = VerificationResult.malformed("missing sig")
        assert result.status is VerificationStatus.MALFORMED
        assert result.detail == "missing sig"
        assert result.signature_valid is False
