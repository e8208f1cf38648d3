"""Test that the quickstart API works for gglas-linker."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import gglas_linker

    assert gglas_linker.__version__ == "0.1.0"


def test_quickstart_issue_and_verify() -> None:
    from gglas_linker import AgentPayload, issue, parse_expiry, verify

    payload = AgentPayload(
        agent={"name": "Alice", "role": "research"},
        scopes=["web", "files"],
        exp=parse_expiry("2099-01-01T00:00:00Z"),
    )
    uri = issue(payload, secret=b"mysupersecret")
    assert uri.startswith("gglas://agent/new?payload=")

    result = verify(uri, secret=b"mysupersecret")
    assert result.ok
    assert result.payload == payload


def test_quickstart_wrong_secret() -> None:
    from gglas_linker import AgentPayload, VerificationStatus, issue, verify

    uri = issue(AgentPayload(agent={"name": "Alice"}), secret=b"mysupersecret")
    assert verify(uri, secret=b"wrong").status is VerificationStatus.INVALID_SIGNATURE


def test_public_api_exports() -> None:
    import gglas_linker

    for name in gglas_linker.__all__:
        assert hasattr(gglas_linker, name), name
