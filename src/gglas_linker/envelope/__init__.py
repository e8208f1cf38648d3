"""envelope — issuance and verification of signed token URIs.

Example
-------
::

    from gglas_linker.envelope import issue, verify
    from gglas_linker.payload import AgentPayload

    uri = issue(AgentPayload(agent={"name": "Alice"}), secret=b"s3cret")
    result = verify(uri, secret=b"s3cret")
    assert result.ok
"""
from __future__ import annotations

from gglas_linker.envelope.compare import constant_time_equals
from gglas_linker.envelope.engine import (
    DEFAULT_PATH,
    DEFAULT_SCHEME,
    EnvelopeEngine,
    compute_signature,
    issue,
    verify,
)
from gglas_linker.envelope.result import VerificationResult, VerificationStatus

__all__ = [
    "DEFAULT_PATH",
    "DEFAULT_SCHEME",
    "EnvelopeEngine",
    "VerificationResult",
    "VerificationStatus",
    "compute_signature",
    "constant_time_equals",
    "issue",
    "verify",
]
