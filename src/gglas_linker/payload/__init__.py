"""payload — the AgentPayload claim set and its expiry helpers."""
from __future__ import annotations

from gglas_linker.payload.agent_payload import SCHEMA_VERSION, AgentPayload, generate_nonce
from gglas_linker.payload.expiry import format_expiry, parse_expiry
from gglas_linker.payload.schema import PayloadDocument

__all__ = [
    "AgentPayload",
    "PayloadDocument",
    "SCHEMA_VERSION",
    "format_expiry",
    "generate_nonce",
    "parse_expiry",
]
