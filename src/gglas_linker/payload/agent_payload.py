"""AgentPayload — the signed claim set carried inside a token.

A payload is built once at issuance (from CLI options or a JSON file),
encoded, and discarded. On verification it is rebuilt from the decoded
JSON. Equality is field-for-field, so a payload without ``scopes`` is not
equal to one with ``scopes=[]``.
"""
from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from gglas_linker.codec.canonical import canonical_json
from gglas_linker.payload.expiry import ensure_utc, format_expiry
from gglas_linker.payload.schema import PayloadDocument

SCHEMA_VERSION: int = 1


def generate_nonce() -> str:
    """Return a fresh 32-character hex nonce."""
    return uuid.uuid4().hex


@dataclass
class AgentPayload:
    """Agent identity claims protected by the token signature.

    Parameters
    ----------
    v:
        Schema version. Defaults to 1.
    agent:
        Open-ended identity attributes (``name``, ``role``, ...). Values may
        be any JSON value; unknown keys are preserved.
    scopes:
        Permission scopes in issuance order, or None when unspecified.
    exp:
        Aware UTC datetime after which the token is stale, or None.
    nonce:
        Opaque per-payload randomness. Not checked for uniqueness.

    Examples
    --------
    >>> payload = AgentPayload(agent={"name": "Alice"}, scopes=["web"])
    >>> payload.to_dict()["scopes"]
    ['web']
    """

    v: int = SCHEMA_VERSION
    agent: dict[str, Any] = field(default_factory=dict)
    scopes: Optional[list[str]] = None
    exp: Optional[datetime.datetime] = None
    nonce: str = field(default_factory=generate_nonce)

    def __post_init__(self) -> None:
        if self.exp is not None:
            self.exp = ensure_utc(self.exp)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_expired(self, now: datetime.datetime | None = None) -> bool:
        """Return True if ``exp`` is set and *now* is strictly after it."""
        if self.exp is None:
            return False
        if now is None:
            now = datetime.datetime.now(datetime.timezone.utc)
        current = ensure_utc(now)
        return current > ensure_utc(self.exp)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary; absent optional fields are omitted."""
        data: dict[str, object] = {"v": self.v, "agent": dict(self.agent)}
        if self.scopes is not None:
            data["scopes"] = list(self.scopes)
        if self.exp is not None:
            data["exp"] = format_expiry(self.exp)
        data["nonce"] = self.nonce
        return data

    def to_json(self) -> str:
        """Return the canonical JSON text that gets signed."""
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentPayload":
        """Build an AgentPayload from a decoded JSON object.

        Raises
        ------
        pydantic.ValidationError
            When a field has the wrong type or ``exp`` is unparsable.
        """
        document = PayloadDocument.model_validate(data)
        return cls(
            v=document.v,
            agent=dict(document.agent),
            scopes=list(document.scopes) if document.scopes is not None else None,
            exp=document.exp,
            nonce=document.nonce,
        )
