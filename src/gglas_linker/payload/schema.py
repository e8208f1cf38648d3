"""Pydantic model for validating payload JSON.

Used both for payload files handed to ``gen`` and for payload JSON decoded
out of a verified token. Unknown top-level keys are ignored; ``agent`` is
an open mapping so arbitrary identity attributes pass through.
"""
from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from gglas_linker.errors import InvalidExpiryFormatError
from gglas_linker.payload.expiry import ensure_utc, parse_expiry


class PayloadDocument(BaseModel):
    """Wire shape of an AgentPayload."""

    v: int = 1
    agent: dict[str, Any] = Field(default_factory=dict)
    scopes: Optional[list[str]] = None
    exp: Optional[datetime.datetime] = None
    nonce: str = ""

    @field_validator("exp", mode="before")
    @classmethod
    def _parse_exp(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return parse_expiry(value)
            except InvalidExpiryFormatError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @field_validator("exp")
    @classmethod
    def _exp_to_utc(cls, value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        if value is None:
            return None
        return ensure_utc(value)


__all__ = ["PayloadDocument"]
