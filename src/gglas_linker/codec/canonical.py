"""Deterministic JSON emission for signed payloads."""
from __future__ import annotations

import json

#: Top-level field order of a serialized AgentPayload.
FIELD_ORDER: tuple[str, ...] = ("v", "agent", "scopes", "exp", "nonce")


def _sorted_value(value: object) -> object:
    if isinstance(value, dict):
        return {str(k): _sorted_value(value[k]) for k in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_sorted_value(item) for item in value]
    return value


def canonical_json(fields: dict[str, object]) -> str:
    """Serialize a payload field mapping to its canonical JSON text.

    Known fields are emitted in :data:`FIELD_ORDER`, any others follow in
    sorted order. Nested mappings have their keys sorted so that two
    semantically equal payloads always yield the same bytes. Separators
    are compact.
    """
    ordered: dict[str, object] = {}
    for name in FIELD_ORDER:
        if name in fields:
            ordered[name] = _sorted_value(fields[name])
    for name in sorted(k for k in fields if k not in FIELD_ORDER):
        ordered[name] = _sorted_value(fields[name])
    return json.dumps(ordered, separators=(",", ":"))
