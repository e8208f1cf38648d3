"""Payload source — builds an AgentPayload from CLI options or a JSON file."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gglas_linker.errors import MissingPayloadSourceError, PayloadFileError
from gglas_linker.payload.agent_payload import AgentPayload, generate_nonce
from gglas_linker.payload.expiry import parse_expiry

logger = logging.getLogger(__name__)


def split_scopes(raw: str) -> list[str]:
    """Split a comma-separated scope list, trimming entries and dropping blanks."""
    return [scope.strip() for scope in raw.split(",") if scope.strip()]


def payload_from_options(
    name: str | None = None,
    role: str | None = None,
    scopes: str | None = None,
    exp: str | None = None,
) -> AgentPayload:
    """Assemble an AgentPayload from individual option values.

    Parameters
    ----------
    name:
        Stored as ``agent["name"]`` when given.
    role:
        Stored as ``agent["role"]`` when given.
    scopes:
        Comma-separated scope list, e.g. ``"web,files"``.
    exp:
        ISO-8601 expiry timestamp.

    Raises
    ------
    MissingPayloadSourceError
        When every option is None.
    InvalidExpiryFormatError
        When *exp* cannot be parsed.
    """
    if name is None and role is None and scopes is None and exp is None:
        raise MissingPayloadSourceError()

    payload = AgentPayload()
    if name is not None:
        payload.agent["name"] = name
    if role is not None:
        payload.agent["role"] = role
    if scopes is not None:
        payload.scopes = split_scopes(scopes)
    if exp is not None:
        payload.exp = parse_expiry(exp)
    return payload


def load_payload_file(path: str | Path) -> AgentPayload:
    """Read a JSON payload file into an AgentPayload.

    Top-level keys are matched case-insensitively (``"Agent"`` is read as
    ``"agent"``). A file without a ``nonce`` gets a freshly generated one.

    Raises
    ------
    PayloadFileError
        When the file cannot be read, is not a JSON object, or does not
        validate.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
        data: Any = json.loads(raw)
    except (OSError, json.JSONDecodeError) as exc:
        raise PayloadFileError(str(path), str(exc)) from exc

    if not isinstance(data, dict):
        raise PayloadFileError(str(path), "top-level JSON value is not an object")

    normalized = {str(key).lower(): value for key, value in data.items()}
    try:
        payload = AgentPayload.from_dict(normalized)
    except ValidationError as exc:
        raise PayloadFileError(str(path), str(exc)) from exc

    if not payload.nonce:
        payload.nonce = generate_nonce()
    logger.debug("Loaded payload file %s", path)
    return payload
