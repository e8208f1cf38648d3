"""Padding-free URL-safe base64 ("base64url").

The standard alphabet is used with ``+`` replaced by ``-`` and ``/`` by
``_``; trailing ``=`` padding is stripped on encode and restored on decode.
The output is safe inside a URI query value without percent-encoding.
"""
from __future__ import annotations

import base64
import binascii
import re

from gglas_linker.errors import DecodeError

_ALPHABET_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    """Encode *data* as unpadded base64url text."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode(text: str) -> bytes:
    """Decode unpadded base64url *text* back into bytes.

    Raises
    ------
    DecodeError
        When *text* contains characters outside the base64url alphabet, its
        length leaves a remainder of 1 modulo 4, or its final character
        carries non-zero unused bits.
    """
    if not _ALPHABET_RE.fullmatch(text):
        raise DecodeError("characters outside the base64url alphabet")

    remainder = len(text) % 4
    if remainder == 1:
        raise DecodeError(f"impossible length {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(str(exc)) from exc

    # Unused trailing bits must be zero so each byte string has one encoding.
    if encode(data) != text:
        raise DecodeError("non-canonical trailing bits")
    return data
