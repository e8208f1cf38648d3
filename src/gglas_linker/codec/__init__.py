"""codec — base64url, query-string and canonical JSON helpers.

Example
-------
::

    from gglas_linker.codec import b64url_decode, b64url_encode

    text = b64url_encode(b"\xfb\xff")
    assert "+" not in text and "/" not in text and "=" not in text
    assert b64url_decode(text) == b"\xfb\xff"
"""
from __future__ import annotations

from gglas_linker.codec.base64url import decode as b64url_decode
from gglas_linker.codec.base64url import encode as b64url_encode
from gglas_linker.codec.canonical import FIELD_ORDER, canonical_json
from gglas_linker.codec.query import parse_query

__all__ = [
    "FIELD_ORDER",
    "b64url_decode",
    "b64url_encode",
    "canonical_json",
    "parse_query",
]
