"""sources — where secrets and payloads come from before the engine runs.

All I/O happens here, once, before :func:`~gglas_linker.envelope.issue` or
:func:`~gglas_linker.envelope.verify` is called with plain values.
"""
from __future__ import annotations

from gglas_linker.sources.payload_source import load_payload_file, payload_from_options, split_scopes
from gglas_linker.sources.secret import resolve_secret

__all__ = [
    "load_payload_file",
    "payload_from_options",
    "resolve_secret",
    "split_scopes",
]
