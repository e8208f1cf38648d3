#!/usr/bin/env python3
"""Example: Quickstart

Issues a gglas:// token for an agent, verifies it, and shows the three
rejection outcomes (wrong secret, tampering, expiry).

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install gglas-linker
"""
from __future__ import annotations

import datetime

import gglas_linker
from gglas_linker import AgentPayload, EnvelopeEngine, parse_expiry


def main() -> None:
    print(f"gglas-linker version: {gglas_linker.__version__}")

    engine = EnvelopeEngine(b"mysupersecret")

    # Step 1: Issue a token
    payload = AgentPayload(
        agent={"name": "Alice", "role": "research"},
        scopes=["web", "files"],
        exp=parse_expiry("2099-01-01T00:00:00Z"),
    )
    uri = engine.issue(payload)
    print(f"Issued: {uri}")

    # Step 2: Verify it
    result = engine.verify(uri)
    print(f"Verify with the right secret: {result.status.value}")
    print(f"  payload JSON: {result.payload_json}")

    # Step 3: Rejections
    wrong = EnvelopeEngine(b"wrong").verify(uri)
    print(f"Verify with a wrong secret:   {wrong.status.value}")

    tampered = uri.replace("payload=e", "payload=f", 1)
    print(f"Verify a tampered token:      {engine.verify(tampered).status.value}")

    stale = AgentPayload(
        agent={"name": "Alice"},
        exp=datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(seconds=1),
    )
    print(f"Verify an expired token:      {engine.verify(engine.issue(stale)).status.value}")


if __name__ == "__main__":
    main()
