"""Constant-time byte comparison for signature checks."""
from __future__ import annotations


def constant_time_equals(left: bytes, right: bytes) -> bool:
    """Return True when *left* and *right* hold identical bytes.

    Unequal lengths return False immediately; only the length is revealed
    by that. For equal lengths every byte pair is visited and differences
    are OR-accumulated, so the scan never exits early on a mismatch.
    """
    if len(left) != len(right):
        return False

    diff = 0
    for a, b in zip(left, right):
        diff |= a ^ b
    return diff == 0
