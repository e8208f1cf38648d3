"""URI query-string parsing."""
from __future__ import annotations

from urllib.parse import unquote


def parse_query(query: str) -> dict[str, str]:
    """Split a query string into a key/value mapping.

    Pairs are separated by ``&`` and split on the first ``=``. Keys and
    values are percent-decoded; a pair without ``=`` maps to ``""``.
    A leading ``?`` is ignored, empty pairs are skipped, and when a key
    repeats the last value wins. Keys are stored case-sensitively.
    """
    result: dict[str, str] = {}
    if not query:
        return result

    for part in query.lstrip("?").split("&"):
        if not part:
            continue
        key, sep, value = part.partition("=")
        result[unquote(key)] = unquote(value) if sep else ""
    return result
