"""Secret provider — resolves the HMAC key from one of three sources.

Precedence is literal value, then file contents (whitespace-trimmed), then
a named environment variable. A secret that resolves to empty or
whitespace-only text counts as missing.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from gglas_linker.errors import MissingSecretError

logger = logging.getLogger(__name__)


def resolve_secret(
    secret: str | None = None,
    secret_file: str | Path | None = None,
    secret_env: str | None = None,
) -> bytes:
    """Return the UTF-8 bytes of the first configured secret source.

    Parameters
    ----------
    secret:
        Literal secret value.
    secret_file:
        Path to a file whose trimmed contents are the secret.
    secret_env:
        Name of an environment variable holding the secret.

    Raises
    ------
    MissingSecretError
        When no source is configured or the chosen one yields nothing.
    OSError
        When *secret_file* is chosen but cannot be read.
    """
    value: str | None
    if secret is not None:
        value = secret
        source = "literal"
    elif secret_file is not None:
        value = Path(secret_file).read_text(encoding="utf-8").strip()
        source = f"file {secret_file}"
    elif secret_env is not None:
        value = os.environ.get(secret_env)
        source = f"environment variable {secret_env}"
    else:
        raise MissingSecretError()

    if value is None or not value.strip():
        logger.debug("Secret source %s resolved to nothing", source)
        raise MissingSecretError()

    logger.debug("Secret resolved from %s", source)
    return value.encode("utf-8")
