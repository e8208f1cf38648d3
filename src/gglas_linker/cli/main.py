"""CLI entry point for gglas-linker.

Invoked as::

    gglas-linker [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m gglas_linker.cli.main

Commands
--------
gen       Issue a signed token URI
verify    Verify a token URI
version   Show version information

Exit codes: 0 success, 1 expected rejection, 2 unexpected error.

Examples
--------
::

    export GGLAS_SECRET=mysupersecret
    gglas-linker gen --name Alice --role research --scopes web,files \\
        --exp 2099-01-01T00:00:00Z --secret-env GGLAS_SECRET
    gglas-linker verify --url "gglas://agent/new?payload=...&sig=..." \\
        --secret-env GGLAS_SECRET
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, NoReturn

import click
from rich.console import Console

from gglas_linker import __version__
from gglas_linker.envelope.engine import DEFAULT_PATH, DEFAULT_SCHEME, issue, verify
from gglas_linker.envelope.result import VerificationStatus
from gglas_linker.errors import MissingPayloadSourceError, MissingSecretError
from gglas_linker.sources.payload_source import load_payload_file, payload_from_options
from gglas_linker.sources.secret import resolve_secret

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

EXIT_REJECTED = 1
EXIT_ERROR = 2

_REJECTION_MESSAGES: dict[VerificationStatus, str] = {
    VerificationStatus.MALFORMED: "Malformed token",
    VerificationStatus.INVALID_SIGNATURE: "Signature invalid",
    VerificationStatus.EXPIRED: "Payload expired (exp)",
}


def _secret_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the secret source options (literal, file, environment variable)."""
    func = click.option(
        "--secret-env", default=None, help="Read the secret from this environment variable."
    )(func)
    func = click.option(
        "--secret-file",
        type=click.Path(dir_okay=False),
        default=None,
        help="Read the secret from this file (whitespace-trimmed).",
    )(func)
    func = click.option("--secret", default=None, help="Literal HMAC secret.")(func)
    return func


def _fail(message: str, code: int) -> NoReturn:
    err_console.print(message, markup=False)
    sys.exit(code)


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="gglas-linker")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """Generator/verifier for signed gglas:// agent links"""
    logging.basicConfig(level=getattr(logging, log_level.upper()))


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    console.print(f"[bold]gglas-linker[/bold] v{__version__}")


# ------------------------------------------------------------------
# gen
# ------------------------------------------------------------------


@cli.command(name="gen")
@click.option("--name", default=None, help="Agent name (agent.name).")
@click.option("--role", default=None, help="Agent role (agent.role).")
@click.option("--scopes", default=None, help="Comma-separated scopes, e.g. web,files.")
@click.option("--exp", default=None, help="ISO-8601 expiry, e.g. 2099-01-01T00:00:00Z.")
@click.option(
    "--payload-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON payload file; takes precedence over the individual flags.",
)
@_secret_options
@click.option(
    "--scheme", envvar="GGLAS_SCHEME", default=DEFAULT_SCHEME, show_default=True, help="URI scheme."
)
@click.option(
    "--path", envvar="GGLAS_PATH", default=DEFAULT_PATH, show_default=True, help="URI path."
)
def gen_command(
    name: str | None,
    role: str | None,
    scopes: str | None,
    exp: str | None,
    payload_file: str | None,
    secret: str | None,
    secret_file: str | None,
    secret_env: str | None,
    scheme: str,
    path: str,
) -> None:
    """Issue a signed token URI and print it."""
    try:
        secret_bytes = resolve_secret(secret, secret_file, secret_env)
        if payload_file:
            payload = load_payload_file(payload_file)
        else:
            payload = payload_from_options(name=name, role=role, scopes=scopes, exp=exp)
        url = issue(payload, secret_bytes, scheme=scheme, path=path)
    except (MissingSecretError, MissingPayloadSourceError) as exc:
        _fail(str(exc), EXIT_REJECTED)
    except Exception as exc:
        _fail(f"Error: {exc}", EXIT_ERROR)
    else:
        console.print(url, markup=False)


# ------------------------------------------------------------------
# verify
# ------------------------------------------------------------------


@cli.command(name="verify")
@click.option("--url", default=None, help="Token URI to verify.")
@_secret_options
def verify_command(
    url: str | None,
    secret: str | None,
    secret_file: str | None,
    secret_env: str | None,
) -> None:
    """Verify a token URI; print OK and the payload JSON on success."""
    if not url:
        _fail("--url is missing", EXIT_REJECTED)

    try:
        secret_bytes = resolve_secret(secret, secret_file, secret_env)
        result = verify(url, secret_bytes)
    except MissingSecretError as exc:
        _fail(str(exc), EXIT_REJECTED)
    except Exception as exc:
        _fail(f"Error: {exc}", EXIT_ERROR)
    else:
        if not result.ok:
            message = _REJECTION_MESSAGES[result.status]
            if result.detail:
                message = f"{message}: {result.detail}"
            _fail(message, EXIT_REJECTED)

        console.print("OK", markup=False)
        console.print(result.payload_json or "", markup=False)


if __name__ == "__main__":
    cli()
