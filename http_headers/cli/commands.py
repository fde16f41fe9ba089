"""CLI command implementations for inspecting HTTP header files."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from http_headers.core.checksum import SUPPORTED_HASH_ALGORITHMS
from http_headers.models.config import Config
from http_headers.models.expires import ExpiresKind
from http_headers.models.headers import Headers
from http_headers.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


def _load_headers(path: Path) -> Headers:
    """Read a JSON object of raw headers from ``path``."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{path} is not valid JSON: {exc.msg}"
        raise click.ClickException(msg) from exc
    if not isinstance(raw, dict):
        msg = f"{path} must contain a JSON object of header names to values"
        raise click.ClickException(msg)
    headers = Headers.create(raw)
    logger.debug("headers_loaded", path=str(path), header_count=len(headers))
    return headers


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        msg = f"--now must be an ISO-8601 timestamp, got {value!r}"
        raise click.BadParameter(msg) from exc


def _describe_expires(headers: Headers) -> str:
    expires = headers.get_expires()
    if expires.kind is ExpiresKind.AT and expires.timestamp is not None:
        return expires.timestamp.isoformat()
    return str(expires.kind)


def _print_summary(title: str, stats: dict[str, Any]) -> None:
    """Print a formatted summary of inspection results."""
    click.echo(f"[INFO] {title}")
    for key, value in stats.items():
        click.echo(f"  {key}: {value}")


@click.command(name="inspect")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--now", "now_value", default=None, help="Reference time (ISO-8601), defaults to now")
def inspect_headers(path: Path, now_value: str | None) -> None:
    """Show normalized headers and cache freshness for a JSON header file."""
    config = _get_config()
    configure_logging(config.log_level, config.log_format)
    now = _parse_now(now_value)
    headers = _load_headers(path)

    click.echo("[INFO] Headers")
    for name in headers.names():
        click.echo(f"  {name}: {headers.get_line(name)}")

    last_modified = headers.get_last_modified()
    _print_summary(
        "Freshness",
        {
            "last-modified": last_modified.isoformat() if last_modified else "absent",
            "age": headers.get_age(now),
            "expires": _describe_expires(headers),
            "has-expired": headers.has_expired(now),
            "hash": headers.create_hash(config.hash_algorithm),
        },
    )


@click.command(name="hash")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--algorithm",
    default=None,
    type=click.Choice(sorted(SUPPORTED_HASH_ALGORITHMS), case_sensitive=False),
    help="Digest algorithm, defaults to the configured hash_algorithm",
)
def hash_headers(path: Path, algorithm: str | None) -> None:
    """Print the content hash of a JSON header file."""
    config = _get_config()
    configure_logging(config.log_level, config.log_format)
    headers = _load_headers(path)
    click.echo(headers.create_hash(algorithm or config.hash_algorithm))
