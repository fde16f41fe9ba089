"""CLI entry point for http-headers."""

from __future__ import annotations

import click

from http_headers.cli.commands import hash_headers, inspect_headers


@click.group()
def cli() -> None:
    """Inspect HTTP response headers and their cache freshness."""


cli.add_command(inspect_headers)
cli.add_command(hash_headers)
