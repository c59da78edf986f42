# -*- coding: utf-8 -*-
"""CLI auth: list stored credentials and their lifecycle state."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

import click

from ..auth import AuthStoreError, load_auth_store, summarize
from .utils import styled_status, utcnow

NOW_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
]


@click.group("auth")
def auth_group() -> None:
    """Inspect stored OAuth/token credentials."""


@auth_group.command("list")
@click.option(
    "--now",
    "now",
    type=click.DateTime(formats=NOW_FORMATS),
    default=None,
    help="Evaluate at this ISO 8601 time (UTC when no offset is given) "
    "instead of the current time.",
)
def list_cmd(now: Optional[datetime]) -> None:
    """Show each stored credential with its method and status."""
    try:
        store = load_auth_store()
    except AuthStoreError as exc:
        click.echo(click.style(f"Error loading credentials: {exc}", fg="red"))
        raise SystemExit(1) from exc

    if len(store) == 0:
        click.echo("No stored credentials.")
        return

    for row in summarize(store, now or utcnow()):
        expires = row.expires_at.isoformat() if row.expires_at else "-"
        status = styled_status(row.state, row.status)
        click.echo(
            f"  {row.provider:16s} {row.auth_method.value:8s} "
            f"{status}  (expires: {expires})",
        )
