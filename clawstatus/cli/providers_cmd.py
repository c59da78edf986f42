# -*- coding: utf-8 -*-
"""CLI commands for inspecting LLM provider configuration."""
from __future__ import annotations

import click

from ..config import ConfigError, load_config
from ..providers import aggregate, resolve_provider
from .utils import mask_api_key


def _load_or_exit():
    try:
        return load_config()
    except ConfigError as exc:
        click.echo(click.style(f"Error loading config: {exc}", fg="red"))
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Inspect provider availability and model identifiers."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@providers_group.command("list")
def list_cmd() -> None:
    """Show every provider, where it is configured, and its key."""
    cfg = _load_or_exit()
    availability = aggregate(cfg.model_list, cfg.providers)
    legacy = cfg.providers.as_mapping()

    click.echo("\n=== Providers ===")
    for status in availability.providers.values():
        settings = legacy.get(status.id)
        state = (
            click.style("available", fg="green")
            if status.available
            else click.style("not set", fg="red")
        )
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {status.name} ({status.id})  [{state}]")
        click.echo(f"{'─' * 44}")
        sources = ", ".join(status.sources) or "(none)"
        click.echo(f"  {'source':16s}: {sources}")
        if status.base_url_addressed:
            click.echo(f"  {'api_base':16s}: {status.api_base or '(not set)'}")
        key = mask_api_key(settings.api_key) if settings else ""
        click.echo(f"  {'api_key':16s}: {key or '(not set)'}")

    unlisted = sorted(availability.unlisted())
    if unlisted:
        click.echo(f"\n{'═' * 44}")
        click.echo("  Other configured providers")
        click.echo(f"{'═' * 44}")
        for pid in unlisted:
            click.echo(f"  {pid}")

    click.echo()


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


@providers_group.command("resolve")
@click.argument("model_id")
def resolve_cmd(model_id: str) -> None:
    """Show which providers a model identifier maps to."""
    tokens = resolve_provider(model_id)
    if tokens is None:
        click.echo(f"{model_id}: no provider prefix")
        return
    click.echo(f"{model_id}: {', '.join(tokens)}")
