# -*- coding: utf-8 -*-
"""CLI status: overall health summary of config, providers, auth, channels."""
from __future__ import annotations

import click

from .. import __version__
from ..auth import summarize
from ..config import Config, ConfigError, get_config_path, load_config
from ..providers import ProviderAvailability, aggregate
from .utils import load_store_or_empty, mark, utcnow

CHANNEL_NAMES = {
    "telegram": "Telegram",
    "discord": "Discord",
    "feishu": "Feishu",
    "dingtalk": "DingTalk",
    "slack": "Slack",
    "whatsapp": "WhatsApp",
    "qq": "QQ",
    "line": "LINE",
    "onebot": "OneBot",
    "maixcam": "MaixCam",
}


def _provider_lines(availability: ProviderAvailability) -> list[str]:
    lines = []
    for status in availability.providers.values():
        if status.base_url_addressed:
            if status.available:
                lines.append(f"{status.name}: ✓ {status.api_base}".rstrip())
            else:
                lines.append(f"{status.name}: not set")
        else:
            value = "✓" if status.available else "not set"
            lines.append(f"{status.name} API: {value}")
    return lines


def _channel_lines(cfg: Config) -> list[str]:
    lines = []
    for key, name in CHANNEL_NAMES.items():
        ch = getattr(cfg.channels, key)
        lines.append(f"  {name}: {'✓' if ch.enabled else 'disabled'}")
    ws = cfg.channels.websocket
    if ws.enabled:
        lines.append(f"  WebSocket: ✓ {ws.address()}")
    else:
        lines.append("  WebSocket: disabled")
    return lines


@click.command("status")
def status_cmd() -> None:
    """Show configuration, provider, credential and channel status."""
    config_path = get_config_path()
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        click.echo(click.style(f"Error loading config: {exc}", fg="red"))
        raise SystemExit(1) from exc

    click.echo(f"clawstatus Status\nVersion: {__version__}\n")

    has_config = config_path.is_file()
    click.echo(f"Config: {config_path} {mark(has_config)}")
    workspace = cfg.workspace_path()
    click.echo(f"Workspace: {workspace} {mark(workspace.exists())}")

    if not has_config:
        return

    click.echo(f"Model: {cfg.agents.defaults.model}")

    availability = aggregate(cfg.model_list, cfg.providers)
    for line in _provider_lines(availability):
        click.echo(line)

    store = load_store_or_empty()
    if len(store) > 0:
        click.echo("\nOAuth/Token Auth:")
        for row in summarize(store, utcnow()):
            click.echo(
                f"  {row.provider} ({row.auth_method.value}): {row.status}",
            )

    click.echo("\nChannels:")
    for line in _channel_lines(cfg):
        click.echo(line)
