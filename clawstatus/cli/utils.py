# -*- coding: utf-8 -*-
"""Small display helpers shared by CLI commands."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import click

from ..auth import (
    AuthStoreError,
    CredentialStore,
    LifecycleState,
    load_auth_store,
)

logger = logging.getLogger(__name__)

CHECK = "✓"
CROSS = "✗"


def mark(ok: bool) -> str:
    return CHECK if ok else CROSS


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def styled_status(state: Optional[LifecycleState], text: str) -> str:
    color = {
        LifecycleState.EXPIRED: "red",
        LifecycleState.NEEDS_REFRESH: "yellow",
    }.get(state, "green")
    return click.style(text, fg=color)


def load_store_or_empty() -> CredentialStore:
    """Load the credential store; a broken store counts as no credentials."""
    try:
        return load_auth_store()
    except AuthStoreError as exc:
        logger.warning("Ignoring credential store: %s", exc)
        return CredentialStore()
