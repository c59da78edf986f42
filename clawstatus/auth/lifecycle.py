# -*- coding: utf-8 -*-
"""Lifecycle state of stored credentials relative to an explicit ``now``."""

from __future__ import annotations

from datetime import datetime
from typing import List

from .models import (
    Credential,
    CredentialStore,
    CredentialSummary,
    LifecycleState,
    as_utc,
)

AUTHENTICATED = "authenticated"


def evaluate(cred: Credential, now: datetime) -> LifecycleState:
    """Classify an OAuth/token credential as fresh, needs_refresh or expired.

    Expiry is checked before the refresh window so a credential past its
    expiry is never reported as merely needing refresh. A credential
    without ``expires_at`` is fresh.
    """
    now = as_utc(now)
    if cred.expires_at is None:
        return LifecycleState.FRESH
    if now >= cred.expires_at:
        return LifecycleState.EXPIRED
    refresh_after = cred.refresh_after()
    if refresh_after is not None and now >= refresh_after:
        return LifecycleState.NEEDS_REFRESH
    return LifecycleState.FRESH


def credential_status(cred: Credential, now: datetime) -> str:
    """Display status; static API keys are always ``authenticated``."""
    if not cred.auth_method.expires:
        return AUTHENTICATED
    return evaluate(cred, now).label


def summarize(
    store: CredentialStore,
    now: datetime,
) -> List[CredentialSummary]:
    """Return one summary row per stored credential, sorted by provider."""
    rows: List[CredentialSummary] = []
    for provider in sorted(store.credentials):
        cred = store.credentials[provider]
        state = (
            evaluate(cred, now) if cred.auth_method.expires else None
        )
        rows.append(
            CredentialSummary(
                provider=provider,
                auth_method=cred.auth_method,
                state=state,
                status=state.label if state is not None else AUTHENTICATED,
                expires_at=cred.expires_at,
            ),
        )
    return rows
