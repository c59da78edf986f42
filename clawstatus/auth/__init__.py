# -*- coding: utf-8 -*-
"""Stored credentials: models, store loading and lifecycle evaluation."""

from .lifecycle import credential_status, evaluate, summarize
from .models import (
    AuthMethod,
    Credential,
    CredentialStore,
    CredentialSummary,
    LifecycleState,
)
from .store import AuthStoreError, get_auth_path, load_auth_store

__all__ = [
    "AuthMethod",
    "AuthStoreError",
    "Credential",
    "CredentialStore",
    "CredentialSummary",
    "LifecycleState",
    "credential_status",
    "evaluate",
    "get_auth_path",
    "load_auth_store",
    "summarize",
]
