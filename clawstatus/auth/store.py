# -*- coding: utf-8 -*-
"""Reading the credential store (auth.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import AUTH_FILE, WORKING_DIR
from .models import CredentialStore

logger = logging.getLogger(__name__)


class AuthStoreError(ValueError):
    """auth.json exists but could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


def get_auth_path() -> Path:
    """Return the default auth.json path."""
    return WORKING_DIR / AUTH_FILE


def load_auth_store(path: Optional[Path] = None) -> CredentialStore:
    """Load auth.json as an immutable snapshot.

    A missing file yields an empty store. Read, JSON and schema failures
    raise :class:`AuthStoreError` chained to the original exception.
    """
    if path is None:
        path = get_auth_path()

    if not path.is_file():
        logger.debug("No credential store at %s", path)
        return CredentialStore()

    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except OSError as exc:
        raise AuthStoreError(path, f"cannot read: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise AuthStoreError(path, f"invalid JSON: {exc}") from exc

    if raw is None:
        return CredentialStore()
    try:
        store = CredentialStore.model_validate(raw)
    except ValidationError as exc:
        raise AuthStoreError(path, f"invalid credential store: {exc}") from exc

    logger.debug("Loaded %d credential(s) from %s", len(store), path)
    return store
