# -*- coding: utf-8 -*-
"""Pydantic data models for stored credentials."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constant import DEFAULT_REFRESH_WINDOW


class AuthMethod(str, Enum):
    API_KEY = "api_key"
    OAUTH = "oauth"
    TOKEN = "token"

    @property
    def expires(self) -> bool:
        """Whether credentials of this method have a lifecycle."""
        return self is not AuthMethod.API_KEY


class LifecycleState(str, Enum):
    FRESH = "fresh"
    NEEDS_REFRESH = "needs_refresh"
    EXPIRED = "expired"

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]


_STATE_LABELS = {
    LifecycleState.FRESH: "authenticated",
    LifecycleState.NEEDS_REFRESH: "needs refresh",
    LifecycleState.EXPIRED: "expired",
}


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Credential(BaseModel):
    """One provider credential as persisted in auth.json."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    provider: str = Field(default="", description="Provider name")
    auth_method: AuthMethod = Field(default=AuthMethod.OAUTH)
    access_token: str = Field(default="", repr=False)
    refresh_token: str = Field(default="", repr=False)
    account_id: str = Field(default="")
    expires_at: Optional[datetime] = Field(
        default=None,
        description="Access token expiry",
    )
    refresh_at: Optional[datetime] = Field(
        default=None,
        description="When the token becomes eligible for refresh; "
        "defaults to a fixed window before expiry",
    )

    @field_validator("expires_at", "refresh_at")
    @classmethod
    def _naive_is_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    def refresh_after(self) -> Optional[datetime]:
        if self.refresh_at is not None:
            return self.refresh_at
        if self.expires_at is None:
            return None
        return self.expires_at - DEFAULT_REFRESH_WINDOW


class CredentialStore(BaseModel):
    """Top-level structure of auth.json."""

    model_config = ConfigDict(frozen=True)

    credentials: Dict[str, Credential] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.credentials)

    def get(self, provider: str) -> Optional[Credential]:
        return self.credentials.get(provider)


class CredentialSummary(BaseModel):
    """Display row for one stored credential."""

    provider: str
    auth_method: AuthMethod
    state: Optional[LifecycleState] = Field(
        default=None,
        description="None for static API-key credentials",
    )
    status: str
    expires_at: Optional[datetime] = None
