# -*- coding: utf-8 -*-
"""Pydantic data models for providers and model bindings."""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

# Source tags recorded on each availability row.
SOURCE_PROVIDERS = "providers"
SOURCE_MODEL_LIST = "model_list"


class ModelEntry(BaseModel):
    """One configured model binding from ``model_list``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    model_name: str = Field(default="", description="Alias used by agents")
    model: str = Field(
        default="",
        description="Model identifier, e.g. ``doubao/ernie-4``",
    )
    api_key: str = Field(default="", description="API key (may be empty)")
    api_base: str = Field(default="", description="Optional API base URL")


class ProviderSettings(BaseModel):
    """Legacy explicit provider block (URL + API key only)."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(default="", description="API key")
    api_base: str = Field(default="", description="API base URL")


class ProvidersConfig(BaseModel):
    """The ``providers`` section of config.json, one block per provider."""

    model_config = ConfigDict(extra="ignore")

    openrouter: ProviderSettings = Field(default_factory=ProviderSettings)
    anthropic: ProviderSettings = Field(default_factory=ProviderSettings)
    openai: ProviderSettings = Field(default_factory=ProviderSettings)
    gemini: ProviderSettings = Field(default_factory=ProviderSettings)
    zhipu: ProviderSettings = Field(default_factory=ProviderSettings)
    qwen: ProviderSettings = Field(default_factory=ProviderSettings)
    groq: ProviderSettings = Field(default_factory=ProviderSettings)
    vllm: ProviderSettings = Field(default_factory=ProviderSettings)
    moonshot: ProviderSettings = Field(default_factory=ProviderSettings)
    deepseek: ProviderSettings = Field(default_factory=ProviderSettings)
    volcengine: ProviderSettings = Field(default_factory=ProviderSettings)
    nvidia: ProviderSettings = Field(default_factory=ProviderSettings)
    ollama: ProviderSettings = Field(default_factory=ProviderSettings)

    def as_mapping(self) -> Dict[str, ProviderSettings]:
        """Return provider id -> settings for every declared block."""
        return {
            name: getattr(self, name) for name in type(self).model_fields
        }


class ProviderDefinition(BaseModel):
    """Static display definition of a known provider."""

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    base_url_addressed: bool = Field(
        default=False,
        description="Configured by api_base (local/self-hosted) "
        "rather than by api_key",
    )


class ProviderStatus(BaseModel):
    """One provider row of an availability query."""

    id: str
    name: str
    available: bool = False
    base_url_addressed: bool = False
    api_base: str = Field(
        default="",
        description="Resolved base URL (base-URL-addressed providers only)",
    )
    sources: List[str] = Field(default_factory=list)


class ProviderAvailability(BaseModel):
    """Merged availability of every provider, recomputed per query."""

    providers: Dict[str, ProviderStatus] = Field(default_factory=dict)
    inferred: Set[str] = Field(
        default_factory=set,
        description="Every canonical token inferred from model_list",
    )
    legacy_extra: Set[str] = Field(
        default_factory=set,
        description="Configured legacy ids with no display definition",
    )

    def is_available(self, provider_id: str) -> bool:
        status = self.providers.get(provider_id)
        if status is not None:
            return status.available
        return (
            provider_id in self.inferred or provider_id in self.legacy_extra
        )

    def get(self, provider_id: str) -> Optional[ProviderStatus]:
        return self.providers.get(provider_id)

    def available_ids(self) -> Set[str]:
        """Known and unknown providers that are usable."""
        known = {pid for pid, s in self.providers.items() if s.available}
        return known | self.inferred | self.legacy_extra

    def unlisted(self) -> Set[str]:
        """Usable providers that have no display definition."""
        return (self.inferred | self.legacy_extra) - set(self.providers)
