# -*- coding: utf-8 -*-
"""Provider models, registry, alias resolution and availability."""

from .availability import aggregate
from .models import (
    ModelEntry,
    ProviderAvailability,
    ProviderDefinition,
    ProviderSettings,
    ProvidersConfig,
    ProviderStatus,
)
from .registry import (
    PROVIDER_ALIASES,
    PROVIDERS,
    get_aliases,
    get_provider,
    list_providers,
)
from .resolver import provider_token, resolve_provider

__all__ = [
    # models
    "ModelEntry",
    "ProviderAvailability",
    "ProviderDefinition",
    "ProviderSettings",
    "ProvidersConfig",
    "ProviderStatus",
    # registry
    "PROVIDER_ALIASES",
    "PROVIDERS",
    "get_aliases",
    "get_provider",
    "list_providers",
    # resolver
    "provider_token",
    "resolve_provider",
    # availability
    "aggregate",
]
