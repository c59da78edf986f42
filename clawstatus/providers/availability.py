# -*- coding: utf-8 -*-
"""Merge legacy provider blocks and ``model_list`` into availability facts."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Set, Union

from .models import (
    SOURCE_MODEL_LIST,
    SOURCE_PROVIDERS,
    ModelEntry,
    ProviderAvailability,
    ProviderSettings,
    ProvidersConfig,
    ProviderStatus,
)
from .registry import get_provider, list_providers
from .resolver import resolve_provider

logger = logging.getLogger(__name__)

LegacyProviders = Union[ProvidersConfig, Mapping[str, ProviderSettings]]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _providers_from_model_list(entries: Iterable[ModelEntry]) -> Set[str]:
    """Return every canonical token implied by keyed model entries."""
    found: Set[str] = set()
    for entry in entries:
        if not entry.api_key:
            continue
        tokens = resolve_provider(entry.model)
        if tokens is None:
            logger.debug(
                "Skipping model %r: no provider prefix",
                entry.model,
            )
            continue
        found.update(tokens)
    return found


def _legacy_configured(provider_id: str, settings: ProviderSettings) -> bool:
    """Key-addressed providers need api_key, local ones need api_base."""
    defn = get_provider(provider_id)
    if defn is not None and defn.base_url_addressed:
        return bool(settings.api_base)
    return bool(settings.api_key)


def _as_mapping(legacy: LegacyProviders) -> Mapping[str, ProviderSettings]:
    if isinstance(legacy, ProvidersConfig):
        return legacy.as_mapping()
    return legacy


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


def aggregate(
    model_entries: Iterable[ModelEntry],
    legacy_providers: LegacyProviders,
) -> ProviderAvailability:
    """Compute provider availability from both configuration mechanisms.

    A provider is available when its legacy block is configured OR a
    keyed ``model_list`` entry resolves to it. Neither source overrides
    the other. Tokens with no display definition get no row: those
    inferred from ``model_list`` are kept in ``inferred``, configured
    legacy ids in ``legacy_extra``.
    """
    legacy = _as_mapping(legacy_providers)
    inferred = _providers_from_model_list(model_entries)

    rows: Dict[str, ProviderStatus] = {}
    for defn in list_providers():
        pid = defn.id
        settings = legacy.get(pid) or ProviderSettings()
        base_url_addressed = defn.base_url_addressed

        sources = []
        if _legacy_configured(pid, settings):
            sources.append(SOURCE_PROVIDERS)
        if pid in inferred:
            sources.append(SOURCE_MODEL_LIST)

        rows[pid] = ProviderStatus(
            id=pid,
            name=defn.name,
            available=bool(sources),
            base_url_addressed=base_url_addressed,
            api_base=settings.api_base if base_url_addressed else "",
            sources=sources,
        )

    legacy_extra = {
        pid
        for pid, settings in legacy.items()
        if pid not in rows and _legacy_configured(pid, settings)
    }

    result = ProviderAvailability(
        providers=rows,
        inferred=inferred,
        legacy_extra=legacy_extra,
    )
    logger.debug(
        "Provider availability: %s",
        sorted(result.available_ids()),
    )
    return result
