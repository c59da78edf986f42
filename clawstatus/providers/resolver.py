# -*- coding: utf-8 -*-
"""Map a model identifier to the canonical provider tokens it implies."""

from __future__ import annotations

from typing import Optional, Tuple

from .registry import get_aliases

MODEL_SEPARATOR = "/"


def provider_token(model_id: str) -> Optional[str]:
    """Return the lowercased prefix before the first ``/``, or ``None``.

    ``None`` when the identifier has no separator or starts with one.
    """
    idx = model_id.find(MODEL_SEPARATOR)
    if idx <= 0:
        return None
    return model_id[:idx].lower()


def resolve_provider(model_id: str) -> Optional[Tuple[str, ...]]:
    """Resolve *model_id* to its provider token plus every alias.

    Example: ``"Doubao/ernie-4"`` → ``("doubao", "volcengine")``,
    ``"deepseek/chat"`` → ``("deepseek",)``, ``"gpt-4o"`` → ``None``.
    """
    token = provider_token(model_id)
    if token is None:
        return None
    return (token,) + tuple(a for a in get_aliases(token) if a != token)
