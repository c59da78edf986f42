# -*- coding: utf-8 -*-
"""Built-in provider definitions, aliases and registry."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models import ProviderDefinition

# ---------------------------------------------------------------------------
# Provider definitions (display order)
# ---------------------------------------------------------------------------

PROVIDER_OPENROUTER = ProviderDefinition(id="openrouter", name="OpenRouter")
PROVIDER_ANTHROPIC = ProviderDefinition(id="anthropic", name="Anthropic")
PROVIDER_OPENAI = ProviderDefinition(id="openai", name="OpenAI")
PROVIDER_GEMINI = ProviderDefinition(id="gemini", name="Gemini")
PROVIDER_ZHIPU = ProviderDefinition(id="zhipu", name="Zhipu")
PROVIDER_QWEN = ProviderDefinition(id="qwen", name="Qwen")
PROVIDER_GROQ = ProviderDefinition(id="groq", name="Groq")
PROVIDER_MOONSHOT = ProviderDefinition(id="moonshot", name="Moonshot")
PROVIDER_DEEPSEEK = ProviderDefinition(id="deepseek", name="DeepSeek")
PROVIDER_VOLCENGINE = ProviderDefinition(id="volcengine", name="VolcEngine")
PROVIDER_NVIDIA = ProviderDefinition(id="nvidia", name="Nvidia")

PROVIDER_VLLM = ProviderDefinition(
    id="vllm",
    name="vLLM/Local",
    base_url_addressed=True,
)

PROVIDER_OLLAMA = ProviderDefinition(
    id="ollama",
    name="Ollama",
    base_url_addressed=True,
)

# Registry: provider_id -> ProviderDefinition
PROVIDERS: Dict[str, ProviderDefinition] = {
    defn.id: defn
    for defn in (
        PROVIDER_OPENROUTER,
        PROVIDER_ANTHROPIC,
        PROVIDER_OPENAI,
        PROVIDER_GEMINI,
        PROVIDER_ZHIPU,
        PROVIDER_QWEN,
        PROVIDER_GROQ,
        PROVIDER_MOONSHOT,
        PROVIDER_DEEPSEEK,
        PROVIDER_VOLCENGINE,
        PROVIDER_NVIDIA,
        PROVIDER_VLLM,
        PROVIDER_OLLAMA,
    )
}

# ---------------------------------------------------------------------------
# Aliases: model-id prefix -> extra canonical providers it also stands for
# ---------------------------------------------------------------------------

PROVIDER_ALIASES: Dict[str, Tuple[str, ...]] = {
    "doubao": ("volcengine",),
    "claude": ("anthropic",),
    "gpt": ("openai",),
    "tongyi": ("qwen",),
    "kimi": ("moonshot",),
    "glm": ("zhipu",),
}


def get_provider(provider_id: str) -> Optional[ProviderDefinition]:
    """Return a provider definition by id, or None if not found."""
    return PROVIDERS.get(provider_id)


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions."""
    return list(PROVIDERS.values())


def get_aliases(token: str) -> Tuple[str, ...]:
    """Return the extra canonical tokens for *token* (may be empty)."""
    return PROVIDER_ALIASES.get(token, ())
