"""Built-in catalog of model capability records."""
from __future__ import annotations

from collections.abc import Iterable

from modelcaps.catalog._data import MODELS
from modelcaps.types import ModelCapability, ModelProvider

AVAILABLE_MODELS = MODELS


def list_models(
    provider: ModelProvider | str | None = None,
    models: Iterable[ModelCapability] = AVAILABLE_MODELS,
) -> list[ModelCapability]:
    """Return models, optionally filtered by provider.

    Models are returned in definition order.
    """
    if provider is None:
        return list(models)
    return [m for m in models if m.provider == provider]


def list_providers(
    models: Iterable[ModelCapability] = AVAILABLE_MODELS,
) -> list[ModelProvider]:
    """Return the distinct providers in first-seen order."""
    seen: dict[ModelProvider, None] = {}
    for m in models:
        seen.setdefault(m.provider, None)
    return list(seen)


__all__ = [
    "AVAILABLE_MODELS",
    "MODELS",
    "list_models",
    "list_providers",
]
