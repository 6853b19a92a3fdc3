"""Capability record and enumeration types."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

COMPOSITE_KEY_SEPARATOR = "/"


class ModelProvider(StrEnum):
    """Service hosting a model's inference API."""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    CUSTOM = "custom"


class ModelOutputFormat(StrEnum):
    """How a model is expected to structure its responses."""

    TOOL_CALL_JSON = "tool-call-json"
    XML = "xml"


class ReasoningEffort(StrEnum):
    """Provider-side deliberation level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ModelFeature(StrEnum):
    """Optional capabilities a model may carry."""

    IMAGE_SUPPORT = "image-support"
    CACHE_CONTROL = "cache-control"
    ROLE_PARAMS_DISABLED = "role-params-disabled"
    SYSTEM_PROMPT_DISABLED = "system-prompt-disabled"
    PREDICTED_OUTPUT = "predicted-output"
    INCLUDE_REASONING = "include-reasoning"


IndexKey = tuple[ModelProvider, str]


def parse_provider(value: object) -> ModelProvider | None:
    """Return the ModelProvider named by *value*, or ``None`` if it names none."""
    if isinstance(value, ModelProvider):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ModelProvider(value)
    except ValueError:
        return None


def index_key(provider: object, model_id: object) -> IndexKey | None:
    """Structured lookup key, or ``None`` when the pair cannot be indexed."""
    parsed = parse_provider(provider)
    if parsed is None or not isinstance(model_id, str):
        return None
    return (parsed, model_id)


def composite_key(provider: str, model_id: str) -> str:
    """Join *provider* and *model_id* into the display key.

    Model ids may contain the separator, so this string is for output only;
    indexing uses :func:`index_key`.
    """
    return f"{provider}{COMPOSITE_KEY_SEPARATOR}{model_id}"


@dataclass(frozen=True)
class ModelCapability:
    """Request parameters and feature flags for one provider/model pairing.

    ``max_tokens`` is the provider's absolute input ceiling and
    ``max_output_tokens`` its absolute output ceiling.
    ``reserved_output_tokens`` is the share of the context window set aside
    for generation; it is a realistic output budget, since for some models
    the hard output ceiling equals the input ceiling and would leave no room
    for input. ``default_max_convo_tokens`` is where callers start
    summarizing conversation history.

    ``model_name`` is what the provider expects in payloads; ``model_id`` is
    unique per provider, so one provider model can appear several times
    with different settings (e.g. reasoning effort).
    """

    description: str
    provider: ModelProvider
    model_name: str
    model_id: str
    max_tokens: int
    max_output_tokens: int
    reserved_output_tokens: int
    default_max_convo_tokens: int
    api_key_env_var: str
    base_url: str
    preferred_output_format: ModelOutputFormat
    features: frozenset[ModelFeature] = field(default_factory=frozenset)
    reasoning_effort: ReasoningEffort | None = None

    def __post_init__(self) -> None:
        # accept any iterable of features but always store a frozenset
        if not isinstance(self.features, frozenset):
            object.__setattr__(self, "features", frozenset(self.features))

    @property
    def composite_key(self) -> str:
        return composite_key(self.provider, self.model_id)

    @property
    def index_key(self) -> IndexKey | None:
        return index_key(self.provider, self.model_id)

    @property
    def effective_input_limit(self) -> int:
        """Input budget left once output space is reserved."""
        return self.max_tokens - self.reserved_output_tokens

    def has(self, feature: ModelFeature) -> bool:
        return feature in self.features

    @property
    def has_image_support(self) -> bool:
        return ModelFeature.IMAGE_SUPPORT in self.features

    @property
    def supports_cache_control(self) -> bool:
        return ModelFeature.CACHE_CONTROL in self.features

    @property
    def role_params_disabled(self) -> bool:
        return ModelFeature.ROLE_PARAMS_DISABLED in self.features

    @property
    def system_prompt_disabled(self) -> bool:
        return ModelFeature.SYSTEM_PROMPT_DISABLED in self.features

    @property
    def predicted_output_enabled(self) -> bool:
        return ModelFeature.PREDICTED_OUTPUT in self.features

    @property
    def include_reasoning(self) -> bool:
        return ModelFeature.INCLUDE_REASONING in self.features

    @property
    def reasoning_effort_enabled(self) -> bool:
        return self.reasoning_effort is not None

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view with enum values as strings."""
        return {
            "description": self.description,
            "provider": str(self.provider) if self.provider else "",
            "model_name": self.model_name,
            "model_id": self.model_id,
            "max_tokens": self.max_tokens,
            "max_output_tokens": self.max_output_tokens,
            "reserved_output_tokens": self.reserved_output_tokens,
            "default_max_convo_tokens": self.default_max_convo_tokens,
            "api_key_env_var": self.api_key_env_var,
            "base_url": self.base_url,
            "preferred_output_format": (
                str(self.preferred_output_format) if self.preferred_output_format else ""
            ),
            "features": sorted(str(f) for f in self.features),
            "reasoning_effort": str(self.reasoning_effort) if self.reasoning_effort else None,
        }
