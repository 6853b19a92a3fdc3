"""Per-provider credential and endpoint defaults."""
from __future__ import annotations

from modelcaps.types import ModelProvider

OPENAI_ENV_VAR = "OPENAI_API_KEY"
OPENAI_V1_BASE_URL = "https://api.openai.com/v1"

API_KEY_ENV_VARS: dict[ModelProvider, str] = {
    ModelProvider.OPENAI: OPENAI_ENV_VAR,
    ModelProvider.OPENROUTER: "OPENROUTER_API_KEY",
    ModelProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    ModelProvider.GOOGLE: "GEMINI_API_KEY",
}

BASE_URLS: dict[ModelProvider, str] = {
    ModelProvider.OPENAI: OPENAI_V1_BASE_URL,
    ModelProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    ModelProvider.ANTHROPIC: "https://api.anthropic.com/v1",
    ModelProvider.GOOGLE: "https://generativelanguage.googleapis.com/v1beta",
}

