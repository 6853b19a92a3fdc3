"""Built-in capability catalog.

Direct OpenAI models come first, then models hosted through OpenRouter.
Order is the listing order shown to users; lookups do not depend on it.

For reasoning models the reserved output sits well under the hard output
ceiling: o3-mini allows 100k output tokens, but ~25k for reasoning plus
~15k for visible output covers nearly every request, which leaves a 160k
effective input limit. Models with a small output ceiling simply reserve
all of it.
"""
from __future__ import annotations

from modelcaps.providers import API_KEY_ENV_VARS, BASE_URLS, OPENAI_ENV_VAR, OPENAI_V1_BASE_URL
from modelcaps.types import (
    ModelCapability,
    ModelFeature,
    ModelOutputFormat,
    ModelProvider,
    ReasoningEffort,
)

_OPENROUTER = ModelProvider.OPENROUTER
_OPENROUTER_KEY = API_KEY_ENV_VARS[_OPENROUTER]
_OPENROUTER_URL = BASE_URLS[_OPENROUTER]

_JSON = ModelOutputFormat.TOOL_CALL_JSON
_XML = ModelOutputFormat.XML

_IMAGES = ModelFeature.IMAGE_SUPPORT
_CACHE = ModelFeature.CACHE_CONTROL
_NO_ROLE_PARAMS = ModelFeature.ROLE_PARAMS_DISABLED
_NO_SYSTEM_PROMPT = ModelFeature.SYSTEM_PROMPT_DISABLED
_PREDICTED = ModelFeature.PREDICTED_OUTPUT
_REASONING = ModelFeature.INCLUDE_REASONING


MODELS: tuple[ModelCapability, ...] = (
    # ------------------------------------------------------------------
    # Direct OpenAI
    # ------------------------------------------------------------------
    ModelCapability(
        description="OpenAI o3-mini-high",
        provider=ModelProvider.OPENAI,
        model_name="o3-mini",
        model_id="openai/o3-mini-high",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=30000,
        default_max_convo_tokens=10000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.HIGH,
    ),
    ModelCapability(
        description="OpenAI o3-mini-medium",
        provider=ModelProvider.OPENAI,
        model_name="o3-mini",
        model_id="openai/o3-mini-medium",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=10000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.MEDIUM,
    ),
    ModelCapability(
        description="OpenAI o3-mini-low",
        provider=ModelProvider.OPENAI,
        model_name="o3-mini",
        model_id="openai/o3-mini-low",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=10000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.LOW,
    ),
    ModelCapability(
        description="OpenAI o1",
        provider=ModelProvider.OPENAI,
        model_name="o1",
        model_id="openai/o1",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=15000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES, _NO_SYSTEM_PROMPT, _NO_ROLE_PARAMS}),
    ),
    ModelCapability(
        description="OpenAI gpt-4o",
        provider=ModelProvider.OPENAI,
        model_name="gpt-4o",
        model_id="openai/gpt-4o",
        max_tokens=128000,
        max_output_tokens=16384,
        reserved_output_tokens=16384,
        default_max_convo_tokens=10000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _PREDICTED}),
    ),
    ModelCapability(
        description="OpenAI gpt-4o-mini",
        provider=ModelProvider.OPENAI,
        model_name="gpt-4o-mini",
        model_id="openai/gpt-4o-mini",
        max_tokens=128000,
        max_output_tokens=16384,
        reserved_output_tokens=16384,
        default_max_convo_tokens=10000,
        api_key_env_var=OPENAI_ENV_VAR,
        base_url=OPENAI_V1_BASE_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _PREDICTED}),
    ),
    # ------------------------------------------------------------------
    # OpenRouter
    # ------------------------------------------------------------------
    ModelCapability(
        description="Anthropic Claude 3.7 Sonnet via OpenRouter",
        provider=_OPENROUTER,
        model_name="anthropic/claude-3.7-sonnet",
        model_id="anthropic/claude-3.7-sonnet",
        max_tokens=200000,
        max_output_tokens=128000,
        reserved_output_tokens=20000,
        default_max_convo_tokens=15000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES, _CACHE}),
    ),
    ModelCapability(
        description="Anthropic Claude 3.5 Sonnet via OpenRouter",
        provider=_OPENROUTER,
        model_name="anthropic/claude-3.5-sonnet",
        model_id="anthropic/claude-3.5-sonnet",
        max_tokens=200000,
        max_output_tokens=128000,
        reserved_output_tokens=20000,
        default_max_convo_tokens=15000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES, _CACHE}),
    ),
    ModelCapability(
        description="Anthropic Claude 3.5 Haiku via OpenRouter",
        provider=_OPENROUTER,
        model_name="anthropic/claude-3.5-haiku",
        model_id="anthropic/claude-3.5-haiku",
        max_tokens=200000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=15000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES, _CACHE}),
    ),
    ModelCapability(
        description="Google Gemini Pro 1.5 via OpenRouter",
        provider=_OPENROUTER,
        model_name="google/gemini-pro-1.5",
        model_id="google/gemini-pro-1.5",
        max_tokens=2000000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=100000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES}),
    ),
    ModelCapability(
        description="Google Gemini Pro 2.0 Experimental via OpenRouter",
        provider=_OPENROUTER,
        model_name="google/gemini-2.0-pro-exp-02-05:free",
        model_id="google/gemini-2.0-pro-exp-02-05:free",
        max_tokens=2000000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=100000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES}),
    ),
    ModelCapability(
        description="Google Gemini Flash 2.0 via OpenRouter",
        provider=_OPENROUTER,
        model_name="google/gemini-2.0-flash-001",
        model_id="google/gemini-2.0-flash-001",
        max_tokens=1000000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=75000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES}),
    ),
    ModelCapability(
        description="DeepSeek V3 via OpenRouter",
        provider=_OPENROUTER,
        model_name="deepseek/deepseek-chat",
        model_id="deepseek/deepseek-chat",
        max_tokens=64000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=7500,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
    ),
    ModelCapability(
        description="DeepSeek R1 via OpenRouter (includes reasoning)",
        provider=_OPENROUTER,
        model_name="deepseek/deepseek-r1",
        model_id="deepseek/deepseek-r1-reasoning",
        max_tokens=64000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=7500,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_REASONING}),
    ),
    ModelCapability(
        description="DeepSeek R1 via OpenRouter (reasoning hidden)",
        provider=_OPENROUTER,
        model_name="deepseek/deepseek-r1",
        model_id="deepseek/deepseek-r1-no-reasoning",
        max_tokens=64000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=7500,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
    ),
    ModelCapability(
        description="Perplexity R1 1776 via OpenRouter (includes reasoning)",
        provider=_OPENROUTER,
        model_name="perplexity/r1-1776",
        model_id="perplexity/r1-1776",
        max_tokens=128000,
        max_output_tokens=128000,
        reserved_output_tokens=30000,
        default_max_convo_tokens=7500,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_REASONING}),
    ),
    ModelCapability(
        description="Perplexity Sonar Reasoning via OpenRouter (includes reasoning)",
        provider=_OPENROUTER,
        model_name="perplexity/sonar-reasoning",
        model_id="perplexity/sonar-reasoning",
        max_tokens=127000,
        max_output_tokens=127000,
        reserved_output_tokens=30000,
        default_max_convo_tokens=7500,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_REASONING}),
    ),
    ModelCapability(
        description="Qwen 2.5 Coder 32B via OpenRouter",
        provider=_OPENROUTER,
        model_name="qwen/qwen-2.5-coder-32b-instruct",
        model_id="qwen/qwen-2.5-coder-32b-instruct",
        max_tokens=128000,
        max_output_tokens=8192,
        reserved_output_tokens=8192,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES}),
    ),
    # OpenAI models via OpenRouter
    ModelCapability(
        description="OpenAI o3-mini-high via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/o3-mini",
        model_id="openai/o3-mini-high",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_SYSTEM_PROMPT, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.HIGH,
    ),
    ModelCapability(
        description="OpenAI o3-mini-medium via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/o3-mini",
        model_id="openai/o3-mini-medium",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_SYSTEM_PROMPT, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.MEDIUM,
    ),
    ModelCapability(
        description="OpenAI o3-mini-low via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/o3-mini",
        model_id="openai/o3-mini-low",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _NO_SYSTEM_PROMPT, _NO_ROLE_PARAMS}),
        reasoning_effort=ReasoningEffort.LOW,
    ),
    ModelCapability(
        description="OpenAI o1 via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/o1",
        model_id="openai/o1",
        max_tokens=200000,
        max_output_tokens=100000,
        reserved_output_tokens=40000,
        default_max_convo_tokens=15000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_XML,
        features=frozenset({_IMAGES, _NO_SYSTEM_PROMPT, _NO_ROLE_PARAMS}),
    ),
    ModelCapability(
        description="OpenAI gpt-4o via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/gpt-4o",
        model_id="openai/gpt-4o",
        max_tokens=128000,
        max_output_tokens=16384,
        reserved_output_tokens=16384,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _PREDICTED}),
    ),
    ModelCapability(
        description="OpenAI gpt-4o-mini via OpenRouter",
        provider=_OPENROUTER,
        model_name="openai/gpt-4o-mini",
        model_id="openai/gpt-4o-mini",
        max_tokens=128000,
        max_output_tokens=16384,
        reserved_output_tokens=16384,
        default_max_convo_tokens=10000,
        api_key_env_var=_OPENROUTER_KEY,
        base_url=_OPENROUTER_URL,
        preferred_output_format=_JSON,
        features=frozenset({_IMAGES, _PREDICTED}),
    ),
)
