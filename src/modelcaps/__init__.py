"""modelcaps: capability registry for hosted language models."""
from __future__ import annotations

__version__ = "0.1.0"

# Types
from modelcaps.types import (
    ModelCapability,
    ModelFeature,
    ModelOutputFormat,
    ModelProvider,
    ReasoningEffort,
    composite_key,
    index_key,
    parse_provider,
)

# Errors
from modelcaps.errors import (
    ModelcapsError,
    CatalogError,
    MissingFieldError,
    DuplicateModelError,
    ConfigurationError,
    SignInError,
    ApiError,
    AuthenticationError,
    ServerError,
    RequestTimeoutError,
    NetworkError,
)

# Catalog, validation and index
from modelcaps.catalog import AVAILABLE_MODELS, list_models, list_providers
from modelcaps.diagnostic import Diagnostic, Severity
from modelcaps.validation import validate, validate_or_raise
from modelcaps.index import CapabilityIndex, CapabilityRegistry, load_index

# Token budgets
from modelcaps.budget import TokenLimits, effective_input_limit, max_possible_output, token_limits

# Config
from modelcaps.config import CLOUD_API_HOST, ModelcapsConfig

__all__ = [
    "__version__",
    # Types
    "ModelCapability",
    "ModelFeature",
    "ModelOutputFormat",
    "ModelProvider",
    "ReasoningEffort",
    "composite_key",
    "index_key",
    "parse_provider",
    # Errors
    "ModelcapsError",
    "CatalogError",
    "MissingFieldError",
    "DuplicateModelError",
    "ConfigurationError",
    "SignInError",
    "ApiError",
    "AuthenticationError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    # Catalog, validation and index
    "AVAILABLE_MODELS",
    "list_models",
    "list_providers",
    "Diagnostic",
    "Severity",
    "validate",
    "validate_or_raise",
    "CapabilityIndex",
    "CapabilityRegistry",
    "load_index",
    # Token budgets
    "TokenLimits",
    "effective_input_limit",
    "max_possible_output",
    "token_limits",
    # Config
    "CLOUD_API_HOST",
    "ModelcapsConfig",
]
