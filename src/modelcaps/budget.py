"""Token-budget derivations from capability records."""
from __future__ import annotations

from dataclasses import dataclass

from modelcaps.types import ModelCapability


@dataclass(frozen=True)
class TokenLimits:
    """The raw provider limits of a model plus the derived input budget."""

    max_tokens: int
    max_output_tokens: int
    reserved_output_tokens: int
    effective_input_limit: int


def effective_input_limit(model: ModelCapability) -> int:
    """``max_tokens - reserved_output_tokens``, computed on every call."""
    return model.max_tokens - model.reserved_output_tokens


def token_limits(model: ModelCapability) -> TokenLimits:
    return TokenLimits(
        max_tokens=model.max_tokens,
        max_output_tokens=model.max_output_tokens,
        reserved_output_tokens=model.reserved_output_tokens,
        effective_input_limit=effective_input_limit(model),
    )


def max_possible_output(model: ModelCapability, input_tokens: int) -> int:
    """Upper bound on output tokens a request with *input_tokens* could use.

    The reserved output is a budgeting hint, not a hard limit passed to the
    provider, so credit checks have to assume the hard output ceiling.
    """
    if input_tokens < 0:
        raise ValueError(f"input_tokens must be >= 0, got {input_tokens}")
    return max(model.max_output_tokens - input_tokens, 0)
