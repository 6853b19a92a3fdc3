"""Validation rules for capability catalogs.

Each rule is a function taking a sequence of ModelCapability records and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from modelcaps.diagnostic import Diagnostic, Severity
from modelcaps.types import IndexKey, ModelCapability, parse_provider

# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _is_unset_count(value: object) -> bool:
    return isinstance(value, bool) or not isinstance(value, int) or value <= 0


# (field, label, unset-predicate), in record layout order
_REQUIRED_CHECKS: tuple[tuple[str, str, Callable[[object], bool]], ...] = (
    ("description", "description", _is_blank),
    ("provider", "model provider", _is_blank),
    ("model_id", "model id", _is_blank),
    ("default_max_convo_tokens", "default max convo tokens", _is_unset_count),
    ("max_tokens", "max tokens", _is_unset_count),
    ("max_output_tokens", "max output tokens", _is_unset_count),
    ("reserved_output_tokens", "reserved output tokens", _is_unset_count),
    ("api_key_env_var", "api key env var", _is_blank),
    ("base_url", "base url", _is_blank),
    ("preferred_output_format", "preferred model output format", _is_blank),
)

REQUIRED_FIELDS = tuple(name for name, _, _ in _REQUIRED_CHECKS)


def _safe_key(model: ModelCapability) -> str | None:
    if _is_blank(model.provider) or _is_blank(model.model_id):
        return None
    return model.composite_key


def check_required_fields(models: Sequence[ModelCapability]) -> list[Diagnostic]:
    """Every required field must be present and non-zero."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        key = _safe_key(model)
        for name, label, is_unset in _REQUIRED_CHECKS:
            if is_unset(getattr(model, name, None)):
                diagnostics.append(
                    Diagnostic(
                        rule="check_required_fields",
                        severity=Severity.ERROR,
                        message=f"{label} is not set",
                        model_key=key,
                        record=model,
                        field=name,
                    )
                )
    return diagnostics


def check_known_provider(models: Sequence[ModelCapability]) -> list[Diagnostic]:
    """The provider must be one of the ModelProvider members."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        if _is_blank(model.provider):
            continue  # check_required_fields reports these
        if parse_provider(model.provider) is None:
            diagnostics.append(
                Diagnostic(
                    rule="check_known_provider",
                    severity=Severity.ERROR,
                    message=f"unknown model provider {model.provider!r}",
                    model_key=_safe_key(model),
                    record=model,
                    field="provider",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Token budget
# ---------------------------------------------------------------------------


def check_effective_input_limit(models: Sequence[ModelCapability]) -> list[Diagnostic]:
    """Reserving output must leave a positive input budget."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        if _is_unset_count(model.max_tokens) or _is_unset_count(model.reserved_output_tokens):
            continue  # check_required_fields reports these
        if model.effective_input_limit <= 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_effective_input_limit",
                    severity=Severity.ERROR,
                    message=(
                        f"reserved output tokens ({model.reserved_output_tokens}) leave no "
                        f"input budget within max tokens ({model.max_tokens})"
                    ),
                    model_key=_safe_key(model),
                    record=model,
                    field="reserved_output_tokens",
                )
            )
    return diagnostics


def check_token_ordering(models: Sequence[ModelCapability]) -> list[Diagnostic]:
    """reserved_output_tokens <= max_output_tokens <= max_tokens."""
    diagnostics: list[Diagnostic] = []
    for model in models:
        counts = (model.reserved_output_tokens, model.max_output_tokens, model.max_tokens)
        if any(_is_unset_count(c) for c in counts):
            continue
        if model.reserved_output_tokens > model.max_output_tokens:
            diagnostics.append(
                Diagnostic(
                    rule="check_token_ordering",
                    severity=Severity.WARNING,
                    message=(
                        f"reserved output tokens ({model.reserved_output_tokens}) exceed "
                        f"max output tokens ({model.max_output_tokens})"
                    ),
                    model_key=_safe_key(model),
                    record=model,
                    field="reserved_output_tokens",
                )
            )
        if model.max_output_tokens > model.max_tokens:
            diagnostics.append(
                Diagnostic(
                    rule="check_token_ordering",
                    severity=Severity.WARNING,
                    message=(
                        f"max output tokens ({model.max_output_tokens}) exceed "
                        f"max tokens ({model.max_tokens})"
                    ),
                    model_key=_safe_key(model),
                    record=model,
                    field="max_output_tokens",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Composite keys
# ---------------------------------------------------------------------------


def check_unique_keys(models: Sequence[ModelCapability]) -> list[Diagnostic]:
    """No two records may share a (provider, model_id) pair."""
    diagnostics: list[Diagnostic] = []
    seen: dict[IndexKey, ModelCapability] = {}
    for model in models:
        if _is_blank(model.model_id):
            continue
        key = model.index_key
        if key is None:
            continue  # check_known_provider reports these
        first = seen.get(key)
        if first is None:
            seen[key] = model
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unique_keys",
                severity=Severity.ERROR,
                message=(
                    f"duplicate composite key '{model.composite_key}' "
                    f"(already used by '{first.description}')"
                ),
                model_key=model.composite_key,
                record=model,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_required_fields,
    check_known_provider,
    check_effective_input_limit,
    check_token_ordering,
    check_unique_keys,
]
