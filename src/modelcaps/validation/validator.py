"""Catalog validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pprint import pformat
from typing import Callable

from modelcaps.diagnostic import Diagnostic
from modelcaps.errors import CatalogError, DuplicateModelError, MissingFieldError
from modelcaps.types import ModelCapability
from modelcaps.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

RuleFunc = Callable[[Sequence[ModelCapability]], list[Diagnostic]]

_ERROR_TYPES: dict[str, type[CatalogError]] = {
    "check_required_fields": MissingFieldError,
    "check_unique_keys": DuplicateModelError,
}


def dump_record(record: object) -> str:
    """Render a record's full contents for a diagnostic."""
    if isinstance(record, ModelCapability):
        return pformat(record.to_dict(), sort_dicts=False)
    return pformat(record)


def validate(
    models: Sequence[ModelCapability], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all validation rules against *models*.

    Returns the full list of diagnostics (errors and warnings).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(models))
    return diagnostics


def validate_or_raise(
    models: Sequence[ModelCapability], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`CatalogError` on the first ERROR diagnostic.

    The error message carries a dump of the offending record so it can be
    found in the catalog source. Returns the warnings when no errors are
    found.
    """
    diagnostics = validate(models, extra_rules=extra_rules)
    for diag in diagnostics:
        if diag.is_error:
            error_type = _ERROR_TYPES.get(diag.rule, CatalogError)
            raise error_type(
                f"{diag}\n{dump_record(diag.record)}",
                record=diag.record,
                rule=diag.rule,
            )
    for diag in diagnostics:
        logger.warning("%s", diag)
    return diagnostics
