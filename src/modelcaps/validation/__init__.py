"""Startup validation of capability catalogs."""
from __future__ import annotations

from modelcaps.validation.rules import ALL_RULES, REQUIRED_FIELDS
from modelcaps.validation.validator import dump_record, validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "REQUIRED_FIELDS",
    "dump_record",
    "validate",
    "validate_or_raise",
]
