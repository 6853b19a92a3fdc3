"""Diagnostic model: structured findings about catalog records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a capability record.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        model_key: Composite key of the offending record, if it has one.
        record: The offending record itself.
        field: The record field involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    model_key: str | None = None
    record: Any = None
    field: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [model={self.model_key}]" if self.model_key else ""
        return f"{self.severity.value}{location}: {self.message}"
