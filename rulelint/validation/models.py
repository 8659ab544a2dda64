"""Diagnostic data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    path: Path
    severity: Severity
    message: str


@dataclass(frozen=True)
class RunSummary:
    files_checked: int
    warnings: int
    errors: int

    @property
    def is_clean(self) -> bool:
        return self.warnings == 0 and self.errors == 0


@dataclass
class LintResult:
    visited: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def record(self, path: Path, diagnostics: list[Diagnostic]) -> None:
        self.visited.append(path)
        self.diagnostics.extend(diagnostics)

    def summary(self) -> RunSummary:
        warnings = sum(1 for item in self.diagnostics if item.severity == Severity.WARNING)
        errors = sum(1 for item in self.diagnostics if item.severity == Severity.ERROR)
        return RunSummary(
            files_checked=len(self.visited), warnings=warnings, errors=errors
        )
