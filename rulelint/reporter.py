"""Summarize a lint run and decide its exit status."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from rulelint.validation.models import Diagnostic, LintResult, RunSummary, Severity


class LineTag(str, Enum):
    PLAIN = "plain"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"
    DIM = "dim"


SEVERITY_GLYPH = {
    Severity.ERROR: "✗",
    Severity.WARNING: "⚠",
}

SEVERITY_TAG = {
    Severity.ERROR: LineTag.ERROR,
    Severity.WARNING: LineTag.WARNING,
}

SUCCESS_MESSAGE = "✓ All rules are valid!"


class LineEmitter(ABC):
    @abstractmethod
    def emit(self, tag: LineTag, text: str) -> None:
        """Write one line of output tagged with its severity."""

    def blank(self) -> None:
        self.emit(LineTag.PLAIN, "")


class Reporter:
    def __init__(self, emitter: LineEmitter, root: Path | None = None) -> None:
        self.emitter = emitter
        self.root = root

    def display_path(self, path: Path) -> str:
        if self.root is not None:
            try:
                return path.relative_to(self.root).as_posix()
            except ValueError:
                pass
        return str(path)

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        glyph = SEVERITY_GLYPH[diagnostic.severity]
        return f"{glyph} {self.display_path(diagnostic.path)}: {diagnostic.message}"

    def report(self, result: LintResult) -> int:
        for diagnostic in result.diagnostics:
            self.emitter.emit(
                SEVERITY_TAG[diagnostic.severity], self.format_diagnostic(diagnostic)
            )

        summary = result.summary()
        self.emitter.blank()
        self.emitter.emit(LineTag.PLAIN, f"Files checked: {summary.files_checked}")
        if summary.errors > 0:
            self.emitter.emit(LineTag.ERROR, f"Errors: {summary.errors}")
        if summary.warnings > 0:
            self.emitter.emit(LineTag.WARNING, f"Warnings: {summary.warnings}")
        if summary.is_clean:
            self.emitter.emit(LineTag.SUCCESS, SUCCESS_MESSAGE)

        return exit_code(summary)


def exit_code(summary: RunSummary) -> int:
    return 1 if summary.errors > 0 else 0
