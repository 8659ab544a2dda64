"""Classify rule files and validate their frontmatter."""

from __future__ import annotations

from pathlib import Path

from rulelint.config import LintConfig
from rulelint.frontmatter.extractor import extract_frontmatter
from rulelint.frontmatter.parser import parse_metadata
from rulelint.validation.checks import IFrontmatterCheck, build_checks
from rulelint.validation.models import Diagnostic, Severity

NO_FRONTMATTER_MESSAGE = "no frontmatter found"


def _relative_parts(path: Path, root: Path | None) -> tuple[str, ...]:
    if root is not None:
        try:
            return path.relative_to(root).parts
        except ValueError:
            pass
    return path.parts


def _contains_run(parts: tuple[str, ...], run: tuple[str, ...]) -> bool:
    width = len(run)
    return any(parts[i : i + width] == run for i in range(len(parts) - width + 1))


class RuleValidator:
    """Produce diagnostics for a single rule file.

    Files are skipped when their name is exempt (``CLAUDE.md``) or when they
    live in a skills directory. Missing frontmatter is only a warning, and is
    tolerated entirely for globally applied shared rules.
    """

    def __init__(self, config: LintConfig | None = None) -> None:
        self.config = config or LintConfig()
        self._checks: list[IFrontmatterCheck] = build_checks(self.config)

    def is_skipped(self, path: Path, root: Path | None = None) -> bool:
        if path.name in self.config.exempt_filenames:
            return True
        directories = _relative_parts(path, root)[:-1]
        return self.config.skills_segment in directories

    def is_shared_rule(self, path: Path, root: Path | None = None) -> bool:
        directories = _relative_parts(path, root)[:-1]
        return _contains_run(directories, self.config.shared_rules_area)

    def validate(
        self, path: Path, content: str, root: Path | None = None
    ) -> list[Diagnostic]:
        if self.is_skipped(path, root):
            return []

        block = extract_frontmatter(content)
        if block is None:
            if self.is_shared_rule(path, root):
                return []
            return [Diagnostic(path, Severity.WARNING, NO_FRONTMATTER_MESSAGE)]

        metadata = parse_metadata(block)
        diagnostics: list[Diagnostic] = []
        for check in self._checks:
            for severity, message in check.run(metadata):
                diagnostics.append(Diagnostic(path, severity, message))
        return diagnostics
