from pathlib import Path

import pytest

from rulelint.reporter import LineTag, Reporter, SUCCESS_MESSAGE, exit_code
from rulelint.validation.models import Diagnostic, LintResult, RunSummary, Severity

ROOT = Path("/repo/configs")


def _result(files: int, *diagnostics: Diagnostic) -> LintResult:
    result = LintResult()
    for index in range(files):
        result.visited.append(ROOT / f"f{index}.md")
    result.diagnostics.extend(diagnostics)
    return result


def test_report_empty_run_is_success(emitter) -> None:
    code = Reporter(emitter, root=ROOT).report(LintResult())

    assert code == 0
    assert emitter.texts == ["", "Files checked: 0", SUCCESS_MESSAGE]


def test_report_lists_diagnostics_then_summary(emitter) -> None:
    result = _result(
        3,
        Diagnostic(ROOT / "x/rules/core.md", Severity.ERROR, "'paths' must be an array"),
        Diagnostic(ROOT / "x/rules/misc.md", Severity.WARNING, "no frontmatter found"),
    )

    code = Reporter(emitter, root=ROOT).report(result)

    assert code == 1
    assert emitter.lines == [
        (LineTag.ERROR, "✗ x/rules/core.md: 'paths' must be an array"),
        (LineTag.WARNING, "⚠ x/rules/misc.md: no frontmatter found"),
        (LineTag.PLAIN, ""),
        (LineTag.PLAIN, "Files checked: 3"),
        (LineTag.ERROR, "Errors: 1"),
        (LineTag.WARNING, "Warnings: 1"),
    ]


def test_report_warnings_only_exit_zero_without_success_line(emitter) -> None:
    result = _result(
        2, Diagnostic(ROOT / "a.md", Severity.WARNING, "no frontmatter found")
    )

    code = Reporter(emitter, root=ROOT).report(result)

    assert code == 0
    assert "Errors: 1" not in emitter.texts
    assert "Warnings: 1" in emitter.texts
    assert SUCCESS_MESSAGE not in emitter.texts


def test_display_path_outside_root_is_absolute(emitter) -> None:
    reporter = Reporter(emitter, root=ROOT)
    assert reporter.display_path(Path("/elsewhere/a.md")) == "/elsewhere/a.md"
    assert Reporter(emitter).display_path(Path("/x/a.md")) == "/x/a.md"


@pytest.mark.parametrize(
    ("warnings", "errors", "expected"),
    [(0, 0, 0), (7, 0, 0), (0, 1, 1), (3, 4, 1)],
)
def test_exit_code_depends_only_on_errors(warnings: int, errors: int, expected: int) -> None:
    assert exit_code(RunSummary(files_checked=10, warnings=warnings, errors=errors)) == expected


def test_summary_counts_by_severity() -> None:
    result = _result(
        4,
        Diagnostic(ROOT / "a.md", Severity.ERROR, "e"),
        Diagnostic(ROOT / "a.md", Severity.ERROR, "e2"),
        Diagnostic(ROOT / "b.md", Severity.WARNING, "w"),
    )
    assert result.summary() == RunSummary(files_checked=4, warnings=1, errors=2)
    assert not result.summary().is_clean
