from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from rulelint.config import LintConfig
from rulelint.errors import UnreadableRuleFileError
from rulelint.validation.models import LintResult
from rulelint.validation.validator import RuleValidator
from rulelint.walker import iter_rule_files

FileObserver = Callable[[Path, bool], None]


class LintRunner:
    def __init__(self, root: Path, config: LintConfig | None = None) -> None:
        self.root = root
        self.config = config or LintConfig()
        self.validator = RuleValidator(self.config)

    def run(self, on_file: Optional[FileObserver] = None) -> LintResult:
        """Validate every rule file under the root in a single pass.

        Per-file problems are collected in the returned result. Read failures
        raise ``UnreadableRuleFileError`` and abort the run.
        """
        result = LintResult()
        for path in iter_rule_files(self.root, self.config.extension):
            content = self._read(path)
            diagnostics = self.validator.validate(path, content, root=self.root)
            result.record(path, diagnostics)
            if on_file is not None:
                on_file(path, self.validator.is_skipped(path, self.root))
        return result

    @staticmethod
    def _read(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableRuleFileError(path, str(exc)) from exc
