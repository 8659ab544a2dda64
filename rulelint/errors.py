from pathlib import Path


class LintAppError(Exception):
    """Base user-facing application error."""


class LintFileError(LintAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class UnreadableDirectoryError(LintFileError):
    def __init__(self, path: Path, detail: str, kind: str = "directory") -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read {kind} ({detail})")


class UnreadableConfigsRootError(UnreadableDirectoryError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(path=path, detail=detail, kind="configs directory")


class UnreadableRuleFileError(LintFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read rule file ({detail})")


class InvalidLintConfigError(LintFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid lint config ({detail})")
