import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from rulelint.reporter import LineEmitter, LineTag  # noqa: E402


class RecordingEmitter(LineEmitter):
    def __init__(self) -> None:
        self.lines: list[tuple[LineTag, str]] = []

    def emit(self, tag: LineTag, text: str) -> None:
        self.lines.append((tag, text))

    @property
    def texts(self) -> list[str]:
        return [text for _, text in self.lines]


@pytest.fixture
def configs_root(tmp_path: Path) -> Path:
    root = tmp_path / "configs"
    root.mkdir()
    return root


@pytest.fixture
def write_rule(configs_root: Path):
    def _write(relative: str, content: str) -> Path:
        path = configs_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
