from pathlib import Path

from rich.console import Console

from rulelint.reporter import LineEmitter, LineTag
from rulelint.tui.enums import LINE_TAG_STYLE, UIStyle


class ConsoleLineEmitter(LineEmitter):
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def emit(self, tag: LineTag, text: str) -> None:
        self.console.print(
            text,
            style=LINE_TAG_STYLE[tag],
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


class LintConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.emitter = ConsoleLineEmitter(self.console)

    def render_header(self, root: Path, verbose: bool = False) -> None:
        self.emitter.blank()
        self.console.print("Validating rule files...", style=UIStyle.BOLD.value)
        if verbose:
            self.emitter.emit(LineTag.DIM, f"root: {root}")
        self.emitter.blank()

    def render_file_trace(self, display_path: str, skipped: bool) -> None:
        verb = "skipped" if skipped else "checked"
        self.emitter.emit(LineTag.DIM, f"  {verb} {display_path}")
