from rulelint.tui.renderers import ConsoleLineEmitter, LintConsoleUI

__all__ = ["ConsoleLineEmitter", "LintConsoleUI"]
