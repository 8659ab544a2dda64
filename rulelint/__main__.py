from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from rulelint.config import default_configs_root, load_config
from rulelint.constants import CONFIG_FILENAME
from rulelint.errors import LintAppError
from rulelint.reporter import Reporter
from rulelint.runner import LintRunner
from rulelint.tui import LintConsoleUI


class FatalLintError(click.ClickException):
    exit_code = 2


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Validate frontmatter of rule files under the configs directory.",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Configs directory to lint (defaults to the bundled configs/).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"YAML settings file (defaults to <root>/{CONFIG_FILENAME}).",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Also check descriptions, activation keys and glob shapes.",
)
@click.option("-v", "--verbose", is_flag=True, help="List every visited file.")
def cli(
    root: Optional[Path],
    config_path: Optional[Path],
    strict: Optional[bool],
    verbose: bool,
) -> None:
    configs_root = root if root is not None else default_configs_root()
    ui = LintConsoleUI(Console())

    try:
        if config_path is not None and not config_path.exists():
            raise FatalLintError(f"Config file not found: {config_path}")
        config = load_config(config_path or configs_root / CONFIG_FILENAME)
        if strict is not None:
            config = replace(config, strict=strict)

        ui.render_header(configs_root, verbose=verbose)
        reporter = Reporter(ui.emitter, root=configs_root)

        def _trace(path: Path, skipped: bool) -> None:
            if verbose:
                ui.render_file_trace(reporter.display_path(path), skipped)

        result = LintRunner(configs_root, config).run(on_file=_trace)
    except LintAppError as exc:
        raise FatalLintError(f"Fatal: {exc}")

    code = reporter.report(result)
    ui.emitter.blank()
    if code:
        raise click.exceptions.Exit(code)


def main() -> int:
    try:
        # without standalone mode click returns the Exit code instead of raising
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
