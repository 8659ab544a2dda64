from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from rulelint.constants import RULE_EXTENSION
from rulelint.errors import UnreadableConfigsRootError, UnreadableDirectoryError


def iter_rule_files(root: Path, extension: str = RULE_EXTENSION) -> Iterator[Path]:
    """Yield files under ``root`` whose name ends with ``extension``.

    Order follows the directory listing and is only meant for display. A
    missing root yields nothing.
    """
    if not root.is_dir():
        return

    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as scan:
                entries = list(scan)
        except OSError as exc:
            if directory == root:
                raise UnreadableConfigsRootError(directory, str(exc)) from exc
            raise UnreadableDirectoryError(directory, str(exc)) from exc

        subdirs: list[Path] = []
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(path)
            elif entry.name.endswith(extension):
                yield path
        # reversed so subdirectories are visited in listing order
        pending.extend(reversed(subdirs))
