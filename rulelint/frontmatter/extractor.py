"""Locate the leading frontmatter block of a markdown file."""

from __future__ import annotations

from rulelint.constants import FRONTMATTER_DELIMITER


def _is_delimiter(line: str, delimiter: str) -> bool:
    return line.rstrip("\r") == delimiter


def extract_frontmatter(
    text: str, delimiter: str = FRONTMATTER_DELIMITER
) -> str | None:
    """Return the text between the opening and closing delimiter lines.

    The opening delimiter must be the very first line of ``text``. Only the
    first delimited region counts; ``None`` means the file has no frontmatter.
    """
    lines = text.split("\n")
    if not _is_delimiter(lines[0], delimiter):
        return None

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index], delimiter):
            return "\n".join(line.rstrip("\r") for line in lines[1:index])
    return None
