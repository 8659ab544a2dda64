"""Restricted parser for rule frontmatter.

Only a flat subset of YAML is understood: ``key: value`` scalars and
``key:`` followed by ``- item`` lists. Nested mappings, block scalars, anchors
and flow collections are not supported. Lines that do not fit the grammar are
ignored instead of reported, so hand-edited files never fail to parse.
"""

from __future__ import annotations

import re

from rulelint.frontmatter.models import ClassifiedLine, LineKind, ParsedMetadata

_KEY_RE = re.compile(r"^([A-Za-z0-9_][A-Za-z0-9_-]*):(.*)$")
_LIST_ITEM_RE = re.compile(r"^\s*-\s*(.+?)\s*$")
_QUOTES = ("\"", "'")


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def classify_line(line: str) -> ClassifiedLine:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return ClassifiedLine(LineKind.IGNORED)

    key_match = _KEY_RE.match(line)
    if key_match:
        key, rest = key_match.group(1), key_match.group(2).strip()
        if rest:
            return ClassifiedLine(
                LineKind.KEY_SCALAR, key=key, value=strip_quotes(rest)
            )
        return ClassifiedLine(LineKind.KEY_LIST_OPEN, key=key)

    item_match = _LIST_ITEM_RE.match(line)
    if item_match:
        return ClassifiedLine(
            LineKind.LIST_ITEM, value=strip_quotes(item_match.group(1))
        )

    return ClassifiedLine(LineKind.UNRECOGNIZED)


def parse_metadata(block: str) -> ParsedMetadata:
    result: ParsedMetadata = {}
    # key of the list that "- item" lines append to
    list_target: str | None = None

    for line in block.split("\n"):
        classified = classify_line(line)

        if classified.kind == LineKind.KEY_SCALAR:
            result[classified.key] = classified.value
            if classified.key == list_target:
                list_target = None
        elif classified.kind == LineKind.KEY_LIST_OPEN:
            result[classified.key] = []
            list_target = classified.key
        elif classified.kind == LineKind.LIST_ITEM and list_target is not None:
            target = result[list_target]
            if isinstance(target, list):
                target.append(classified.value)

    return result
