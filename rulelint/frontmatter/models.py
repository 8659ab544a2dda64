"""Frontmatter data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


MetadataValue = Union[str, list[str]]
ParsedMetadata = dict[str, MetadataValue]


class LineKind(str, Enum):
    IGNORED = "ignored"
    KEY_SCALAR = "key_scalar"
    KEY_LIST_OPEN = "key_list_open"
    LIST_ITEM = "list_item"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    key: str = ""
    value: str = ""
