"""Lint settings and their optional YAML override file."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from rulelint.constants import (
    CATCH_ALL_PATTERNS,
    CLAUDE_FILENAME,
    CONFIGS_DIRNAME,
    KNOWN_KEYS,
    RULE_EXTENSION,
    SHARED_RULES_AREA,
    SKILLS_DIRNAME,
)
from rulelint.errors import InvalidLintConfigError

_STRING_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

LINT_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "extension": {"type": "string", "pattern": r"^\.\w+$"},
        "exempt_filenames": _STRING_LIST,
        "skills_segment": {"type": "string", "minLength": 1},
        "shared_rules_area": {**_STRING_LIST, "minItems": 1},
        "strict": {"type": "boolean"},
        "known_keys": _STRING_LIST,
        "catch_all_patterns": _STRING_LIST,
    },
}

_TUPLE_FIELDS = (
    "exempt_filenames",
    "shared_rules_area",
    "known_keys",
    "catch_all_patterns",
)


@dataclass(frozen=True)
class LintConfig:
    extension: str = RULE_EXTENSION
    exempt_filenames: tuple[str, ...] = (CLAUDE_FILENAME,)
    skills_segment: str = SKILLS_DIRNAME
    shared_rules_area: tuple[str, ...] = SHARED_RULES_AREA
    strict: bool = False
    known_keys: tuple[str, ...] = KNOWN_KEYS
    catch_all_patterns: tuple[str, ...] = CATCH_ALL_PATTERNS


def default_configs_root() -> Path:
    """Sibling ``configs`` directory of the project checkout."""
    return Path(__file__).resolve().parent.parent / CONFIGS_DIRNAME


def _format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def load_config(path: Path | None, base: LintConfig | None = None) -> LintConfig:
    config = base or LintConfig()
    if path is None or not path.exists():
        return config

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidLintConfigError(path, str(exc)) from exc
    except yaml.YAMLError as exc:
        raise InvalidLintConfigError(path, f"invalid YAML: {exc}") from exc

    if raw is None:
        return config

    validator = Draft202012Validator(LINT_CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(raw), key=lambda item: list(item.path))
    if errors:
        raise InvalidLintConfigError(path, _format_schema_error(errors[0]))

    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        overrides[key] = tuple(value) if key in _TUPLE_FIELDS else value
    return replace(config, **overrides)
