"""Structural checks applied to parsed frontmatter."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from rulelint.config import LintConfig
from rulelint.constants import ALWAYS_APPLY_KEY, DESCRIPTION_KEY, PATHS_KEY
from rulelint.frontmatter.models import ParsedMetadata
from rulelint.validation.models import Severity

Finding = tuple[Severity, str]

_ROOT_ONLY_GLOB_RE = re.compile(r"^\*\.\w+$")


class IFrontmatterCheck(ABC):
    @abstractmethod
    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        """Return (severity, message) pairs for one file's metadata."""


class PathsShapeCheck(IFrontmatterCheck):
    """``paths`` must be a list of string patterns."""

    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        if PATHS_KEY not in metadata:
            return []
        paths = metadata[PATHS_KEY]
        if not isinstance(paths, list):
            return [(Severity.ERROR, "'paths' must be an array")]
        return [
            (Severity.ERROR, f"invalid path pattern: {pattern!r}")
            for pattern in paths
            if not isinstance(pattern, str)
        ]


class UnknownKeysCheck(IFrontmatterCheck):
    def __init__(self, known_keys: tuple[str, ...]) -> None:
        self._known_keys = set(known_keys)

    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        return [
            (Severity.WARNING, f'unknown frontmatter key: "{key}"')
            for key in metadata
            if key not in self._known_keys
        ]


class DescriptionCheck(IFrontmatterCheck):
    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        description = metadata.get(DESCRIPTION_KEY)
        # a bare "description:" parses to an empty list and counts as present
        if description is None or description == "":
            return [(Severity.ERROR, 'missing "description" field')]
        if isinstance(description, str) and not description.strip():
            return [(Severity.ERROR, 'empty "description" field')]
        return []


class ActivationCheck(IFrontmatterCheck):
    """A rule activates either by ``paths`` or by ``alwaysApply``, never both."""

    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        has_paths = PATHS_KEY in metadata
        has_always_apply = ALWAYS_APPLY_KEY in metadata
        if has_paths and has_always_apply:
            return [(Severity.ERROR, 'cannot have both "paths" and "alwaysApply"')]
        if not has_paths and not has_always_apply:
            return [(Severity.ERROR, 'must have either "paths" or "alwaysApply"')]
        return []


class PathPatternsCheck(IFrontmatterCheck):
    def __init__(self, catch_all_patterns: tuple[str, ...]) -> None:
        self._catch_all = set(catch_all_patterns)

    def run(self, metadata: ParsedMetadata) -> list[Finding]:
        paths = metadata.get(PATHS_KEY)
        if not isinstance(paths, list):
            return []
        if not paths:
            return [
                (Severity.ERROR, "'paths' array is empty (rule will never activate)")
            ]

        findings: list[Finding] = []
        for pattern in paths:
            if pattern in self._catch_all:
                findings.append(
                    (
                        Severity.ERROR,
                        f'catch-all pattern "{pattern}", use "alwaysApply: true" '
                        "or narrow the glob",
                    )
                )
            if _ROOT_ONLY_GLOB_RE.match(pattern):
                findings.append(
                    (
                        Severity.WARNING,
                        f'root-only glob "{pattern}", did you mean "**/{pattern}"?',
                    )
                )
        return findings


def build_checks(config: LintConfig) -> list[IFrontmatterCheck]:
    checks: list[IFrontmatterCheck] = [PathsShapeCheck()]
    if config.strict:
        checks.extend(
            [
                UnknownKeysCheck(config.known_keys),
                DescriptionCheck(),
                ActivationCheck(),
                PathPatternsCheck(config.catch_all_patterns),
            ]
        )
    return checks
