"""Tests for individual frontmatter checks."""

from rulelint.config import LintConfig
from rulelint.validation.checks import (
    ActivationCheck,
    DescriptionCheck,
    PathPatternsCheck,
    PathsShapeCheck,
    UnknownKeysCheck,
    build_checks,
)
from rulelint.validation.models import Severity


def test_paths_shape_accepts_list() -> None:
    assert PathsShapeCheck().run({"paths": ["a", "b"]}) == []


def test_paths_shape_accepts_missing_key() -> None:
    assert PathsShapeCheck().run({"description": "x"}) == []


def test_paths_shape_rejects_scalar() -> None:
    assert PathsShapeCheck().run({"paths": "**/*.ts"}) == [
        (Severity.ERROR, "'paths' must be an array")
    ]


def test_paths_shape_rejects_non_string_elements() -> None:
    findings = PathsShapeCheck().run({"paths": ["ok", 3]})  # type: ignore[list-item]
    assert findings == [(Severity.ERROR, "invalid path pattern: 3")]


def test_unknown_keys_warns_per_key() -> None:
    check = UnknownKeysCheck(("description", "paths"))
    findings = check.run({"description": "x", "tags": [], "owner": "me"})
    assert findings == [
        (Severity.WARNING, 'unknown frontmatter key: "tags"'),
        (Severity.WARNING, 'unknown frontmatter key: "owner"'),
    ]


def test_description_missing_and_empty() -> None:
    assert DescriptionCheck().run({}) == [(Severity.ERROR, 'missing "description" field')]
    assert DescriptionCheck().run({"description": ""}) == [
        (Severity.ERROR, 'missing "description" field')
    ]
    assert DescriptionCheck().run({"description": "  "}) == [
        (Severity.ERROR, 'empty "description" field')
    ]
    assert DescriptionCheck().run({"description": "x"}) == []


def test_activation_requires_exactly_one_key() -> None:
    check = ActivationCheck()
    assert check.run({"paths": ["a"]}) == []
    assert check.run({"alwaysApply": "true"}) == []
    assert check.run({}) == [
        (Severity.ERROR, 'must have either "paths" or "alwaysApply"')
    ]
    assert check.run({"paths": ["a"], "alwaysApply": "true"}) == [
        (Severity.ERROR, 'cannot have both "paths" and "alwaysApply"')
    ]


def test_path_patterns_empty_list() -> None:
    check = PathPatternsCheck(("**",))
    assert check.run({"paths": []}) == [
        (Severity.ERROR, "'paths' array is empty (rule will never activate)")
    ]


def test_path_patterns_ignores_scalar_paths() -> None:
    assert PathPatternsCheck(("**",)).run({"paths": "**"}) == []


def test_path_patterns_accepts_scoped_globs() -> None:
    check = PathPatternsCheck(("**/*", "**", "*"))
    assert check.run({"paths": ["**/*.ts", "src/*.py", "docs/**"]}) == []


def test_build_checks_lenient_by_default() -> None:
    checks = build_checks(LintConfig())
    assert [type(check) for check in checks] == [PathsShapeCheck]


def test_build_checks_strict() -> None:
    checks = build_checks(LintConfig(strict=True))
    assert len(checks) == 5


def test_description_bare_key_counts_as_present() -> None:
    assert DescriptionCheck().run({"description": []}) == []
