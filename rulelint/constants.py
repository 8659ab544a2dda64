from typing import Final


CONFIGS_DIRNAME: Final[str] = "configs"
CONFIG_FILENAME: Final[str] = ".rulelint.yaml"
FRONTMATTER_DELIMITER: Final[str] = "---"
RULE_EXTENSION: Final[str] = ".md"

CLAUDE_FILENAME: Final[str] = "CLAUDE.md"
SKILLS_DIRNAME: Final[str] = "skills"
SHARED_RULES_AREA: Final[tuple[str, ...]] = ("_shared", "rules")

PATHS_KEY: Final[str] = "paths"
DESCRIPTION_KEY: Final[str] = "description"
ALWAYS_APPLY_KEY: Final[str] = "alwaysApply"

KNOWN_KEYS: Final[tuple[str, ...]] = (
    "description",
    "paths",
    "alwaysApply",
    "name",
    "version",
    "argument-hint",
)
CATCH_ALL_PATTERNS: Final[tuple[str, ...]] = ("**/*", "**", "*")
