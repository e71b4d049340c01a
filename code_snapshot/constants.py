from typing import Final


RULES_FILENAME: Final[str] = ".gitignore"
DEFAULT_FENCE: Final[str] = "```"

DOUBLE_STAR: Final[str] = "**"
COMMENT_PREFIX: Final[str] = "#"
NEGATION_PREFIX: Final[str] = "!"

CONFIG_DIRNAME: Final[str] = "code-snapshot"
CONFIG_FILENAME: Final[str] = "config.yaml"
