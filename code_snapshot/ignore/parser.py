"""Compile gitignore-style rule files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from code_snapshot.constants import (
    COMMENT_PREFIX,
    DOUBLE_STAR,
    NEGATION_PREFIX,
    RULES_FILENAME,
)
from code_snapshot.ignore.models import Rule, RuleSet

_WHITESPACE = " \t\r\n"


def parse_rule_line(line: str) -> Optional[Rule]:
    """Return the compiled rule for one line, or None for blanks, comments and junk."""
    text = line.strip(_WHITESPACE)
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    negated = False
    if text.startswith(NEGATION_PREFIX):
        negated = True
        text = text[1:].strip(_WHITESPACE)
        if not text:
            return None

    dir_only = False
    if text.endswith("/"):
        dir_only = True
        text = text[:-1]

    anchored = False
    if text.startswith("/"):
        anchored = True
        text = text.lstrip("/")

    text = text.replace("\\", "/")
    if not text:
        return None
    if text == DOUBLE_STAR:
        dir_only = False

    return Rule(
        segments=tuple(text.split("/")),
        negated=negated,
        dir_only=dir_only,
        anchored=anchored,
    )


def compile_rules(text: str) -> RuleSet:
    rules: list[Rule] = []
    for line in text.split("\n"):
        rule = parse_rule_line(line)
        if rule is not None:
            rules.append(rule)
    return RuleSet(rules=tuple(rules))


def load_rule_set(root: Path, filename: str = RULES_FILENAME) -> RuleSet:
    path = root / filename
    if not path.is_file():
        return RuleSet()
    try:
        text = path.read_bytes().decode("utf-8", errors="surrogateescape")
    except OSError:
        return RuleSet()
    return compile_rules(text)
