"""Wildcard engine and last-match-wins evaluation for ignore rules.

Patterns are matched segment by segment. Within a segment ``*`` matches any
run of characters and ``?`` matches exactly one; neither crosses a ``/``
because segments never contain one. A whole ``**`` segment absorbs zero or
more path segments. ``[`` and ``\\`` carry no special meaning.
"""

from __future__ import annotations

from typing import Optional, Sequence

from code_snapshot.constants import DOUBLE_STAR
from code_snapshot.ignore.models import Rule, RuleSet


def segment_match(pattern: str, text: str) -> bool:
    pi = 0
    ti = 0
    star_pi = -1
    star_ti = -1
    while ti < len(text):
        if pi < len(pattern) and (pattern[pi] == "?" or pattern[pi] == text[ti]):
            pi += 1
            ti += 1
        elif pi < len(pattern) and pattern[pi] == "*":
            pi += 1
            star_pi = pi
            star_ti = ti
        elif star_pi != -1:
            star_ti += 1
            pi = star_pi
            ti = star_ti
        else:
            return False
    while pi < len(pattern) and pattern[pi] == "*":
        pi += 1
    return pi == len(pattern)


def segments_match(pattern: Sequence[str], path: Sequence[str]) -> bool:
    # Memoized on (pattern index, path index); recursion depth is bounded by len(pattern).
    memo: dict[tuple[int, int], bool] = {}

    def match_from(pi: int, si: int) -> bool:
        key = (pi, si)
        cached = memo.get(key)
        if cached is not None:
            return cached

        if pi == len(pattern):
            result = si == len(path)
        elif pattern[pi] == DOUBLE_STAR:
            result = any(match_from(pi + 1, k) for k in range(si, len(path) + 1))
        elif si == len(path):
            result = False
        else:
            result = segment_match(pattern[pi], path[si]) and match_from(pi + 1, si + 1)

        memo[key] = result
        return result

    return match_from(0, 0)


def rule_matches(rule: Rule, relative_path: str, is_directory: bool) -> bool:
    if rule.dir_only and not is_directory:
        return False

    path = relative_path
    if path.endswith("/") and not rule.dir_only:
        path = path[:-1]

    if segments_match(rule.segments, path.split("/")):
        return True
    if rule.anchored:
        return False

    for index, char in enumerate(path):
        if char == "/" and index + 1 < len(path):
            if segments_match(rule.segments, path[index + 1 :].split("/")):
                return True
    return False


def last_matching_rule(
    rule_set: RuleSet, relative_path: str, is_directory: bool
) -> Optional[Rule]:
    matched: Optional[Rule] = None
    for rule in rule_set:
        if rule_matches(rule, relative_path, is_directory):
            matched = rule
    return matched


def is_ignored(rule_set: RuleSet, relative_path: str, is_directory: bool) -> bool:
    ignored = False
    for rule in rule_set:
        if rule_matches(rule, relative_path, is_directory):
            ignored = not rule.negated
    return ignored


class IgnoreMatcher:
    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def is_ignored(self, relative_path: str, is_directory: bool) -> bool:
        return is_ignored(self._rule_set, relative_path, is_directory)

    def explain(self, relative_path: str, is_directory: bool) -> Optional[Rule]:
        """Return the rule that decides the outcome, or None when no rule matches."""
        return last_matching_rule(self._rule_set, relative_path, is_directory)
