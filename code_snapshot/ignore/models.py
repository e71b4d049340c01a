"""Ignore rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rule:
    segments: tuple[str, ...]
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False

    @property
    def pattern(self) -> str:
        return "/".join(self.segments)

    def describe(self) -> str:
        text = self.pattern
        if self.anchored:
            text = f"/{text}"
        if self.dir_only:
            text = f"{text}/"
        if self.negated:
            text = f"!{text}"
        return text


@dataclass(frozen=True)
class RuleSet:
    """Compiled rules in file order; later rules take precedence."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)
