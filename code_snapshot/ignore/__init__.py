from code_snapshot.ignore.matcher import IgnoreMatcher, is_ignored, rule_matches
from code_snapshot.ignore.models import Rule, RuleSet
from code_snapshot.ignore.parser import compile_rules, load_rule_set

__all__ = [
    "IgnoreMatcher",
    "Rule",
    "RuleSet",
    "compile_rules",
    "is_ignored",
    "load_rule_set",
    "rule_matches",
]
