"""
Rule Evaluator for Kennel Report.

Ordered rule chains: each rule is a (name, predicate, result) triple checked
top to bottom against a dict of facts. The first match wins; a chain always
ends in its default so every evaluation yields a value.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

from core.logger import get_logger

T = TypeVar("T")
Facts = Dict[str, Any]

logger = get_logger("rule_evaluator")


@dataclass(frozen=True)
class Rule(Generic[T]):
    name: str
    predicate: Callable[[Facts], bool]
    result: T


class RuleChain(Generic[T]):
    """
    First-match-wins rule chain with a guaranteed default.
    """

    def __init__(self, name: str, rules: Sequence[Rule[T]], default: T):
        self.name = name
        self.rules: List[Rule[T]] = list(rules)
        self.default = default

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

    def match(self, facts: Facts) -> Optional[Rule[T]]:
        """Return the first rule whose predicate holds, or None for the default."""
        for rule in self.rules:
            if rule.predicate(facts):
                return rule
        return None

    def evaluate(self, facts: Facts) -> T:
        rule = self.match(facts)
        if rule is None:
            logger.debug("%s: no rule matched, default %s", self.name, self.default)
            return self.default
        logger.debug("%s: rule '%s' -> %s", self.name, rule.name, rule.result)
        return rule.result


def contains_any(haystack: str, keywords: Iterable[str]) -> bool:
    return any(keyword in haystack for keyword in keywords)


def keyword_rule(name: str, keywords: Sequence[str], result: T, key: str = "haystack") -> Rule[T]:
    """Rule that fires when facts[key] contains any of the keywords."""
    return Rule(name=name, predicate=lambda facts: contains_any(facts[key], keywords), result=result)
