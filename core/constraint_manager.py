from datetime import date
from typing import Callable, List, Optional
from core.models import RuleResult
from core.state import SearchState

Rule = Callable[[date, date, SearchState], RuleResult]


class ConstraintManager:
    def __init__(self, state: SearchState):
        self.state = state
        self.rules: list[Rule] = []

    def add_rule(self, rule_func: Rule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def first_violation(self, start: date, end: date) -> Optional[RuleResult]:
        """Evaluate rules in registration order; stop at the first violation."""
        for rule in self.rules:
            result = rule(start, end, self.state)
            if result.violated:
                return result
        return None

    def evaluate_all(self, start: date, end: date) -> List[RuleResult]:
        """Evaluate every rule without short-circuiting."""
        return [rule(start, end, self.state) for rule in self.rules]
