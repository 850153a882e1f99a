"""
Stylesheet data model: rules, their selectors and their declarations.
"""

from typing import Iterable, List, Optional

from .selector import SimpleSelector
from .values import Value


class Declaration:
    """A single ``name: value`` pair. Names are case-sensitive."""

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self):
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    A rule set: selectors (any of which may match) and ordered declarations.
    """

    def __init__(self, selectors: Iterable[SimpleSelector], declarations: Iterable[Declaration]):
        """
        Initialize a rule.

        Args:
            selectors: Selectors in the order matching should try them
            declarations: Declarations in source order
        """
        self.selectors: List[SimpleSelector] = list(selectors)
        self.declarations: List[Declaration] = list(declarations)

    def __repr__(self):
        selectors = ", ".join(str(selector) for selector in self.selectors)
        return f"Rule({selectors!r}, {len(self.declarations)} declarations)"


class Stylesheet:
    """An ordered list of rules."""

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self.rules: List[Rule] = list(rules or [])

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self):
        return f"Stylesheet({len(self.rules)} rules)"
