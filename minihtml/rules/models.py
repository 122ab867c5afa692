"""
Rule Models — The containment rule table.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class ContainmentRule:
    """What one parent element may contain."""

    parent: str
    children: frozenset[str] = frozenset()
    forbidden: frozenset[str] = frozenset()
    text_only: bool = False
    message: Optional[str] = None

    def allows(self, child: str) -> bool:
        """Check a child tag name against this rule."""
        if self.text_only:
            return False
        if child in self.forbidden:
            return False
        return not self.children or child in self.children


@dataclass(frozen=True)
class RuleTable:
    """
    Read-only rule table shared by every validation pass.

    Frozen so that no pass can alter the rules seen by the next one.
    """

    name: str
    version: str
    description: str = ""
    void_elements: frozenset[str] = frozenset({"meta"})
    containment: Mapping[str, ContainmentRule] = field(default_factory=dict)
    messages: Mapping[str, str] = field(default_factory=dict)

    def rule_for(self, parent: str) -> ContainmentRule:
        try:
            return self.containment[parent]
        except KeyError:
            raise KeyError(f"No containment rule for <{parent}> in ruleset '{self.name}'") from None

    def message(self, key: str) -> str:
        return self.messages[key]
