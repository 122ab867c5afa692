"""Rules — Containment rule table and its YAML loader."""

from minihtml.rules.loader import RuleTableError, clear_cache, get_ruleset, load_ruleset
from minihtml.rules.models import ContainmentRule, RuleTable

__all__ = [
    "ContainmentRule",
    "RuleTable",
    "RuleTableError",
    "clear_cache",
    "get_ruleset",
    "load_ruleset",
]
