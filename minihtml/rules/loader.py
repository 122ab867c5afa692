"""
Rule Loader — Load and parse containment rule tables from YAML files.
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Optional

import yaml

from minihtml.core.logging import LogChannel, get_logger
from minihtml.rules.models import ContainmentRule, RuleTable

RULESETS_DIR = Path(__file__).parent / "rulesets"
DEFAULT_RULESET = "default"

REQUIRED_PARENTS = ("head", "body", "title", "span", "div")
REQUIRED_MESSAGES = ("root_start", "root_end", "single_root", "head_count", "body_count")

log = get_logger(LogChannel.SYSTEM)


class RuleTableError(ValueError):
    """Raised when a ruleset file is missing or malformed."""


def load_ruleset(name: str = DEFAULT_RULESET) -> RuleTable:
    """
    Load a rule table by name from the packaged rulesets directory.

    Raises:
        RuleTableError: If the file doesn't exist or is invalid
    """
    path = RULESETS_DIR / f"{name}.yaml"
    if not path.exists():
        raise RuleTableError(f"Ruleset not found: {path}")
    return load_ruleset_from_path(path)


def load_ruleset_from_path(path: Path) -> RuleTable:
    """Load a rule table from an arbitrary path."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise RuleTableError(f"Cannot read ruleset {path}: {e}") from e
    return parse_ruleset(data)


def parse_ruleset(data: dict) -> RuleTable:
    """Parse and check a rule table from a dictionary."""
    if not isinstance(data, dict):
        raise RuleTableError("Ruleset must be a mapping")

    void_elements = data.get("void_elements") or []
    if not isinstance(void_elements, list):
        raise RuleTableError("void_elements must be a list")

    containment = {}
    for parent, rule_data in (data.get("containment") or {}).items():
        containment[parent] = parse_rule(parent, rule_data or {})

    missing = [p for p in REQUIRED_PARENTS if p not in containment]
    if missing:
        raise RuleTableError(f"Missing containment rules for: {', '.join(missing)}")

    messages = dict(data.get("messages") or {})
    missing = [m for m in REQUIRED_MESSAGES if m not in messages]
    if missing:
        raise RuleTableError(f"Missing messages for: {', '.join(missing)}")

    return RuleTable(
        name=data.get("name", "unnamed"),
        version=str(data.get("version", "1.0")),
        description=data.get("description", ""),
        void_elements=frozenset(n.lower() for n in void_elements),
        containment=MappingProxyType(containment),
        messages=MappingProxyType(messages),
    )


def parse_rule(parent: str, data: dict) -> ContainmentRule:
    """Parse a single containment rule."""
    children = data.get("children", [])
    forbidden = data.get("forbidden", [])
    if not isinstance(children, list) or not isinstance(forbidden, list):
        raise RuleTableError(f"Rule for <{parent}>: children/forbidden must be lists")
    return ContainmentRule(
        parent=parent,
        children=frozenset(c.lower() for c in children),
        forbidden=frozenset(c.lower() for c in forbidden),
        text_only=bool(data.get("text_only", False)),
        message=data.get("message"),
    )


def list_rulesets() -> list[str]:
    """List available ruleset names."""
    return sorted(p.stem for p in RULESETS_DIR.glob("*.yaml"))


# Cache for loaded rulesets
_cache: dict[str, RuleTable] = {}


def get_ruleset(name: Optional[str] = None, use_cache: bool = True) -> RuleTable:
    """
    Get a rule table, using cache by default.

    The name defaults to MINIHTML_RULESET, then "default".
    """
    name = name or os.environ.get("MINIHTML_RULESET", DEFAULT_RULESET)
    if use_cache and name in _cache:
        return _cache[name]

    table = load_ruleset(name)
    log.info("ruleset_loaded", ruleset=name, version=table.version, rules=len(table.containment))
    _cache[name] = table
    return table


def clear_cache() -> None:
    """Clear the ruleset cache."""
    _cache.clear()
