"""Completion — Static structural snippets for editors."""

from minihtml.completion.catalogue import TRIGGER_CHARACTERS, get_completions

__all__ = ["TRIGGER_CHARACTERS", "get_completions"]
