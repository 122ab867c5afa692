"""
minihtml CLI — Command-line interface for validating .mhtml documents.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional

from minihtml import __version__
from minihtml.completion import TRIGGER_CHARACTERS, get_completions
from minihtml.core.context import ValidationRequest
from minihtml.core.engine import Engine, setup_default_pipeline
from minihtml.ir.enums import DiagnosticSeverity, ValidationStatus
from minihtml.ir.schema import ValidationResult
from minihtml.markup.tree import TextNode, build_tree
from minihtml.rules.loader import RuleTableError, get_ruleset

STDIN_URI = "untitled:stdin"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minihtml",
        description="Structural validator for Mini HTML (.mhtml) documents",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"minihtml {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate_parser = subparsers.add_parser("validate", help="Validate one or more documents")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        help="Paths to .mhtml files (use - for stdin)",
    )
    validate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json publish envelopes",
    )
    validate_parser.add_argument(
        "--ruleset",
        type=str,
        default=None,
        help="Rule table to use (default: MINIHTML_RULESET or 'default')",
    )
    validate_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or MINIHTML_LOG_LEVEL env var)",
    )
    validate_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,scan,rules,emit,system). Default: all",
    )

    completions_parser = subparsers.add_parser("completions", help="Print the completion catalogue")
    completions_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
    )

    tree_parser = subparsers.add_parser("tree", help="[DEBUG] Print the parsed element tree")
    tree_parser.add_argument("path", help="Path to a .mhtml file (use - for stdin)")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "validate":
        return run_validate(args)
    if args.command == "completions":
        return run_completions(args)
    if args.command == "tree":
        return run_tree(args)

    return 0


def _read_input(path: str) -> tuple[str, str]:
    """Return (uri, text) for a path or stdin."""
    if path == "-":
        return STDIN_URI, sys.stdin.read()
    file_path = Path(path)
    return file_path.resolve().as_uri(), file_path.read_text(encoding="utf-8-sig")


def run_validate(args: argparse.Namespace) -> int:
    """Run the validate command."""
    from minihtml.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)

    try:
        engine = Engine(rules=get_ruleset(args.ruleset))
    except RuleTableError as e:
        print(f"minihtml: {e}", file=sys.stderr)
        return 2
    setup_default_pipeline(engine)

    has_errors = False
    envelopes = []

    for path in args.paths:
        try:
            uri, text = _read_input(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"minihtml: cannot read {path}: {e}", file=sys.stderr)
            has_errors = True
            continue

        version = 0 if path == "-" else os.stat(path).st_mtime_ns
        result = engine.validate_document(ValidationRequest(uri=uri, version=version, text=text))
        if result.diagnostics or result.status == ValidationStatus.ERROR:
            has_errors = True

        if args.format == "json":
            envelopes.append(result.to_publish_params())
        else:
            print(format_text(path, result), end="")

    if args.format == "json":
        print(json.dumps(envelopes, indent=2))

    return 1 if has_errors else 0


def format_text(path: str, result: ValidationResult) -> str:
    """One line per diagnostic, 1-based line:column like compilers print."""
    if result.status == ValidationStatus.ERROR:
        return f"{path}: internal error, no diagnostics produced\n"
    lines = []
    for diag in result.diagnostics:
        severity = DiagnosticSeverity(diag.severity).name.lower()
        start = diag.range.start
        lines.append(
            f"{path}:{start.line + 1}:{start.character + 1}: {severity} [{diag.code.value}] {diag.message}"
        )
    return "".join(line + "\n" for line in lines)


def run_completions(args: argparse.Namespace) -> int:
    """Print the static completion catalogue."""
    items = get_completions()
    if args.format == "json":
        print(json.dumps({
            "triggerCharacters": list(TRIGGER_CHARACTERS),
            "items": [item.to_wire() for item in items],
        }, indent=2))
        return 0
    for item in items:
        print(f"{item.label:<6} {item.detail}")
    return 0


def run_tree(args: argparse.Namespace) -> int:
    """Print the element tree with offsets (debugging aid)."""
    try:
        _, text = _read_input(args.path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"minihtml: cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    tree = build_tree(text, void_elements=get_ruleset().void_elements)
    lines: list[str] = []
    stack = [(node, 0) for node in reversed(tree.children)]
    while stack:
        node, depth = stack.pop()
        indent = "  " * depth
        if isinstance(node, TextNode):
            snippet = text[node.start:node.end].strip()
            if snippet:
                lines.append(f"{indent}#text {snippet[:40]!r} [{node.start}:{node.end}]")
            continue
        state = "" if node.closed or node.void else " (unclosed)"
        lines.append(f"{indent}<{node.name}> [{node.start}:{node.end}]{state}")
        stack.extend((child, depth + 1) for child in reversed(node.children))

    for token in tree.stray_closes:
        lines.append(f"stray {token.raw} [{token.start}:{token.end}]")

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
