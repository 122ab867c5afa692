"""CLI — Command-line entry points."""
