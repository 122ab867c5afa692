"""Core — Validation context, pass orchestration and logging."""
