"""brewforge CLI — Typer-based command-line interface.

Provides the ``brewforge`` command with subcommands for inspecting
artifacts, rendering formulas and publishing them.

All output uses Rich for formatted terminal display.
"""
