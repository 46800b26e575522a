"""Command-line layer (typer + rich). No validation logic lives here."""
