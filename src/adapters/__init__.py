"""Adapters: I/O against the outside world (HTTP, JSON files)."""
