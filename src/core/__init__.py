"""Core: domain models, interfaces and validation services."""
