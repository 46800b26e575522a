"""Core services: extraction and validation of the student info file."""
