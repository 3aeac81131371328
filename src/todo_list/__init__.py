"""JSON-backed command-line todo list."""

__version__ = "0.1.0"
