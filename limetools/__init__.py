"""Lime Tools: internal console for managing the user roster."""

__version__ = "1.0.0"
