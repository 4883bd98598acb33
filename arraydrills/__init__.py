"""Classic array exercises: sorts, rotated-array searches, list problems and an echo command."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "search", "sorting"]