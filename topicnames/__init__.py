"""Validation of topic names, reporting the reason and position of any fault."""

__version__ = "0.1.0"
__all__ = ["validation"]