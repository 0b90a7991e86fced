"""Two-stack integer sorting and checking of operation sequences."""

__version__ = "0.1.0"
__all__ = ["checker", "cli", "parsing", "sorting", "stacks"]