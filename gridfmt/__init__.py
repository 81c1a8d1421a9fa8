"""Formatting settings, text measurement and word wrapping for terminal text tables."""

__version__ = "0.1.0"

__all__ = ["format", "styles", "textwidth", "wrap"]