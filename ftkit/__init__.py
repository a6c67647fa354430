"""C-library style helpers for ASCII characters, byte buffers, strings and fd output."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "textops"]