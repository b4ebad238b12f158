"""C-style string helpers (cstring) and a sscanf-like formatted scanner (scanf)."""

__version__ = "0.1.0"
__all__ = ["cstring", "scanf"]