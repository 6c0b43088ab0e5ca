"""Character, byte-buffer, linked-list, output, string and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "lists", "output", "strings", "transform", "printf"]