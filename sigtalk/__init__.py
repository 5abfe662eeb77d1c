"""Helpers for ASCII characters, C-style strings, byte buffers, a linked list and printf-style formatting."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "convert",
    "cstring",
    "fdio",
    "formatting",
    "linked",
    "memory",
]