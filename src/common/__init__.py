"""
Common utilities for speed-dial.

Modules:
- parsing: Environment/config string parsing (name lists, integers)
"""

__all__ = [
    "parsing",
]
