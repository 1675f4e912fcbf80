"""
Literal matcher (recognition only).

Finds numeric literals in text: timestamps, #x/0x hex, hex floats, binary,
unprefixed hex, decimal integers and bare fractions.

- Pure functions over the input text; no state between calls
- No numeric parsing and no semantic validation (month 13 is accepted)
"""

from .matcher import find_next, iter_matches, match_at

__all__ = ["find_next", "iter_matches", "match_at"]
