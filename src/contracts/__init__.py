"""
Canonical contracts shared by the matcher and the grouping stage.

- literals: what the matcher recognized (kind + named sub-spans)
- styling: parity tags, groups and the style spans handed to a host

Stage code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .literals import LiteralKind, LiteralMatch, Span
from .styling import Anchor, Group, HighlightResult, Parity, StyleSpan

__all__ = [
    "LiteralKind",
    "LiteralMatch",
    "Span",
    "Anchor",
    "Group",
    "HighlightResult",
    "Parity",
    "StyleSpan",
]
