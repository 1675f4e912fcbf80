"""
Deterministic digit grouping for numeric literals.

- literal -> typed sub-spans (via literal_match) -> alternating-parity groups
- integer parts are grouped from the units digit, fractions and date/time
  fields from the most significant digit
- style spans are merged into a host sink, never replacing existing styles

No numeric parsing, no locale separators, no state between passes.
"""

from .config import GroupingConfig, InvalidConfigurationError
from .group_digits import group_digits
from .highlight import highlight, highlight_match, run_highlight_on_text
from .styles import ListStyleSink, StyleSink, TagSetStyleStore

__all__ = [
    "GroupingConfig",
    "InvalidConfigurationError",
    "group_digits",
    "highlight",
    "highlight_match",
    "run_highlight_on_text",
    "ListStyleSink",
    "StyleSink",
    "TagSetStyleStore",
]
