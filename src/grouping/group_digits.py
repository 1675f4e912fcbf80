from __future__ import annotations

from contracts.styling import Anchor, Group, Parity

from .config import InvalidConfigurationError


def group_digits(
    lo: int,
    hi: int,
    *,
    width: int,
    start_parity: Parity,
    anchor: Anchor,
    threshold: int,
) -> list[Group]:
    """
    Split ``[lo, hi)`` into alternating-parity groups of `width` characters.

    FROM_END peels groups off the high end: the group nearest `hi` gets
    `start_parity` and the short group, if any, ends up next to `lo`.
    FROM_START peels from the low end: the left-most group gets
    `start_parity` and the short group, if any, sits next to `hi`.

    Spans shorter than `threshold` are not grouped at all. Groups are always
    returned left to right.
    """

    if width <= 0:
        raise InvalidConfigurationError(f"width must be > 0, got {width}")
    if threshold < 0:
        raise InvalidConfigurationError(f"threshold must be >= 0, got {threshold}")
    if lo > hi:
        raise InvalidConfigurationError(f"invalid span: lo={lo} > hi={hi}")

    if hi - lo < threshold:
        return []

    groups: list[Group] = []
    parity = start_parity

    if anchor is Anchor.FROM_END:
        while lo < hi:
            g_lo = max(lo, hi - width)
            groups.append(Group(start=g_lo, end=hi, parity=parity))
            hi = g_lo
            parity = parity.flipped()
        groups.reverse()
        return groups

    while lo < hi:
        g_hi = min(hi, lo + width)
        groups.append(Group(start=lo, end=g_hi, parity=parity))
        lo = g_hi
        parity = parity.flipped()
    return groups
