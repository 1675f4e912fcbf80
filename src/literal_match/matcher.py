from __future__ import annotations

import re
from typing import Iterator

from contracts.literals import LiteralKind, LiteralMatch, Span

# Named groups carry LiteralMatch field names; any other group name is internal.
_SUB_SPAN_FIELDS = frozenset(("int_hex", "int_dec", "frac_dec", "frac_hex", "datetime", "time", "offset"))

# Fractional seconds are only allowed after a full HHMMSS run and are not part of `time`.
_TIMESTAMP_RE = re.compile(
    r"(?P<datetime>[0-9]{8}T"
    r"(?P<time>[0-9]{2}(?:[0-9]{2}(?P<sec>[0-9]{2})?)?)"
    r"(?(sec)(?:\.[0-9]+)?)"
    r"(?:[-+]?(?P<offset>[0-9]+))?)"
)
_HEX_PREFIXED_RE = re.compile(r"#[xX](?P<int_hex>[0-9A-Fa-f]+)")
# The fraction/exponent tail is taken only when complete: 0x1234.5678 matches 0x1234.
_HEX_OR_FLOAT_RE = re.compile(
    r"0[xX](?P<int_hex>[0-9A-Fa-f]*)"
    r"(?:\.(?P<frac_hex>[0-9A-Fa-f]+)[pP][-+]?(?P<int_dec>[0-9]+))?"
)
_BINARY_RE = re.compile(r"[0#][bB](?P<int_hex>[01]+)")
_UNPREFIXED_HEX_RE = re.compile(
    r"\b(?=[0-9A-Fa-f]*[0-9])(?=[0-9A-Fa-f]*[A-Fa-f])(?P<int_hex>[0-9A-Fa-f]+)\b"
)
_DECIMAL_RE = re.compile(r"(?P<int_dec>[0-9]+)")
_BARE_FRACTION_RE = re.compile(r"\.(?P<frac_dec>[0-9]+)")

# Priority order: at equal start positions the earlier alternative wins.
_GRAMMAR: tuple[tuple[LiteralKind, re.Pattern[str]], ...] = (
    (LiteralKind.TIMESTAMP, _TIMESTAMP_RE),
    (LiteralKind.HEX_PREFIXED, _HEX_PREFIXED_RE),
    (LiteralKind.HEX_OR_FLOAT, _HEX_OR_FLOAT_RE),
    (LiteralKind.BINARY, _BINARY_RE),
    (LiteralKind.UNPREFIXED_HEX, _UNPREFIXED_HEX_RE),
    (LiteralKind.DECIMAL, _DECIMAL_RE),
    (LiteralKind.BARE_FRACTION, _BARE_FRACTION_RE),
)

# Every literal form starts with one of these characters.
_CANDIDATE_START_RE = re.compile(r"[0-9A-Fa-f#.]")


def _build_match(kind: LiteralKind, m: re.Match[str]) -> LiteralMatch:
    fields: dict[str, Span] = {}
    for name in m.groupdict():
        if name not in _SUB_SPAN_FIELDS:
            continue
        s, e = m.span(name)
        if s == -1:
            continue
        fields[name] = Span(s, e)
    return LiteralMatch(kind=kind, start=m.start(), end=m.end(), **fields)


def _clamp_range(text: str, start: int, limit: int | None) -> tuple[int, int]:
    n = len(text)
    lo = min(max(0, start), n)
    hi = n if limit is None else min(max(0, limit), n)
    return lo, hi


def match_at(text: str, pos: int) -> LiteralMatch | None:
    """Try every literal form at exactly `pos`, in priority order."""
    for kind, pattern in _GRAMMAR:
        m = pattern.match(text, pos)
        if m is not None:
            return _build_match(kind, m)
    return None


def find_next(text: str, start: int = 0, limit: int | None = None) -> LiteralMatch | None:
    """
    Return the left-most literal starting in ``[start, limit)``.

    Ties on the start position go to the alternative listed earliest in the
    grammar. The match may extend past `limit`; only its start is bounded.
    Returns None when no literal starts before `limit`.
    """

    pos, hi = _clamp_range(text, start, limit)
    while pos < hi:
        cand = _CANDIDATE_START_RE.search(text, pos, hi)
        if cand is None:
            return None
        found = match_at(text, cand.start())
        if found is not None:
            return found
        pos = cand.start() + 1
    return None


def iter_matches(text: str, start: int = 0, limit: int | None = None) -> Iterator[LiteralMatch]:
    """Yield consecutive matches, resuming each search at the previous match end."""
    cursor, hi = _clamp_range(text, start, limit)
    while cursor < hi:
        m = find_next(text, cursor, hi)
        if m is None:
            return
        yield m
        cursor = m.end
