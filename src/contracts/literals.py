from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LiteralKind(str, Enum):
    # Listed in grammar priority order (earlier alternatives win on equal starts).
    TIMESTAMP = "TIMESTAMP"
    HEX_PREFIXED = "HEX_PREFIXED"
    HEX_OR_FLOAT = "HEX_OR_FLOAT"
    BINARY = "BINARY"
    UNPREFIXED_HEX = "UNPREFIXED_HEX"
    DECIMAL = "DECIMAL"
    BARE_FRACTION = "BARE_FRACTION"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)`` into the scanned text."""

    start: int
    end: int

    def length(self) -> int:
        return int(self.end - self.start)

    def is_empty(self) -> bool:
        return self.end <= self.start

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Span":
        return Span(start=int(d["start"]), end=int(d["end"]))


_SUB_SPAN_FIELDS = ("int_hex", "int_dec", "frac_dec", "frac_hex", "datetime", "time", "offset")


def _span_or_none(d: dict[str, Any], key: str) -> Span | None:
    raw = d.get(key)
    return None if raw is None else Span.from_dict(raw)


@dataclass(frozen=True, slots=True)
class LiteralMatch:
    """
    One recognized literal.

    Sub-spans are present only for the literal forms that produce them:
    - int_hex: hex or binary integer digits
    - int_dec: decimal integer digits (exponent digits for hex floats)
    - frac_dec / frac_hex: fractional digits
    - datetime: whole timestamp; time: its hour/minute/second digits
    - offset: timestamp offset digits (sign excluded)
    """

    kind: LiteralKind
    start: int
    end: int
    int_hex: Span | None = None
    int_dec: Span | None = None
    frac_dec: Span | None = None
    frac_hex: Span | None = None
    datetime: Span | None = None
    time: Span | None = None
    offset: Span | None = None

    def sub_spans(self) -> dict[str, Span]:
        out: dict[str, Span] = {}
        for name in _SUB_SPAN_FIELDS:
            span = getattr(self, name)
            if span is not None:
                out[name] = span
        return out

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "kind": self.kind.value,
            "start": self.start,
            "end": self.end,
        }
        for name in _SUB_SPAN_FIELDS:
            span = getattr(self, name)
            out[name] = None if span is None else span.to_dict()
        return out

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LiteralMatch":
        return LiteralMatch(
            kind=LiteralKind(str(d["kind"])),
            start=int(d["start"]),
            end=int(d["end"]),
            int_hex=_span_or_none(d, "int_hex"),
            int_dec=_span_or_none(d, "int_dec"),
            frac_dec=_span_or_none(d, "frac_dec"),
            frac_hex=_span_or_none(d, "frac_hex"),
            datetime=_span_or_none(d, "datetime"),
            time=_span_or_none(d, "time"),
            offset=_span_or_none(d, "offset"),
        )
