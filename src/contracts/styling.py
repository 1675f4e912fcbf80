from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Parity(str, Enum):
    """The two alternating style tags handed to the host."""

    ODD = "odd"
    EVEN = "even"

    def flipped(self) -> "Parity":
        return Parity.EVEN if self is Parity.ODD else Parity.ODD


class Anchor(str, Enum):
    # FROM_END: groups measured from the high end, short group (if any) next to lo.
    # FROM_START: groups measured from the low end, short group (if any) next to hi.
    FROM_END = "from_end"
    FROM_START = "from_start"


@dataclass(frozen=True, slots=True)
class Group:
    start: int
    end: int
    parity: Parity

    def to_style_span(self) -> "StyleSpan":
        return StyleSpan(start=self.start, end=self.end, parity=self.parity)


@dataclass(frozen=True, slots=True)
class StyleSpan:
    start: int
    end: int
    parity: Parity

    @property
    def tag(self) -> str:
        return self.parity.value

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "parity": self.parity.value}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "StyleSpan":
        return StyleSpan(start=int(d["start"]), end=int(d["end"]), parity=Parity(str(d["parity"])))


@dataclass(frozen=True, slots=True)
class HighlightResult:
    ok: bool
    errors: list[str]
    meta: dict[str, Any]  # includes config echo + version, counts
    spans: list[StyleSpan]
    source_relpath: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "ok": self.ok,
            "errors": list(self.errors),
            "meta": dict(self.meta),
            "spans": [s.to_dict() for s in self.spans],
        }
        if self.source_relpath is not None:
            out["source_relpath"] = self.source_relpath
        return out

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "HighlightResult":
        spans_raw = d.get("spans") or []
        return HighlightResult(
            ok=bool(d.get("ok", False)),
            errors=[str(x) for x in (d.get("errors") or [])],
            meta=dict(d.get("meta") or {}),
            spans=[StyleSpan.from_dict(s) for s in spans_raw],
            source_relpath=(None if d.get("source_relpath") is None else str(d.get("source_relpath"))),
        )
