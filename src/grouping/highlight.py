from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from contracts.literals import LiteralMatch, Span
from contracts.styling import Anchor, HighlightResult, Parity, StyleSpan
from literal_match.matcher import iter_matches

from .config import GroupingConfig
from .group_digits import group_digits
from .styles import StyleSink

logger = logging.getLogger(__name__)

_HEX_GROUP_WIDTH = 4  # hex and binary digits: nibbles
_YEAR_WIDTH = 4
_DATE_FIELD_WIDTH = 2
_TIME_FIELD_WIDTH = 2
_MAX_TZ_OFFSET_LEN = 4  # longer "offsets" are grouped like decimal integers


@dataclass(frozen=True, slots=True)
class _GroupRule:
    width: int
    anchor: Anchor
    start_parity: Parity
    threshold: int


def _fixed(width: int, parity: Parity) -> _GroupRule:
    # Date/time fields are always styled, whatever their length.
    return _GroupRule(width=width, anchor=Anchor.FROM_START, start_parity=parity, threshold=0)


def _dispatch(m: LiteralMatch, config: GroupingConfig) -> list[tuple[Span, _GroupRule]]:
    """Map each present sub-span of `m` to its grouping rule, in document order."""
    out: list[tuple[Span, _GroupRule]] = []

    if m.int_hex is not None:
        out.append((m.int_hex, _GroupRule(_HEX_GROUP_WIDTH, Anchor.FROM_END, Parity.ODD, config.threshold)))
    if m.frac_hex is not None:
        out.append((m.frac_hex, _GroupRule(_HEX_GROUP_WIDTH, Anchor.FROM_START, Parity.ODD, config.threshold)))
    if m.int_dec is not None:
        out.append((m.int_dec, _GroupRule(config.group_size, Anchor.FROM_END, Parity.ODD, config.threshold)))
    if m.frac_dec is not None:
        out.append((m.frac_dec, _GroupRule(config.group_size, Anchor.FROM_START, Parity.ODD, config.threshold)))

    if m.datetime is not None:
        # YYYYMMDD: each field is a single group.
        year = m.datetime.start
        month = year + _YEAR_WIDTH
        day = month + _DATE_FIELD_WIDTH
        out.append((Span(year, month), _fixed(_YEAR_WIDTH, Parity.EVEN)))
        out.append((Span(month, day), _fixed(_DATE_FIELD_WIDTH, Parity.ODD)))
        out.append((Span(day, day + _DATE_FIELD_WIDTH), _fixed(_DATE_FIELD_WIDTH, Parity.EVEN)))
    if m.time is not None:
        out.append((m.time, _fixed(_TIME_FIELD_WIDTH, Parity.EVEN)))
    if m.offset is not None:
        if m.offset.length() <= _MAX_TZ_OFFSET_LEN:
            out.append((m.offset, _fixed(_TIME_FIELD_WIDTH, Parity.EVEN)))
        else:
            out.append((m.offset, _GroupRule(config.group_size, Anchor.FROM_END, Parity.ODD, config.threshold)))

    return sorted(out, key=lambda item: item[0].start)


def highlight_match(m: LiteralMatch, config: GroupingConfig) -> list[StyleSpan]:
    """Style spans for a single match, left to right."""
    spans: list[StyleSpan] = []
    for span, rule in _dispatch(m, config):
        groups = group_digits(
            span.start,
            span.end,
            width=rule.width,
            start_parity=rule.start_parity,
            anchor=rule.anchor,
            threshold=rule.threshold,
        )
        spans.extend(g.to_style_span() for g in groups)
    return spans


def _highlight_pass(
    text: str,
    start: int,
    limit: int | None,
    config: GroupingConfig,
    sink: StyleSink | None,
) -> tuple[list[StyleSpan], dict[str, int]]:
    spans: list[StyleSpan] = []
    kind_counts: dict[str, int] = {}

    for m in iter_matches(text, start, limit):
        kind_counts[m.kind.value] = kind_counts.get(m.kind.value, 0) + 1
        for ss in highlight_match(m, config):
            if sink is not None:
                sink.merge_style(ss.start, ss.end, ss.tag)
            spans.append(ss)

    logger.debug(
        "highlight pass [%s, %s): %d literals, %d spans",
        start,
        len(text) if limit is None else limit,
        sum(kind_counts.values()),
        len(spans),
    )
    return spans, kind_counts


def highlight(
    text: str,
    start: int = 0,
    limit: int | None = None,
    *,
    config: GroupingConfig | None = None,
    sink: StyleSink | None = None,
) -> list[StyleSpan]:
    """
    Find every literal starting in ``[start, limit)`` and emit its digit groups.

    Each style span is merged into `sink` (when given) as soon as it is
    computed, and also returned in emission order. The pass keeps no state;
    rerunning it over unchanged text yields the same spans.
    """

    cfg = config if config is not None else GroupingConfig()
    cfg.validate()
    spans, _ = _highlight_pass(text, start, limit, cfg, sink)
    return spans


def run_highlight_on_text(
    text: str,
    config: GroupingConfig,
    *,
    start: int = 0,
    limit: int | None = None,
    source_relpath: str | None = None,
) -> HighlightResult:
    config.validate()

    spans, kind_counts = _highlight_pass(text, start, limit, config, None)
    meta: dict[str, Any] = {
        "version": "digit_grouping_v1",
        "grouping_config": config.to_dict(),
        "range": {"start": start, "limit": limit},
        "counts": {
            "chars": len(text),
            "literals": sum(kind_counts.values()),
            "spans": len(spans),
            "by_kind": dict(sorted(kind_counts.items())),
        },
    }
    return HighlightResult(ok=True, errors=[], meta=meta, spans=spans, source_relpath=source_relpath)
