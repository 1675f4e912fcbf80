from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from contracts.styling import StyleSpan

from .config import GroupingConfig
from .highlight import highlight


def render_groups(text: str, spans: Iterable[StyleSpan]) -> str:
    """Wrap every style span in parentheses, e.g. 28318530 -> (28)(318)(530)."""
    out: list[str] = []
    pos = 0
    for s in sorted(spans, key=lambda s: s.start):
        out.append(text[pos : s.start])
        out.append(f"({text[s.start : s.end]})")
        pos = s.end
    out.append(text[pos:])
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="num-groups-debug-print")
    ap.add_argument("--input", required=True, type=Path, help="Text file to scan.")
    ap.add_argument("--group-size", type=int, default=3)
    ap.add_argument("--threshold", type=int, default=5)
    ap.add_argument("--spans", action="store_true", help="Also print every span with its parity.")
    ap.add_argument("--max-lines", type=int, default=0, help="If >0, truncate after N lines.")
    args = ap.parse_args(argv)

    cfg = GroupingConfig(group_size=args.group_size, threshold=args.threshold)
    lines = args.input.read_text(encoding="utf-8").splitlines()

    for i, line in enumerate(lines):
        if args.max_lines and i >= args.max_lines:
            print(f"... (truncated at {args.max_lines})")
            break

        spans = highlight(line, config=cfg)
        print(f"{i + 1:>5}: {render_groups(line, spans)}")
        if args.spans:
            for s in spans:
                print(f"  - [{s.start},{s.end}) {s.tag:<4} text={line[s.start : s.end]!r}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
