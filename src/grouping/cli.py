from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .artifacts import serialize_highlight_result, write_highlight_json_artifact
from .config import GroupingConfig, InvalidConfigurationError
from .highlight import run_highlight_on_text

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="num-groups",
        description="Find numeric literals in a text file and emit alternating digit-group style spans.",
    )
    p.add_argument("--input", required=True, type=Path, help="Path to a UTF-8 text file.")
    p.add_argument("--output", type=Path, default=None, help="Path to write the JSON artifact. Default: stdout.")
    p.add_argument("--group-size", type=int, default=3, help="Digits per group for decimal parts.")
    p.add_argument("--threshold", type=int, default=5, help="Minimum run length before grouping applies.")
    p.add_argument("--start", type=int, default=0, help="Character offset to start scanning at.")
    p.add_argument("--limit", type=int, default=None, help="No literal starting at or after this offset is reported.")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        cfg = GroupingConfig(group_size=args.group_size, threshold=args.threshold)
    except InvalidConfigurationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    result = run_highlight_on_text(
        text,
        cfg,
        start=args.start,
        limit=args.limit,
        source_relpath=str(args.input),
    )

    if args.output is None:
        sys.stdout.write(serialize_highlight_result(result))
        return 0 if result.ok else 2

    write_highlight_json_artifact(result=result, out_file=args.output)
    logger.info("wrote %d spans to %s", len(result.spans), args.output)

    summary = {
        "ok": result.ok,
        "literals": result.meta["counts"]["literals"],
        "spans": len(result.spans),
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
