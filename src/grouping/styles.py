from __future__ import annotations

from abc import ABC, abstractmethod


class StyleSink(ABC):
    """
    Host-side style store the highlighter writes into.

    IMPORTANT:
    - merge_style must add `tag` to whatever styling the range already has.
    - Sinks must NOT drop or replace existing tags; resets are the host's job.
    """

    @abstractmethod
    def merge_style(self, start: int, end: int, tag: str) -> None:
        raise NotImplementedError


class ListStyleSink(StyleSink):
    """Records merge calls in the order they were made."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, str]] = []

    def merge_style(self, start: int, end: int, tag: str) -> None:
        self.calls.append((start, end, tag))


class TagSetStyleStore(StyleSink):
    """Per-character tag sets; independent styling passes compose by union."""

    def __init__(self) -> None:
        self._tags: dict[int, set[str]] = {}

    def merge_style(self, start: int, end: int, tag: str) -> None:
        for pos in range(start, end):
            self._tags.setdefault(pos, set()).add(tag)

    def tags_at(self, pos: int) -> frozenset[str]:
        return frozenset(self._tags.get(pos, ()))

    def clear(self, start: int = 0, end: int | None = None) -> None:
        if end is None:
            end = max(self._tags, default=-1) + 1
        for pos in range(start, end):
            self._tags.pop(pos, None)

    def runs(self) -> list[tuple[int, int, frozenset[str]]]:
        """Coalesce adjacent positions with identical tag sets into (start, end, tags)."""
        out: list[tuple[int, int, frozenset[str]]] = []
        for pos in sorted(self._tags):
            tags = frozenset(self._tags[pos])
            if not tags:
                continue
            if out and out[-1][1] == pos and out[-1][2] == tags:
                out[-1] = (out[-1][0], pos + 1, tags)
            else:
                out.append((pos, pos + 1, tags))
        return out
