from __future__ import annotations

import unittest

from contracts.styling import Parity, StyleSpan
from grouping.config import GroupingConfig, InvalidConfigurationError
from grouping.highlight import highlight, run_highlight_on_text
from grouping.styles import ListStyleSink, TagSetStyleStore

O = Parity.ODD
E = Parity.EVEN


def _spans(*triples: tuple[int, int, Parity]) -> list[StyleSpan]:
    return [StyleSpan(s, e, p) for s, e, p in triples]


class TestHighlightDispatch(unittest.TestCase):
    def test_decimal_integer_grouped_from_units_digit(self) -> None:
        self.assertEqual(highlight("28318530"), _spans((0, 2, O), (2, 5, E), (5, 8, O)))

    def test_short_numbers_are_left_alone(self) -> None:
        self.assertEqual(highlight("1234 and 42"), [])

    def test_fraction_grouped_from_the_point(self) -> None:
        # "123" is below threshold; the fraction is grouped left to right.
        self.assertEqual(highlight("123.456789"), _spans((4, 7, O), (7, 10, E)))

    def test_hex_integer_groups_of_four(self) -> None:
        self.assertEqual(highlight("0x1921FB5"), _spans((2, 5, E), (5, 9, O)))

    def test_binary_groups_of_four(self) -> None:
        self.assertEqual(highlight("#b101010101"), _spans((2, 3, O), (3, 7, E), (7, 11, O)))

    def test_hex_float(self) -> None:
        text = "0x1.921FB54p+2"
        spans = highlight(text)

        self.assertEqual(spans, _spans((4, 8, O), (8, 11, E)))
        self.assertEqual([text[s.start : s.end] for s in spans], ["921F", "B54"])

    def test_timestamp_fields(self) -> None:
        text = "20220805T1258"
        spans = highlight(text)

        self.assertEqual(
            spans,
            _spans((0, 4, E), (4, 6, O), (6, 8, E), (9, 11, E), (11, 13, O)),
        )
        self.assertEqual([text[s.start : s.end] for s in spans], ["2022", "08", "05", "12", "58"])

    def test_short_timezone_offset_grouped_in_pairs(self) -> None:
        spans = highlight("20220805T1258+0100")
        self.assertEqual(spans[-2:], _spans((14, 16, E), (16, 18, O)))

    def test_long_offset_falls_back_to_decimal_grouping(self) -> None:
        text = "20220805T123456789012"
        spans = highlight(text)

        self.assertEqual(
            spans,
            _spans(
                (0, 4, E),
                (4, 6, O),
                (6, 8, E),
                (9, 11, E),
                (11, 13, O),
                (13, 15, E),
                (15, 18, E),
                (18, 21, O),
            ),
        )

        # The fallback honours the configured threshold; date/time fields do not.
        spans = highlight(text, config=GroupingConfig(threshold=10))
        self.assertEqual(len(spans), 6)
        self.assertEqual(spans[-1], StyleSpan(13, 15, E))

    def test_config_is_threaded_explicitly(self) -> None:
        self.assertEqual(
            highlight("28318530", config=GroupingConfig(group_size=4)),
            _spans((0, 4, E), (4, 8, O)),
        )
        self.assertEqual(highlight("12", config=GroupingConfig(threshold=0)), _spans((0, 2, O)))
        # Defaults are untouched by the previous calls.
        self.assertEqual(highlight("28318530"), _spans((0, 2, O), (2, 5, E), (5, 8, O)))

    def test_start_and_limit(self) -> None:
        text = "12345 67890"
        self.assertEqual(highlight(text, 6), _spans((6, 8, E), (8, 11, O)))
        # A literal starting before the limit is styled in full.
        self.assertEqual(highlight(text, 0, 3), _spans((0, 2, E), (2, 5, O)))

    def test_mixed_text_emits_in_document_order(self) -> None:
        text = "pi=3.14159265, tau=0x1.921FB54p+2, n=1000000"
        spans = highlight(text)

        starts = [s.start for s in spans]
        self.assertEqual(starts, sorted(starts))
        for a, b in zip(spans, spans[1:]):
            self.assertLessEqual(a.end, b.start)


class TestHighlightSinks(unittest.TestCase):
    def test_spans_are_merged_into_the_sink_as_emitted(self) -> None:
        sink = ListStyleSink()
        spans = highlight("28318530 and 0x1921FB5", sink=sink)

        self.assertEqual(sink.calls, [(s.start, s.end, s.tag) for s in spans])
        self.assertEqual({tag for _, _, tag in sink.calls}, {"odd", "even"})

    def test_merge_keeps_existing_styles(self) -> None:
        store = TagSetStyleStore()
        store.merge_style(0, 8, "keyword")

        highlight("28318530", sink=store)

        self.assertEqual(store.tags_at(0), frozenset({"keyword", "odd"}))
        self.assertEqual(store.tags_at(3), frozenset({"keyword", "even"}))
        self.assertEqual(store.tags_at(7), frozenset({"keyword", "odd"}))

    def test_rerun_is_idempotent(self) -> None:
        text = "id=20220805T125800.25-0700 size=4294967296 mask=#xFFFF_0000 0b11110000"
        self.assertEqual(highlight(text), highlight(text))

        store = TagSetStyleStore()
        highlight(text, sink=store)
        first = store.runs()
        highlight(text, sink=store)
        self.assertEqual(store.runs(), first)


class TestHighlightConfig(unittest.TestCase):
    def test_invalid_configuration_is_rejected_up_front(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            GroupingConfig(group_size=0)
        with self.assertRaises(InvalidConfigurationError):
            GroupingConfig(threshold=-1)
        with self.assertRaises(InvalidConfigurationError):
            GroupingConfig(group_size=True)
        with self.assertRaises(ValueError):
            GroupingConfig(group_size=2.5)

    def test_run_highlight_on_text_meta(self) -> None:
        text = "x = 28318530; y = 0x1921FB5"
        cfg = GroupingConfig()

        r1 = run_highlight_on_text(text, cfg).to_dict()
        r2 = run_highlight_on_text(text, cfg).to_dict()
        self.assertEqual(r1, r2)

        self.assertTrue(r1["ok"])
        meta = r1["meta"]
        self.assertEqual(meta["grouping_config"], {"group_size": 3, "threshold": 5})
        self.assertEqual(meta["counts"]["literals"], 2)
        self.assertEqual(meta["counts"]["by_kind"], {"DECIMAL": 1, "HEX_OR_FLOAT": 1})
        self.assertEqual(meta["counts"]["spans"], len(r1["spans"]))
        self.assertEqual(r1["spans"][0], {"start": 4, "end": 6, "parity": "odd"})


if __name__ == "__main__":
    unittest.main()
