"""Tests for substring matching and ranking over the application index."""

from __future__ import annotations

import unittest

from keylaunch.entries import Entry, Label, sort_by_name
from keylaunch.search import search_apps


def _index(*names: str) -> tuple[Entry, ...]:
    return tuple(
        sort_by_name(
            Entry(
                icon="app",
                label=Label.plain(name),
                completion_text=name,
                command=name.lower(),
                search_key=name.lower(),
            )
            for name in names
        )
    )


class SearchAppsTests(unittest.TestCase):
    def test_empty_query_returns_nothing(self) -> None:
        self.assertEqual(search_apps("", _index("Firefox", "Files")), [])

    def test_equal_offsets_tie_break_alphabetically(self) -> None:
        results = search_apps("fi", _index("Firefox", "Files", "Terminal"))
        self.assertEqual([entry.label.text for entry in results], ["Files", "Firefox"])
        self.assertEqual([entry.match_offset for entry in results], [0, 0])

    def test_earlier_match_outranks_alphabetical_order(self) -> None:
        results = search_apps("term", _index("A Terminal", "Terminal", "Xterm"))
        self.assertEqual([entry.label.text for entry in results], ["Terminal", "Xterm", "A Terminal"])
        self.assertEqual([entry.match_offset for entry in results], [0, 1, 2])

    def test_match_is_case_insensitive_and_highlights_original_case(self) -> None:
        (result,) = search_apps("FOX", _index("Firefox"))
        self.assertEqual(result.match_offset, 4)
        self.assertEqual(result.label.text, "Firefox")
        self.assertEqual(result.label.highlighted, "fox")
        self.assertEqual((result.label.highlight_start, result.label.highlight_length), (4, 3))

    def test_highlight_stays_aligned_when_lowercasing_grows_the_name(self) -> None:
        (result,) = search_apps("fire", _index("\u0130stanbul Firefox"))

        self.assertEqual(result.search_key, "i\u0307stanbul firefox")
        self.assertEqual(result.match_offset, 10)
        self.assertEqual(result.label.highlighted, "Fire")
        self.assertEqual((result.label.highlight_start, result.label.highlight_length), (9, 4))

    def test_highlight_covering_expanded_character_spans_it_once(self) -> None:
        (result,) = search_apps("i\u0307s", _index("\u0130stanbul"))

        self.assertEqual(result.label.highlighted, "\u0130s")

    def test_custom_search_key_falls_back_to_key_offsets(self) -> None:
        entry = Entry(
            icon="app",
            label=Label.plain("Web Browser"),
            completion_text="Web Browser",
            command="browser",
            search_key="web browser firefox",
        )
        (result,) = search_apps("web", (entry,))

        self.assertEqual(result.label.highlighted, "Web")

    def test_results_always_contain_query(self) -> None:
        index = _index("Files", "Firefox", "GIMP", "LibreOffice Writer", "Calculator")
        for query in ("i", "off", "e w", "calc", "zzz"):
            with self.subTest(query=query):
                for entry in search_apps(query, index):
                    self.assertIn(query.lower(), entry.search_key)

    def test_ordering_property_holds(self) -> None:
        results = search_apps("e", _index("Files", "Firefox", "Editor", "Terminal", "GEdit", "Xeyes"))
        keys = [(entry.match_offset, entry.search_key) for entry in results]
        self.assertEqual(keys, sorted(keys))

    def test_index_entries_are_not_mutated(self) -> None:
        index = _index("Firefox")
        search_apps("fox", index)
        self.assertEqual(index[0].match_offset, -1)
        self.assertEqual(index[0].label, Label.plain("Firefox"))


if __name__ == "__main__":
    unittest.main()
