"""Checks on the bundled C++ interview question document."""

import unittest

from cppqa.catalog.store import EntryStore
from cppqa.catalog.validate import check_document
from cppqa.config import DEFAULT_SOURCE
from cppqa.render.entry import render
from cppqa.render.links import iter_links


class TestBundledCatalog(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.store = EntryStore.from_path(DEFAULT_SOURCE)
        cls.entries = list(cls.store.list())

    def test_is_well_formed(self) -> None:
        self.assertEqual(check_document(self.store.markdown), [])

    def test_ordinals_contiguous_from_one(self) -> None:
        self.assertEqual([e.ordinal for e in self.entries], list(range(1, len(self.entries) + 1)))

    def test_titles_and_bodies_non_empty(self) -> None:
        for entry in self.entries:
            self.assertTrue(entry.title.strip())
            self.assertTrue(entry.body.strip())

    def test_first_entry_is_main_features(self) -> None:
        first = self.entries[0]
        self.assertEqual(first.title, "What are the main features of C++?")
        self.assertEqual(first.ordinal, 1)
        self.assertTrue(any(s.is_cpp for s in first.snippets))

    def test_last_entry_is_smart_pointers(self) -> None:
        last = self.entries[-1]
        self.assertEqual(len(self.entries), 15)
        self.assertEqual(last.ordinal, 15)
        self.assertEqual(last.title, "Explain the concept of smart pointers in C++.")
        subsections = [s.lower() for s in last.subsections]
        self.assertEqual(len(subsections), 3)
        for variant, heading in zip(("unique", "shared", "weak"), subsections):
            self.assertIn(variant, heading)

    def test_snippets_round_trip(self) -> None:
        for entry in self.entries:
            for snippet in entry.snippets:
                self.assertIn(snippet.to_markdown(), entry.body)

    def test_every_entry_renders_twice_identically(self) -> None:
        for entry in self.entries:
            self.assertEqual(render(entry), render(entry))

    def test_preamble_links_external_assets(self) -> None:
        self.assertEqual(self.store.title, "C++ Interview Questions")
        kinds = {link.kind for link in iter_links(self.store.preamble)}
        self.assertEqual(kinds, {"image", "link"})


if __name__ == "__main__":
    unittest.main()
