"""Tests for the entry store."""

from __future__ import annotations

import tempfile
import unittest
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from cppqa.catalog.models import Entry
from cppqa.catalog.store import CatalogError, EntryStore

DOC = "# Title\n\n## 1. Alpha?\n\nA body.\n\n## 2. Beta?\n\nB body.\n\n## 3. Gamma?\n\nC body.\n"


class TestEntryStore(unittest.TestCase):
    def test_list_is_lazy_and_restartable(self) -> None:
        store = EntryStore(DOC)
        first = store.list()
        self.assertIsInstance(first, Iterator)
        self.assertEqual([e.ordinal for e in first], [1, 2, 3])
        # Exhausting one iterator does not affect the next call.
        self.assertEqual([e.ordinal for e in store.list()], [1, 2, 3])
        self.assertEqual([e.title for e in store], ["Alpha?", "Beta?", "Gamma?"])

    def test_empty_store_is_valid(self) -> None:
        store = EntryStore("")
        self.assertEqual(list(store.list()), [])
        self.assertEqual(len(store), 0)
        self.assertIsNone(store.title)

    def test_len_title_and_preamble(self) -> None:
        store = EntryStore(DOC)
        self.assertEqual(len(store), 3)
        self.assertEqual(store.title, "Title")
        self.assertEqual(store.preamble, "")

    def test_get_by_ordinal(self) -> None:
        store = EntryStore(DOC)
        self.assertEqual(store.get(2).title, "Beta?")
        with self.assertRaises(CatalogError):
            store.get(99)

    def test_find_is_case_insensitive(self) -> None:
        store = EntryStore(DOC)
        self.assertEqual([e.ordinal for e in store.find("gAmMa")], [3])
        self.assertEqual(store.find("delta"), [])

    def test_from_path(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "doc.md"
            path.write_text(DOC, encoding="utf-8")
            store = EntryStore.from_path(path)
            self.assertEqual(store.source, path)
            self.assertEqual(len(store), 3)

    def test_from_path_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(CatalogError):
                EntryStore.from_path(Path(td) / "missing.md")

    def test_default_store_reads_bundled_document(self) -> None:
        store = EntryStore.default()
        self.assertGreater(len(store), 0)


class TestEntryModel(unittest.TestCase):
    def test_blank_title_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Entry(ordinal=1, title="   ", body="text")

    def test_slug_and_markdown(self) -> None:
        entry = Entry(ordinal=7, title="What is RAII?", body="Scope-bound resources.")
        self.assertEqual(entry.slug, "07-what-is-raii")
        self.assertEqual(entry.to_markdown(), "## 7. What is RAII?\n\nScope-bound resources.\n")


if __name__ == "__main__":
    unittest.main()
