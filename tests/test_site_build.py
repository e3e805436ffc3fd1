"""Tests for the static site generator."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from cppqa.catalog.store import EntryStore
from cppqa.site.build import build_site

DOC = """# Sample Catalog

![logo](img/logo.png)

## 1. What is RAII?

Scope-bound *resources*.

```cpp
std::lock_guard<std::mutex> lock(m);
```

## 2. What is a template?

Generic code.
"""


class TestSiteBuild(unittest.TestCase):
    def test_build_site_writes_indexes_and_pages(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            report = build_site(EntryStore(DOC), out)

            self.assertEqual(report["entries"], 2)
            self.assertEqual(report["snippets"], 1)
            self.assertGreater(report["total_bytes"], 0)

            self.assertTrue((out / "index.html").exists())
            self.assertTrue((out / "all.html").exists())
            self.assertEqual((out / "catalog.md").read_text(encoding="utf-8"), DOC)
            first = out / "entries" / "01-what-is-raii.html"
            second = out / "entries" / "02-what-is-a-template.html"
            self.assertTrue(first.exists())
            self.assertTrue(second.exists())

            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn("<title>Sample Catalog</title>", index)
            self.assertIn('href="entries/01-what-is-raii.html"', index)
            self.assertIn("1 snippet", index)

            page = first.read_text(encoding="utf-8")
            self.assertIn("std::lock_guard&lt;std::mutex&gt;", page)
            self.assertIn('href="02-what-is-a-template.html"', page)
            self.assertNotIn("Previous", page)

    def test_base_url_applies_to_relative_assets(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            build_site(EntryStore(DOC), out, base_url="https://example.com/repo/")
            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn('src="https://example.com/repo/img/logo.png"', index)

    def test_entry_pages_point_relative_urls_at_site_root(self) -> None:
        doc = "## 1. Diagram\n\nSee ![raii](img/raii.png) and [notes](notes.md#top) or [x](#local).\n"
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            build_site(EntryStore(doc), out)
            page = (out / "entries" / "01-diagram.html").read_text(encoding="utf-8")
            self.assertIn('src="../img/raii.png"', page)
            self.assertIn('href="../notes.md#top"', page)
            self.assertIn('href="#local"', page)
            all_page = (out / "all.html").read_text(encoding="utf-8")
            self.assertIn('src="img/raii.png"', all_page)

    def test_repeated_slugs_get_distinct_pages(self) -> None:
        doc = "## 1. Same\n\nfirst\n\n## 1. Same\n\nsecond\n"
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            build_site(EntryStore(doc), out)
            first = (out / "entries" / "01-same.html").read_text(encoding="utf-8")
            second = (out / "entries" / "01-same-2.html").read_text(encoding="utf-8")
            self.assertIn("first", first)
            self.assertIn('href="01-same-2.html"', first)
            self.assertIn("second", second)
            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn('href="entries/01-same-2.html"', index)

    def test_empty_catalog(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            report = build_site(EntryStore(""), out)
            self.assertEqual(report["entries"], 0)
            index = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn("C++ Interview Questions", index)


if __name__ == "__main__":
    unittest.main()
