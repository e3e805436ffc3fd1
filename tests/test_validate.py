"""Tests for structural checks."""

import unittest

from cppqa.catalog.models import Entry
from cppqa.catalog.validate import check_document, check_entries


class TestCheckDocument(unittest.TestCase):
    def test_well_formed_document_has_no_issues(self) -> None:
        doc = "## 1. One\n\nA\n\n```cpp\nint x;\n```\n\n## 2. Two\n\nB\n"
        self.assertEqual(check_document(doc), [])

    def test_empty_document_has_no_issues(self) -> None:
        self.assertEqual(check_document(""), [])

    def test_ordinal_gap(self) -> None:
        doc = "## 1. One\n\nA\n\n## 3. Three\n\nC\n"
        issues = check_document(doc)
        self.assertEqual([i.code for i in issues], ["ordinal-sequence"])
        self.assertEqual(issues[0].ordinal, 3)
        self.assertIn("expected ordinal 2", issues[0].message)

    def test_ordinal_must_start_at_one(self) -> None:
        issues = check_document("## 2. Two\n\nB\n")
        self.assertEqual([i.code for i in issues], ["ordinal-sequence"])

    def test_empty_body(self) -> None:
        issues = check_document("## 1. One\n\n---\n\n## 2. Two\n\nB\n")
        self.assertEqual([(i.code, i.ordinal) for i in issues], [("empty-body", 1)])

    def test_unclosed_fence(self) -> None:
        issues = check_document("## 1. One\n\nText\n\n```cpp\nint x;\n")
        self.assertEqual([i.code for i in issues], ["unclosed-fence"])
        self.assertIn("line 3", issues[0].message)

    def test_duplicate_title(self) -> None:
        issues = check_document("## 1. Same\n\nA\n\n## 2. same\n\nB\n")
        self.assertEqual([(i.code, i.ordinal) for i in issues], [("duplicate-title", 2)])

    def test_issue_str(self) -> None:
        issue = check_document("## 2. Two\n\nB\n")[0]
        self.assertTrue(str(issue).startswith("[ordinal-sequence] entry 2:"))


class TestCheckEntries(unittest.TestCase):
    def test_accepts_model_instances(self) -> None:
        entries = [
            Entry(ordinal=1, title="A", body="a"),
            Entry(ordinal=2, title="B", body="b"),
        ]
        self.assertEqual(check_entries(entries), [])

    def test_reordered_entries(self) -> None:
        entries = [
            Entry(ordinal=2, title="B", body="b"),
            Entry(ordinal=1, title="A", body="a"),
        ]
        codes = [i.code for i in check_entries(entries)]
        self.assertEqual(codes, ["ordinal-sequence", "ordinal-sequence"])


if __name__ == "__main__":
    unittest.main()
