"""Tests for link and asset resolution."""

import unittest

from cppqa.render.links import (
    is_absolute,
    iter_links,
    relocate,
    relocate_links,
    resolve,
    rewrite_links,
    safe_href,
)


class TestResolve(unittest.TestCase):
    def test_identity_without_base(self) -> None:
        for url in ["img/logo.png", "https://example.com/a", "#anchor", ""]:
            self.assertEqual(resolve(url), url)

    def test_absolute_urls_untouched(self) -> None:
        base = "https://mirror.example/docs/"
        for url in ["https://example.com/a", "mailto:someone@example.com", "//cdn.example/x.png"]:
            self.assertEqual(resolve(url, base), url)

    def test_fragment_untouched(self) -> None:
        self.assertEqual(resolve("#smart-pointers", "https://example.com/"), "#smart-pointers")

    def test_relative_joined_onto_base(self) -> None:
        self.assertEqual(
            resolve("images/logo.png", "https://example.com/repo"),
            "https://example.com/repo/images/logo.png",
        )
        self.assertEqual(
            resolve("../up.png", "https://example.com/repo/docs/"),
            "https://example.com/repo/up.png",
        )

    def test_is_absolute(self) -> None:
        self.assertTrue(is_absolute("http://x"))
        self.assertTrue(is_absolute("//x"))
        self.assertFalse(is_absolute("x/y"))


class TestSafeHref(unittest.TestCase):
    def test_rejects_script_schemes(self) -> None:
        self.assertIsNone(safe_href("javascript:alert(1)"))
        self.assertIsNone(safe_href(" DATA:text/html,x"))
        self.assertIsNone(safe_href("   "))
        self.assertIsNone(safe_href(None))

    def test_keeps_normal_urls(self) -> None:
        self.assertEqual(safe_href(" https://example.com "), "https://example.com")


class TestIterLinks(unittest.TestCase):
    def test_finds_links_and_images_outside_code(self) -> None:
        md = (
            "![logo](https://example.com/logo.svg)\n"
            "See [ref](https://en.cppreference.com/w/cpp) and `[not](a-link)`.\n"
            "```cpp\n// [also](not-a-link)\n```\n"
        )
        links = list(iter_links(md))
        self.assertEqual([(l.kind, l.url) for l in links], [
            ("image", "https://example.com/logo.svg"),
            ("link", "https://en.cppreference.com/w/cpp"),
        ])
        self.assertEqual(links[0].text, "logo")


class TestRewriteLinks(unittest.TestCase):
    def test_rewrites_only_relative_urls_outside_code(self) -> None:
        md = (
            "![logo](img/logo.png \"Logo\") [abs](https://x.example/)\n"
            "```\n[code](img/other.png)\n```\n"
        )
        out = rewrite_links(md, "https://example.com/repo/")
        self.assertIn('![logo](https://example.com/repo/img/logo.png "Logo")', out)
        self.assertIn("[abs](https://x.example/)", out)
        self.assertIn("[code](img/other.png)", out)

    def test_no_base_is_identity(self) -> None:
        md = "[a](b)\n"
        self.assertEqual(rewrite_links(md, None), md)
        self.assertEqual(rewrite_links(md, ""), md)


class TestRelocate(unittest.TestCase):
    def test_prefixes_document_relative_urls_only(self) -> None:
        self.assertEqual(relocate("img/logo.png", "../"), "../img/logo.png")
        for url in ["https://example.com/a", "/root.png", "#frag", "", "//cdn.example/x"]:
            self.assertEqual(relocate(url, "../"), url)

    def test_relocate_links_skips_code(self) -> None:
        md = "![a](img/a.png) `[b](img/b.png)`\n```\n[c](img/c.png)\n```\n"
        out = relocate_links(md, "../")
        self.assertIn("![a](../img/a.png)", out)
        self.assertIn("`[b](img/b.png)`", out)
        self.assertIn("[c](img/c.png)", out)
        self.assertEqual(relocate_links(md, ""), md)


if __name__ == "__main__":
    unittest.main()
