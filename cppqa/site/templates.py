"""HTML templates for the static site generator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from .styles import CSS


def html_doc(
    title: str,
    home: str,
    nav: Iterable[str],
    body: str,
    description: str = "",
) -> str:
    """Wrap a page body in the shared layout.

    `home` and the `nav` items are pre-rendered anchors.
    """
    head = [
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
    ]
    if description:
        head.append(f'<meta name="description" content="{escape(description, quote=True)}">')
    head.append(f"<title>{escape(title)}</title>")
    head.append(f"<style>{CSS}</style>")

    return "\n".join(
        [
            "<!doctype html>",
            '<html lang="en">',
            "<head>",
            *head,
            "</head>",
            "<body>",
            f'<header><div class="home">{home}</div><nav>{" ".join(nav)}</nav></header>',
            "<main>",
            body,
            "</main>",
            '<footer class="muted">Generated by cppqa from the catalog document.</footer>',
            "</body>",
            "</html>",
        ]
    ) + "\n"


def link(href: str, text: str) -> str:
    return f'<a href="{escape(href, quote=True)}">{escape(text)}</a>'


def heading(text: str, level: int = 1) -> str:
    return f"<h{level}>{escape(text)}</h{level}>"


def rule() -> str:
    return '<div class="rule"></div>'


@dataclass(frozen=True)
class EntryRow:
    ordinal: int
    title_html: str
    snippets: int
    href: str


def entries_index(title: str, preamble_html: str, rows: Iterable[EntryRow]) -> str:
    lines = [heading(title)]
    if preamble_html:
        lines.append(f'<div class="preamble">{preamble_html}</div>')
    lines.append(rule())
    lines.append(heading("Questions", level=2))
    lines.append('<ol class="entries">')
    for r in rows:
        count = f"{r.snippets} snippet" + ("" if r.snippets == 1 else "s")
        lines.append(
            f'<li value="{r.ordinal}">'
            f'<a href="{escape(r.href, quote=True)}">{r.title_html}</a>'
            f' <span class="muted">· {escape(count)}</span>'
            "</li>"
        )
    lines.append("</ol>")
    return "\n".join(lines)


def entry_nav(prev_href: str | None, next_href: str | None) -> str:
    parts = []
    if prev_href:
        parts.append(link(prev_href, "← Previous"))
    if next_href:
        parts.append(link(next_href, "Next →"))
    if not parts:
        return ""
    return '<div class="pager">' + " ".join(parts) + "</div>"


def content_page(html: str, stats: list[str], footer: str = "") -> str:
    lines = []
    for s in stats:
        lines.append(f'<div class="muted">{escape(s)}</div>')
    lines.append(rule())
    lines.append(html)
    if footer:
        lines.append(rule())
        lines.append(footer)
    return "\n".join(lines)
