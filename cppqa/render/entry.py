"""Render catalog entries."""

from __future__ import annotations

from collections.abc import Iterable

from ..catalog.models import Entry
from ..catalog.parse import unique_slugs
from .markdown import markdown_to_html, render_inline


def render(entry: Entry, base_url: str | None = None, anchor: str | None = None) -> str:
    """Render one entry to an HTML fragment.

    Pure function: the same entry always gives the same output. Snippets
    are escaped and shown as-is.

    Args:
        entry: Entry to render
        base_url: Optional base for relative links and images
        anchor: Heading id; defaults to the entry's slug

    Returns:
        HTML fragment with the question heading and the answer body
    """
    heading = (
        f'<h2 id="{anchor or entry.slug}">'
        f"{entry.ordinal}. {render_inline(entry.title, base_url)}"
        "</h2>"
    )
    body = markdown_to_html(entry.body, base_url=base_url)
    return f"{heading}\n{body}" if body else heading


def render_catalog(entries: Iterable[Entry], base_url: str | None = None) -> str:
    """Render every entry, in order, as one fragment with distinct anchors."""
    entries = list(entries)
    return "\n".join(
        render(e, base_url=base_url, anchor=slug) for e, slug in zip(entries, unique_slugs(entries))
    )
