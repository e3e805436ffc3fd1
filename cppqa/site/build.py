"""Static site generator for the question catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..catalog.models import Entry
from ..catalog.parse import unique_slugs
from ..catalog.store import EntryStore
from ..render.entry import render, render_catalog
from ..render.links import relocate_links
from ..render.markdown import markdown_to_html, render_inline
from .templates import (
    EntryRow,
    content_page,
    entries_index,
    entry_nav,
    html_doc,
    link,
)

DEFAULT_TITLE = "C++ Interview Questions"


def build_site(store: EntryStore, out_dir: Path, base_url: str | None = None) -> dict[str, Any]:
    """Build a static HTML site from a catalog.

    Args:
        store: Entry store to publish
        out_dir: Output directory (created if missing)
        base_url: Optional base for relative links and images

    Returns:
        Report dict with entry/snippet counts, output dir and total size
    """
    out_dir = Path(out_dir).resolve()
    entries_dir = out_dir / "entries"
    entries_dir.mkdir(parents=True, exist_ok=True)

    title = store.title or DEFAULT_TITLE
    entries = list(store.list())

    # Raw source, so "Raw MD" links work offline.
    (out_dir / "catalog.md").write_text(store.markdown, encoding="utf-8")

    slugs = unique_slugs(entries)
    snippets_total = 0
    for idx, entry in enumerate(entries):
        snippets_total += len(entry.snippets)
        prev_slug = slugs[idx - 1] if idx > 0 else None
        next_slug = slugs[idx + 1] if idx + 1 < len(entries) else None
        _write_entry_page(entry, slugs[idx], prev_slug, next_slug, entries_dir, title, base_url)

    # Single-page catalog
    all_body = content_page(
        html=render_catalog(entries, base_url=base_url),
        stats=[f"{len(entries)} questions · {snippets_total} snippets"],
    )
    all_html = html_doc(
        title=f"{title} (all)",
        home=link("index.html", f"← {title}"),
        nav=[link("catalog.md", "Raw MD")],
        body=all_body,
        description=f"All {len(entries)} questions on one page.",
    )
    (out_dir / "all.html").write_text(all_html, encoding="utf-8")

    # Root index
    rows = [
        EntryRow(
            ordinal=e.ordinal,
            title_html=render_inline(e.title, base_url),
            snippets=len(e.snippets),
            href=f"entries/{slug}.html",
        )
        for e, slug in zip(entries, slugs)
    ]
    body = entries_index(
        title=title,
        preamble_html=markdown_to_html(store.preamble, base_url=base_url),
        rows=rows,
    )
    html = html_doc(
        title=title,
        home=link("index.html", title),
        nav=[link("all.html", "All on one page"), link("catalog.md", "Raw MD")],
        body=body,
        description=f"{len(entries)} C++ interview questions with answers and code snippets.",
    )
    (out_dir / "index.html").write_text(html, encoding="utf-8")

    return {
        "entries": len(entries),
        "snippets": snippets_total,
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }


def _write_entry_page(
    entry: Entry,
    slug: str,
    prev_slug: str | None,
    next_slug: str | None,
    entries_dir: Path,
    site_title: str,
    base_url: str | None,
) -> None:
    nav = entry_nav(
        f"{prev_slug}.html" if prev_slug else None,
        f"{next_slug}.html" if next_slug else None,
    )
    stats = [f"Question {entry.ordinal} · {len(entry.snippets)} snippets · {len(entry.body):,} chars"]
    shown = entry
    if not base_url:
        # Pages live one level down; relative URLs are written for the root.
        shown = entry.model_copy(
            update={
                "title": relocate_links(entry.title, "../"),
                "body": relocate_links(entry.body, "../"),
            }
        )
    body = content_page(html=render(shown, base_url=base_url, anchor=slug), stats=stats, footer=nav)
    page = html_doc(
        title=f"{entry.ordinal}. {entry.title} · {site_title}",
        home=link("../index.html", f"← {site_title}"),
        nav=[link("../catalog.md", "Raw MD")],
        body=body,
        description=entry.title,
    )
    (entries_dir / f"{slug}.html").write_text(page, encoding="utf-8")


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
