"""Split a catalog document into ordered question/answer entries."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

from .fences import ENTRY_HEADING_PATTERN, code_line_mask, scan_fences
from .models import Catalog, Entry, Snippet

TITLE_PATTERN = re.compile(r"^#[ \t]+(?P<title>.+?)(?:[ \t]+#+)?[ \t]*$")

_THEMATIC_BREAKS = {"---", "***", "___"}


class EntryHeading(NamedTuple):
    """Internal representation of an entry heading match."""

    line_num: int
    ordinal: int | None
    title: str


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to a URL-safe slug.

    Args:
        text: Text to convert
        max_len: Maximum length of slug

    Returns:
        Lowercase slug with hyphens
    """
    text = text.lower()

    # Keep language names readable
    text = text.replace("c++", "cpp")
    text = text.replace("&", " and ")
    text = re.sub(r"[_:/.]+", " ", text)

    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"[\s-]+", "-", text)
    text = text.strip("-")

    if len(text) > max_len:
        # Try to break at a word boundary
        if "-" in text[:max_len]:
            text = text[:max_len].rsplit("-", 1)[0]
        else:
            text = text[:max_len]

    return text


def unique_slugs(entries: list[Entry]) -> list[str]:
    """Return one slug per entry, in order, with repeats made distinct.

    The first entry with a given slug keeps it. Later ones get "-2", "-3"
    and so on, so file names built from the slugs never collide.
    """
    taken: set[str] = set()
    slugs: list[str] = []
    for entry in entries:
        slug = entry.slug
        n = 2
        while slug in taken:
            slug = f"{entry.slug}-{n}"
            n += 1
        taken.add(slug)
        slugs.append(slug)
    return slugs


def normalize_newlines(markdown: str) -> str:
    return markdown.replace("\r\n", "\n").replace("\r", "\n")


def find_entry_headings(lines: list[str]) -> list[EntryHeading]:
    """Find all entry headings, ignoring lines inside fenced code.

    Args:
        lines: Document lines

    Returns:
        Headings in document order
    """
    mask = code_line_mask(lines)
    headings: list[EntryHeading] = []
    for line_num, line in enumerate(lines):
        if mask[line_num]:
            continue
        m = ENTRY_HEADING_PATTERN.match(line)
        if not m:
            continue
        ordinal = m.group("ordinal")
        headings.append(
            EntryHeading(
                line_num=line_num,
                ordinal=int(ordinal) if ordinal is not None else None,
                title=m.group("title"),
            )
        )
    return headings


def extract_snippets(body: str) -> list[Snippet]:
    """Collect the closed fenced blocks of an entry body, in order."""
    lines = body.split("\n")
    snippets: list[Snippet] = []
    for span in scan_fences(lines):
        if span.end is None:
            continue
        snippets.append(
            Snippet(
                language=span.language,
                info=span.info,
                fence=span.fence,
                indent=span.indent,
                closing=lines[span.end],
                lines=lines[span.start + 1 : span.end],
                line_start=span.start,
            )
        )
    return snippets


def _clean_body(lines: list[str]) -> str:
    body = list(lines)
    while body and (not body[-1].strip() or body[-1].strip() in _THEMATIC_BREAKS):
        body.pop()
    while body and not body[0].strip():
        body.pop(0)
    return "\n".join(body)


def iter_entries(markdown: str) -> Iterator[Entry]:
    """Yield the entries of a document lazily, in document order.

    Entries without an explicit number take their position as ordinal.
    """
    lines = normalize_newlines(markdown).split("\n")
    headings = find_entry_headings(lines)

    for idx, heading in enumerate(headings):
        end = headings[idx + 1].line_num if idx + 1 < len(headings) else len(lines)
        body = _clean_body(lines[heading.line_num + 1 : end])
        yield Entry(
            ordinal=heading.ordinal if heading.ordinal is not None else idx + 1,
            title=heading.title,
            body=body,
            snippets=extract_snippets(body),
        )


def split_preamble(markdown: str) -> tuple[str | None, str]:
    """Return the document title and the text before the first entry.

    Args:
        markdown: Full document

    Returns:
        (title or None, preamble text without the title line)
    """
    lines = normalize_newlines(markdown).split("\n")
    headings = find_entry_headings(lines)
    head = lines[: headings[0].line_num] if headings else lines

    title: str | None = None
    mask = code_line_mask(head)
    for i, line in enumerate(head):
        if mask[i]:
            continue
        m = TITLE_PATTERN.match(line)
        if m:
            title = m.group("title")
            head = head[:i] + head[i + 1 :]
            break

    return title, _clean_body(head)


def parse_catalog(markdown: str) -> Catalog:
    """Parse a whole document into a Catalog."""
    title, preamble = split_preamble(markdown)
    return Catalog(title=title, preamble=preamble, entries=list(iter_entries(markdown)))
