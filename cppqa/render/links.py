"""Resolve and rewrite outbound links and image URLs."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from urllib.parse import urljoin

from pydantic import BaseModel

from ..catalog.fences import code_line_mask

_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

# [text](url) and ![alt](url), with an optional "title"
LINK_PATTERN = re.compile(
    r"(?P<bang>!?)\[(?P<text>[^\]]*)\]\((?P<url>[^)\s]+)(?P<title>\s+\"[^\"]*\")?\)"
)

_INLINE_CODE_PATTERN = re.compile(r"(`+)(?:(?!\1).)+?\1")


class Link(BaseModel):
    """A link or image reference found in the document."""

    kind: str  # "link" or "image"
    text: str
    url: str


def is_absolute(url: str) -> bool:
    return bool(_SCHEME_PATTERN.match(url)) or url.startswith("//")


def resolve(url: str, base_url: str | None = None) -> str:
    """Resolve a URL against an optional base.

    Absolute URLs, fragment-only anchors and anything resolved without a
    base URL come back unchanged.
    """
    if not base_url or not url or url.startswith("#") or is_absolute(url):
        return url
    base = base_url if base_url.endswith("/") else base_url + "/"
    return urljoin(base, url)


def safe_href(href: str | None) -> str | None:
    if href is None:
        return None
    cleaned = href.strip()
    if not cleaned:
        return None
    lowered = cleaned.lower()
    if lowered.startswith(("javascript:", "data:", "vbscript:")):
        return None
    return cleaned


def _code_spans(line: str) -> list[tuple[int, int]]:
    return [(m.start(), m.end()) for m in _INLINE_CODE_PATTERN.finditer(line)]


def _in_spans(pos: int, spans: list[tuple[int, int]]) -> bool:
    return any(start <= pos < end for start, end in spans)


def iter_links(markdown: str) -> Iterator[Link]:
    """Yield every link and image outside code, in document order."""
    lines = markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    mask = code_line_mask(lines)
    for line, in_code in zip(lines, mask):
        if in_code:
            continue
        spans = _code_spans(line)
        for m in LINK_PATTERN.finditer(line):
            if _in_spans(m.start(), spans):
                continue
            yield Link(
                kind="image" if m.group("bang") else "link",
                text=m.group("text"),
                url=m.group("url"),
            )


def relocate(url: str, prefix: str) -> str:
    """Prefix a document-relative URL so it still works from a subdirectory.

    Absolute URLs, root-relative paths and fragment-only anchors are
    returned unchanged.
    """
    if not url or url.startswith(("#", "/")) or is_absolute(url):
        return url
    return prefix + url


def _map_links(markdown: str, fn: Callable[[str], str]) -> str:
    lines = markdown.split("\n")
    mask = code_line_mask(lines)
    out: list[str] = []
    for line, in_code in zip(lines, mask):
        if in_code:
            out.append(line)
            continue
        spans = _code_spans(line)

        def _repl(m: re.Match[str]) -> str:
            if _in_spans(m.start(), spans):
                return m.group(0)
            title = m.group("title") or ""
            return f"{m.group('bang')}[{m.group('text')}]({fn(m.group('url'))}{title})"

        out.append(LINK_PATTERN.sub(_repl, line))
    return "\n".join(out)


def rewrite_links(markdown: str, base_url: str | None) -> str:
    """Apply `resolve` to every link and image URL outside code.

    All other text is left byte-for-byte unchanged.
    """
    if not base_url:
        return markdown
    return _map_links(markdown, lambda url: resolve(url, base_url))


def relocate_links(markdown: str, prefix: str) -> str:
    """Apply `relocate` to every link and image URL outside code."""
    if not prefix:
        return markdown
    return _map_links(markdown, lambda url: relocate(url, prefix))
