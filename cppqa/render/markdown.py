"""Render catalog Markdown to HTML."""

from __future__ import annotations

import re
from html import escape

from ..catalog.fences import FenceSpan, scan_fences
from ..catalog.parse import slugify
from .links import resolve, safe_href

HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})[ \t]+(?P<text>.*?)(?:[ \t]+#+)?[ \t]*$")
LIST_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d+[.)])[ \t]+(?P<text>.*)$")

_THEMATIC_BREAKS = {"---", "***", "___"}

_TABLE_SEPARATOR_PATTERN = re.compile(r"^\|?[ \t]*:?-{3,}:?[ \t]*(?:\|[ \t]*:?-{3,}:?[ \t]*)*\|?$")


def markdown_to_html(md: str, base_url: str | None = None) -> str:
    """Convert catalog Markdown to an HTML fragment.

    Covers the subset the catalog uses. Output is deterministic.
    Fenced code is escaped verbatim. A fence that is never closed is
    rendered as literal text.
    """
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    lines = md.split("\n")

    spans = scan_fences(lines)
    closed: dict[int, FenceSpan] = {s.start: s for s in spans if s.end is not None}
    unclosed = {s.start for s in spans if s.end is None}

    out: list[str] = []

    def flush_paragraph(buf: list[str]) -> None:
        if not buf:
            return
        text = " ".join(s.strip() for s in buf if s.strip())
        if text:
            out.append(f"<p>{_inline(text, base_url)}</p>")
        buf.clear()

    i = 0
    para_buf: list[str] = []

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        # Code fences
        span = closed.get(i)
        if span is not None:
            flush_paragraph(para_buf)
            code_text = "\n".join(_strip_indent(lines[i + 1 : span.end], span.indent))
            out.append(_code_block(code_text, span.language))
            i = span.end + 1
            continue

        if i in unclosed:
            flush_paragraph(para_buf)
            out.append(f"<p>{_text(stripped)}</p>")
            i += 1
            continue

        # Horizontal rule
        if stripped in _THEMATIC_BREAKS:
            flush_paragraph(para_buf)
            out.append("<hr>")
            i += 1
            continue

        # Table (GFM)
        if _is_table_start(lines, i):
            flush_paragraph(para_buf)
            table_lines: list[str] = []
            while i < len(lines) and lines[i].strip().startswith("|"):
                table_lines.append(lines[i])
                i += 1
            out.append(_table_to_html(table_lines, base_url))
            continue

        # Headings
        m = HEADING_PATTERN.match(stripped)
        if m:
            flush_paragraph(para_buf)
            level = len(m.group("hashes"))
            text = m.group("text")
            anchor = slugify(_plain(text))
            id_attr = f' id="{_attr(anchor)}"' if anchor else ""
            out.append(f"<h{level}{id_attr}>{_inline(text, base_url)}</h{level}>")
            i += 1
            continue

        # Lists (ordered or unordered, nested by indentation)
        item = LIST_ITEM_PATTERN.match(line)
        if item:
            flush_paragraph(para_buf)
            html, i = _render_list(lines, i, item, set(closed) | unclosed, base_url)
            out.append(html)
            continue

        # Blockquote
        if stripped.startswith(">"):
            flush_paragraph(para_buf)
            out.append("<blockquote>")
            quote_buf: list[str] = []
            while i < len(lines):
                s = lines[i].strip()
                if not s.startswith(">"):
                    break
                q = s[1:].strip()
                if q:
                    quote_buf.append(q)
                elif quote_buf:
                    out.append(f"<p>{_inline(' '.join(quote_buf), base_url)}</p>")
                    quote_buf = []
                i += 1
            if quote_buf:
                out.append(f"<p>{_inline(' '.join(quote_buf), base_url)}</p>")
            out.append("</blockquote>")
            continue

        # Blank line ends paragraph
        if not stripped:
            flush_paragraph(para_buf)
            i += 1
            continue

        # Default: paragraph text
        para_buf.append(line)
        i += 1

    flush_paragraph(para_buf)
    return "\n".join(out)


def render_inline(text: str, base_url: str | None = None) -> str:
    """Render a single line of inline Markdown (titles, table cells)."""
    return _inline(text, base_url)


def _code_block(code: str, language: str) -> str:
    cls = f' class="language-{_attr(language)}"' if language else ""
    return f"<pre><code{cls}>{_text(code)}</code></pre>"


def _strip_indent(lines: list[str], indent: str) -> list[str]:
    width = len(indent)
    if not width:
        return list(lines)
    return [line[width:] if line[:width].strip() == "" else line for line in lines]


def _indent_width(indent: str) -> int:
    return len(indent.expandtabs(4))


def _render_list(
    lines: list[str],
    i: int,
    first: re.Match[str],
    fence_starts: set[int],
    base_url: str | None,
) -> tuple[str, int]:
    base_indent = _indent_width(first.group("indent"))
    ordered = first.group("marker")[0].isdigit()

    # Each item: [inline html, nested list html, ...]
    items: list[list[str]] = []

    while i < len(lines):
        line = lines[i]

        if not line.strip():
            # A blank line ends the list unless the next line continues it.
            nxt = LIST_ITEM_PATTERN.match(lines[i + 1]) if i + 1 < len(lines) else None
            if nxt and _indent_width(nxt.group("indent")) >= base_indent:
                i += 1
                continue
            break

        if i in fence_starts:
            break

        m = LIST_ITEM_PATTERN.match(line)
        if m:
            indent = _indent_width(m.group("indent"))
            if indent < base_indent:
                break
            if indent > base_indent and items:
                nested, i = _render_list(lines, i, m, fence_starts, base_url)
                items[-1].append(nested)
                continue
            if m.group("marker")[0].isdigit() != ordered:
                break
            items.append([_inline(m.group("text").strip(), base_url)])
            i += 1
            continue

        # Indented text continues the previous item.
        if items and _indent_width(line[: len(line) - len(line.lstrip())]) > base_indent:
            items[-1][0] += " " + _inline(line.strip(), base_url)
            i += 1
            continue

        break

    tag = "ol" if ordered else "ul"
    parts = [f"<{tag}>"]
    for item in items:
        parts.append("<li>" + "\n".join(item) + "</li>")
    parts.append(f"</{tag}>")
    return "\n".join(parts), i


def _text(text: str) -> str:
    return escape(text, quote=False)


def _attr(text: str) -> str:
    return escape(text, quote=True)


def _plain(text: str) -> str:
    """Drop inline markup characters (used for heading anchors)."""
    return re.sub(r"[`*]", "", text)


def _inline(text: str, base_url: str | None = None) -> str:
    # Markup is stashed behind tokens, the rest is escaped, then tokens are expanded.
    replacements: list[str] = []

    def stash(html: str) -> str:
        token = f"@@{len(replacements)}@@"
        replacements.append(html)
        return token

    text = re.sub(r"(`+)(.+?)\1", lambda m: stash(f"<code>{_text(m.group(2).strip())}</code>"), text)

    # Images
    def _image_repl(match: re.Match[str]) -> str:
        src = safe_href(match.group(2))
        alt = match.group(1)
        if not src:
            return alt
        src = resolve(src, base_url)
        return stash(f'<img src="{_attr(src)}" alt="{_attr(alt)}">')

    text = re.sub(r"!\[([^\]]*)\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)", _image_repl, text)

    # Links
    def _link_repl(match: re.Match[str]) -> str:
        href = safe_href(match.group(2))
        label = match.group(1)
        if not href:
            return label
        href = resolve(href, base_url)
        return stash(f'<a href="{_attr(href)}">{_inline_emphasis(_text(label))}</a>')

    text = re.sub(r"\[([^\]]+)\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)", _link_repl, text)

    escaped = _inline_emphasis(_text(text))

    # Later stashes may contain earlier tokens, so expand newest first.
    for idx in reversed(range(len(replacements))):
        escaped = escaped.replace(f"@@{idx}@@", replacements[idx])
    return escaped


def _inline_emphasis(text: str) -> str:
    # Bold, then italics. Runs on already-escaped text.
    text = re.sub(r"\*\*([^*]+)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__([^_]+)__", r"<strong>\1</strong>", text)
    text = re.sub(r"(?<![\w*])\*(?!\s)([^*]+?)(?<!\s)\*(?![\w*])", r"<em>\1</em>", text)
    text = re.sub(r"(?<![\w_])_(?!\s)([^_]+?)(?<!\s)_(?![\w_])", r"<em>\1</em>", text)
    return text


def _is_table_start(lines: list[str], i: int) -> bool:
    if i + 1 >= len(lines) or not lines[i].strip().startswith("|"):
        return False
    return bool(_TABLE_SEPARATOR_PATTERN.match(lines[i + 1].strip()))


def _table_to_html(table_lines: list[str], base_url: str | None = None) -> str:
    # Row 2 is the alignment row.
    rows = []
    for line in table_lines:
        if not line.strip().startswith("|"):
            continue
        parts = [p.strip() for p in re.split(r"(?<!\\)\|", line.strip().strip("|"))]
        rows.append([p.replace("\\|", "|") for p in parts])

    if len(rows) < 2:
        return "<pre>" + _text("\n".join(table_lines)) + "</pre>"

    header = rows[0]
    body_rows = rows[2:]

    out = ["<table>", "<thead>", "<tr>"]
    for h in header:
        out.append(f"<th>{_inline(h, base_url)}</th>")
    out.extend(["</tr>", "</thead>", "<tbody>"])
    for r in body_rows:
        out.append("<tr>")
        for c in r:
            out.append(f"<td>{_inline(c, base_url)}</td>")
        out.append("</tr>")
    out.extend(["</tbody>", "</table>"])
    return "\n".join(out)
