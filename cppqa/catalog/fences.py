"""Locate fenced code blocks in Markdown lines."""

from __future__ import annotations

import re
from typing import NamedTuple

# Opening fence: up to any indentation, then ``` or ~~~ (three or more) and an info string.
FENCE_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")

ENTRY_HEADING_PATTERN = re.compile(
    r"^##[ \t]+(?:(?P<ordinal>\d+)[ \t]*[.)][ \t]+)?(?P<title>\S.*?)[ \t]*$"
)

# Numbered entry headings end the search for a closing fence. Other "## "
# lines (shell or Python comments, Markdown samples) stay inside the block.
NUMBERED_HEADING_PATTERN = re.compile(r"^##[ \t]+\d+[ \t]*[.)][ \t]+\S")


class FenceSpan(NamedTuple):
    """One opening fence and where it closes."""

    start: int
    end: int | None  # closing line index, None when the fence is never closed
    indent: str
    fence: str
    info: str

    @property
    def closed(self) -> bool:
        return self.end is not None

    @property
    def language(self) -> str:
        words = self.info.strip().split()
        return words[0].lower() if words else ""


def match_fence(line: str) -> re.Match[str] | None:
    """Match an opening fence line, or return None."""
    m = FENCE_PATTERN.match(line)
    if not m:
        return None
    # Backtick fences cannot carry backticks in their info string.
    if m.group("fence")[0] == "`" and "`" in m.group("info"):
        return None
    return m


def find_fence_close(lines: list[str], start: int, fence: str) -> int | None:
    """Return the index of the line closing `fence`, searching from `start`.

    A closing fence uses the same character, is at least as long as the
    opening one and carries nothing else. A numbered entry heading stops
    the search, so a stray fence never swallows the entries after it.
    """
    char = fence[0]
    for j in range(start, len(lines)):
        s = lines[j].strip()
        if s and len(s) >= len(fence) and set(s) == {char}:
            return j
        if NUMBERED_HEADING_PATTERN.match(lines[j]):
            return None
    return None


def scan_fences(lines: list[str]) -> list[FenceSpan]:
    """Find every opening fence in order.

    Lines inside a closed block are skipped. An unclosed opener is recorded
    with `end=None` and scanning resumes on the next line, so its own line
    is treated as plain text.
    """
    spans: list[FenceSpan] = []
    i = 0
    while i < len(lines):
        m = match_fence(lines[i])
        if not m:
            i += 1
            continue

        fence = m.group("fence")
        end = find_fence_close(lines, i + 1, fence)
        spans.append(
            FenceSpan(
                start=i,
                end=end,
                indent=m.group("indent"),
                fence=fence,
                info=m.group("info"),
            )
        )
        i = end + 1 if end is not None else i + 1

    return spans


def code_line_mask(lines: list[str]) -> list[bool]:
    """Return a flag per line: True when the line belongs to a closed fenced block."""
    mask = [False] * len(lines)
    for span in scan_fences(lines):
        if span.end is None:
            continue
        for j in range(span.start, span.end + 1):
            mask[j] = True
    return mask
