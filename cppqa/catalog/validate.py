"""Structural checks for catalog documents."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from .fences import scan_fences
from .models import Entry
from .parse import iter_entries


class Issue(BaseModel):
    """A structural problem found in the document."""

    code: str
    message: str
    ordinal: int | None = None

    def __str__(self) -> str:
        where = f"entry {self.ordinal}: " if self.ordinal is not None else ""
        return f"[{self.code}] {where}{self.message}"


def check_entries(entries: Iterable[Entry]) -> list[Issue]:
    """Check ordinals, bodies, code fences and titles.

    Args:
        entries: Entries in document order

    Returns:
        Issues in document order; empty when the entries are well-formed
    """
    issues: list[Issue] = []
    seen_titles: dict[str, int] = {}

    for position, entry in enumerate(entries, start=1):
        if entry.ordinal != position:
            issues.append(
                Issue(
                    code="ordinal-sequence",
                    message=f"expected ordinal {position}, found {entry.ordinal}",
                    ordinal=entry.ordinal,
                )
            )

        if not entry.body.strip():
            issues.append(
                Issue(code="empty-body", message="entry has no answer text", ordinal=entry.ordinal)
            )

        for span in scan_fences(entry.body.split("\n")):
            if span.end is None:
                issues.append(
                    Issue(
                        code="unclosed-fence",
                        message=f"code fence on body line {span.start + 1} is never closed",
                        ordinal=entry.ordinal,
                    )
                )

        key = entry.title.strip().casefold()
        if key in seen_titles:
            issues.append(
                Issue(
                    code="duplicate-title",
                    message=f"same title as entry {seen_titles[key]}",
                    ordinal=entry.ordinal,
                )
            )
        else:
            seen_titles[key] = entry.ordinal

    return issues


def check_document(markdown: str) -> list[Issue]:
    """Run all structural checks on a whole document."""
    return check_entries(iter_entries(markdown))
