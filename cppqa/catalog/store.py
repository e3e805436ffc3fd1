"""Read-only entry store over one catalog document."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..config import SOURCE_PATH
from .models import Entry
from .parse import iter_entries, normalize_newlines, split_preamble


class CatalogError(ValueError):
    """Raised when a catalog document cannot be read or an entry is missing."""


class EntryStore:
    """Ordered entries of a catalog document.

    The store keeps only the document text. Every call to `list()` parses
    on demand and returns a fresh iterator, so iteration can be restarted
    any number of times.
    """

    def __init__(self, markdown: str, source: Path | None = None):
        self._markdown = normalize_newlines(markdown)
        self.source = source

    @classmethod
    def from_path(cls, path: Path) -> "EntryStore":
        """Load a UTF-8 document from disk."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog document not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Cannot read catalog document {path}: {e}") from e
        return cls(text, source=path)

    @classmethod
    def default(cls) -> "EntryStore":
        """Store for the configured document (bundled unless CPPQA_SOURCE is set)."""
        return cls.from_path(SOURCE_PATH)

    @property
    def markdown(self) -> str:
        return self._markdown

    @property
    def title(self) -> str | None:
        return split_preamble(self._markdown)[0]

    @property
    def preamble(self) -> str:
        return split_preamble(self._markdown)[1]

    def list(self) -> Iterator[Entry]:
        """Entries in ordinal order. Empty documents yield nothing."""
        return iter_entries(self._markdown)

    def __iter__(self) -> Iterator[Entry]:
        return self.list()

    def __len__(self) -> int:
        return sum(1 for _ in self.list())

    def get(self, ordinal: int) -> Entry:
        for entry in self.list():
            if entry.ordinal == ordinal:
                return entry
        raise CatalogError(f"No entry with ordinal {ordinal}")

    def find(self, text: str) -> list[Entry]:
        """Entries whose title contains `text`, case-insensitively."""
        needle = text.casefold()
        return [e for e in self.list() if needle in e.title.casefold()]
