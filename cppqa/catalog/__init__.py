"""Catalog document parsing, entry storage and structural checks."""

from .models import Catalog, Entry, Snippet
from .parse import iter_entries, parse_catalog, slugify
from .store import CatalogError, EntryStore
from .validate import Issue, check_document, check_entries

__all__ = [
    "Catalog",
    "Entry",
    "Snippet",
    "iter_entries",
    "parse_catalog",
    "slugify",
    "CatalogError",
    "EntryStore",
    "Issue",
    "check_document",
    "check_entries",
]
