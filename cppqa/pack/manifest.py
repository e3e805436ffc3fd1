"""Manifest model and generation."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel

from ..catalog.models import Entry
from ..catalog.parse import unique_slugs
from ..config import PARSER_VERSION, SCHEMA_VERSION
from ..render.links import rewrite_links
from ..render.tokenize import count_tokens

MANIFEST_NAME = "manifest.json"


class SourceInfo(BaseModel):
    """The document the pack was built from."""

    name: str
    sha256: str


class CatalogInfo(BaseModel):
    """Catalog-level metadata."""

    title: str | None
    entries_count: int
    snippets_count: int


class EntryInfo(BaseModel):
    """Entry metadata in manifest."""

    ordinal: int
    title: str
    slug: str
    path: str
    snippets: int
    subsections: list[str]
    tokens_approx: int
    sha256: str


class Manifest(BaseModel):
    """Contents of `manifest.json`: what was packed and the hash of every file."""

    schema_version: int = SCHEMA_VERSION
    parser_version: str = PARSER_VERSION
    source: SourceInfo
    catalog: CatalogInfo
    entries: list[EntryInfo]
    artifacts: dict[str, str]  # path -> sha256
    warnings: list[str]
    tokens_total: int


def compute_sha256(content: bytes | str) -> str:
    """Hex SHA-256 of bytes, or of a string's UTF-8 encoding."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    return hashlib.sha256(data).hexdigest()


def entry_path(slug: str) -> str:
    return f"entries/{slug}.md"


def entry_markdown(entry: Entry, base_url: str | None = None) -> str:
    """Text of an entry's pack file, with links resolved against `base_url`."""
    return rewrite_links(entry.to_markdown(), base_url)


def create_manifest(
    source_name: str,
    source_text: str,
    title: str | None,
    entries: list[Entry],
    artifacts: dict[str, str],
    warnings: list[str],
    base_url: str | None = None,
) -> Manifest:
    """Create a manifest for a catalog pack.

    No timestamps are recorded, so the same document always gives the
    same manifest. Entry hashes and token counts are taken from the same
    text `build_pack` writes to each entry file.

    Args:
        source_name: File name of the source document
        source_text: Source document text
        title: Catalog title
        entries: Entries in ordinal order
        artifacts: Map of artifact paths to SHA256 hashes
        warnings: List of warning messages
        base_url: Base URL the entry files were written with

    Returns:
        Populated Manifest object
    """
    entry_infos = []
    for entry, slug in zip(entries, unique_slugs(entries)):
        markdown = entry_markdown(entry, base_url)
        entry_infos.append(
            EntryInfo(
                ordinal=entry.ordinal,
                title=entry.title,
                slug=slug,
                path=entry_path(slug),
                snippets=len(entry.snippets),
                subsections=entry.subsections,
                tokens_approx=count_tokens(markdown),
                sha256=compute_sha256(markdown),
            )
        )

    return Manifest(
        source=SourceInfo(name=source_name, sha256=compute_sha256(source_text)),
        catalog=CatalogInfo(
            title=title,
            entries_count=len(entries),
            snippets_count=sum(len(e.snippets) for e in entries),
        ),
        entries=entry_infos,
        artifacts=artifacts,
        warnings=warnings,
        tokens_total=sum(info.tokens_approx for info in entry_infos),
    )


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a manifest with sorted keys and a trailing newline.

    Equal manifests always serialize to identical text.
    """
    payload = manifest.model_dump(mode="json")
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def write_manifest(manifest: Manifest, output_dir: Path) -> Path:
    """Write `manifest.json` into a pack directory and return its path."""
    path = output_dir / MANIFEST_NAME
    path.write_text(dump_manifest(manifest), encoding="utf-8")
    return path
