"""Core pack builder for catalog exports."""

import json
from pathlib import Path

from pydantic import BaseModel

from ..catalog.models import Entry, Snippet
from ..catalog.parse import unique_slugs
from ..catalog.store import CatalogError, EntryStore
from ..catalog.validate import check_entries
from ..config import DEFAULT_SNIPPET_EXTENSION, SNIPPET_EXTENSIONS
from ..render.links import rewrite_links
from .llms_txt import generate_llms_txt, write_llms_txt
from .manifest import (
    MANIFEST_NAME,
    compute_sha256,
    create_manifest,
    entry_markdown,
    entry_path,
    write_manifest,
)

# Directories build_pack creates; removed on rebuild once they are empty.
_PACK_SUBDIRS = ("snippets", "entries")


class PackResult(BaseModel):
    """Result of building a pack."""

    output_dir: Path
    entries_count: int
    snippets_count: int
    tokens_total: int
    warnings: list[str]
    artifacts: list[str]


def snippet_filename(entry: Entry, index: int, snippet: Snippet) -> str:
    """File name for the `index`-th (1-based) snippet of an entry."""
    ext = SNIPPET_EXTENSIONS.get(snippet.language, DEFAULT_SNIPPET_EXTENSION)
    return f"{entry.ordinal:02d}-{index}{ext}"


def export_snippets(entries: list[Entry], dest_dir: Path, language: str | None = None) -> list[Path]:
    """Write each snippet's code to its own file.

    Args:
        entries: Entries to export from
        dest_dir: Directory to write into (created if missing)
        language: Only export snippets with this fence language

    Returns:
        Written paths, in entry then snippet order
    """
    dest_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    used: set[str] = set()
    for entry in entries:
        for idx, snippet in enumerate(entry.snippets, start=1):
            if language and snippet.language != language.lower():
                continue
            name = snippet_filename(entry, idx, snippet)
            stem, ext = name.rsplit(".", 1)
            n = 2
            # Entries sharing an ordinal would otherwise overwrite each other.
            while name in used:
                name = f"{stem}-{n}.{ext}"
                n += 1
            used.add(name)
            path = dest_dir / name
            path.write_text(snippet.code + "\n", encoding="utf-8")
            written.append(path)
    return written


def _read_manifest(manifest_path: Path) -> dict:
    try:
        return json.loads(manifest_path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise CatalogError(f"Cannot read existing manifest {manifest_path}: {e}") from e


def _remove_previous_pack(out_dir: Path, manifest_data: dict) -> None:
    """Delete the files a previous build recorded, and nothing else.

    Paths listed in the old manifest that point outside `out_dir` are
    ignored. Pack subdirectories are removed only when left empty.
    """
    root = out_dir.resolve()
    for rel in manifest_data.get("artifacts", {}):
        path = (out_dir / rel).resolve()
        if not path.is_relative_to(root) or path == root:
            continue
        if path.is_file():
            path.unlink()
    (out_dir / MANIFEST_NAME).unlink()

    for name in _PACK_SUBDIRS:
        subdir = out_dir / name
        if subdir.is_dir() and not any(subdir.iterdir()):
            subdir.rmdir()


def build_pack(
    store: EntryStore,
    out_dir: Path,
    with_snippets: bool = False,
    base_url: str | None = None,
    force: bool = False,
) -> PackResult:
    """Build a deterministic export pack for a catalog.

    The output directory may hold other files. A rebuild with `force`
    deletes only what the existing `manifest.json` lists.

    Args:
        store: Entry store to export
        out_dir: Pack directory
        with_snippets: Also export snippets as individual files
        base_url: Optional base for relative links and images
        force: Rebuild even if a pack already exists

    Returns:
        PackResult with build info
    """
    warnings: list[str] = []
    artifacts: list[str] = []
    out_dir = Path(out_dir)

    # Check if already exists
    manifest_path = out_dir / MANIFEST_NAME
    if manifest_path.exists():
        manifest_data = _read_manifest(manifest_path)
        if not force:
            catalog = manifest_data.get("catalog", {})
            return PackResult(
                output_dir=out_dir,
                entries_count=catalog.get("entries_count", 0),
                snippets_count=catalog.get("snippets_count", 0),
                tokens_total=manifest_data.get("tokens_total", 0),
                warnings=["Pack already exists, use --force to rebuild"],
                artifacts=list(manifest_data.get("artifacts", {}).keys()),
            )
        _remove_previous_pack(out_dir, manifest_data)

    entries_dir = out_dir / "entries"
    entries_dir.mkdir(parents=True, exist_ok=True)

    entries = list(store.list())
    if not entries:
        warnings.append("Catalog has no entries")

    # Structural issues travel with the pack instead of failing it.
    warnings.extend(str(issue) for issue in check_entries(entries))

    # Full catalog
    full_md = rewrite_links(store.markdown, base_url)
    (out_dir / "catalog.full.md").write_text(full_md, encoding="utf-8")
    artifacts.append("catalog.full.md")

    # One file per entry; repeated slugs get a numeric suffix.
    for entry, slug in zip(entries, unique_slugs(entries)):
        rel = entry_path(slug)
        (out_dir / rel).write_text(entry_markdown(entry, base_url), encoding="utf-8")
        artifacts.append(rel)
    # Optional - snippet files
    snippet_files: list[str] = []
    if with_snippets:
        for path in export_snippets(entries, out_dir / "snippets"):
            rel = f"snippets/{path.name}"
            snippet_files.append(rel)
            artifacts.append(rel)

    # llms.txt (needed before hashing artifacts)
    write_llms_txt(generate_llms_txt(store.title, entries, snippet_files), out_dir)
    artifacts.append("llms.txt")

    # Compute hashes for all artifacts (excluding manifest.json itself)
    artifact_hashes: dict[str, str] = {}
    for artifact in sorted(set(artifacts)):
        artifact_path = out_dir / artifact
        if artifact_path.exists():
            artifact_hashes[artifact] = compute_sha256(artifact_path.read_bytes())

    source_name = store.source.name if store.source is not None else "catalog.md"
    manifest = create_manifest(
        source_name=source_name,
        source_text=store.markdown,
        title=store.title,
        entries=entries,
        artifacts=artifact_hashes,
        warnings=warnings,
        base_url=base_url,
    )
    write_manifest(manifest, out_dir)
    artifacts.append(MANIFEST_NAME)

    return PackResult(
        output_dir=out_dir,
        entries_count=len(entries),
        snippets_count=manifest.catalog.snippets_count,
        tokens_total=manifest.tokens_total,
        warnings=warnings,
        artifacts=artifacts,
    )
