"""Export packs: per-entry Markdown, snippet files, llms.txt and manifest."""

from .build import PackResult, build_pack, export_snippets, snippet_filename
from .llms_txt import generate_llms_txt
from .manifest import CatalogInfo, EntryInfo, Manifest, SourceInfo, dump_manifest

__all__ = [
    "build_pack",
    "export_snippets",
    "snippet_filename",
    "PackResult",
    "Manifest",
    "EntryInfo",
    "SourceInfo",
    "CatalogInfo",
    "generate_llms_txt",
    "dump_manifest",
]
