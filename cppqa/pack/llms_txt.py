"""Generate llms.txt for a catalog pack."""

from pathlib import Path

from ..catalog.models import Entry
from ..catalog.parse import unique_slugs
from .manifest import entry_path


def generate_llms_txt(
    title: str | None,
    entries: list[Entry],
    snippet_files: list[str] | None = None,
) -> str:
    """Generate pack-level llms.txt content.

    Args:
        title: Catalog title
        entries: Entries in ordinal order
        snippet_files: Relative paths of exported snippet files, if any

    Returns:
        llms.txt content as string
    """
    lines = []

    # Header
    lines.append(f"# {title or 'C++ Interview Questions'}")
    lines.append("")
    snippets = sum(len(e.snippets) for e in entries)
    lines.append(f"> {len(entries)} questions and answers about C++, with {snippets} code snippets.")
    lines.append("")

    lines.append("## Catalog")
    lines.append("")
    lines.append("- [Full Catalog](catalog.full.md)")
    lines.append("- [Manifest](manifest.json)")
    lines.append("")

    lines.append("## Questions")
    lines.append("")
    for entry, slug in zip(entries, unique_slugs(entries)):
        lines.append(f"- [{entry.ordinal}. {entry.title}]({entry_path(slug)})")
    lines.append("")

    if snippet_files:
        lines.append("## Optional")
        lines.append("")
        for rel in snippet_files:
            lines.append(f"- [{Path(rel).name}]({rel})")
        lines.append("")

    return "\n".join(lines)


def write_llms_txt(content: str, output_dir: Path) -> Path:
    path = output_dir / "llms.txt"
    path.write_text(content, encoding="utf-8")
    return path
