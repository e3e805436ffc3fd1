"""CLI entry point for cppqa."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import ASSET_BASE_URL, SOURCE_PATH


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cppqa",
        description="C++ interview questions: browse, check, render and export the catalog.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"cppqa {__version__}",
    )
    parser.add_argument(
        "--source",
        "-s",
        type=Path,
        default=SOURCE_PATH,
        help="Catalog document (default: bundled document or $CPPQA_SOURCE)",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List questions in order")

    p_show = sub.add_parser("show", help="Print one entry")
    p_show.add_argument("ordinal", type=int, help="Entry number")
    p_show.add_argument("--html", action="store_true", help="Print rendered HTML instead of Markdown")
    p_show.add_argument("--base-url", default=ASSET_BASE_URL, help="Base URL for relative links")

    sub.add_parser("check", help="Check the document's structure")

    p_snip = sub.add_parser("snippets", help="Print or export code snippets")
    p_snip.add_argument("--ordinal", "-n", type=int, help="Only this entry")
    p_snip.add_argument("--language", "-l", help="Only snippets with this fence language (e.g. cpp)")
    p_snip.add_argument("--out", "-o", type=Path, help="Write snippets as files into this directory")

    p_links = sub.add_parser("links", help="List outbound links and images")
    p_links.add_argument("--images", action="store_true", help="Only images")
    p_links.add_argument("--base-url", default=ASSET_BASE_URL, help="Base URL for relative links")

    p_site = sub.add_parser("site", help="Generate a static HTML site")
    p_site.add_argument("--out", "-o", type=Path, default=Path("./site"), help="Site output directory")
    p_site.add_argument("--base-url", default=ASSET_BASE_URL, help="Base URL for relative links")

    p_pack = sub.add_parser("pack", help="Build an export pack (Markdown, llms.txt, manifest)")
    p_pack.add_argument("--out", "-o", type=Path, default=Path("./pack"), help="Pack output directory")
    p_pack.add_argument("--with-snippets", action="store_true", help="Also export snippet files")
    p_pack.add_argument("--base-url", default=ASSET_BASE_URL, help="Base URL for relative links")
    p_pack.add_argument("--force", action="store_true", help="Rebuild an existing pack")

    args = parser.parse_args(argv)

    commands = {
        "list": _cmd_list,
        "show": _cmd_show,
        "check": _cmd_check,
        "snippets": _cmd_snippets,
        "links": _cmd_links,
        "site": _cmd_site,
        "pack": _cmd_pack,
    }
    handler = commands.get(args.cmd)
    if handler is None:
        parser.print_help()
        return 2

    from .catalog.store import CatalogError

    try:
        return handler(args)
    except (CatalogError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _load_store(args: Any):
    from .catalog.store import EntryStore

    return EntryStore.from_path(args.source)


def _cmd_list(args: Any) -> int:
    store = _load_store(args)
    entries = list(store.list())
    if not entries:
        print("No entries found")
        return 0

    if store.title:
        print(f"{store.title}\n")
    for e in entries:
        count = f"{len(e.snippets)} snippet" + ("" if len(e.snippets) == 1 else "s")
        print(f"  {e.ordinal:>3}. {e.title}  ({count})")
    return 0


def _cmd_show(args: Any) -> int:
    store = _load_store(args)
    entry = store.get(args.ordinal)

    if args.html:
        from .render.entry import render

        print(render(entry, base_url=args.base_url or None))
    else:
        print(entry.to_markdown(), end="")
    return 0


def _cmd_check(args: Any) -> int:
    from .catalog.validate import check_entries

    store = _load_store(args)
    entries = list(store.list())
    issues = check_entries(entries)

    if not issues:
        print(f"✓ {len(entries)} entries, no structural issues")
        return 0

    print(f"Issues ({len(issues)}):")
    for issue in issues:
        print(f"  - {issue}")
    return 1


def _cmd_snippets(args: Any) -> int:
    store = _load_store(args)
    entries = [store.get(args.ordinal)] if args.ordinal is not None else list(store.list())

    if args.out is not None:
        from .pack.build import export_snippets

        written = export_snippets(entries, args.out, language=args.language)
        print(f"✓ {len(written)} snippets written to {args.out}")
        return 0

    from .pack.build import snippet_filename

    shown = 0
    for entry in entries:
        for idx, snippet in enumerate(entry.snippets, start=1):
            if args.language and snippet.language != args.language.lower():
                continue
            if shown:
                print()
            print(f"// {snippet_filename(entry, idx, snippet)} · {entry.title}")
            print(snippet.code)
            shown += 1

    if not shown:
        print("No snippets found")
    return 0


def _cmd_links(args: Any) -> int:
    from .render.links import iter_links, resolve

    store = _load_store(args)
    links = [link for link in iter_links(store.markdown) if not args.images or link.kind == "image"]
    if not links:
        print("No links found")
        return 0

    base_url = args.base_url or None
    for link in links:
        text = link.text or "-"
        print(f"  {link.kind:5} {resolve(link.url, base_url)}  {text}")
    return 0


def _cmd_site(args: Any) -> int:
    from .site.build import build_site

    store = _load_store(args)
    report = build_site(store, args.out, base_url=args.base_url or None)
    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Entries: {report.get('entries')}")
    print(f"  Snippets: {report.get('snippets')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    return 0


def _cmd_pack(args: Any) -> int:
    from .pack.build import build_pack

    store = _load_store(args)
    result = build_pack(
        store,
        args.out,
        with_snippets=bool(args.with_snippets),
        base_url=args.base_url or None,
        force=bool(args.force),
    )

    print("✓ Pack built")
    print(f"  Output: {result.output_dir}")
    print(f"  Entries: {result.entries_count}")
    print(f"  Snippets: {result.snippets_count}")
    print(f"  Tokens: {result.tokens_total:,}")

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):")
        for w in result.warnings[:10]:
            print(f"  - {w}")
        if len(result.warnings) > 10:
            print(f"  ... and {len(result.warnings) - 10} more")

    return 0


if __name__ == "__main__":
    app()
