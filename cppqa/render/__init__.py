"""Markdown rendering and link resolution."""

from .entry import render, render_catalog
from .links import Link, iter_links, resolve, rewrite_links, safe_href
from .markdown import markdown_to_html, render_inline
from .tokenize import count_tokens

__all__ = [
    "render",
    "render_catalog",
    "Link",
    "iter_links",
    "resolve",
    "rewrite_links",
    "safe_href",
    "markdown_to_html",
    "render_inline",
    "count_tokens",
]
