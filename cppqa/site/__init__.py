"""Static HTML site generation."""

from .build import build_site

__all__ = ["build_site"]
