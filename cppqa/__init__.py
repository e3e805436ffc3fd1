"""cppqa: a C++ interview question catalog, with a renderer, site builder and export pack."""

__version__ = "0.1.0"
