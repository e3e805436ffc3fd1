"""Configuration constants and paths for cppqa."""

import os
from pathlib import Path

# The catalog document bundled with the package
PACKAGE_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_SOURCE = PACKAGE_DATA_DIR / "cpp_interview_questions.md"

# Override via CPPQA_SOURCE to read another catalog document
SOURCE_PATH = Path(os.getenv("CPPQA_SOURCE", str(DEFAULT_SOURCE)))

# Base URL for relative links and image paths.
# Empty means relative URLs are left as they are.
ASSET_BASE_URL = os.getenv("CPPQA_ASSET_BASE_URL", "")

# Parser versioning for determinism tracking
PARSER_VERSION = "0.1.0"
SCHEMA_VERSION = 1

# Token counting model
TIKTOKEN_ENCODING = "cl100k_base"

# Fence info strings that mark C++ source
CPP_LANGUAGE_TAGS = ("cpp", "c++", "cxx", "cc", "hpp", "h++")

# Snippet export file extensions, keyed by fence language
SNIPPET_EXTENSIONS = {
    "cpp": ".cpp",
    "c++": ".cpp",
    "cxx": ".cpp",
    "cc": ".cpp",
    "hpp": ".hpp",
    "h++": ".hpp",
    "c": ".c",
    "h": ".h",
    "cmake": ".cmake",
    "bash": ".sh",
    "sh": ".sh",
    "shell": ".sh",
    "console": ".txt",
    "text": ".txt",
}
DEFAULT_SNIPPET_EXTENSION = ".txt"
