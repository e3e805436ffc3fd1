"""Entry and snippet models for the question catalog."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from ..config import CPP_LANGUAGE_TAGS
from .fences import code_line_mask

SUBSECTION_PATTERN = re.compile(r"^###[ \t]+(?P<title>.+?)(?:[ \t]+#+)?[ \t]*$")


class Snippet(BaseModel):
    """An illustrative code block inside an entry. Never executed or checked."""

    language: str = ""
    info: str = ""
    fence: str = "```"
    indent: str = ""
    closing: str = "```"
    lines: list[str] = Field(default_factory=list)
    line_start: int = 0

    @property
    def code(self) -> str:
        """Block text with the fence indentation removed."""
        width = len(self.indent)
        out = []
        for line in self.lines:
            if width and line[:width].strip() == "":
                line = line[width:]
            out.append(line)
        return "\n".join(out)

    @property
    def is_cpp(self) -> bool:
        return self.language in CPP_LANGUAGE_TAGS

    def to_markdown(self) -> str:
        """Re-emit the fenced block exactly as it appeared in the body."""
        return "\n".join([f"{self.indent}{self.fence}{self.info}", *self.lines, self.closing])


class Entry(BaseModel):
    """One question and its answer."""

    ordinal: int
    title: str
    body: str
    snippets: list[Snippet] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @property
    def slug(self) -> str:
        from .parse import slugify

        slug = slugify(self.title)
        return f"{self.ordinal:02d}-{slug}" if slug else f"{self.ordinal:02d}"

    @property
    def subsections(self) -> list[str]:
        """Level-3 headings of the body, skipping fenced code."""
        lines = self.body.split("\n")
        mask = code_line_mask(lines)
        titles = []
        for line, in_code in zip(lines, mask):
            if in_code:
                continue
            m = SUBSECTION_PATTERN.match(line)
            if m:
                titles.append(m.group("title"))
        return titles

    def to_markdown(self) -> str:
        return f"## {self.ordinal}. {self.title}\n\n{self.body}\n"


class Catalog(BaseModel):
    """A whole document: optional title, preamble and the entries."""

    title: str | None = None
    preamble: str = ""
    entries: list[Entry] = Field(default_factory=list)
