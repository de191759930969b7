"""Front matter handling.

Mermaid accepts Jekyll-style YAML front matter ahead of the diagram:

    ---
    title: My chart
    notes: |
      spans
      several lines
    ---
    flowchart LR
      ...

Only the diagram body matters for building trees; the block is split off
here and loaded lazily if a caller asks for it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from mermaid_forest.errors import FrontMatterError

_FRONT_RE = re.compile(
    r"\A\s*---[ \t]*(?:\r\n|\n|\r)(?:(?P<raw>.*?)(?:\r\n|\n|\r))??---[ \t]*(?:\r\n|\n|\r|\Z)",
    re.S,
)
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


@dataclass(frozen=True)
class FrontMatter:
    raw: str | None
    content: str
    line_offset: int = 0

    @property
    def metadata(self) -> dict[str, Any]:
        """The front matter parsed as YAML ({} when there is none)."""
        if not self.raw:
            return {}
        try:
            loaded = yaml.safe_load(self.raw)
        except yaml.YAMLError as e:
            raise FrontMatterError(f"invalid front matter: {e}") from e
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise FrontMatterError("front matter must be a mapping of key: value pairs")
        return loaded


def split_front_matter(text: str) -> FrontMatter:
    """Split a leading `---` block from the diagram body."""
    m = _FRONT_RE.match(text)
    if m is None:
        return FrontMatter(raw=None, content=text)
    consumed = text[: m.end()]
    offset = len(_NEWLINE_RE.findall(consumed))
    return FrontMatter(raw=m.group("raw") or "", content=text[m.end() :], line_offset=offset)


def strip_front_matter(text: str) -> str:
    """Return the diagram body with any front matter removed."""
    return split_front_matter(text).content
