"""Syntax-level data structures for the flowchart subset.

A diagram line is classified into one of three tagged results
(SkipLine, ValidEdge, TerminalEdge) so later stages match on the
variant instead of counting token parts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DiagramLine:
    number: int  # 1-based, counted in the original input
    text: str


@dataclass(frozen=True)
class NodeDescriptor:
    identifier: str
    attribute: str

    @property
    def is_bracketed(self) -> bool:
        return self.identifier != self.attribute


@dataclass(frozen=True)
class SkipLine:
    """Chart declaration or a lone terminal marker."""

    line: DiagramLine


@dataclass(frozen=True)
class ValidEdge:
    """`source --> |label| destination`"""

    line: DiagramLine
    source: str
    label: str
    destination: str


@dataclass(frozen=True)
class TerminalEdge:
    """`source --> |label| <terminal>` or `source --> |label|`"""

    line: DiagramLine
    source: str
    label: str


ParsedLine = Union[SkipLine, ValidEdge, TerminalEdge]
