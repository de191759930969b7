"""Syntax types: diagram lines, node descriptors and parse results."""

from mermaid_forest.syntax.types import (
    DiagramLine,
    NodeDescriptor,
    ParsedLine,
    SkipLine,
    TerminalEdge,
    ValidEdge,
)

__all__ = [
    "DiagramLine",
    "NodeDescriptor",
    "ParsedLine",
    "SkipLine",
    "TerminalEdge",
    "ValidEdge",
]
