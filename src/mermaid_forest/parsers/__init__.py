"""Parsers for the flowchart subset: tokenizer and edge record builder."""

from __future__ import annotations

from mermaid_forest.config import TransformConfig
from mermaid_forest.ir.tree import EdgeRecord
from mermaid_forest.parsers.flowchart import AttributeMap, FlowchartParser, parse_node_token
from mermaid_forest.parsers.tokenizer import diagram_lines, split_parts, tokenize, tokenize_line


def parse(content: str, config: TransformConfig | None = None, line_offset: int = 0) -> list[EdgeRecord]:
    """Parse diagram content (no front matter) into finalized EdgeRecords."""
    return FlowchartParser(config).parse(content, line_offset)


__all__ = [
    "AttributeMap",
    "FlowchartParser",
    "diagram_lines",
    "parse",
    "parse_node_token",
    "split_parts",
    "tokenize",
    "tokenize_line",
]
