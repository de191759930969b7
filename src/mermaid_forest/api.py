"""Public API: diagram text in, forest out."""

from __future__ import annotations

import logging
from typing import Any

from mermaid_forest.config import TransformConfig
from mermaid_forest.frontmatter import split_front_matter
from mermaid_forest.ir.forest import assemble_forest
from mermaid_forest.ir.tree import TreeNode
from mermaid_forest.parsers import parse

logger = logging.getLogger(__name__)


def transform(diagram_text: str | None, config: TransformConfig | None = None) -> list[TreeNode] | None:
    """Parse a flowchart diagram into a forest of attribute/value trees.

    Args:
        diagram_text: Diagram source, optionally preceded by YAML front matter.
        config: Terminal marker, chart keywords and limits; defaults apply when None.

    Returns:
        The root TreeNodes in diagram order, or None if the input is empty.

    Raises:
        MalformedLineError: If a line does not match the edge syntax.
        UnresolvedReferenceError: If a destination never starts an edge.
        CyclicDiagramError: If the diagram loops back on itself.
        ForestTooLargeError: If expansion exceeds config.max_nodes.
        ForestTooDeepError: If a path is longer than config.max_depth.
    """
    if not diagram_text:
        return None
    config = config or TransformConfig()
    front = split_front_matter(diagram_text)
    if front.raw is not None:
        logger.debug("stripped %d line(s) of front matter", front.line_offset)
    records = parse(front.content, config, front.line_offset)
    return assemble_forest(records, config)


def transform_to_dicts(diagram_text: str | None, config: TransformConfig | None = None) -> list[dict[str, Any]] | None:
    """Like transform, but returns plain dicts ready for json.dumps."""
    forest = transform(diagram_text, config)
    if forest is None:
        return None
    return [tree.to_dict() for tree in forest]
