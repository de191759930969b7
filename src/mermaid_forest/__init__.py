"""mermaid-forest: Mermaid flowchart edges to attribute/value trees."""

from mermaid_forest.api import transform, transform_to_dicts
from mermaid_forest.config import TransformConfig
from mermaid_forest.errors import (
    CyclicDiagramError,
    ForestTooDeepError,
    ForestTooLargeError,
    FrontMatterError,
    MalformedLineError,
    TransformError,
    UnresolvedReferenceError,
)
from mermaid_forest.frontmatter import split_front_matter, strip_front_matter
from mermaid_forest.ir.tree import DataPair, TreeNode

__all__ = [
    "CyclicDiagramError",
    "DataPair",
    "ForestTooDeepError",
    "ForestTooLargeError",
    "FrontMatterError",
    "MalformedLineError",
    "TransformConfig",
    "TransformError",
    "TreeNode",
    "UnresolvedReferenceError",
    "split_front_matter",
    "strip_front_matter",
    "transform",
    "transform_to_dicts",
]
