"""Intermediate representation: edge records, tree nodes and forest assembly."""

from mermaid_forest.ir.forest import ForestAssembler, assemble_forest, identifier_graph, root_indices, validate_records
from mermaid_forest.ir.tree import DataPair, EdgeRecord, TreeNode

__all__ = [
    "DataPair",
    "EdgeRecord",
    "ForestAssembler",
    "TreeNode",
    "assemble_forest",
    "identifier_graph",
    "root_indices",
    "validate_records",
]
