"""Edge records and tree nodes.

EdgeRecord is the flat, one-per-line form produced by the parser.
TreeNode is the output form; nodes are frozen and never shared between
parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DataPair:
    attribute: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"attribute": self.attribute, "value": self.value}


@dataclass(frozen=True)
class EdgeRecord:
    identifier: str
    next_identifier: str | None
    data: DataPair
    line: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.next_identifier is None


@dataclass(frozen=True)
class TreeNode:
    data: DataPair
    children: tuple[TreeNode, ...] = field(default_factory=tuple)

    @property
    def attribute(self) -> str:
        return self.data.attribute

    @property
    def value(self) -> str:
        return self.data.value

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form, suitable for json.dumps."""
        out: dict[str, Any] = {"data": self.data.to_dict(), "children": []}
        stack: list[tuple[TreeNode, dict[str, Any]]] = [(self, out)]
        while stack:
            node, node_out = stack.pop()
            for child in node.children:
                child_out: dict[str, Any] = {"data": child.data.to_dict(), "children": []}
                node_out["children"].append(child_out)
                stack.append((child, child_out))
        return out

    def walk(self):
        """Yield this node and every descendant, depth first."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
