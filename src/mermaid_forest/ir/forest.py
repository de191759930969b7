"""Forest assembly: EdgeRecords → rooted trees of TreeNodes.

The identifier graph (one networkx edge per `identifier --> next`) is
checked for dangling references and cycles first. Expansion then works
over an arena of build slots addressed by index; the frontier holds slot
indices only, and the finished arena is frozen into TreeNodes bottom-up.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

import networkx as nx

from mermaid_forest.config import TransformConfig
from mermaid_forest.errors import (
    CyclicDiagramError,
    ForestTooDeepError,
    ForestTooLargeError,
    UnresolvedReferenceError,
)
from mermaid_forest.ir.tree import EdgeRecord, TreeNode

logger = logging.getLogger(__name__)


@dataclass
class _Slot:
    record: int  # index into the record list
    depth: int = 1
    children: list[int] = field(default_factory=list)  # slot indices


def identifier_graph(records: list[EdgeRecord]) -> nx.DiGraph:
    """Directed graph of identifiers, one edge per `identifier --> next`."""
    digraph: nx.DiGraph = nx.DiGraph()
    for record in records:
        if record.identifier not in digraph:
            digraph.add_node(record.identifier)
        if record.next_identifier is not None:
            digraph.add_edge(record.identifier, record.next_identifier)
    return digraph


def validate_records(records: list[EdgeRecord]) -> None:
    """Reject dangling destinations and cycles.

    Raises:
        UnresolvedReferenceError: If a destination never starts an edge.
        CyclicDiagramError: If following destinations can loop.
    """
    sources = {record.identifier for record in records}
    for record in records:
        if record.next_identifier is not None and record.next_identifier not in sources:
            raise UnresolvedReferenceError(record.next_identifier, record.line)

    digraph = identifier_graph(records)
    if not nx.is_directed_acyclic_graph(digraph):
        cycle = nx.find_cycle(digraph)
        raise CyclicDiagramError([(src, dst) for src, dst in cycle])


def root_indices(records: list[EdgeRecord]) -> list[int]:
    """Indices of records whose identifier is never another record's destination."""
    referenced = {record.next_identifier for record in records if record.next_identifier is not None}
    return [i for i, record in enumerate(records) if record.identifier not in referenced]


class ForestAssembler:
    """Expands validated EdgeRecords into a forest."""

    def __init__(self, records: list[EdgeRecord], config: TransformConfig | None = None) -> None:
        self.records = records
        self.config = config or TransformConfig()
        self._arena: list[_Slot] = []
        self._by_identifier: dict[str, list[int]] = {}
        for i, record in enumerate(records):
            self._by_identifier.setdefault(record.identifier, []).append(i)

    def _new_slot(self, record: int, depth: int = 1) -> int:
        if len(self._arena) >= self.config.max_nodes:
            raise ForestTooLargeError(self.config.max_nodes)
        if depth > self.config.max_depth:
            raise ForestTooDeepError(self.config.max_depth, self.records[record].line)
        self._arena.append(_Slot(record=record, depth=depth))
        return len(self._arena) - 1

    def _expand(self, roots: list[int]) -> None:
        frontier: deque[int] = deque(slot for slot in roots if not self.records[self._arena[slot].record].is_leaf)
        while frontier:
            parent = frontier.popleft()
            next_identifier = self.records[self._arena[parent].record].next_identifier
            for record in self._by_identifier.get(next_identifier, []):
                child = self._new_slot(record, self._arena[parent].depth + 1)
                self._arena[parent].children.append(child)
                if not self.records[record].is_leaf:
                    frontier.append(child)

    def assemble(self) -> list[TreeNode]:
        validate_records(self.records)
        roots = [self._new_slot(i) for i in root_indices(self.records)]
        logger.debug("found %d root(s) among %d records", len(roots), len(self.records))
        self._expand(roots)
        logger.debug("expanded arena to %d node(s)", len(self._arena))

        # children always sit after their parent in the arena
        frozen: list[TreeNode | None] = [None] * len(self._arena)
        for index in range(len(self._arena) - 1, -1, -1):
            slot = self._arena[index]
            children = tuple(frozen[c] for c in slot.children)
            frozen[index] = TreeNode(data=self.records[slot.record].data, children=children)  # type: ignore[arg-type]
        return [frozen[slot] for slot in roots]  # type: ignore[misc]


def assemble_forest(records: list[EdgeRecord], config: TransformConfig | None = None) -> list[TreeNode]:
    """Build the forest for `records`; see ForestAssembler."""
    return ForestAssembler(records, config).assemble()
