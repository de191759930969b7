"""Exceptions raised while turning a diagram into a forest.

Everything derives from ValueError so callers that already treat parse
failures as ValueError keep working.
"""

from __future__ import annotations


class TransformError(ValueError):
    """Base class for all diagram transformation failures."""


class FrontMatterError(TransformError):
    """The front matter block is not valid YAML."""


class MalformedLineError(TransformError):
    """A diagram line does not have the `source --> |label| [dest]` shape."""

    def __init__(self, line_number: int, text: str, reason: str) -> None:
        self.line_number = line_number
        self.text = text
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {text!r}")


class UnresolvedReferenceError(TransformError):
    """An edge points at an identifier that never starts an edge."""

    def __init__(self, identifier: str, line_number: int) -> None:
        self.identifier = identifier
        self.line_number = line_number
        super().__init__(f"line {line_number}: destination '{identifier}' has no outgoing edges")


class CyclicDiagramError(TransformError):
    """The identifier graph contains a cycle, so trees would never end."""

    def __init__(self, cycle: list[tuple[str, str]]) -> None:
        self.cycle = cycle
        path = " --> ".join([src for src, _ in cycle] + [cycle[0][0]]) if cycle else ""
        super().__init__(f"diagram contains a cycle: {path}")


class ForestTooLargeError(TransformError):
    """Expansion produced more tree nodes than the configured limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"forest exceeds {limit} nodes")


class ForestTooDeepError(TransformError):
    """A path through the diagram is longer than the configured depth limit."""

    def __init__(self, limit: int, line_number: int) -> None:
        self.limit = limit
        self.line_number = line_number
        super().__init__(f"line {line_number}: tree depth exceeds {limit} levels")
