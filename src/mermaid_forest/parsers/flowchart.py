"""Flowchart parser: node descriptor resolution and edge record building.

Turns classified diagram lines into EdgeRecords. Display attributes come
from bracket notation (`C[Investment Focus]`) anywhere in the diagram, so
records are built in two passes: collect every line while filling the
AttributeMap, then rebuild each record against the finalized map.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from mermaid_forest.config import TransformConfig
from mermaid_forest.errors import MalformedLineError
from mermaid_forest.ir.tree import DataPair, EdgeRecord
from mermaid_forest.parsers.tokenizer import tokenize
from mermaid_forest.syntax.types import DiagramLine, NodeDescriptor, ParsedLine, TerminalEdge, ValidEdge

logger = logging.getLogger(__name__)

_FORBIDDEN_ID_CHARS = frozenset("[]|")


def parse_node_token(token: str) -> NodeDescriptor:
    """Split `C[Investment Focus]` into identifier `C` and attribute `Investment Focus`.

    Raises:
        ValueError: If the identifier is empty or the bracket is not closed
            at the end of the token.
    """
    identifier, bracket, rest = token.partition("[")
    if not identifier or _FORBIDDEN_ID_CHARS.intersection(identifier):
        raise ValueError(f"invalid node identifier in '{token}'")
    if not bracket:
        return NodeDescriptor(identifier=identifier, attribute=identifier)
    if not rest.endswith("]"):
        raise ValueError(f"node '{identifier}' has text after its closing ']'")
    attribute = rest[:-1].strip()
    if not attribute:
        raise ValueError(f"node '{identifier}' has an empty display name")
    return NodeDescriptor(identifier=identifier, attribute=attribute)


class AttributeMap:
    """Identifier → display attribute for a single parse.

    The first bracketed declaration of an identifier wins. Identifiers
    never declared with brackets map to themselves once finalized.
    """

    def __init__(self) -> None:
        self._declared: dict[str, str] = {}
        self._seen: dict[str, None] = {}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._declared

    def resolve(self, token: str, line: DiagramLine | None = None) -> NodeDescriptor:
        try:
            descriptor = parse_node_token(token)
        except ValueError as e:
            if line is None:
                raise
            raise MalformedLineError(line.number, line.text, str(e)) from e

        self._seen.setdefault(descriptor.identifier)
        if descriptor.is_bracketed:
            if descriptor.identifier not in self:
                self._declared[descriptor.identifier] = descriptor.attribute
            elif self._declared[descriptor.identifier] != descriptor.attribute:
                logger.debug(
                    "ignoring redeclaration %s[%s]; keeping [%s]",
                    descriptor.identifier,
                    descriptor.attribute,
                    self._declared[descriptor.identifier],
                )
        return descriptor

    def finalize(self) -> Mapping[str, str]:
        """Read-only mapping covering every identifier resolved so far."""
        resolved = {identifier: self._declared.get(identifier, identifier) for identifier in self._seen}
        return MappingProxyType(resolved)


class FlowchartParser:
    """Builds EdgeRecords from flowchart diagram content."""

    def __init__(self, config: TransformConfig | None = None) -> None:
        self.config = config or TransformConfig()

    def build_records(self, parsed: list[ParsedLine]) -> list[EdgeRecord]:
        attributes = AttributeMap()
        records: list[EdgeRecord] = []
        for item in parsed:
            if not isinstance(item, (ValidEdge, TerminalEdge)):
                continue
            source = attributes.resolve(item.source, item.line)
            next_identifier: str | None = None
            if isinstance(item, ValidEdge):
                next_identifier = attributes.resolve(item.destination, item.line).identifier
            records.append(
                EdgeRecord(
                    identifier=source.identifier,
                    next_identifier=next_identifier,
                    data=DataPair(attribute=source.attribute, value=item.label),
                    line=item.line.number,
                )
            )
        return finalize_records(records, attributes.finalize())

    def parse(self, content: str, line_offset: int = 0) -> list[EdgeRecord]:
        """Parse diagram content (front matter already removed) into EdgeRecords."""
        parsed = tokenize(content, self.config, line_offset)
        records = self.build_records(parsed)
        logger.debug("parsed %d edge records", len(records))
        return records


def finalize_records(records: list[EdgeRecord], attributes: Mapping[str, str]) -> list[EdgeRecord]:
    """Rebuild each record with the attribute its identifier finally resolved to."""
    out: list[EdgeRecord] = []
    for record in records:
        attribute = attributes.get(record.identifier, record.data.attribute)
        if attribute != record.data.attribute:
            record = replace(record, data=replace(record.data, attribute=attribute))
        out.append(record)
    return out
