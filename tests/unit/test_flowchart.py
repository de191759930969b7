"""Tests for mermaid_forest.parsers.flowchart — attribute resolution and edge records."""

import logging

import pytest

from mermaid_forest.errors import MalformedLineError
from mermaid_forest.ir.tree import DataPair, EdgeRecord
from mermaid_forest.parsers import parse
from mermaid_forest.parsers.flowchart import AttributeMap, parse_node_token
from mermaid_forest.syntax.types import NodeDescriptor

SAMPLE = """flowchart LR
  A[Entity Type] --> |Firm| Relevant
  A --> |Product/Strategy| C[Investment Focus]
  C --> |Long Only| Relevant
  C --> |Two| Relevant
  Relevant"""


# ─── parse_node_token ────────────────────────────────────────────────────────


def test_bare_token():
    assert parse_node_token("A") == NodeDescriptor(identifier="A", attribute="A")


def test_bracketed_token():
    assert parse_node_token("C[Investment Focus]") == NodeDescriptor(identifier="C", attribute="Investment Focus")


@pytest.mark.parametrize("token", ["[Name]", "A[Name]tail", "A[]", "A|B"])
def test_invalid_tokens(token):
    with pytest.raises(ValueError):
        parse_node_token(token)


# ─── AttributeMap ────────────────────────────────────────────────────────────


def test_first_bracketed_declaration_wins():
    attributes = AttributeMap()
    attributes.resolve("A[Hello]")
    attributes.resolve("A[World]")
    assert attributes.finalize()["A"] == "Hello"


def test_bare_identifiers_are_self_mapped():
    attributes = AttributeMap()
    attributes.resolve("A")
    attributes.resolve("B[Bee]")
    assert dict(attributes.finalize()) == {"A": "A", "B": "Bee"}


def test_late_declaration_overrides_bare_use():
    attributes = AttributeMap()
    first = attributes.resolve("C")
    attributes.resolve("C[Investment Focus]")
    assert first.attribute == "C"
    assert attributes.finalize()["C"] == "Investment Focus"


def test_finalized_map_is_read_only():
    attributes = AttributeMap()
    attributes.resolve("A")
    finalized = attributes.finalize()
    with pytest.raises(TypeError):
        finalized["A"] = "changed"  # type: ignore[index]


def test_contains_tracks_bracketed_only():
    attributes = AttributeMap()
    attributes.resolve("A")
    attributes.resolve("B[Bee]")
    assert "A" not in attributes
    assert "B" in attributes


# ─── FlowchartParser ─────────────────────────────────────────────────────────


def test_sample_records():
    records = parse(SAMPLE)
    assert records == [
        EdgeRecord("A", None, DataPair("Entity Type", "Firm"), line=2),
        EdgeRecord("A", "C", DataPair("Entity Type", "Product/Strategy"), line=3),
        EdgeRecord("C", None, DataPair("Investment Focus", "Long Only"), line=4),
        EdgeRecord("C", None, DataPair("Investment Focus", "Two"), line=5),
    ]


def test_declaration_after_first_use():
    src = "flowchart LR\n  C --> |Long Only| Relevant\n  A[Entity Type] --> |Product| C[Investment Focus]\n"
    records = parse(src)
    assert records[0].identifier == "C"
    assert records[0].data.attribute == "Investment Focus"


def test_destination_attribute_is_not_kept_on_record():
    records = parse("A --> |x| B[Bee]\nB --> |y| Relevant\n")
    assert records[0].data.attribute == "A"
    assert records[0].next_identifier == "B"
    assert records[1].data.attribute == "Bee"


def test_bad_node_token_reports_line():
    with pytest.raises(MalformedLineError) as excinfo:
        parse("flowchart LR\n  A --> |x| Relevant\n  A[X]y --> |z| Relevant\n")
    assert excinfo.value.line_number == 3


def test_empty_content_gives_no_records():
    assert parse("") == []
    assert parse("flowchart LR\n") == []


def test_conflicting_redeclaration_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="mermaid_forest.parsers.flowchart")
    records = parse("A[X] --> |x| Relevant\nA[Y] --> |y| Relevant\n")
    assert [r.data.attribute for r in records] == ["X", "X"]
    assert "ignoring redeclaration A[Y]; keeping [X]" in caplog.text


def test_repeated_identical_declaration_is_not_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="mermaid_forest.parsers.flowchart")
    parse("A[X] --> |x| Relevant\nA[X] --> |y| Relevant\n")
    assert "redeclaration" not in caplog.text
