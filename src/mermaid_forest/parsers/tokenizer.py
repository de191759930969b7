"""Line tokenizer for the flowchart subset.

Splits the diagram body into lines, each line into token parts, and
classifies every line into a SkipLine, ValidEdge or TerminalEdge.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from mermaid_forest.config import TransformConfig
from mermaid_forest.errors import MalformedLineError
from mermaid_forest.syntax.types import DiagramLine, ParsedLine, SkipLine, TerminalEdge, ValidEdge

logger = logging.getLogger(__name__)

# ─── Lines ───────────────────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"[ \t]+")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


def diagram_lines(content: str, line_offset: int = 0) -> Iterator[DiagramLine]:
    """Yield trimmed, whitespace-normalized, non-blank lines.

    Line numbers are 1-based and shifted by `line_offset` so they point
    into the text the content was cut from.
    """
    for index, raw in enumerate(_NEWLINE_RE.split(content), start=1):
        text = _WHITESPACE_RE.sub(" ", raw).strip()
        if text:
            yield DiagramLine(number=index + line_offset, text=text)


# ─── Parts ───────────────────────────────────────────────────────────────────


def _needs_merge(part: str) -> bool:
    if part.count("[") > part.count("]"):
        return True
    return part.count("|") == 1


def _unglue_arrow(parts: list[str], arrow: str) -> list[str]:
    # `-->|Yes|` is written without a space as often as with one
    out: list[str] = []
    for part in parts:
        if part.startswith(arrow + "|"):
            out.append(arrow)
            out.append(part[len(arrow) :])
        else:
            out.append(part)
    return out


def split_parts(text: str, arrow: str = "-->") -> list[str]:
    """Split a line on spaces, keeping `[...]` names and `|...|` labels whole.

    A part that leaves a bracket or a pipe open is merged with the parts
    after it until it closes. An unclosed part at the end of the line is
    returned as is; the caller decides whether that is an error.
    """
    parts = _unglue_arrow(text.split(" "), arrow)
    merged: list[str] = []
    i = 0
    while i < len(parts):
        current = parts[i]
        i += 1
        while _needs_merge(current) and i < len(parts):
            current = f"{current} {parts[i]}"
            i += 1
        merged.append(current)
    return [p for p in merged if p]


# ─── Classification ─────────────────────────────────────────────────────────


def _check_closed(line: DiagramLine, parts: list[str]) -> None:
    for part in parts:
        if part.count("[") > part.count("]"):
            raise MalformedLineError(line.number, line.text, "unterminated '['")
        if part.count("|") == 1:
            raise MalformedLineError(line.number, line.text, "unterminated '|' label")


def _label_text(line: DiagramLine, part: str) -> str:
    if len(part) < 2 or not (part.startswith("|") and part.endswith("|")):
        raise MalformedLineError(line.number, line.text, "expected a |label| after the arrow")
    label = part[1:-1].strip()
    if not label:
        raise MalformedLineError(line.number, line.text, "empty edge label")
    return label


def tokenize_line(line: DiagramLine, config: TransformConfig | None = None) -> ParsedLine:
    """Classify one diagram line.

    Raises:
        MalformedLineError: If the line is not a chart declaration, a lone
            terminal marker, or `source --> |label| [destination]`.
    """
    config = config or TransformConfig()
    parts = split_parts(line.text, config.arrow)
    if not parts:
        return SkipLine(line)

    if parts[0] in config.chart_keywords:
        return SkipLine(line)
    if len(parts) == 1 and parts[0] == config.terminal_marker:
        return SkipLine(line)

    _check_closed(line, parts)

    if len(parts) < 3:
        raise MalformedLineError(line.number, line.text, "expected 'source --> |label| destination'")
    if len(parts) > 4:
        raise MalformedLineError(line.number, line.text, "unexpected text after the destination")
    source, arrow, label_part = parts[0], parts[1], parts[2]
    if arrow != config.arrow:
        raise MalformedLineError(line.number, line.text, f"expected '{config.arrow}' after '{source}'")
    label = _label_text(line, label_part)

    if len(parts) == 3 or parts[3] == config.terminal_marker:
        return TerminalEdge(line=line, source=source, label=label)
    return ValidEdge(line=line, source=source, label=label, destination=parts[3])


def tokenize(content: str, config: TransformConfig | None = None, line_offset: int = 0) -> list[ParsedLine]:
    """Classify every line of `content`, dropping skipped lines."""
    config = config or TransformConfig()
    results: list[ParsedLine] = []
    for line in diagram_lines(content, line_offset):
        parsed = tokenize_line(line, config)
        if isinstance(parsed, SkipLine):
            logger.debug("skipping line %d: %r", line.number, line.text)
            continue
        results.append(parsed)
    return results
