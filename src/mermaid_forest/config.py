"""Centralized configuration for mermaid-forest."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TransformConfig:
    """Configuration for the diagram-to-forest pipeline."""

    terminal_marker: str = "Relevant"
    chart_keywords: tuple[str, ...] = ("flowchart", "graph")
    arrow: str = "-->"
    max_nodes: int = 100_000
    max_depth: int = 256
