"""CLI entry point for mermaid-forest."""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click

from mermaid_forest.api import transform_to_dicts
from mermaid_forest.config import TransformConfig
from mermaid_forest.errors import TransformError


@contextmanager
def _debug_logging(enabled: bool) -> Iterator[None]:
    """Send the package's debug records to stderr for the duration of the block."""
    if not enabled:
        yield
        return
    package_logger = logging.getLogger("mermaid_forest")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--terminal", "-t", "terminal", type=str, default="Relevant", help="Terminal marker ending a path")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for compact output)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log parsing steps to stderr")
def main(input: str | None, terminal: str, indent: int, output: str | None, verbose: bool) -> None:
    """Mermaid flowchart to attribute/value trees as JSON."""
    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    with _debug_logging(verbose):
        try:
            forest = transform_to_dicts(text, TransformConfig(terminal_marker=terminal))
        except TransformError as e:
            click.echo(f"parse error:\n{e}", err=True)
            sys.exit(1)

    rendered = json.dumps(forest if forest is not None else [], indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
