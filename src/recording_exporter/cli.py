"""
CLI for inspecting exported recording files.
"""
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from .exceptions import RecordingExportError
from .models import AllRecordingsDocument, NodeDocument, RecordingDocument
from .reader import load_document

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Send log records to the console through rich."""
    level = logging.DEBUG if verbose else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Recording exporter - inspect JSON exports of captured call traces."""
    setup_logging(verbose)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--tree", "show_tree", is_flag=True, help="Print the call tree of each recording")
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Stop expanding the call tree below this depth"
)
def summary(path: Path, show_tree: bool, max_depth: int | None):
    """
    Summarize an exported recording file.

    PATH: A single-recording or all-recordings JSON export

    Examples:

        $ recording-export summary exports/all.json

        $ recording-export summary exports/recording-7.json --tree --max-depth 3
    """
    try:
        document = load_document(path)
    except RecordingExportError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if isinstance(document, AllRecordingsDocument):
        recordings = document.recordings
        console.print(f"[green]✓[/green] {document.count} recording(s) in {path}")
    else:
        recordings = [document]
        console.print(f"[green]✓[/green] Recording {document.id} in {path}")

    console.print(_recordings_table(recordings))

    if show_tree:
        for recording in recordings:
            thread = escape(recording.thread_name or "unknown thread")
            tree = Tree(f"[bold]Recording {recording.id}[/bold] ({thread})")
            _add_node(tree, recording.root, depth=1, max_depth=max_depth)
            console.print(tree)


def _recordings_table(recordings: list[RecordingDocument]) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", justify="right")
    table.add_column("Thread")
    table.add_column("Started")
    table.add_column("Duration (ms)", justify="right")
    table.add_column("Calls", justify="right")

    for recording in recordings:
        table.add_row(
            str(recording.id),
            escape(recording.thread_name or "-"),
            _format_epoch_ms(recording.start_time_epoch_ms),
            str(recording.duration_millis),
            str(recording.total_calls),
        )
    return table


def _format_epoch_ms(epoch_ms: int | None) -> str:
    if epoch_ms is None:
        return "-"
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat(timespec="milliseconds")


def format_call(node: NodeDocument) -> str:
    """One-line label: Owner.method(args) -> result."""
    label = escape(f"{node.owner_class or '?'}.{node.method_name or '?'}({', '.join(node.args)})")
    if node.thrown:
        if node.return_value is not None:
            label += f" [red]threw {escape(node.return_value)}[/red]"
        else:
            label += " [red]threw[/red]"
    elif node.return_value is not None:
        label += f" -> {escape(node.return_value)}"
    return label


def _add_node(parent: Tree, node: NodeDocument, depth: int, max_depth: int | None) -> None:
    branch = parent.add(f"{format_call(node)} [dim]{node.duration_nanos} ns[/dim]", highlight=False)

    if not node.children:
        return
    if max_depth is not None and depth >= max_depth:
        branch.add(f"[dim]... {len(node.children)} more call(s)[/dim]")
        return

    for child in node.children:
        _add_node(branch, child, depth + 1, max_depth)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
