"""Main CLI interface for copymig."""

import json
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from copymig.core.history import GitHistory, HistoryError
from copymig.core.script_record import to_json_record
from copymig.models.change import Change

console = Console()

repo_option = click.option(
    "--repo",
    type=click.Path(file_okay=False),
    default=".",
    envvar="COPYMIG_REPO",
    show_default=True,
    help="Path to the git repository",
)
files_option = click.option(
    "--files", is_flag=True, help="Compute the files touched by each change"
)


def _setup_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("copymig")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )


def _files_summary(change: Change) -> str:
    if change.change_files is None:
        return "?"
    return str(len(change.change_files))


@click.group()
@click.version_option(package_name="copymig")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """copymig - inspect changes as a migration sees them."""
    _setup_logging(verbose)


@main.command()
@repo_option
@click.option("--max-count", "-n", type=int, default=10, show_default=True)
@files_option
def log(repo: str, max_count: Optional[int], files: bool):
    """List recent changes."""
    history = GitHistory(Path(repo))
    try:
        changes = list(history.changes(max_count=max_count, with_files=files))
    except HistoryError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise click.Abort() from e

    if not changes:
        console.print("[yellow]No changes found[/yellow]")
        return

    table = Table(title=f"Changes in {escape(str(Path(repo).resolve()))}")
    table.add_column("Ref", style="cyan")
    table.add_column("Author")
    table.add_column("Date", style="dim")
    table.add_column("Message")
    table.add_column("Labels", justify="right")
    table.add_column("Files", justify="right")

    for change in changes:
        date = change.date_time.strftime("%Y-%m-%d") if change.date_time else ""
        table.add_row(
            change.revision.short(),
            escape(change.author.name),
            date,
            escape(change.first_line_message),
            str(len(change.labels)),
            _files_summary(change),
        )

    console.print(table)


@main.command()
@click.argument("ref")
@repo_option
@files_option
@click.option("--json", "as_json", is_flag=True, help="Print the change as JSON")
def show(ref: str, repo: str, files: bool, as_json: bool):
    """Show a single change."""
    history = GitHistory(Path(repo))
    try:
        change = history.get(ref, with_files=files)
    except HistoryError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise click.Abort() from e

    if as_json:
        click.echo(json.dumps(to_json_record(change), indent=2))
        return

    lines = [
        f"[bold]Ref:[/bold] {change.reference_string}",
        f"[bold]Author:[/bold] {escape(str(change.author))}",
        f"[bold]Date:[/bold] {change.date_time.isoformat() if change.date_time else ''}",
    ]
    for name, value in change.labels.items():
        lines.append(f"[bold]{escape(name)}:[/bold] {escape(value)}")
    if change.change_files is not None:
        lines.append(f"[bold]Files:[/bold] {len(change.change_files)}")
        lines.extend(f"  {escape(path)}" for path in sorted(change.change_files))

    console.print(Panel("\n".join(lines), title=escape(change.first_line_message)))
    console.print(change.message, markup=False, highlight=False)


if __name__ == "__main__":
    main()
