"""Command line front end for the task API.

Usage:
    taskctl list                    # All tasks
    taskctl list --filter active    # Only open tasks
    taskctl add "buy milk"
    taskctl done 1
    taskctl rename 1 "buy oat milk"
    taskctl rm 1
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import httpx
from rich.console import Console
from rich.table import Table

from taskmanager.client.task_client import TaskClient
from taskmanager.core.config import settings
from taskmanager.core.logging_setup import setup_logging
from taskmanager.models.tasks import TaskFilter

_EMPTY_MESSAGES = {
    TaskFilter.ALL: "No tasks yet. Add one to get started!",
    TaskFilter.ACTIVE: "No active tasks. Great job!",
    TaskFilter.COMPLETED: "No completed tasks yet.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskctl",
        description="Manage tasks on a running Task Manager API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--url",
        default=settings.TASK_API_URL,
        help=f"Tasks collection URL (default: {settings.TASK_API_URL})",
    )
    parser.add_argument(
        "--filter",
        dest="task_filter",
        default=TaskFilter.ALL.value,
        choices=[f.value for f in TaskFilter],
        help="Which tasks to show after the command runs (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="Show tasks")

    add = sub.add_parser("add", help="Create a task")
    add.add_argument("description", nargs="+")

    for name, help_text in (
        ("done", "Mark a task completed"),
        ("undo", "Mark a task active again"),
        ("toggle", "Flip a task's completion flag"),
        ("rm", "Delete a task"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("task_id", type=int)

    rename = sub.add_parser("rename", help="Replace a task's description")
    rename.add_argument("task_id", type=int)
    rename.add_argument("description", nargs="+")

    return parser


def render(client: TaskClient, task_filter: TaskFilter, console: Console) -> None:
    """Print the filtered mirror with per-filter counts."""
    counts = client.counts()
    summary = "  ".join(
        f"[bold]{f.value.capitalize()}[/bold] ({counts[f.value]})"
        if f is task_filter
        else f"{f.value.capitalize()} ({counts[f.value]})"
        for f in TaskFilter
    )
    console.print(summary)

    tasks = client.visible(task_filter)
    if not tasks:
        console.print(f"[dim]{_EMPTY_MESSAGES[task_filter]}[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Done", justify="center")
    table.add_column("Description")
    for task in tasks:
        if task.is_completed:
            table.add_row(str(task.id), "[green]✓[/green]", f"[dim strike]{task.description}[/dim strike]")
        else:
            table.add_row(str(task.id), "", task.description)
    console.print(table)


def run(args: argparse.Namespace, client: TaskClient, console: Console) -> int:
    """Execute one command against ``client``. Returns the exit status."""
    if not client.load():
        console.print(f"[red]{client.error}[/red]")
        return 1

    command = args.command or "list"
    ok = True
    if command == "add":
        text = " ".join(args.description)
        if not text.strip():
            console.print("[yellow]Nothing to add: description is empty[/yellow]")
        else:
            ok = client.add(text) is not None
    elif command == "done":
        ok = client.set_completed(args.task_id, True) is not None
    elif command == "undo":
        ok = client.set_completed(args.task_id, False) is not None
    elif command == "toggle":
        ok = client.toggle(args.task_id) is not None
    elif command == "rename":
        ok = client.rename(args.task_id, " ".join(args.description)) is not None
    elif command == "rm":
        ok = client.delete(args.task_id)

    if not ok:
        console.print(f"[red]Error: {client.error}[/red]")

    render(client, TaskFilter(args.task_filter), console)
    return 0 if ok else 1


def main(argv: Sequence[str] | None = None, http: httpx.Client | None = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    console = Console()
    base_url = args.url if http is None else None
    with TaskClient(http=http, base_url=base_url) as client:
        return run(args, client, console)


if __name__ == "__main__":
    sys.exit(main())
