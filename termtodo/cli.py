"""Command-line interface for the terminal todo list."""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import ExitStack, contextmanager
from datetime import datetime

from termtodo.models import Task, TaskRepository
from termtodo.timediff import calculate_time_difference, format_timestamp

logger = logging.getLogger(__name__)

LOG_FILE = "logs.txt"
_TAB_WIDTH = 8
_INTEGER = re.compile(r"[+-]?\d+")
_STORAGE_ERRORS = (OSError, ValueError, LookupError)
_TIMESTAMP_FAILURE = (
    "Failed to convert tasks 'created' property from string to time: %s"
)


@contextmanager
def configure_logging(path: str | os.PathLike[str] = LOG_FILE) -> Iterator[logging.Handler]:
    """Send the package's log records to stderr and to a fresh file at ``path``.

    The file is truncated on entry; handlers are removed and closed on exit.
    Raises OSError when the file cannot be created.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    stream_handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S")
    package_logger = logging.getLogger("termtodo")
    for handler in (stream_handler, file_handler):
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    try:
        yield file_handler
    finally:
        for handler in (stream_handler, file_handler):
            package_logger.removeHandler(handler)
            handler.flush()
        file_handler.close()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its add, complete, delete and list commands."""
    parser = argparse.ArgumentParser(prog="tasks", description="A todo list for the terminal")
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")

    add = commands.add_parser("add", help="Add a new task to the todo list")
    add.add_argument("description")

    complete = commands.add_parser("complete", help="Set a task as being completed")
    complete.add_argument("task_id")

    delete = commands.add_parser("delete", help="Removes a task for the todo list by it's id")
    delete.add_argument("task_id")

    listing = commands.add_parser("list", help="Lists all of the tasks in your todo list")
    listing.add_argument("-a", "--all", action="store_true", help="Show all tasks")
    return parser


def _tabulate(rows: Sequence[Sequence[str]]) -> str:
    """Align cells the way a tab-padded elastic tabstop writer does.

    Every cell but the last in a row is padded with tabs up to its column
    width rounded up to a multiple of the tab width.
    """
    widths: dict[int, int] = {}
    for row in rows:
        for column, cell in enumerate(row[:-1]):
            widths[column] = max(widths.get(column, 0), len(cell))
    lines = []
    for row in rows:
        parts = []
        for column, cell in enumerate(row[:-1]):
            cell_width = -(-widths[column] // _TAB_WIDTH) * _TAB_WIDTH
            padding = cell_width - len(cell)
            parts.append(cell + "\t" * -(-padding // _TAB_WIDTH))
        if row:
            parts.append(row[-1])
        lines.append("".join(parts) + "\n")
    return "".join(lines)


def _build_table(
    header: list[str],
    tasks: Iterable[Task],
    row: Callable[[Task, str], list[str]],
    now: datetime | None,
) -> str:
    rows = [header]
    for task in tasks:
        try:
            difference = calculate_time_difference(task.created, now)
        except ValueError as error:
            logger.error(_TIMESTAMP_FAILURE, error)
            break
        rows.append(row(task, difference))
    return _tabulate(rows)


def _short_row(task: Task, difference: str) -> list[str]:
    return [str(task.id), task.name, difference]


def _full_row(task: Task, difference: str) -> list[str]:
    return [str(task.id), task.name, difference, str(task.completed).lower()]


def format_new_task(task: Task, now: datetime | None = None) -> str:
    """Render a freshly added task as a small table."""
    return _build_table(["ID", "Task", "Created"], [task], _short_row, now)


def format_updated_task(task: Task, now: datetime | None = None) -> str:
    """Render an updated task, including its completion state."""
    return _build_table(["ID", "Task", "Created", "Done"], [task], _full_row, now)


def format_task_table(
    tasks: Iterable[Task], show_all: bool = False, now: datetime | None = None
) -> str:
    """Render tasks as a table; without ``show_all`` only unfinished tasks appear."""
    if show_all:
        return _build_table(["ID", "Task", "Created", "Done"], tasks, _full_row, now)
    return _build_table(
        ["ID", "Task", "Created"],
        (task for task in tasks if not task.completed),
        _short_row,
        now,
    )


def _parse_task_id(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"parsing {text!r}: invalid syntax")
    return int(text)


def _add(args: argparse.Namespace, repository: TaskRepository) -> None:
    payload = Task(
        name=args.description,
        created=format_timestamp(datetime.now().astimezone()),
        completed=False,
    )
    try:
        task_id = repository.store(payload)
    except _STORAGE_ERRORS as error:
        logger.error("Failed to save new task: %s", error)
        return
    try:
        task = repository.show(task_id)
    except _STORAGE_ERRORS as error:
        logger.error("Failed to get new task: %s", error)
        return
    sys.stdout.write(format_new_task(task))


def _find(args: argparse.Namespace, repository: TaskRepository) -> Task | None:
    try:
        task_id = _parse_task_id(args.task_id)
    except ValueError as error:
        logger.error("Could not convert task ID to int: %s", error)
        return None
    try:
        return repository.show(task_id)
    except _STORAGE_ERRORS as error:
        logger.error("Could not find task: %s", error)
        return None


def _complete(args: argparse.Namespace, repository: TaskRepository) -> None:
    task = _find(args, repository)
    if task is None:
        return
    task.completed = True
    try:
        repository.update(task)
    except _STORAGE_ERRORS as error:
        logger.error("Failed to update task: %s", error)
        return
    sys.stdout.write(format_updated_task(task))


def _delete(args: argparse.Namespace, repository: TaskRepository) -> None:
    task = _find(args, repository)
    if task is None:
        return
    try:
        repository.delete(task)
    except _STORAGE_ERRORS as error:
        logger.error("Could not delete task: %s", error)


def _list(args: argparse.Namespace, repository: TaskRepository) -> None:
    try:
        tasks = repository.index()
    except _STORAGE_ERRORS as error:
        logger.error("Failed to set tasks: %s", error)
        return
    sys.stdout.write(format_task_table(tasks, show_all=args.all))


_COMMANDS: dict[str, Callable[[argparse.Namespace, TaskRepository], None]] = {
    "add": _add,
    "complete": _complete,
    "delete": _delete,
    "list": _list,
}


def _run(argv: Sequence[str] | None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exit_request:
        return 0 if exit_request.code in (0, None) else 1
    if args.command is None:
        parser.print_help()
        return 0
    _COMMANDS[args.command](args, TaskRepository())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``tasks`` command and return its exit status."""
    with ExitStack() as stack:
        try:
            stack.enter_context(configure_logging(LOG_FILE))
        except OSError as error:
            print(error, file=sys.stderr)
            return 1
        return _run(argv)


if __name__ == "__main__":
    sys.exit(main())