"""Task records kept in a CSV file."""

from __future__ import annotations

import csv
import logging
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO

try:
    import fcntl
except ImportError:  # pragma: no cover - non-POSIX systems
    fcntl = None

logger = logging.getLogger(__name__)

HEADER = ["ID", "Description", "CreatedAt", "IsComplete"]

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class Task:
    """A single todo item."""

    id: int = 0
    name: str = ""
    created: str = ""
    completed: bool = False


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested ID."""


def default_csv_path(directory: str | os.PathLike[str] | None = None) -> Path:
    """Return the task file location under ``directory`` (the working directory by default)."""
    base = Path(directory) if directory is not None else Path.cwd()
    return base / "data" / "todo-list.csv"


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean {text!r}")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


@contextmanager
def _locked(path: Path) -> Iterator[IO[str]]:
    try:
        descriptor = os.open(path, os.O_RDWR | os.O_CREAT, 0o777)
    except OSError as error:
        raise OSError(f"failed to open file {path} for reading") from error
    with os.fdopen(descriptor, "r+", newline="", encoding="utf-8") as handle:
        if fcntl is not None:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        try:
            yield handle
        finally:
            if fcntl is not None:
                handle.flush()
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


def _parse_records(records: list[list[str]]) -> list[Task]:
    tasks = []
    for record in records[1:]:
        if len(record) < 4:
            raise ValueError(f"record {record!r} has too few fields")
        completed = _parse_bool(record[3])
        task_id = _parse_int(record[0])
        tasks.append(Task(task_id, record[1], record[2], completed))
    return tasks


class TaskRepository:
    """Reads and writes tasks in a CSV file guarded by an exclusive lock."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_csv_path()

    def _read(self) -> list[list[str]]:
        with _locked(self.path) as handle:
            records = [row for row in csv.reader(handle) if row]
        if records:
            width = len(records[0])
            for number, record in enumerate(records, start=1):
                if len(record) != width:
                    raise ValueError(
                        f"record on line {number}: wrong number of fields"
                    )
        return records

    def _write(self, tasks: list[Task]) -> None:
        with _locked(self.path) as handle:
            handle.seek(0)
            handle.truncate()
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(HEADER)
            writer.writerows(
                [str(task.id), task.name, task.created, "true" if task.completed else "false"]
                for task in tasks
            )

    def index(self) -> list[Task]:
        """Return all tasks in file order."""
        try:
            return _parse_records(self._read())
        except (OSError, ValueError):
            logger.error("Failed to read csv file %s", self.path)
            raise

    def store(self, task: Task) -> int:
        """Append ``task`` with a fresh ID and return that ID."""
        tasks = self.index()
        new_id = tasks[-1].id + 1 if tasks else 1
        tasks.append(replace(task, id=new_id))
        self._write(tasks)
        return new_id

    def show(self, task_id: int) -> Task:
        """Return the task with ``task_id``; raise TaskNotFoundError if absent."""
        for task in self.index():
            if task.id == task_id:
                return task
        raise TaskNotFoundError(f"could not find task with ID {task_id}")

    def update(self, task: Task) -> None:
        """Save the completion state of ``task``."""
        tasks = self.index()
        for existing in tasks:
            if existing.id == task.id:
                existing.completed = task.completed
                break
        self._write(tasks)

    def delete(self, task: Task) -> None:
        """Remove the task with the same ID as ``task``."""
        tasks = self.index()
        for position, existing in enumerate(tasks):
            if existing.id == task.id:
                del tasks[position]
                break
        self._write(tasks)