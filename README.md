# termtodo

A small todo list for the terminal. Tasks are kept in a CSV file,
`data/todo-list.csv`, under the directory you run the command from.

## Installation

```
pip install .
```

## Usage

The package installs a `tasks` command. Run it with no command to see the
help text.

Add a task:

```
tasks add "Write the weekly report"
```

This prints a table with the new task's ID, its description and how long
ago it was created (for example `a few seconds ago`).

List the tasks that are still open:

```
tasks list
```

List every task, including completed ones, with a `Done` column holding
`true` or `false`:

```
tasks list --all
tasks list -a
```

Mark a task as done by its ID; the updated task is printed:

```
tasks complete 3
```

Remove a task by its ID:

```
tasks delete 3
```

The top-level `-t`/`--toggle` flag is accepted but has no effect.

Errors such as an unknown task ID, an ID that is not a whole number or an
unreadable CSV file are reported as log messages; the command prints
nothing else in that case. When listing, a task whose creation time cannot
be parsed ends the table at that point and an error is logged.

## Storage

The CSV file has the header `ID,Description,CreatedAt,IsComplete`.
Timestamps are stored as `YYYY-MM-DDTHH:MM:SS+HH:MM` in local time. A new
task gets the ID of the last task in the file plus one, or 1 if the list
is empty. On POSIX systems the file is held under an exclusive `flock`
while it is read or written; elsewhere it is not locked.

The file itself is created when missing, but the `data` directory is not:
it must already exist in the directory you run `tasks` from.

Each run writes its log messages both to standard error and to `logs.txt`
in the current directory, replacing that file's previous contents.

## Using it as a library

- `termtodo.models.Task` is a dataclass with `id`, `name`, `created` and
  `completed`.
- `termtodo.models.TaskRepository(path=None)` works on a CSV file
  (`default_csv_path()` when no path is given). `index()` returns all tasks
  in file order, `store(task)` appends a task under a fresh ID and returns
  that ID, `show(task_id)` returns one task or raises
  `TaskNotFoundError`, `update(task)` saves a task's completion state and
  `delete(task)` removes the task with the same ID. Malformed rows raise
  `ValueError`.
- `termtodo.timediff` has `format_timestamp`, `parse_timestamp`,
  `time_diff` and `calculate_time_difference` for the stored timestamp
  form and phrases such as `3 days ago` or `in an hour`.
- `termtodo.cli` has `format_new_task`, `format_updated_task` and
  `format_task_table`, which return the tab-aligned tables the command
  prints, and `main(argv=None)`, which runs the command and returns its
  exit status.

## What it does not do

There is no command to edit a task's description or to mark a completed
task as open again, and no way to choose a different storage file from the
command line.

## Development

```
pip install -e ".[test]"
pytest
```