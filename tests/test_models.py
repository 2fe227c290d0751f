import pytest

from termtodo.models import Task, TaskNotFoundError, TaskRepository, default_csv_path

CREATED = "2025-01-02T03:04:05+00:00"


@pytest.fixture
def repo(tmp_path):
    return TaskRepository(tmp_path / "todo-list.csv")


def test_default_csv_path(tmp_path):
    assert default_csv_path(tmp_path) == tmp_path / "data" / "todo-list.csv"


def test_index_of_missing_file_creates_it(repo):
    assert repo.index() == []
    assert repo.path.exists()


def test_store_assigns_sequential_ids(repo):
    assert repo.store(Task(name="one", created=CREATED)) == 1
    assert repo.store(Task(name="two", created=CREATED)) == 2
    assert [task.name for task in repo.index()] == ["one", "two"]


def test_store_writes_header(repo):
    repo.store(Task(name="one", created=CREATED))
    first_line = repo.path.read_text(encoding="utf-8").splitlines()[0]
    assert first_line == "ID,Description,CreatedAt,IsComplete"


def test_show_returns_stored_task(repo):
    task_id = repo.store(Task(name="buy milk, eggs", created=CREATED))
    assert repo.show(task_id) == Task(task_id, "buy milk, eggs", CREATED, False)


def test_show_missing_raises(repo):
    repo.store(Task(name="one", created=CREATED))
    with pytest.raises(TaskNotFoundError, match="could not find task with ID 7"):
        repo.show(7)


def test_update_marks_completed(repo):
    task_id = repo.store(Task(name="one", created=CREATED))
    other_id = repo.store(Task(name="two", created=CREATED))
    task = repo.show(task_id)
    task.completed = True
    repo.update(task)
    assert repo.show(task_id).completed is True
    assert repo.show(other_id).completed is False


def test_delete_removes_only_matching(repo):
    ids = [repo.store(Task(name=name, created=CREATED)) for name in ("a", "b", "c")]
    repo.delete(repo.show(ids[1]))
    assert [task.id for task in repo.index()] == [ids[0], ids[2]]


def test_new_id_follows_last_task(repo):
    for name in ("a", "b", "c"):
        repo.store(Task(name=name, created=CREATED))
    repo.delete(repo.show(2))
    assert repo.store(Task(name="d", created=CREATED)) == 4
    repo.delete(repo.show(4))
    assert repo.store(Task(name="e", created=CREATED)) == 4


def test_index_accepts_alternate_booleans(repo):
    repo.path.write_text(
        "ID,Description,CreatedAt,IsComplete\n1,x," + CREATED + ",1\n2,y," + CREATED + ",F\n",
        encoding="utf-8",
    )
    assert [task.completed for task in repo.index()] == [True, False]


def test_index_rejects_bad_boolean(repo):
    repo.path.write_text(
        "ID,Description,CreatedAt,IsComplete\n1,x," + CREATED + ",maybe\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        repo.index()


def test_index_rejects_bad_id(repo):
    repo.path.write_text(
        "ID,Description,CreatedAt,IsComplete\nabc,x," + CREATED + ",true\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        repo.index()


def test_index_rejects_ragged_rows(repo):
    repo.path.write_text(
        "ID,Description,CreatedAt,IsComplete\n1,x\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        repo.index()


def test_store_does_not_mutate_argument(repo):
    task = Task(name="one", created=CREATED)
    repo.store(task)
    assert task.id == 0