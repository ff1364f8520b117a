"""
TodoTask entity rules: create, update, complete, overdue.
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.src.domain import (
    Category,
    CreateTodoTaskRequest,
    InvalidArgumentError,
    InvalidStateError,
    TodoTask,
    UpdateTodoTaskRequest,
    utc_now,
)


def make_task(**fields) -> TodoTask:
    fields.setdefault("title", "Write report")
    return TodoTask.create(CreateTodoTaskRequest(**fields))


def test_create_with_valid_request():
    due = utc_now() + timedelta(days=2)
    task = make_task(
        title="  Write report  ",
        description="  quarterly numbers ",
        assigned_to=7,
        category_id=3,
        due_date=due,
    )

    assert task.id == 0
    assert task.title == "Write report"
    assert task.description == "quarterly numbers"
    assert task.assigned_to == 7
    assert task.category_id == 3
    assert task.due_date == due
    assert task.is_completed is False
    assert task.completed_at is None
    assert task.updated_at is None
    assert task.created_at.tzinfo is not None


def test_create_defaults_missing_references_to_zero():
    task = make_task()
    assert task.assigned_to == 0
    assert task.category_id == 0
    assert task.description is None


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_create_with_empty_title_raises(title):
    with pytest.raises(InvalidArgumentError) as exc_info:
        make_task(title=title)
    assert exc_info.value.field == "title"
    assert exc_info.value.message == "Title cannot be empty"


def test_title_length_limit_applies_after_trim():
    assert make_task(title="x" * 50).title == "x" * 50
    assert make_task(title="  " + "x" * 50 + "  ").title == "x" * 50

    with pytest.raises(InvalidArgumentError, match="cannot exceed 50"):
        make_task(title="x" * 51)


def test_description_length_limit():
    assert make_task(description="d" * 500).description == "d" * 500
    with pytest.raises(InvalidArgumentError) as exc_info:
        make_task(description="d" * 501)
    assert exc_info.value.field == "description"


def test_naive_datetimes_are_treated_as_utc():
    naive = datetime(2030, 1, 1, 12, 0, 0)
    task = make_task(due_date=naive)
    assert task.due_date == datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_update_only_touches_present_fields():
    task = make_task(description="keep me", assigned_to=4)

    task.update(UpdateTodoTaskRequest(title=" New title "))

    assert task.title == "New title"
    assert task.description == "keep me"
    assert task.assigned_to == 4
    assert task.updated_at is not None


def test_update_explicit_null_clears_description():
    task = make_task(description="old")
    task.update(UpdateTodoTaskRequest(description=None))
    assert task.description is None


def test_update_explicit_null_resets_references():
    task = make_task(assigned_to=5, category_id=2)
    task.update(UpdateTodoTaskRequest(assigned_to=None, category_id=None))
    assert task.assigned_to == 0
    assert task.category_id == 0


def test_update_with_no_fields_still_refreshes_updated_at():
    task = make_task()
    assert task.updated_at is None
    task.update(UpdateTodoTaskRequest())
    assert task.updated_at is not None
    assert task.title == "Write report"


def test_failed_update_leaves_task_untouched():
    task = make_task(description="old")

    with pytest.raises(InvalidArgumentError):
        task.update(UpdateTodoTaskRequest(description="new", title="x" * 51))

    assert task.description == "old"
    assert task.title == "Write report"
    assert task.updated_at is None


def test_update_null_title_is_rejected():
    task = make_task()
    with pytest.raises(InvalidArgumentError, match="Title cannot be empty"):
        task.update(UpdateTodoTaskRequest(title=None))


def test_update_category_drops_stale_loaded_category():
    task = make_task(category_id=1)
    task.category = Category(id=1, name="Work")

    task.update(UpdateTodoTaskRequest(category_id=2))

    assert task.category_id == 2
    assert task.category is None


def test_complete_marks_task_completed():
    task = make_task()
    task.complete()

    assert task.is_completed is True
    assert task.completed_at is not None
    assert task.updated_at == task.completed_at


def test_complete_twice_raises_and_keeps_timestamp():
    task = make_task()
    task.complete()
    first_completed_at = task.completed_at

    with pytest.raises(InvalidStateError, match="already completed"):
        task.complete()
    assert task.completed_at == first_completed_at


def test_is_overdue():
    past = utc_now() - timedelta(days=1)
    future = utc_now() + timedelta(days=1)

    assert make_task(due_date=past).is_overdue is True
    assert make_task(due_date=future).is_overdue is False
    assert make_task().is_overdue is False

    done = make_task(due_date=past)
    done.complete()
    assert done.is_overdue is False


def test_entities_compare_by_type_and_id():
    a = TodoTask(id=1, title="a")
    b = TodoTask(id=1, title="b")
    c = Category(id=1, name="c")

    assert a == b
    assert a != c
    assert len({a, b}) == 1
