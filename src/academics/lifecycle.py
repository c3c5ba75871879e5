"""
Task lifecycle: a task is created PENDING and moves to SUBMITTED when a file
is handed in. There is no way back to PENDING. Submitting again is allowed
and refreshes the file and submission date.
"""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Any, Mapping

from .errors import NotFoundError, ValidationError
from .kinds import EntityKind
from .schemas import Task
from .store import EntityStore
from .validation import validate_creation

logger = logging.getLogger(__name__)

TASK_FIELDS = ("title", "description", "dueDate", "studentId", "subjectId")


class TaskState(str, Enum):
    PENDING = "pending"
    SUBMITTED = "submitted"


def task_state(task: Task) -> TaskState:
    return TaskState.SUBMITTED if task.submitted else TaskState.PENDING


def create_task(store: EntityStore, payload: Mapping[str, Any]) -> Task:
    cleaned = validate_creation(store, EntityKind.TASK, payload)
    fields = {name: cleaned[name] for name in TASK_FIELDS}
    fields.update(submitted=False, file=None, grade=None)
    return store.create(EntityKind.TASK, fields)


def submit_task(store: EntityStore, task_id: Any, file: Any, today: date) -> Task:
    task = store.find_by_id(EntityKind.TASK, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    if not file:
        raise ValidationError("File is required")

    previous = task_state(task)
    # The stored record is updated in place so every holder sees the change.
    task.submitted = True
    task.file = file
    task.submitted_date = today.isoformat()
    logger.info(
        "Task %s submitted (%s -> %s) file=%s", task.id, previous.value, task_state(task).value, file
    )
    return task
