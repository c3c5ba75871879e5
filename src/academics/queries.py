from __future__ import annotations

from typing import Any, List

from .errors import NotFoundError
from .kinds import EntityKind
from .schemas import Enrollment, Student, Subject, Task
from .store import EntityStore, parse_id


def _require(store: EntityStore, kind: EntityKind, entity_id: Any, message: str) -> int:
    if not store.exists(kind, entity_id):
        raise NotFoundError(message)
    return parse_id(entity_id)


def students_of_subject(store: EntityStore, subject_id: Any) -> List[Student]:
    wanted = _require(store, EntityKind.SUBJECT, subject_id, "Subject not found")
    enrollments: List[Enrollment] = store.get(EntityKind.ENROLLMENT)
    students = (
        store.find_by_id(EntityKind.STUDENT, e.student_id)
        for e in enrollments
        if e.subject_id == wanted
    )
    return [s for s in students if s is not None]


def subjects_of_student(store: EntityStore, student_id: Any) -> List[Subject]:
    wanted = _require(store, EntityKind.STUDENT, student_id, "Student not found")
    enrollments: List[Enrollment] = store.get(EntityKind.ENROLLMENT)
    subjects = (
        store.find_by_id(EntityKind.SUBJECT, e.subject_id)
        for e in enrollments
        if e.student_id == wanted
    )
    return [s for s in subjects if s is not None]


def tasks_of_student(store: EntityStore, student_id: Any) -> List[Task]:
    wanted = _require(store, EntityKind.STUDENT, student_id, "Student not found")
    return [t for t in store.get(EntityKind.TASK) if t.student_id == wanted]
