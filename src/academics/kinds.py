from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Type

from .schemas import Enrollment, Professor, Record, Student, Subject, Task


class EntityKind(str, Enum):
    PROFESSOR = "professors"
    STUDENT = "students"
    SUBJECT = "subjects"
    ENROLLMENT = "enrollments"
    TASK = "tasks"

    @property
    def spec(self) -> "KindSpec":
        return KIND_SPECS[self]


@dataclass(frozen=True)
class Reference:
    """A foreign key: ``field`` on the new record must name an existing ``target``."""

    field: str
    target: EntityKind
    label: str


@dataclass(frozen=True)
class KindSpec:
    model: Type[Record]
    required: Tuple[str, ...]
    references: Tuple[Reference, ...] = ()


_STUDENT_REF = Reference("studentId", EntityKind.STUDENT, "Student")
_SUBJECT_REF = Reference("subjectId", EntityKind.SUBJECT, "Subject")

KIND_SPECS: Dict[EntityKind, KindSpec] = {
    EntityKind.PROFESSOR: KindSpec(Professor, ("name", "email")),
    EntityKind.STUDENT: KindSpec(Student, ("name", "email")),
    EntityKind.SUBJECT: KindSpec(
        Subject,
        ("name", "professorId"),
        (Reference("professorId", EntityKind.PROFESSOR, "Professor"),),
    ),
    EntityKind.ENROLLMENT: KindSpec(
        Enrollment,
        ("studentId", "subjectId"),
        (_STUDENT_REF, _SUBJECT_REF),
    ),
    EntityKind.TASK: KindSpec(
        Task,
        ("title", "description", "dueDate", "studentId", "subjectId"),
        (_STUDENT_REF, _SUBJECT_REF),
    ),
}
