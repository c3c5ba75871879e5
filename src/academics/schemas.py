from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class Record(BaseModel):
    """Base for stored records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(..., ge=1)


class Professor(Record):
    # Submitted fields are stored verbatim; only foreign keys are normalized.
    model_config = ConfigDict(extra="allow")

    name: Any
    email: Any


class Student(Record):
    model_config = ConfigDict(extra="allow")

    name: Any
    email: Any


class Subject(Record):
    model_config = ConfigDict(extra="allow")

    name: Any
    professor_id: int = Field(..., alias="professorId")


class Enrollment(Record):
    student_id: int = Field(..., alias="studentId")
    subject_id: int = Field(..., alias="subjectId")


class Task(Record):
    title: Any
    description: Any
    due_date: Any = Field(..., alias="dueDate")
    student_id: int = Field(..., alias="studentId")
    subject_id: int = Field(..., alias="subjectId")
    submitted: bool = False
    file: Optional[Any] = None
    grade: Optional[Any] = None
    submitted_date: Optional[str] = Field(None, alias="submittedDate")

    @model_serializer(mode="wrap")
    def omit_unset_submitted_date(self, handler) -> Dict[str, Any]:
        data = handler(self)
        # submittedDate only appears once the task has been handed in.
        for key in ("submittedDate", "submitted_date"):
            if key in data and data[key] is None:
                del data[key]
        return data


class SubmitTaskRequest(BaseModel):
    file: Optional[Any] = None


class SubmitTaskResponse(BaseModel):
    message: str
    task: Task


class StatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    professors: int
    students: int
    subjects: int
    enrollments: int
    tasks: int
    tasks_submitted: int = Field(..., alias="tasksSubmitted")
