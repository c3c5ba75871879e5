from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Request, status

from .kinds import EntityKind
from .schemas import (
    Enrollment,
    Professor,
    StatusResponse,
    Student,
    Subject,
    SubmitTaskRequest,
    SubmitTaskResponse,
    Task,
)
from .service import AcademicsService


router = APIRouter(tags=["Academics"])

JsonBody = Optional[Dict[str, Any]]


def get_service(request: Request) -> AcademicsService:
    return request.app.state.academics


def _id_param(description: str) -> Any:
    return Path(..., description=description)


# ---- Professors ----

@router.get("/professors", response_model=List[Professor], summary="List professors")
async def list_professors(service: AcademicsService = Depends(get_service)):
    return await service.list_entities(EntityKind.PROFESSOR)


@router.post(
    "/professors",
    status_code=status.HTTP_201_CREATED,
    response_model=Professor,
    summary="Create a professor",
)
async def create_professor(
    payload: JsonBody = Body(None), service: AcademicsService = Depends(get_service)
):
    return await service.create_entity(EntityKind.PROFESSOR, payload or {})


@router.get("/professors/{professor_id}", response_model=Professor, summary="Get a professor")
async def get_professor(
    professor_id: str = _id_param("Professor id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.get_entity(EntityKind.PROFESSOR, professor_id)


# ---- Students ----

@router.get("/students", response_model=List[Student], summary="List students")
async def list_students(service: AcademicsService = Depends(get_service)):
    return await service.list_entities(EntityKind.STUDENT)


@router.post(
    "/students",
    status_code=status.HTTP_201_CREATED,
    response_model=Student,
    summary="Create a student",
)
async def create_student(
    payload: JsonBody = Body(None), service: AcademicsService = Depends(get_service)
):
    return await service.create_entity(EntityKind.STUDENT, payload or {})


@router.get("/students/{student_id}", response_model=Student, summary="Get a student")
async def get_student(
    student_id: str = _id_param("Student id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.get_entity(EntityKind.STUDENT, student_id)


@router.get(
    "/students/{student_id}/subjects",
    response_model=List[Subject],
    summary="Subjects a student is enrolled in",
)
async def get_student_subjects(
    student_id: str = _id_param("Student id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.subjects_of_student(student_id)


@router.get(
    "/students/{student_id}/tasks",
    response_model=List[Task],
    summary="Tasks assigned to a student",
)
async def get_student_tasks(
    student_id: str = _id_param("Student id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.tasks_of_student(student_id)


# ---- Subjects ----

@router.get("/subjects", response_model=List[Subject], summary="List subjects")
async def list_subjects(service: AcademicsService = Depends(get_service)):
    return await service.list_entities(EntityKind.SUBJECT)


@router.post(
    "/subjects",
    status_code=status.HTTP_201_CREATED,
    response_model=Subject,
    summary="Create a subject",
)
async def create_subject(
    payload: JsonBody = Body(None), service: AcademicsService = Depends(get_service)
):
    return await service.create_entity(EntityKind.SUBJECT, payload or {})


@router.get("/subjects/{subject_id}", response_model=Subject, summary="Get a subject")
async def get_subject(
    subject_id: str = _id_param("Subject id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.get_entity(EntityKind.SUBJECT, subject_id)


@router.get(
    "/subjects/{subject_id}/students",
    response_model=List[Student],
    summary="Students enrolled in a subject",
)
async def get_subject_students(
    subject_id: str = _id_param("Subject id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.students_of_subject(subject_id)


# ---- Enrollments ----

@router.get("/enrollments", response_model=List[Enrollment], summary="List enrollments")
async def list_enrollments(service: AcademicsService = Depends(get_service)):
    return await service.list_entities(EntityKind.ENROLLMENT)


@router.post(
    "/enrollments",
    status_code=status.HTTP_201_CREATED,
    response_model=Enrollment,
    summary="Enroll a student in a subject",
)
async def create_enrollment(
    payload: JsonBody = Body(None), service: AcademicsService = Depends(get_service)
):
    return await service.create_enrollment(payload or {})


@router.get("/enrollments/{enrollment_id}", response_model=Enrollment, summary="Get an enrollment")
async def get_enrollment(
    enrollment_id: str = _id_param("Enrollment id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.get_entity(EntityKind.ENROLLMENT, enrollment_id)


# ---- Tasks ----

@router.get("/tasks", response_model=List[Task], summary="List tasks")
async def list_tasks(service: AcademicsService = Depends(get_service)):
    return await service.list_entities(EntityKind.TASK)


@router.post(
    "/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=Task,
    summary="Assign a task",
)
async def create_task(
    payload: JsonBody = Body(None), service: AcademicsService = Depends(get_service)
):
    return await service.create_task(payload or {})


@router.get("/tasks/{task_id}", response_model=Task, summary="Get a task")
async def get_task(
    task_id: str = _id_param("Task id."),
    service: AcademicsService = Depends(get_service),
):
    return await service.get_entity(EntityKind.TASK, task_id)


@router.put(
    "/tasks/{task_id}/submit",
    response_model=SubmitTaskResponse,
    summary="Submit a task",
)
async def submit_task(
    task_id: str = _id_param("Task id."),
    payload: Optional[SubmitTaskRequest] = Body(None),
    service: AcademicsService = Depends(get_service),
) -> SubmitTaskResponse:
    file = payload.file if payload is not None else None
    task = await service.submit_task(task_id, file)
    return SubmitTaskResponse(message="Task submitted", task=task)


# ---- Status ----

@router.get("/status", response_model=StatusResponse, summary="Collection counts")
async def get_status(service: AcademicsService = Depends(get_service)) -> StatusResponse:
    return await service.status()
