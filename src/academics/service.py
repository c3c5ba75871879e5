from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Callable, List, Mapping, Optional

from . import lifecycle, queries
from .errors import ConflictError, NotFoundError
from .kinds import EntityKind
from .reporting import status_snapshot
from .schemas import Enrollment, Record, StatusResponse, Student, Subject, Task
from .store import EntityStore, seed_store
from .validation import validate_creation

logger = logging.getLogger(__name__)


class AcademicsService:
    """Single-writer facade over one ``EntityStore``.

    Every operation holds the same lock from validation through the append,
    so ids stay ``len + 1`` and enrollment pairs stay unique.
    """

    def __init__(
        self,
        store: Optional[EntityStore] = None,
        *,
        seed: bool = False,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._store = store if store is not None else EntityStore()
        self._lock = asyncio.Lock()
        self._clock = clock
        if seed:
            seed_store(self._store)

    async def list_entities(self, kind: EntityKind) -> List[Record]:
        async with self._lock:
            return self._store.get(kind)

    async def get_entity(self, kind: EntityKind, entity_id: Any) -> Record:
        async with self._lock:
            record = self._store.find_by_id(kind, entity_id)
            if record is None:
                raise NotFoundError("Not found")
            return record

    async def create_entity(self, kind: EntityKind, fields: Mapping[str, Any]) -> Record:
        if kind is EntityKind.ENROLLMENT:
            return await self.create_enrollment(fields)
        if kind is EntityKind.TASK:
            return await self.create_task(fields)
        async with self._lock:
            cleaned = validate_creation(self._store, kind, fields)
            return self._store.create(kind, cleaned)

    async def create_enrollment(self, fields: Mapping[str, Any]) -> Enrollment:
        async with self._lock:
            cleaned = validate_creation(self._store, EntityKind.ENROLLMENT, fields)
            student_id, subject_id = cleaned["studentId"], cleaned["subjectId"]
            for existing in self._store.get(EntityKind.ENROLLMENT):
                if existing.student_id == student_id and existing.subject_id == subject_id:
                    logger.debug("Duplicate enrollment student=%s subject=%s", student_id, subject_id)
                    raise ConflictError("Already enrolled")
            return self._store.create(
                EntityKind.ENROLLMENT, {"studentId": student_id, "subjectId": subject_id}
            )

    async def create_task(self, fields: Mapping[str, Any]) -> Task:
        async with self._lock:
            return lifecycle.create_task(self._store, fields)

    async def students_of_subject(self, subject_id: Any) -> List[Student]:
        async with self._lock:
            return queries.students_of_subject(self._store, subject_id)

    async def subjects_of_student(self, student_id: Any) -> List[Subject]:
        async with self._lock:
            return queries.subjects_of_student(self._store, student_id)

    async def tasks_of_student(self, student_id: Any) -> List[Task]:
        async with self._lock:
            return queries.tasks_of_student(self._store, student_id)

    async def submit_task(self, task_id: Any, file: Any) -> Task:
        async with self._lock:
            return lifecycle.submit_task(self._store, task_id, file, self._clock())

    async def status(self) -> StatusResponse:
        async with self._lock:
            return status_snapshot(self._store)
