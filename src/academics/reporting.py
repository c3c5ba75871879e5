from __future__ import annotations

from .kinds import EntityKind
from .schemas import StatusResponse
from .store import EntityStore


def status_snapshot(store: EntityStore) -> StatusResponse:
    counts = store.counts()
    submitted = sum(1 for task in store.get(EntityKind.TASK) if task.submitted is True)
    return StatusResponse(
        professors=counts[EntityKind.PROFESSOR],
        students=counts[EntityKind.STUDENT],
        subjects=counts[EntityKind.SUBJECT],
        enrollments=counts[EntityKind.ENROLLMENT],
        tasks=counts[EntityKind.TASK],
        tasks_submitted=submitted,
    )
