from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as SchemaError

from .errors import ValidationError
from .kinds import EntityKind
from .schemas import Record

logger = logging.getLogger(__name__)


def parse_id(value: Any) -> Optional[int]:
    """Return ``value`` as a canonical integer id, or ``None`` if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class EntityStore:
    """Append-only in-memory collections, one per entity kind.

    The store does no validation of its own; ``validate_creation`` runs first.
    """

    def __init__(self) -> None:
        self._collections: Dict[EntityKind, List[Record]] = {kind: [] for kind in EntityKind}

    def get(self, kind: EntityKind) -> List[Record]:
        return list(self._collections[kind])

    def find_by_id(self, kind: EntityKind, entity_id: Any) -> Optional[Record]:
        wanted = parse_id(entity_id)
        if wanted is None:
            return None
        for record in self._collections[kind]:
            if record.id == wanted:
                return record
        return None

    def exists(self, kind: EntityKind, entity_id: Any) -> bool:
        return self.find_by_id(kind, entity_id) is not None

    def create(self, kind: EntityKind, fields: Mapping[str, Any]) -> Record:
        collection = self._collections[kind]
        data = dict(fields)
        data["id"] = len(collection) + 1
        try:
            record = kind.spec.model.model_validate(data)
        except SchemaError as exc:
            field = ".".join(str(part) for part in exc.errors()[0]["loc"])
            raise ValidationError(f"Invalid field: {field}") from exc
        collection.append(record)
        logger.info("Created %s id=%s", kind.value, record.id)
        return record

    def counts(self) -> Dict[EntityKind, int]:
        return {kind: len(records) for kind, records in self._collections.items()}


SEED_DATA: Dict[EntityKind, List[Dict[str, Any]]] = {
    EntityKind.PROFESSOR: [
        {"name": "Juan Pérez", "email": "juan@mail.com"},
        {"name": "Sebastián Díaz", "email": "seba@mail.com"},
    ],
    EntityKind.STUDENT: [
        {"name": "Pedro Gómez", "email": "pedro@mail.com"},
        {"name": "Roberto Riberos", "email": "rober@mail.com"},
    ],
    EntityKind.SUBJECT: [
        {"name": "Matemática", "professorId": 1},
        {"name": "Lengua", "professorId": 2},
    ],
    EntityKind.ENROLLMENT: [
        {"studentId": 1, "subjectId": 1},
        {"studentId": 2, "subjectId": 2},
    ],
}


def seed_store(store: EntityStore) -> EntityStore:
    # Dict order matters: referenced kinds are loaded before their referrers.
    for kind, rows in SEED_DATA.items():
        for row in rows:
            store.create(kind, row)
    logger.debug("Seed data loaded: %s", {k.value: v for k, v in store.counts().items()})
    return store
