from __future__ import annotations

from typing import Any, Dict, Mapping

from .errors import MissingReferenceError, ValidationError
from .kinds import EntityKind
from .store import EntityStore, parse_id


def check_required(kind: EntityKind, payload: Mapping[str, Any]) -> None:
    """Raise for the first required field that is absent or empty."""
    for field in kind.spec.required:
        if not payload.get(field):
            raise ValidationError(f"Missing field: {field}")


def check_references(store: EntityStore, kind: EntityKind, payload: Mapping[str, Any]) -> None:
    for ref in kind.spec.references:
        if not store.exists(ref.target, payload.get(ref.field)):
            raise MissingReferenceError(f"{ref.label} does not exist")


def validate_creation(store: EntityStore, kind: EntityKind, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Gate a creation: required fields first, then foreign keys.

    Returns a copy of ``payload`` with foreign keys normalized to integers so
    stored records compare ids by value regardless of how they were sent.
    """
    check_required(kind, payload)
    check_references(store, kind, payload)
    cleaned = dict(payload)
    for ref in kind.spec.references:
        cleaned[ref.field] = parse_id(payload[ref.field])
    return cleaned
