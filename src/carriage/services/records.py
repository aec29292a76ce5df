"""Helpers shared by the plain CRUD services."""

import uuid
from typing import Any, TypeVar

from carriage.db import TableRepository
from carriage.models.base import CarriageModel

M = TypeVar("M", bound=CarriageModel)


def new_id() -> str:
    return str(uuid.uuid4())


def create_record(repository: TableRepository[M], payload: CarriageModel, **overrides: Any) -> M:
    """Persist ``payload`` under a freshly generated id."""
    record = repository.model.model_validate({**payload.model_dump(), **overrides, "id": new_id()})
    return repository.create(record)
