"""In-memory project store for development, the CLI, and tests."""

from __future__ import annotations

import uuid
from typing import Any

from cursorcraft.errors import ProjectNotFoundError, StoreError

from .base import UPDATABLE_FIELDS, ProjectRecord


class InMemoryProjectStore:
    """Dict-backed :class:`~cursorcraft.store.base.ProjectStore`.

    Rows are copied on the way in and out, so callers never hold a reference
    to stored state.
    """

    def __init__(self) -> None:
        self._rows: dict[str, ProjectRecord] = {}

    async def create(self, record: ProjectRecord) -> ProjectRecord:
        project_id = record.id or uuid.uuid4().hex
        if project_id in self._rows:
            raise StoreError(f"Project already exists: {project_id}")
        stored = record.model_copy(update={"id": project_id}, deep=True)
        self._rows[project_id] = stored
        return stored.model_copy(deep=True)

    async def get(self, project_id: str, user_id: str | None) -> ProjectRecord | None:
        row = self._rows.get(project_id)
        if row is None or row.user_id != user_id:
            return None
        return row.model_copy(deep=True)

    async def list(self, user_id: str | None) -> list[ProjectRecord]:
        rows = [r for r in self._rows.values() if r.user_id == user_id]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [r.model_copy(deep=True) for r in rows]

    async def update(
        self, project_id: str, user_id: str | None, changes: dict[str, Any]
    ) -> ProjectRecord:
        row = await self.get(project_id, user_id)
        if row is None:
            raise ProjectNotFoundError(project_id)
        allowed = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        updated = ProjectRecord.model_validate({**row.model_dump(), **allowed})
        self._rows[project_id] = updated
        return updated.model_copy(deep=True)

    async def delete(self, project_id: str, user_id: str | None) -> None:
        if await self.get(project_id, user_id) is not None:
            del self._rows[project_id]

    def __len__(self) -> int:
        return len(self._rows)
