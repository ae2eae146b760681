"""Project service: persistence plus document generation.

Creating a project renders its documents, writes the project row, and only
then stores the documents under the project's document keys, namespaced by
the new project id so that equally named projects never share documents.
Reading a document falls back to regenerating the whole set from the stored
row when the document store has no copy (e.g. it was cleared or lives on
another machine).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cursorcraft.errors import ProjectNotFoundError, ProjectValidationError
from cursorcraft.generator.engine import DocumentEngine
from cursorcraft.generator.models import DocumentKind, GeneratedDocumentSet, ProjectConfig
from cursorcraft.store.base import ProjectRecord, ProjectStore
from cursorcraft.store.documents import DocumentStore


def validate_config(config: ProjectConfig, strict: bool = True) -> None:
    """Reject a blank project name when *strict* is set.

    Raises:
        ProjectValidationError: If the name is empty or whitespace.
    """
    if strict and not config.name.strip():
        raise ProjectValidationError("Please enter a project name")


class CreatedProject(BaseModel):
    """Result of :meth:`ProjectService.create_project`."""

    record: ProjectRecord
    documents: GeneratedDocumentSet
    document_keys: list[str] = Field(default_factory=list)


class ProjectService:
    """Creates, reads, updates and deletes projects and their documents.

    Args:
        store: Project row persistence (Supabase or in-memory).
        documents: Storage for the generated documents.
        engine: Document engine; a default one is created when omitted.
        strict: Reject blank project names with
            :class:`~cursorcraft.errors.ProjectValidationError`.  Off by
            default, in which case blank names render as blank titles.
    """

    def __init__(
        self,
        store: ProjectStore,
        documents: DocumentStore,
        engine: DocumentEngine | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self.store = store
        self.documents = documents
        self.engine = engine or DocumentEngine()
        self.strict = strict

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, config: ProjectConfig) -> None:
        """Apply strict-mode checks; a no-op when ``strict`` is off."""
        validate_config(config, strict=self.strict)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def create_project(
        self, config: ProjectConfig, user_id: str | None = None
    ) -> CreatedProject:
        """Render the documents, persist the project row, then store the documents."""
        self.validate(config)
        documents = self.engine.generate_all(config)
        record = await self.store.create(ProjectRecord.from_config(config, user_id))
        keys = self.documents.save_set(config.name, documents, namespace=record.id)
        return CreatedProject(record=record, documents=documents, document_keys=keys)

    async def get_project(self, project_id: str, user_id: str | None = None) -> ProjectRecord:
        record = await self.store.get(project_id, user_id)
        if record is None:
            raise ProjectNotFoundError(project_id)
        return record

    async def list_projects(self, user_id: str | None = None) -> list[ProjectRecord]:
        return await self.store.list(user_id)

    async def update_project(
        self,
        project_id: str,
        changes: dict[str, Any],
        user_id: str | None = None,
    ) -> ProjectRecord:
        """Update the row and re-render its documents from the new values.

        Documents stored under the old project name are removed, so a rename
        does not leave stale keys behind.
        """
        current = await self.get_project(project_id, user_id)
        if "name" in changes:
            self.validate(ProjectConfig(name=changes["name"] or ""))
        updated = await self.store.update(project_id, user_id, changes)
        self.documents.clear(current.name, namespace=project_id)
        self.documents.save_set(
            updated.name, self.engine.generate_all(updated.to_config()), namespace=project_id
        )
        return updated

    async def delete_project(self, project_id: str, user_id: str | None = None) -> None:
        record = await self.get_project(project_id, user_id)
        await self.store.delete(project_id, user_id)
        self.documents.clear(record.name, namespace=project_id)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    async def get_document(
        self,
        project_id: str,
        kind: DocumentKind | str,
        user_id: str | None = None,
    ) -> str:
        """Return one document, regenerating the set if it is not stored.

        Raises:
            InvalidDocumentTypeError: If *kind* is not a known document slug.
            ProjectNotFoundError: If the project does not exist for *user_id*.
        """
        if not isinstance(kind, DocumentKind):
            kind = DocumentKind.from_slug(kind)
        record = await self.get_project(project_id, user_id)

        stored = self.documents.get(record.name, kind, namespace=record.id)
        if stored is not None:
            return stored

        documents = self.engine.generate_all(record.to_config())
        self.documents.save_set(record.name, documents, namespace=record.id)
        return documents.get(kind)

    async def get_documents(
        self, project_id: str, user_id: str | None = None
    ) -> GeneratedDocumentSet:
        """Return the full document set of a project, regenerating missing ones."""
        record = await self.get_project(project_id, user_id)
        if not self.documents.has_all(record.name, namespace=record.id):
            documents = self.engine.generate_all(record.to_config())
            self.documents.save_set(record.name, documents, namespace=record.id)
            return documents
        return GeneratedDocumentSet(
            **{
                kind.field_name: self.documents.get(record.name, kind, namespace=record.id)
                for kind in DocumentKind
            }
        )
