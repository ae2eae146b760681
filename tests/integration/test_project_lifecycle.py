"""Integration tests for the create -> read -> export -> delete flow.

These tests wire the real engine, the file-backed document store, the
in-memory project store and the exporter together.  No network access is
required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cursorcraft.generator import DocumentExporter, DocumentKind, ProjectConfig
from cursorcraft.service import ProjectService
from cursorcraft.store import FileDocumentStore, InMemoryProjectStore


@pytest.mark.integration
class TestProjectLifecycle:
    """Projects survive a restart of the document store and export cleanly."""

    @pytest.mark.asyncio
    async def test_create_reopen_export_delete(self, tmp_path: Path):
        projects = InMemoryProjectStore()
        service = ProjectService(projects, FileDocumentStore(tmp_path / "docs"), strict=True)

        config = ProjectConfig(
            name="My Cool App",
            description="Recipe sharing",
            platform="mobile",
            framework="React Native",
            selected_packages=["auth", "zustand"],
        )
        created = await service.create_project(config, user_id="user-1")
        assert len(list((tmp_path / "docs").glob("*/*.md"))) == 5

        # A second service over the same directory sees the stored documents.
        reopened = ProjectService(projects, FileDocumentStore(tmp_path / "docs"))
        code_style = await reopened.get_document(created.record.id, "code-style", "user-1")
        assert "## React/Next.js Specific Guidelines" in code_style

        documents = await reopened.get_documents(created.record.id, "user-1")
        paths = await DocumentExporter().export(documents, config.name, tmp_path / "out")
        readme = (tmp_path / "out" / "my-cool-app" / "README.md").read_text(encoding="utf-8")
        assert "git clone https://github.com/username/my-cool-app.git" in readme
        assert "Designed for mobile development." in readme
        assert len(paths) == len(DocumentKind)

        await reopened.delete_project(created.record.id, "user-1")
        assert list((tmp_path / "docs").glob("*/*.md")) == []
        assert await reopened.list_projects("user-1") == []
