"""Unit tests for ProjectService (cursorcraft.service).

Tests cover:
- validate_config in strict and permissive mode
- create_project (row stored before the documents, keys returned,
  equally named projects keep separate documents)
- get_project / list_projects owner scoping
- get_document (stored copy, regeneration fallback, bad slugs)
- get_documents
- update_project (rename moves documents, strict name check)
- delete_project (row and documents removed)
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from cursorcraft.errors import (
    InvalidDocumentTypeError,
    ProjectNotFoundError,
    ProjectValidationError,
    StoreError,
)
from cursorcraft.generator import DocumentKind, ProjectConfig, generate_all_document_set
from cursorcraft.service import ProjectService, validate_config


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidateConfig:
    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected_in_strict_mode(self, name):
        with pytest.raises(ProjectValidationError, match="Please enter a project name"):
            validate_config(ProjectConfig(name=name))

    @pytest.mark.unit
    def test_blank_name_allowed_when_permissive(self):
        validate_config(ProjectConfig(name=""), strict=False)

    @pytest.mark.unit
    def test_name_accepted(self, acme_config):
        validate_config(acme_config)


# ---------------------------------------------------------------------------
# Create / read
# ---------------------------------------------------------------------------


class TestCreateProject:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stores_row_and_documents(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")

        assert created.record.id
        assert created.record.user_id == "user-1"
        assert created.documents == generate_all_document_set(acme_config)
        assert created.document_keys[0] == "Acme_prd"
        assert service.documents.has_all("Acme", namespace=created.record.id)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_blank_name_permissive(self, service: ProjectService):
        created = await service.create_project(ProjectConfig(name=""))
        assert created.record.name == ""
        assert created.document_keys[0] == "_prd"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_blank_name_strict_stores_nothing(self, strict_service: ProjectService):
        with pytest.raises(ProjectValidationError):
            await strict_service.create_project(ProjectConfig(name="  "))
        assert len(strict_service.store) == 0
        assert strict_service.documents.keys() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_insert_stores_no_documents(self, service: ProjectService, acme_config):
        with patch.object(service.store, "create", AsyncMock(side_effect=StoreError("down"))):
            with pytest.raises(StoreError, match="down"):
                await service.create_project(acme_config, user_id="user-1")
        assert service.documents.keys() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_same_name_for_two_owners(self, service: ProjectService):
        alice = await service.create_project(
            ProjectConfig(name="Shop", description="Alice's shop"), user_id="alice"
        )
        bob = await service.create_project(
            ProjectConfig(name="Shop", description="Bob's shop"), user_id="bob"
        )

        alice_prd = await service.get_document(alice.record.id, "prd", "alice")
        bob_prd = await service.get_document(bob.record.id, "prd", "bob")
        assert "## Project Overview\nAlice's shop\n" in alice_prd
        assert "## Project Overview\nBob's shop\n" in bob_prd


class TestReadProjects:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_project_other_owner(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")
        with pytest.raises(ProjectNotFoundError):
            await service.get_project(created.record.id, "user-2")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_projects(self, service: ProjectService, acme_config):
        await service.create_project(acme_config, user_id="user-1")
        await service.create_project(ProjectConfig(name="Other"), user_id="user-2")
        names = [r.name for r in await service.list_projects("user-1")]
        assert names == ["Acme"]


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestGetDocument:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_stored_copy(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")
        service.documents.save(
            "Acme", DocumentKind.README, "edited", namespace=created.record.id
        )

        content = await service.get_document(created.record.id, "readme", "user-1")
        assert content == "edited"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_regenerates_when_missing(self, service: ProjectService):
        created = await service.create_project(
            ProjectConfig(name="Acme", selected_packages=["auth"]), user_id="user-1"
        )
        service.documents.clear("Acme", namespace=created.record.id)

        content = await service.get_document(created.record.id, "cursor-rules", "user-1")
        assert "# Use Next.js, TypeScript, auth." in content
        assert service.documents.has_all("Acme", namespace=created.record.id)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_regenerated_description_placeholder(self, service: ProjectService):
        created = await service.create_project(ProjectConfig(name="Acme"))
        service.documents.clear("Acme", namespace=created.record.id)

        prd = await service.get_document(created.record.id, DocumentKind.PRD)
        assert "## Project Overview\nNo description provided\n" in prd

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_slug(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config)
        with pytest.raises(InvalidDocumentTypeError):
            await service.get_document(created.record.id, "changelog")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_project(self, service: ProjectService):
        with pytest.raises(ProjectNotFoundError):
            await service.get_document("nope", "prd")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_documents(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")
        documents = await service.get_documents(created.record.id, "user-1")
        assert documents == created.documents

        service.documents.save("Acme", DocumentKind.PRD, "edited", namespace=created.record.id)
        assert (await service.get_documents(created.record.id, "user-1")).prd == "edited"


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------


class TestUpdateProject:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_rename_moves_documents(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")

        updated = await service.update_project(
            created.record.id, {"name": "Acme Pro", "framework": "Vue.js"}, "user-1"
        )

        assert updated.name == "Acme Pro"
        namespace = created.record.id
        assert service.documents.get("Acme", DocumentKind.PRD, namespace) is None
        code_style = service.documents.get("Acme Pro", DocumentKind.CODE_STYLE, namespace)
        assert "## Vue.js Specific Guidelines" in code_style

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_strict_rejects_blank_rename(self, strict_service: ProjectService, acme_config):
        created = await strict_service.create_project(acme_config)
        with pytest.raises(ProjectValidationError):
            await strict_service.update_project(created.record.id, {"name": " "})
        assert (await strict_service.get_project(created.record.id)).name == "Acme"
        assert strict_service.documents.has_all("Acme", namespace=created.record.id)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_project(self, service: ProjectService):
        with pytest.raises(ProjectNotFoundError):
            await service.update_project("nope", {"name": "x"})


class TestDeleteProject:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_removes_row_and_documents(self, service: ProjectService, acme_config):
        created = await service.create_project(acme_config, user_id="user-1")
        await service.delete_project(created.record.id, "user-1")

        assert await service.list_projects("user-1") == []
        assert service.documents.keys() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_keeps_documents_of_same_named_project(self, service: ProjectService):
        first = await service.create_project(
            ProjectConfig(name="Shop", description="first"), user_id="user-1"
        )
        second = await service.create_project(
            ProjectConfig(name="Shop", description="second"), user_id="user-1"
        )

        await service.delete_project(first.record.id, "user-1")

        assert service.documents.has_all("Shop", namespace=second.record.id)
        prd = await service.get_document(second.record.id, "prd", "user-1")
        assert "## Project Overview\nsecond\n" in prd

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_project(self, service: ProjectService):
        with pytest.raises(ProjectNotFoundError):
            await service.delete_project("nope")
