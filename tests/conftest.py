"""Shared pytest fixtures for the CursorCraft test suite.

Provides reusable fixtures for:
- Sample project configurations (full, minimal, empty)
- In-memory and file-backed stores
- A project service wired to in-memory backends
- A Supabase project row
- An environment without CursorCraft / Supabase variables
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from cursorcraft.generator.models import ProjectConfig
from cursorcraft.service import ProjectService
from cursorcraft.store.documents import DocumentStore, FileDocumentStore
from cursorcraft.store.memory import InMemoryProjectStore


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def acme_config() -> ProjectConfig:
    """A fully populated web project."""
    return ProjectConfig(
        name="Acme",
        description="A shop",
        platform="web",
        framework="Next.js",
        selected_packages=["auth", "zod"],
        template="starter",
    )


@pytest.fixture
def minimal_config() -> ProjectConfig:
    """A project with a name and nothing else."""
    return ProjectConfig(name="Acme")


@pytest.fixture
def empty_config() -> ProjectConfig:
    """A configuration with every field left at its default."""
    return ProjectConfig()


# ---------------------------------------------------------------------------
# Stores & service
# ---------------------------------------------------------------------------

@pytest.fixture
def project_store() -> InMemoryProjectStore:
    return InMemoryProjectStore()


@pytest.fixture
def document_store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def file_document_store(tmp_path: Path) -> FileDocumentStore:
    """File-backed document store rooted in a temporary directory."""
    return FileDocumentStore(tmp_path / "documents")


@pytest.fixture
def service(project_store: InMemoryProjectStore, document_store: DocumentStore) -> ProjectService:
    """Permissive project service over in-memory backends."""
    return ProjectService(project_store, document_store)


@pytest.fixture
def strict_service(
    project_store: InMemoryProjectStore, document_store: DocumentStore
) -> ProjectService:
    """Project service that rejects blank project names."""
    return ProjectService(project_store, document_store, strict=True)


@pytest.fixture
def supabase_row() -> dict[str, Any]:
    """A project row as PostgREST returns it."""
    return {
        "id": "7f3c",
        "name": "Acme",
        "description": "A shop",
        "template_type": "web",
        "framework": "Next.js",
        "packages": ["auth", "zod"],
        "template": "starter",
        "user_id": "user-1",
        "created_at": "2025-03-01T12:00:00+00:00",
    }


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

_ENV_VARS = (
    "SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "SUPABASE_TABLE",
    "SUPABASE_TIMEOUT",
    "CURSORCRAFT_OUTPUT_DIR",
    "CURSORCRAFT_DOCUMENTS_DIR",
    "CURSORCRAFT_STRICT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable ``Settings.from_env`` reads."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
