"""Project and document persistence.

Stores are constructed explicitly and handed to the code that needs them::

    from cursorcraft.config import Settings
    from cursorcraft.store import create_document_store, create_project_store

    settings = Settings.from_env()
    projects = create_project_store(settings)
    documents = create_document_store(settings)

``create_project_store`` picks the backend once, at construction time: the
Supabase store when a URL and key are configured, the in-memory store
otherwise.
"""

from __future__ import annotations

from cursorcraft.config import Settings
from cursorcraft.store.base import ProjectRecord, ProjectStore
from cursorcraft.store.documents import DocumentStore, FileDocumentStore, document_key
from cursorcraft.store.memory import InMemoryProjectStore
from cursorcraft.store.supabase import SupabaseProjectStore
from cursorcraft.utils import print_warning

__all__ = [
    "DocumentStore",
    "FileDocumentStore",
    "InMemoryProjectStore",
    "ProjectRecord",
    "ProjectStore",
    "SupabaseProjectStore",
    "create_document_store",
    "create_project_store",
    "document_key",
]


def create_project_store(settings: Settings) -> ProjectStore:
    """Build the project store selected by *settings*."""
    supabase = settings.supabase
    if supabase.configured:
        return SupabaseProjectStore(
            supabase.url,
            supabase.anon_key,
            table=supabase.table,
            timeout=supabase.timeout,
        )
    print_warning(
        "Missing Supabase credentials; projects are kept in memory only. "
        "Set SUPABASE_URL and SUPABASE_ANON_KEY to persist them."
    )
    return InMemoryProjectStore()


def create_document_store(settings: Settings) -> DocumentStore:
    """Build the document store selected by *settings*."""
    if settings.export.documents_dir is not None:
        return FileDocumentStore(settings.export.documents_dir)
    return DocumentStore()
