"""Keyed storage for generated documents.

Documents are stored under ``f"{project_name}{kind.storage_suffix}"``, e.g.
``"Acme_prd"`` or ``"Acme_cursor_rules"``, inside an optional *namespace*.
The project service uses the project id as the namespace, so two projects
with the same name (for the same owner or for different owners) never share
documents.

Two variants share one interface: :class:`DocumentStore` keeps everything in
memory, :class:`FileDocumentStore` writes one UTF-8 file per key.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote, unquote

from cursorcraft.generator.models import DocumentKind, GeneratedDocumentSet


def document_key(project_name: str, kind: DocumentKind) -> str:
    """Return the storage key for one document of *project_name*."""
    return f"{project_name}{kind.storage_suffix}"


class DocumentStore:
    """In-memory document storage.

    Subclasses change where the content lives by overriding ``_read``,
    ``_write``, ``_remove`` and ``keys``; the key scheme stays the same.
    """

    def __init__(self) -> None:
        self._items: dict[tuple[str, str], str] = {}

    # -- Public API --------------------------------------------------------

    def save(
        self, project_name: str, kind: DocumentKind, content: str, namespace: str = ""
    ) -> str:
        """Store one document and return its key."""
        key = document_key(project_name, kind)
        self._write(namespace, key, content)
        return key

    def save_set(
        self, project_name: str, documents: GeneratedDocumentSet, namespace: str = ""
    ) -> list[str]:
        """Store all five documents and return their keys in kind order."""
        return [
            self.save(project_name, kind, content, namespace)
            for kind, content in documents.items()
        ]

    def get(self, project_name: str, kind: DocumentKind, namespace: str = "") -> str | None:
        """Return the stored document, or ``None`` if it was never stored."""
        return self._read(namespace, document_key(project_name, kind))

    def has_all(self, project_name: str, namespace: str = "") -> bool:
        return all(self.get(project_name, kind, namespace) is not None for kind in DocumentKind)

    def clear(self, project_name: str, namespace: str = "") -> None:
        """Remove every stored document of *project_name* in *namespace*."""
        for kind in DocumentKind:
            self._remove(namespace, document_key(project_name, kind))

    def keys(self) -> list[str]:
        """Return every stored key, prefixed with ``"<namespace>/"`` when it has one."""
        return sorted(_display_key(ns, key) for ns, key in self._items)

    # -- Storage hooks -----------------------------------------------------

    def _read(self, namespace: str, key: str) -> str | None:
        return self._items.get((namespace, key))

    def _write(self, namespace: str, key: str, content: str) -> None:
        self._items[(namespace, key)] = content

    def _remove(self, namespace: str, key: str) -> None:
        self._items.pop((namespace, key), None)


class FileDocumentStore(DocumentStore):
    """Document storage in a directory, one ``<quoted key>.md`` file per key.

    Namespaced documents live in a ``<quoted namespace>/`` subdirectory.
    Keys and namespaces are percent-encoded for the file system so that
    project names with slashes or other path characters stay inside *root*.
    """

    def __init__(self, root: str | Path) -> None:
        super().__init__()
        self.root = Path(root)

    def keys(self) -> list[str]:
        if not self.root.is_dir():
            return []
        found = [unquote(p.stem) for p in self.root.glob("*.md")]
        found.extend(
            _display_key(unquote(p.parent.name), unquote(p.stem))
            for p in self.root.glob("*/*.md")
        )
        return sorted(found)

    def _path(self, namespace: str, key: str) -> Path:
        if not namespace:
            return self.root / f"{quote(key, safe='')}.md"
        # Dots are encoded too so that "." and ".." cannot name a parent directory.
        directory = self.root / quote(namespace, safe="").replace(".", "%2E")
        return directory / f"{quote(key, safe='')}.md"

    def _read(self, namespace: str, key: str) -> str | None:
        path = self._path(namespace, key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, namespace: str, key: str, content: str) -> None:
        path = self._path(namespace, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _remove(self, namespace: str, key: str) -> None:
        self._path(namespace, key).unlink(missing_ok=True)


def _display_key(namespace: str, key: str) -> str:
    return f"{namespace}/{key}" if namespace else key
