"""Writes a generated document set to disk.

Each document lands in ``<output_dir>/<project-slug>/`` under the file name
given by its :class:`DocumentKind` (``PRD.md``, ``CODE_STYLE.md``,
``.cursorrules``, ``PROGRESS.md``, ``README.md``).
"""

from __future__ import annotations

from pathlib import Path

from cursorcraft.utils import sanitize_name

from .models import GeneratedDocumentSet
from .templates import TemplateRenderer

_FALLBACK_DIRNAME = "untitled-project"


class DocumentExporter:
    """Exports documents using the renderer's async file writer."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def project_dir(self, output_dir: str | Path, project_name: str) -> Path:
        """Return the folder the documents for *project_name* are written to."""
        return Path(output_dir) / (sanitize_name(project_name) or _FALLBACK_DIRNAME)

    async def export(
        self,
        documents: GeneratedDocumentSet,
        project_name: str,
        output_dir: str | Path,
    ) -> list[Path]:
        """Write all five documents and return the written paths in kind order."""
        target = self.project_dir(output_dir, project_name)
        written: list[Path] = []
        for kind, content in documents.items():
            path = await self.renderer.write_file(target / kind.filename, content + "\n")
            written.append(path)
        return written
