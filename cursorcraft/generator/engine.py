"""Document template engine.

Renders the five project documents (PRD, code-style guide, AI-assistant
rules, progress tracker, README) from a ``ProjectConfig``.  Every renderer is
a pure function of its input: no clock, no randomness, no I/O beyond reading
the packaged templates.  Absent optional values fall back to fixed text or
are left out; nothing is rejected.

Quick usage::

    from cursorcraft.generator import ProjectConfig, generate_all_document_set

    docs = generate_all_document_set(
        ProjectConfig(name="Acme", platform="web", framework="Next.js")
    )
    print(docs.readme)
"""

from __future__ import annotations

from typing import Any

from jinja2 import TemplatesNotFound

from .guidelines import guideline_for
from .models import (
    NO_DESCRIPTION,
    DocumentKind,
    GeneratedDocumentSet,
    ProjectConfig,
)
from .templates import TemplateRenderer

# Always listed after the framework in the tech stack.
BASE_LANGUAGE = "TypeScript"

_TEMPLATES: dict[DocumentKind, str] = {
    DocumentKind.PRD: "prd.md.j2",
    DocumentKind.CODE_STYLE: "code_style.md.j2",
    DocumentKind.CURSOR_RULES: "cursor_rules.j2",
    DocumentKind.PROGRESS_TRACKER: "progress_tracker.md.j2",
    DocumentKind.README: "readme.md.j2",
}


def build_tech_stack(framework: str | None, packages: list[str]) -> str:
    """Join ``[framework, "TypeScript", *packages]`` with ``", "``.

    Empty and ``None`` entries are dropped, order is preserved and duplicates
    are kept.
    """
    return ", ".join(item for item in [framework, BASE_LANGUAGE, *packages] if item)


class DocumentEngine:
    """Renders the project documents through a :class:`TemplateRenderer`.

    The engine keeps no per-call state, so one instance can serve any number
    of projects.  Construction fails with :class:`jinja2.TemplatesNotFound`
    when the renderer's template directory lacks any of the five templates.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        missing = sorted(set(_TEMPLATES.values()) - set(self.renderer.list_templates()))
        if missing:
            raise TemplatesNotFound(missing)

    # -- Individual documents ----------------------------------------------

    def render_prd(self, config: ProjectConfig) -> str:
        """Render the Product Requirements Document skeleton."""
        return self.render_document(config, DocumentKind.PRD)

    def render_code_style(self, config: ProjectConfig) -> str:
        """Render the code-style guide, with the framework block if one applies."""
        return self.render_document(config, DocumentKind.CODE_STYLE)

    def render_cursor_rules(self, config: ProjectConfig) -> str:
        """Render the ``.cursorrules`` AI-assistant configuration."""
        return self.render_document(config, DocumentKind.CURSOR_RULES)

    def render_progress_tracker(self, config: ProjectConfig) -> str:
        """Render the fixed five-phase progress tracker."""
        return self.render_document(config, DocumentKind.PROGRESS_TRACKER)

    def render_readme(self, config: ProjectConfig) -> str:
        """Render the README skeleton."""
        return self.render_document(config, DocumentKind.README)

    def render_document(self, config: ProjectConfig, kind: DocumentKind) -> str:
        """Render the document of the given *kind*."""
        return self.renderer.render(_TEMPLATES[kind], self._build_context(config))

    # -- Aggregate ---------------------------------------------------------

    def generate_all(self, config: ProjectConfig) -> GeneratedDocumentSet:
        """Render all five documents from one configuration."""
        return GeneratedDocumentSet(
            prd=self.render_prd(config),
            code_style=self.render_code_style(config),
            cursor_rules=self.render_cursor_rules(config),
            progress_tracker=self.render_progress_tracker(config),
            readme=self.render_readme(config),
        )

    # -- Context building --------------------------------------------------

    def _build_context(self, config: ProjectConfig) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": config.name,
            "description": config.description or NO_DESCRIPTION,
            "platform": config.platform_label,
            "framework": config.framework or "",
            "packages": list(config.selected_packages),
            "tech_stack": build_tech_stack(config.framework, config.selected_packages),
            "guideline": guideline_for(config.framework),
        }


# ---------------------------------------------------------------------------
# Module-level API
# ---------------------------------------------------------------------------

_default_engine = DocumentEngine()


def render_prd(config: ProjectConfig) -> str:
    return _default_engine.render_prd(config)


def render_code_style(config: ProjectConfig) -> str:
    return _default_engine.render_code_style(config)


def render_cursor_rules(config: ProjectConfig) -> str:
    return _default_engine.render_cursor_rules(config)


def render_progress_tracker(config: ProjectConfig) -> str:
    return _default_engine.render_progress_tracker(config)


def render_readme(config: ProjectConfig) -> str:
    return _default_engine.render_readme(config)


def render_document(config: ProjectConfig, kind: DocumentKind) -> str:
    return _default_engine.render_document(config, kind)


def generate_all_document_set(config: ProjectConfig) -> GeneratedDocumentSet:
    """Render the complete document set with the default engine."""
    return _default_engine.generate_all(config)
