"""CursorCraft document generator.

Turns a ``ProjectConfig`` into the five Markdown documents every new project
starts with: PRD, code-style guide, ``.cursorrules``, progress tracker and
README.

Quick usage::

    from cursorcraft.generator import ProjectConfig, generate_all_document_set

    config = ProjectConfig(
        name="Acme",
        description="A shop",
        platform="web",
        framework="Next.js",
        selected_packages=["auth", "zod"],
    )
    docs = generate_all_document_set(config)
    docs.as_dict().keys()  # prd, codeStyle, cursorRules, progressTracker, readme
"""

from cursorcraft.generator.engine import (
    DocumentEngine,
    build_tech_stack,
    generate_all_document_set,
    render_code_style,
    render_cursor_rules,
    render_document,
    render_prd,
    render_progress_tracker,
    render_readme,
)
from cursorcraft.generator.exporter import DocumentExporter
from cursorcraft.generator.guidelines import FrameworkFamily, classify_framework, guideline_for
from cursorcraft.generator.models import (
    DocumentKind,
    GeneratedDocumentSet,
    Platform,
    ProjectConfig,
)
from cursorcraft.generator.templates import TemplateRenderer

__all__ = [
    "DocumentEngine",
    "DocumentExporter",
    "DocumentKind",
    "FrameworkFamily",
    "GeneratedDocumentSet",
    "Platform",
    "ProjectConfig",
    "TemplateRenderer",
    "build_tech_stack",
    "classify_framework",
    "generate_all_document_set",
    "guideline_for",
    "render_code_style",
    "render_cursor_rules",
    "render_document",
    "render_prd",
    "render_progress_tracker",
    "render_readme",
]
