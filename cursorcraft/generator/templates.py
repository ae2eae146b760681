"""Jinja2 template rendering for the generated project documents.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cursorcraft/generator/templates/`` directory and renders them with a
project context.  Autoescaping is disabled: user values are substituted into
Markdown verbatim, so a project name containing Markdown syntax will show up
as Markdown in the output.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the ``.j2`` document templates.

    Templates are rendered with a context dictionary built from a
    ``ProjectConfig`` (name, description, platform, framework, packages and
    derived values such as the tech stack and the README slug).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(enabled_extensions=(), default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = _slugify_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"prd.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File output (async) -----------------------------------------------

    async def write_file(self, output_path: str | Path, content: str) -> Path:
        """Write already-rendered *content* to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Lowercase *value* and replace each run of whitespace with a hyphen.

    ``"My Cool App"`` becomes ``"my-cool-app"``.  Other characters are kept
    as they are, so the slug matches the folder name a user would get by
    typing the project name into ``git clone``.
    """
    return re.sub(r"\s+", "-", value.lower())


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
