"""CursorCraft configuration.

Typed settings for the store backends, the document export location, and
validation strictness.  All settings use Pydantic v2 models so they are
validated at construction time and can be serialised to/from JSON or read
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from cursorcraft.utils import parse_bool


class SupabaseConfig(BaseModel):
    """Connection settings for the hosted Supabase (PostgREST) project store."""

    url: str = Field(default="", description="Project URL, e.g. https://xyz.supabase.co")
    anon_key: str = Field(default="", description="Anon/public API key")
    table: str = Field(default="projects", description="Table holding project rows")
    timeout: int = Field(default=30, ge=1, description="Per-request timeout in seconds")

    @property
    def configured(self) -> bool:
        """``True`` when both the URL and the API key are present."""
        return bool(self.url.strip() and self.anon_key.strip())


class ExportConfig(BaseModel):
    """Where generated documents are written."""

    output_dir: Path = Field(default=Path("./output"))
    documents_dir: Path | None = Field(
        default=None,
        description="Directory for the file-backed document store; in-memory when unset",
    )


class Settings(BaseModel):
    """Global CursorCraft configuration.

    Instances are typically created once by the CLI entry point (or by an
    embedding application) and passed to the store factory and the project
    service.
    """

    supabase: SupabaseConfig = Field(default_factory=SupabaseConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    strict_validation: bool = Field(
        default=False,
        description="Reject blank project names instead of rendering them",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SUPABASE_URL, SUPABASE_ANON_KEY (the ``NEXT_PUBLIC_`` prefixed
            names are accepted too), SUPABASE_TABLE, SUPABASE_TIMEOUT,
            CURSORCRAFT_OUTPUT_DIR, CURSORCRAFT_DOCUMENTS_DIR,
            CURSORCRAFT_STRICT.
        """
        supabase_kwargs: dict[str, Any] = {
            "url": _first_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
            "anon_key": _first_env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        }
        if os.environ.get("SUPABASE_TABLE"):
            supabase_kwargs["table"] = os.environ["SUPABASE_TABLE"]
        if os.environ.get("SUPABASE_TIMEOUT"):
            supabase_kwargs["timeout"] = int(os.environ["SUPABASE_TIMEOUT"])

        export_kwargs: dict[str, Any] = {}
        if os.environ.get("CURSORCRAFT_OUTPUT_DIR"):
            export_kwargs["output_dir"] = Path(os.environ["CURSORCRAFT_OUTPUT_DIR"])
        if os.environ.get("CURSORCRAFT_DOCUMENTS_DIR"):
            export_kwargs["documents_dir"] = Path(os.environ["CURSORCRAFT_DOCUMENTS_DIR"])

        return cls(
            supabase=SupabaseConfig(**supabase_kwargs),
            export=ExportConfig(**export_kwargs),
            strict_validation=parse_bool(os.environ.get("CURSORCRAFT_STRICT")),
        )


def _first_env(*names: str) -> str:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return ""
