"""Data models for the document template engine.

``ProjectConfig`` is the input assembled by the wizard at "generate" time,
``GeneratedDocumentSet`` is the fixed-shape output, and ``DocumentKind``
describes each of the five documents (title, storage suffix, URL slug and
export filename).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cursorcraft.errors import InvalidDocumentTypeError

NO_DESCRIPTION = "No description provided"


class Platform(str, Enum):
    """Target application category selected in the wizard."""

    WEB = "web"
    MOBILE = "mobile"
    DESKTOP = "desktop"
    API = "api"


class ProjectConfig(BaseModel):
    """The user-chosen values that drive document generation.

    Nothing here is validated beyond shape: an empty ``name`` still renders,
    it just produces documents with blank titles.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Project name used verbatim in headings")
    description: str = Field(default="", description="Short project description")
    platform: Platform | None = Field(default=None, description="Target platform")
    framework: str | None = Field(default=None, description="Framework, free text")
    selected_packages: list[str] = Field(
        default_factory=list,
        alias="selectedPackages",
        description="Package identifiers in selection order (duplicates kept)",
    )
    template: str = Field(default="", description="Cosmetic template label")

    @property
    def platform_label(self) -> str:
        """Return the platform value, or an empty string when unset."""
        return self.platform.value if self.platform else ""


class DocumentKind(str, Enum):
    """The five documents produced for every project."""

    PRD = "prd"
    CODE_STYLE = "code_style"
    CURSOR_RULES = "cursor_rules"
    PROGRESS_TRACKER = "progress_tracker"
    README = "readme"

    @property
    def display_title(self) -> str:
        return _DOCUMENT_META[self][0]

    @property
    def storage_suffix(self) -> str:
        """Suffix appended to the project name to form the storage key."""
        return f"_{self.value}"

    @property
    def slug(self) -> str:
        """Slug used in document URLs (``/projects/<id>/documents/<slug>``)."""
        return _DOCUMENT_META[self][1]

    @property
    def filename(self) -> str:
        """File name used when the document is exported to disk."""
        return _DOCUMENT_META[self][2]

    @property
    def field_name(self) -> str:
        """Attribute name on :class:`GeneratedDocumentSet`."""
        return self.value

    @classmethod
    def from_slug(cls, value: str) -> "DocumentKind":
        """Resolve a URL slug, enum value, or camelCase key to a kind.

        Raises:
            InvalidDocumentTypeError: If *value* names no known document.
        """
        for kind in cls:
            if value in (kind.slug, kind.value, _CAMEL_KEYS[kind]):
                return kind
        raise InvalidDocumentTypeError(value)


_DOCUMENT_META: dict[DocumentKind, tuple[str, str, str]] = {
    DocumentKind.PRD: ("Product Requirements Document", "prd", "PRD.md"),
    DocumentKind.CODE_STYLE: ("Code Style Guidelines", "code-style", "CODE_STYLE.md"),
    DocumentKind.CURSOR_RULES: ("Cursor AI Rules", "cursor-rules", ".cursorrules"),
    DocumentKind.PROGRESS_TRACKER: ("Progress Tracker", "progress", "PROGRESS.md"),
    DocumentKind.README: ("README", "readme", "README.md"),
}

_CAMEL_KEYS: dict[DocumentKind, str] = {
    DocumentKind.PRD: "prd",
    DocumentKind.CODE_STYLE: "codeStyle",
    DocumentKind.CURSOR_RULES: "cursorRules",
    DocumentKind.PROGRESS_TRACKER: "progressTracker",
    DocumentKind.README: "readme",
}


class GeneratedDocumentSet(BaseModel):
    """The five Markdown documents rendered from one ``ProjectConfig``."""

    model_config = ConfigDict(populate_by_name=True)

    prd: str
    code_style: str = Field(..., alias="codeStyle")
    cursor_rules: str = Field(..., alias="cursorRules")
    progress_tracker: str = Field(..., alias="progressTracker")
    readme: str

    def get(self, kind: DocumentKind) -> str:
        return getattr(self, kind.field_name)

    def as_dict(self) -> dict[str, str]:
        """Return the documents keyed ``prd``, ``codeStyle``, ``cursorRules``,
        ``progressTracker`` and ``readme``."""
        return self.model_dump(by_alias=True)

    def items(self) -> list[tuple[DocumentKind, str]]:
        return [(kind, self.get(kind)) for kind in DocumentKind]
