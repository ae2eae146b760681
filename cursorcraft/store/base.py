"""Project store interface.

Defines the project row model and the contract every store backend
implements, so the service layer works the same against the hosted
Supabase table and the in-memory store used for development and tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Protocol

from pydantic import BaseModel, Field, field_validator

from cursorcraft.generator.models import NO_DESCRIPTION, Platform, ProjectConfig

# Framework assumed when a stored row has none, matching what the project
# page uses when it regenerates documents for an old row.
DEFAULT_FRAMEWORK = "Next.js"


class ProjectRecord(BaseModel):
    """A persisted project row, scoped to its owner by ``user_id``."""

    id: str = Field(default="", description="Row id; assigned by the store on create")
    name: str
    description: str = Field(default="")
    template_type: str | None = Field(default=None, description="Platform chosen in the wizard")
    framework: str | None = Field(default=None)
    packages: list[str] = Field(default_factory=list)
    template: str = Field(default="")
    user_id: str | None = Field(default=None, description="Owner; None for anonymous projects")
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )

    @field_validator("description", "template", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("packages", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_config(cls, config: ProjectConfig, user_id: str | None = None) -> "ProjectRecord":
        """Build a new (unsaved) row from a wizard configuration."""
        return cls(
            name=config.name,
            description=config.description or NO_DESCRIPTION,
            template_type=config.platform_label or None,
            framework=config.framework,
            packages=list(config.selected_packages),
            template=config.template,
            user_id=user_id,
        )

    def to_config(self) -> ProjectConfig:
        """Rebuild the configuration used to regenerate this project's documents."""
        platform = None
        if self.template_type in {p.value for p in Platform}:
            platform = Platform(self.template_type)
        return ProjectConfig(
            name=self.name,
            description=self.description or NO_DESCRIPTION,
            platform=platform,
            framework=self.framework or DEFAULT_FRAMEWORK,
            selected_packages=list(self.packages),
            template=self.template,
        )


# Fields callers may change through ``update``.
UPDATABLE_FIELDS = frozenset(
    {"name", "description", "template_type", "framework", "packages", "template"}
)


class ProjectStore(Protocol):
    """Protocol for project persistence backends.

    Every query is scoped to an owner: a project created by one user is
    invisible to another, and ``user_id=None`` addresses anonymous rows.
    """

    async def create(self, record: ProjectRecord) -> ProjectRecord:
        """Insert *record* and return the stored row (with its id)."""
        ...

    async def get(self, project_id: str, user_id: str | None) -> ProjectRecord | None:
        """Return the row, or ``None`` if it does not exist for this owner."""
        ...

    async def list(self, user_id: str | None) -> list[ProjectRecord]:
        """Return the owner's rows, newest first."""
        ...

    async def update(
        self, project_id: str, user_id: str | None, changes: dict[str, Any]
    ) -> ProjectRecord:
        """Apply *changes* and return the updated row.

        Raises:
            ProjectNotFoundError: If no such row exists for this owner.
        """
        ...

    async def delete(self, project_id: str, user_id: str | None) -> None:
        """Delete the row; deleting a missing row is not an error."""
        ...
