"""Exception hierarchy shared by the store, service, and CLI layers.

The document engine itself never raises: every well-formed ``ProjectConfig``
renders.  These errors belong to the collaborators around it.
"""

from __future__ import annotations


class CursorCraftError(Exception):
    """Base class for every error raised by CursorCraft."""


class StoreError(CursorCraftError):
    """A project store could not complete a request (network, HTTP, payload)."""


class ProjectNotFoundError(CursorCraftError):
    """No project exists with the requested id for the requesting owner."""

    def __init__(self, project_id: str) -> None:
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


class InvalidDocumentTypeError(CursorCraftError):
    """The requested document type is not one of the five generated documents."""

    def __init__(self, document_type: str) -> None:
        super().__init__(f"Invalid document type: {document_type}")
        self.document_type = document_type


class ProjectValidationError(CursorCraftError):
    """A project configuration was rejected by strict validation."""
