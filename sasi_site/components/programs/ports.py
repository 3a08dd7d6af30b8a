"""
Programs component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from sasi_site.domain.entities import Program


class ProgramRepoPort(Protocol):
    """Repository interface for programs."""

    def get_by_id(self, program_id: UUID) -> Program | None:
        """Get program by ID."""
        ...

    def get_by_slug(self, slug: str) -> Program | None:
        """Get program by slug."""
        ...

    def save(self, program: Program) -> Program:
        """Insert or update a program."""
        ...

    def delete(self, program_id: UUID) -> None:
        """Delete a program."""
        ...

    def list_all(self) -> list[Program]:
        """List all programs."""
        ...

    def clear(self) -> None:
        """Delete every program."""
        ...


class TimePort(Protocol):
    """Time provider interface."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class RulesPort(Protocol):
    """Port for program rules configuration."""

    @property
    def default_icon(self) -> str:
        """Icon used when the form leaves it blank."""
        ...

    @property
    def default_image_url(self) -> str:
        """Image assigned to newly created programs."""
        ...

    @property
    def default_order(self) -> int:
        """Sort order used when the form leaves it blank."""
        ...
