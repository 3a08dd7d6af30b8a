"""
Programs component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from sasi_site.domain.entities import Program

# --- Validation Error ---


@dataclass(frozen=True)
class ProgramValidationError:
    """Program validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateProgramInput:
    """Input for creating a program from the admin form."""

    title: str
    description: str
    short_description: str
    category: str
    icon: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class UpdateProgramInput:
    """Input for updating a program. All text fields are resubmitted."""

    program_id: UUID
    title: str | None
    description: str | None
    short_description: str | None
    category: str | None
    icon: str | None
    order: int | None = None


@dataclass(frozen=True)
class DeleteProgramInput:
    """Input for deleting a program."""

    program_id: UUID


@dataclass(frozen=True)
class GetProgramInput:
    """Input for getting a program by ID or slug."""

    program_id: UUID | None = None
    slug: str | None = None


@dataclass(frozen=True)
class ListProgramsInput:
    """Input for listing programs."""

    active_only: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class ProgramOutput:
    """Output containing a single program."""

    program: Program | None
    errors: list[ProgramValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ProgramListOutput:
    """Output containing a list of programs."""

    programs: tuple[Program, ...]
    errors: list[ProgramValidationError] = field(default_factory=list)
    success: bool = True
