"""
Admin Programs API Routes.

CRUD endpoints behind the admin panel's programs screen.

Errors:
- 400 with ``{"errors": [...]}`` when the form fails validation
- 404 when the program does not exist
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from sasi_site.api.deps import get_program_service
from sasi_site.components.programs import ProgramService, ProgramValidationError
from sasi_site.domain.entities import Program

router = APIRouter()


class ProgramFormRequest(BaseModel):
    """Program form as submitted from the admin panel."""

    title: str | None = Field(None, description="Program title")
    description: str | None = Field(None, description="Full description")
    short_description: str | None = Field(None, description="Card text (max 250 chars)")
    category: str | None = Field(None, description="Program category")
    icon: str | None = Field(None, description="Font Awesome icon class")
    order: int | None = Field(None, description="Display order")


class ProgramStatResponse(BaseModel):
    icon: str
    value: str
    label: str


class ProgramResponse(BaseModel):
    """Program response."""

    id: str
    title: str
    slug: str
    category: str
    icon: str
    short_description: str
    full_description: str
    highlights: list[str]
    stats: list[ProgramStatResponse]
    image_url: str
    image_alt: str
    is_active: bool
    order: int
    page_url: str
    created_at: str
    updated_at: str


class ProgramListResponse(BaseModel):
    """List of programs response."""

    programs: list[ProgramResponse]
    count: int


class ValidationErrorResponse(BaseModel):
    """Validation error response."""

    errors: list[dict[str, Any]]


# --- Helper Functions ---


def program_to_response(program: Program) -> ProgramResponse:
    """Convert Program to response model."""
    return ProgramResponse(
        id=str(program.id),
        title=program.title,
        slug=program.slug,
        category=program.category,
        icon=program.icon,
        short_description=program.short_description,
        full_description=program.full_description,
        highlights=list(program.highlights),
        stats=[ProgramStatResponse(**s.model_dump()) for s in program.stats],
        image_url=program.image.url,
        image_alt=program.image.alt,
        is_active=program.is_active,
        order=program.order,
        page_url=program.page_url,
        created_at=program.created_at.isoformat(),
        updated_at=program.updated_at.isoformat(),
    )


def _serialize_errors(
    errors: list[ProgramValidationError],
) -> list[dict[str, Any]]:
    """Serialize validation errors."""
    return [
        {
            "code": e.code,
            "message": e.message,
            "field": e.field,
        }
        for e in errors
    ]


def _not_found(program_id: UUID) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Program {program_id} not found")


# --- Routes ---


@router.get("", response_model=ProgramListResponse)
def list_programs(
    service: ProgramService = Depends(get_program_service),
) -> ProgramListResponse:
    """List every program, active or not, in display order."""
    programs = service.list_all()
    return ProgramListResponse(
        programs=[program_to_response(p) for p in programs],
        count=len(programs),
    )


@router.post(
    "",
    response_model=ProgramResponse,
    status_code=201,
    responses={400: {"model": ValidationErrorResponse}},
)
def create_program(
    request: ProgramFormRequest,
    service: ProgramService = Depends(get_program_service),
) -> ProgramResponse:
    """Create a program. Icon and order fall back to the configured defaults."""
    program, errors = service.create(
        title=request.title or "",
        description=request.description or "",
        short_description=request.short_description or "",
        category=request.category or "",
        icon=request.icon,
        order=request.order,
    )

    if errors:
        raise HTTPException(
            status_code=400,
            detail={"errors": _serialize_errors(errors)},
        )

    assert program is not None
    return program_to_response(program)


@router.get("/{program_id}", response_model=ProgramResponse)
def get_program(
    program_id: UUID,
    service: ProgramService = Depends(get_program_service),
) -> ProgramResponse:
    program = service.get(program_id)
    if program is None:
        raise _not_found(program_id)
    return program_to_response(program)


@router.put(
    "/{program_id}",
    response_model=ProgramResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
def update_program(
    program_id: UUID,
    request: ProgramFormRequest,
    service: ProgramService = Depends(get_program_service),
) -> ProgramResponse:
    """Update a program. Every text field must be resubmitted."""
    program, errors = service.update(
        program_id=program_id,
        title=request.title,
        description=request.description,
        short_description=request.short_description,
        category=request.category,
        icon=request.icon,
        order=request.order,
    )

    if errors:
        if any(e.code == "not_found" for e in errors):
            raise _not_found(program_id)
        raise HTTPException(
            status_code=400,
            detail={"errors": _serialize_errors(errors)},
        )

    assert program is not None
    return program_to_response(program)


@router.delete("/{program_id}")
def delete_program(
    program_id: UUID,
    service: ProgramService = Depends(get_program_service),
) -> dict[str, str]:
    if not service.delete(program_id):
        raise _not_found(program_id)
    return {"status": "deleted"}
