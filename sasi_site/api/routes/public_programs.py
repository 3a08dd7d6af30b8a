"""
Public programs API.

Active programs in display order, for the programs pages.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sasi_site.api.deps import get_program_service
from sasi_site.api.routes.admin_programs import ProgramResponse, program_to_response
from sasi_site.components.programs import ProgramService

router = APIRouter()


class PublicProgramListResponse(BaseModel):
    """Active programs."""

    programs: list[ProgramResponse]
    count: int


@router.get("", response_model=PublicProgramListResponse)
def list_active_programs(
    service: ProgramService = Depends(get_program_service),
) -> PublicProgramListResponse:
    programs = service.list_active()
    return PublicProgramListResponse(
        programs=[program_to_response(p) for p in programs],
        count=len(programs),
    )
